"""
Expedited Strategy

Fast shipping priced on billable weight, the greater of actual weight and
volumetric weight. Bulky but light packages pay for the space they take.

    volumetric_weight = height_in * width_in * length_in / 139
    cost = 12.00 * max(weight_lbs, volumetric_weight)
"""

from decimal import Decimal

from ..data import EXPEDITED_RATE_PER_LB, VOLUMETRIC_DIVISOR
from ..order import Order
from .base import ShippingKind, ShippingStrategy, to_decimal


class ExpeditedStrategy(ShippingStrategy):
    """Expedited - flat per-pound rate on billable weight."""

    # Identity
    kind = ShippingKind.EXPEDITED
    name = "expedited"

    @staticmethod
    def volumetric_weight(order: Order) -> Decimal:
        """Volume in cubic inches divided by the volumetric divisor."""
        volume = to_decimal(order.height_in) * to_decimal(order.width_in) * to_decimal(order.length_in)
        return volume / VOLUMETRIC_DIVISOR

    @classmethod
    def billable_weight(cls, order: Order) -> Decimal:
        return max(cls.volumetric_weight(order), to_decimal(order.weight_lbs))

    def quote(self, order: Order) -> Decimal:
        return EXPEDITED_RATE_PER_LB * self.billable_weight(order)
