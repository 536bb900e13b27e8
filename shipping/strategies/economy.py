"""
Economy Strategy

Low-cost shipping priced on actual weight only.

    cost = 5.00 + (weight_lbs - 10) * 0.50    if weight_lbs > 10
    cost = 5.00                               otherwise

A package of exactly 10 lbs pays the base fee only.
"""

from decimal import Decimal

from ..data import (
    ECONOMY_BASE_FEE,
    ECONOMY_RATE_PER_LB,
    ECONOMY_WEIGHT_THRESHOLD_LBS,
)
from ..order import Order
from .base import ShippingKind, ShippingStrategy, to_decimal


class EconomyStrategy(ShippingStrategy):
    """Economy - base fee plus a per-pound charge above 10 lbs."""

    # Identity
    kind = ShippingKind.ECONOMY
    name = "economy"

    def quote(self, order: Order) -> Decimal:
        weight = to_decimal(order.weight_lbs)
        overweight = Decimal("0")

        if weight > ECONOMY_WEIGHT_THRESHOLD_LBS:
            overweight = (weight - ECONOMY_WEIGHT_THRESHOLD_LBS) * ECONOMY_RATE_PER_LB

        return ECONOMY_BASE_FEE + overweight
