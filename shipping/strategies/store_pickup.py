"""
Store Pickup Strategy

The customer collects the order in person, so there is no transport cost.
Pricing an order with cost() tells the customer, through the injected
Notifier, that they will hear when the order is ready for pickup.
quote() prices without notifying.
"""

from decimal import Decimal

from ..data import STORE_PICKUP_FEE
from ..notifications import LoggingNotifier, Notifier
from ..order import Order
from .base import ShippingKind, ShippingStrategy


class StorePickupStrategy(ShippingStrategy):
    """Store Pickup - always free, notifies the customer once per priced order."""

    # Identity
    kind = ShippingKind.STORE_PICKUP
    name = "store_pickup"

    # Side effects
    notifies_customer = True

    def __init__(self, notifier: Notifier | None = None):
        self.notifier = notifier if notifier is not None else LoggingNotifier()

    def quote(self, order: Order) -> Decimal:
        return STORE_PICKUP_FEE

    def cost(self, order: Order) -> Decimal:
        self.notifier.notify_customer_ready(order)
        return self.quote(order)

    def __repr__(self) -> str:
        return f"StorePickupStrategy(notifier={self.notifier!r})"
