"""Test helpers shared across shipping test modules."""

from datetime import datetime
from decimal import Decimal

from shipping.order import Order


class RecordingNotifier:
    """Notifier that remembers every order it was told about."""

    def __init__(self):
        self.notified = []

    def notify_customer_ready(self, order):
        self.notified.append(order)


def make_order(weight, height=10.0, width=10.0, length=10.0, price="100.00"):
    """Build an order with a fixed creation time."""
    return Order(
        weight_lbs=weight,
        height_in=height,
        width_in=width,
        length_in=length,
        price=Decimal(price),
        created_at=datetime(2025, 6, 15, 12, 0),
    )
