"""
Customer Notifications

Sink for the "order ready for pickup" signal raised by the store-pickup
strategy. Delivery is fire-and-forget: notifiers return nothing and the
strategy does not wait on or inspect the outcome.
"""

import logging
from typing import Protocol, runtime_checkable

from .order import Order

logger = logging.getLogger(__name__)


@runtime_checkable
class Notifier(Protocol):
    """Anything that can tell a customer their order is ready for pickup."""

    def notify_customer_ready(self, order: Order) -> None:
        ...


class LoggingNotifier:
    """Default notifier. Emits the notice as an INFO log record."""

    MESSAGE = "Customer will be notified when the order is ready for store pickup"

    def __init__(self, log: logging.Logger | None = None):
        self._logger = log or logger

    def notify_customer_ready(self, order: Order) -> None:
        self._logger.info(
            "%s (order created %s, value %s)",
            self.MESSAGE,
            order.created_at.isoformat(),
            order.price,
        )


__all__ = [
    "Notifier",
    "LoggingNotifier",
]
