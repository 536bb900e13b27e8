"""
Shipping Calculator

Holds one shipping strategy and delegates cost calculation to it.

Calculators are immutable: to price with a different strategy, build a new
calculator (with_strategy() does this for you).
"""

import logging
from decimal import Decimal

from .exceptions import InvalidStrategyError
from .factory import select_strategy
from .notifications import Notifier
from .order import Order
from .strategies import ALL, ShippingKind, ShippingStrategy

logger = logging.getLogger(__name__)


class ShippingCalculator:
    """Computes order shipping cost with a fixed strategy."""

    __slots__ = ("_strategy",)

    def __init__(self, strategy: ShippingStrategy):
        if not isinstance(strategy, ShippingStrategy):
            raise InvalidStrategyError(
                f"ShippingCalculator needs a ShippingStrategy, got {type(strategy).__name__}"
            )
        self._strategy = strategy

    @classmethod
    def for_kind(
        cls,
        kind: ShippingKind | str,
        notifier: Notifier | None = None
    ) -> "ShippingCalculator":
        """Build a calculator around a freshly selected strategy."""
        return cls(select_strategy(kind, notifier))

    @property
    def strategy(self) -> ShippingStrategy:
        return self._strategy

    def with_strategy(self, strategy: ShippingStrategy) -> "ShippingCalculator":
        """Return a new calculator using a different strategy."""
        return type(self)(strategy)

    def compute_cost(self, order: Order) -> Decimal:
        """Shipping cost for the order, as computed by the held strategy."""
        cost = self._strategy.cost(order)
        logger.debug("%s priced order at %s", self._strategy.name, cost)
        return cost

    def __repr__(self) -> str:
        return f"ShippingCalculator({self._strategy!r})"


# =============================================================================
# QUOTE COMPARISON
# =============================================================================

def compare_costs(order: Order) -> dict[ShippingKind, Decimal]:
    """
    Quote the order with every strategy, cheapest first.

    Uses quote(), so no customer notifications are sent. Ties keep
    ShippingKind order.
    """
    quotes = [(s.kind, s().quote(order)) for s in ALL]
    return dict(sorted(quotes, key=lambda item: item[1]))


def cheapest_kind(order: Order) -> ShippingKind:
    """Kind with the lowest quote for the order."""
    return next(iter(compare_costs(order)))


__all__ = [
    "ShippingCalculator",
    "compare_costs",
    "cheapest_kind",
]
