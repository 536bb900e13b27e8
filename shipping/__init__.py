"""
Shipping Module

Shipping cost calculator with selectable pricing strategies (economy,
expedited, store pickup).

USAGE
-----
    from shipping import Order, ShippingCalculator, ShippingKind

    calculator = ShippingCalculator.for_kind(ShippingKind.ECONOMY)
    cost = calculator.compute_cost(order)
"""

from .calculate_costs import calculate_costs
from .calculator import ShippingCalculator, cheapest_kind, compare_costs
from .exceptions import InvalidOrderError, InvalidStrategyError, ShippingError
from .factory import select_strategy
from .notifications import LoggingNotifier, Notifier
from .order import Order
from .strategies import (
    EconomyStrategy,
    ExpeditedStrategy,
    ShippingKind,
    ShippingStrategy,
    StorePickupStrategy,
    round_cost,
)
from .version import VERSION

__all__ = [
    # Data
    "Order",
    "ShippingKind",
    # Strategies
    "ShippingStrategy",
    "EconomyStrategy",
    "ExpeditedStrategy",
    "StorePickupStrategy",
    "select_strategy",
    # Calculation
    "ShippingCalculator",
    "compare_costs",
    "cheapest_kind",
    "calculate_costs",
    "round_cost",
    # Notifications
    "Notifier",
    "LoggingNotifier",
    # Errors
    "ShippingError",
    "InvalidStrategyError",
    "InvalidOrderError",
    "VERSION",
]
