"""
Strategies Package

Exports all shipping strategy classes and the kind-to-strategy registry.

Every ShippingKind maps to exactly one strategy class. The mapping is
checked at import time so a missing or duplicated strategy fails fast.
"""

from .base import ShippingKind, ShippingStrategy, round_cost, to_decimal
from .economy import EconomyStrategy
from .expedited import ExpeditedStrategy
from .store_pickup import StorePickupStrategy


# All strategies, in ShippingKind order
ALL = [EconomyStrategy, ExpeditedStrategy, StorePickupStrategy]


# =============================================================================
# HELPERS
# =============================================================================

def get_strategy_class(kind: ShippingKind) -> type[ShippingStrategy]:
    """Get the strategy class registered for a kind."""
    return STRATEGIES_BY_KIND[kind]


# =============================================================================
# VALIDATION
# =============================================================================

def validate_strategies() -> None:
    """
    Validate strategy registry integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []

    kinds = [s.kind for s in ALL]
    names = [s.name for s in ALL]

    for kind in ShippingKind:
        count = kinds.count(kind)
        if count != 1:
            errors.append(f"{kind.value}: expected exactly one strategy, found {count}")

    for name in set(names):
        if names.count(name) > 1:
            errors.append(f"{name}: strategy name used more than once")

    for s in ALL:
        if not issubclass(s, ShippingStrategy):
            errors.append(f"{s.__name__}: must subclass ShippingStrategy")

    if errors:
        raise ValueError("Strategy configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_strategies()

STRATEGIES_BY_KIND: dict[ShippingKind, type[ShippingStrategy]] = {s.kind: s for s in ALL}

__all__ = [
    # Base
    "ShippingKind",
    "ShippingStrategy",
    "round_cost",
    "to_decimal",
    # Strategy classes
    "EconomyStrategy",
    "ExpeditedStrategy",
    "StorePickupStrategy",
    # Registry
    "ALL",
    "STRATEGIES_BY_KIND",
    # Helpers
    "get_strategy_class",
    "validate_strategies",
]
