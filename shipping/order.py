"""
Order

Immutable order value passed into every cost calculation.

FIELDS
------
    weight_lbs  - Actual weight in pounds (> 0)
    height_in   - Package height in inches (> 0)
    width_in    - Package width in inches (> 0)
    length_in   - Package length in inches (> 0)
    price       - Order value (Decimal, >= 0)
    created_at  - Order creation time (defaults to now)

Out-of-domain values are rejected at construction with InvalidOrderError, so
strategies can treat every Order they receive as valid.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation

from .exceptions import InvalidOrderError


DIMENSION_FIELDS = ("weight_lbs", "height_in", "width_in", "length_in")


@dataclass(frozen=True)
class Order:
    """A customer order with the measurements that drive shipping cost."""

    weight_lbs: float
    height_in: float
    width_in: float
    length_in: float
    price: Decimal
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        for name in DIMENSION_FIELDS:
            object.__setattr__(self, name, _positive_real(name, getattr(self, name)))
        object.__setattr__(self, "price", _non_negative_amount(self.price))

        if not isinstance(self.created_at, datetime):
            raise InvalidOrderError(
                f"created_at must be a datetime, got {type(self.created_at).__name__}"
            )

    @property
    def cubic_in(self) -> float:
        """Package volume in cubic inches."""
        return self.height_in * self.width_in * self.length_in


# =============================================================================
# VALIDATION HELPERS
# =============================================================================

def _is_number(value) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _positive_real(name: str, value) -> float:
    """Coerce a weight or dimension to float, rejecting non-positive values."""
    if not _is_number(value):
        raise InvalidOrderError(f"{name} must be a number, got {value!r}")

    result = float(value)
    if not math.isfinite(result) or result <= 0:
        raise InvalidOrderError(f"{name} must be a positive finite number, got {value!r}")

    return result


def _non_negative_amount(value) -> Decimal:
    """Coerce a price to Decimal, rejecting negative and non-finite amounts."""
    if isinstance(value, str):
        try:
            value = Decimal(value)
        except InvalidOperation:
            raise InvalidOrderError(f"price must be a decimal amount, got {value!r}") from None

    if not _is_number(value):
        raise InvalidOrderError(f"price must be a decimal amount, got {value!r}")

    # str() keeps 19.99 from becoming 19.989999999999998436805981327779591083526611328125
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    if not amount.is_finite() or amount < 0:
        raise InvalidOrderError(f"price must be a non-negative finite amount, got {value!r}")

    return amount


__all__ = [
    "Order",
    "DIMENSION_FIELDS",
]
