"""
Shipping Strategy Base Class

Shared base class and kind enumeration for all shipping strategies.
"""

from abc import ABC, abstractmethod
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum

from ..data import COST_QUANTUM, normalize_method
from ..exceptions import InvalidStrategyError
from ..order import Order


# =============================================================================
# STRATEGY KINDS
# =============================================================================

class ShippingKind(str, Enum):
    """The closed set of shipping strategies a customer can choose."""

    ECONOMY = "economy"
    EXPEDITED = "expedited"
    STORE_PICKUP = "store-pickup"

    @classmethod
    def parse(cls, value) -> "ShippingKind":
        """
        Convert external input into a ShippingKind.

        Accepts ShippingKind members, canonical values and the aliases in
        METHOD_ALIASES (case-insensitive, surrounding whitespace ignored).

        Raises:
            InvalidStrategyError: If the value is not a known shipping method
        """
        if isinstance(value, cls):
            return value

        canonical = normalize_method(value) if isinstance(value, str) else None
        if canonical is None:
            valid = ", ".join(kind.value for kind in cls)
            raise InvalidStrategyError(
                f"Unknown shipping strategy: {value!r}. Valid strategies: {valid}"
            )

        return cls(canonical)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def to_decimal(value) -> Decimal:
    """Convert an order measurement to Decimal without binary float noise."""
    return value if isinstance(value, Decimal) else Decimal(str(value))


def round_cost(amount: Decimal) -> Decimal:
    """
    Round a cost to cents, half up, for display or invoicing.

    Strategies return exact amounts; rounding is left to the caller.
    """
    return amount.quantize(COST_QUANTUM, rounding=ROUND_HALF_UP)


# =============================================================================
# BASE CLASS
# =============================================================================

class ShippingStrategy(ABC):
    """
    Base class for all shipping strategies.

    Attributes:
        IDENTITY
            kind    - ShippingKind this strategy implements
            name    - Short code used in batch column names (e.g., "economy")

        SIDE EFFECTS
            notifies_customer - True if the constructor takes a Notifier

    Strategies hold no per-calculation state: every cost is a pure function
    of the Order passed in, so one instance can price orders from several
    threads at once. Costs are exact Decimals, never rounded.
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    kind: ShippingKind
    name: str

    # -------------------------------------------------------------------------
    # SIDE EFFECTS
    # -------------------------------------------------------------------------
    notifies_customer: bool = False

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @abstractmethod
    def quote(self, order: Order) -> Decimal:
        """Shipping cost for the order, without side effects."""

    def cost(self, order: Order) -> Decimal:
        """
        Shipping cost for the order.

        Same amount as quote(). Strategies that must act when an order is
        actually priced (e.g., notify the customer) override this.
        """
        return self.quote(order)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = [
    "ShippingKind",
    "ShippingStrategy",
    "to_decimal",
    "round_cost",
]
