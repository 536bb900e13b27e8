"""
Shipping Exceptions

All errors raised by the package derive from ShippingError, which is a
ValueError so callers validating input can catch either.
"""


class ShippingError(ValueError):
    """Base class for shipping calculation errors."""


class InvalidStrategyError(ShippingError):
    """Raised when a strategy selector is not one of the known kinds."""


class InvalidOrderError(ShippingError):
    """Raised when an order has out-of-domain weight, dimensions or price."""


__all__ = [
    "ShippingError",
    "InvalidStrategyError",
    "InvalidOrderError",
]
