"""
Shipping Data

Reference configuration for rates and accepted shipping method names.

Structure:
    - reference/rates.py: Per-strategy rate constants
    - reference/shipping_methods.py: External method name aliases
"""

from .reference.rates import (
    ECONOMY_BASE_FEE,
    ECONOMY_WEIGHT_THRESHOLD_LBS,
    ECONOMY_RATE_PER_LB,
    EXPEDITED_RATE_PER_LB,
    VOLUMETRIC_DIVISOR,
    STORE_PICKUP_FEE,
    COST_QUANTUM,
)
from .reference.shipping_methods import METHOD_ALIASES, normalize_method


__all__ = [
    # Rates
    "ECONOMY_BASE_FEE",
    "ECONOMY_WEIGHT_THRESHOLD_LBS",
    "ECONOMY_RATE_PER_LB",
    "EXPEDITED_RATE_PER_LB",
    "VOLUMETRIC_DIVISOR",
    "STORE_PICKUP_FEE",
    "COST_QUANTUM",
    # Method names
    "METHOD_ALIASES",
    "normalize_method",
]
