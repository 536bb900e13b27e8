"""
Rate Configuration

Published rates for each shipping strategy. Amounts are strings so they load
into Decimal without float artifacts.
"""

from decimal import Decimal

# Economy: flat fee plus a per-pound charge above the threshold
ECONOMY_BASE_FEE = Decimal("5.00")
ECONOMY_WEIGHT_THRESHOLD_LBS = Decimal("10")    # Strictly greater triggers the per-lb charge
ECONOMY_RATE_PER_LB = Decimal("0.50")

# Expedited: per-pound rate on the greater of actual and volumetric weight
EXPEDITED_RATE_PER_LB = Decimal("12.00")
VOLUMETRIC_DIVISOR = 139                        # Cubic inches per pound

# Store pickup: customer collects in person
STORE_PICKUP_FEE = Decimal("0.00")

# Display rounding for callers (costs themselves are exact)
COST_QUANTUM = Decimal("0.01")
