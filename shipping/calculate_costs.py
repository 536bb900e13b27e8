"""
Batch Shipping Cost Calculator

DataFrame in, DataFrame out. The input can come from any source (order
export, CSV, manual creation) as long as it contains the required columns.
The output is the same DataFrame with calculation columns and costs appended.

Batch pricing quotes: it never sends store-pickup notifications.

REQUIRED INPUT COLUMNS
----------------------
    weight_lbs          - Actual weight in pounds
    height_in           - Package height in inches
    width_in            - Package width in inches
    length_in           - Package length in inches

OPTIONAL INPUT COLUMNS
----------------------
    shipping_method     - Chosen method per order (e.g., "economy", "fast")

OUTPUT COLUMNS ADDED
--------------------
    supplement_orders() adds:
        - cubic_in, volumetric_weight_lbs
        - uses_volumetric_weight, billable_weight_lbs

    calculate() adds:
        - cost_economy, cost_expedited, cost_store_pickup (exact Decimal quotes)
        - shipping_kind, cost_total (only when a kind is known)
        - calculator_version

USAGE
-----
    from shipping.calculate_costs import calculate_costs
    result = calculate_costs(df)
    result = calculate_costs(df, kind=ShippingKind.ECONOMY)
"""

from decimal import Decimal

import polars as pl

from .data import VOLUMETRIC_DIVISOR
from .exceptions import InvalidOrderError
from .order import DIMENSION_FIELDS, Order
from .strategies import ALL, ShippingKind, get_strategy_class
from .version import VERSION


REQUIRED_INPUT_COLS = list(DIMENSION_FIELDS)
METHOD_COL = "shipping_method"
DECIMAL_PRECISION = 38     # Widest polars Decimal


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_costs(
    df: pl.DataFrame,
    kind: ShippingKind | str | None = None
) -> pl.DataFrame:
    """
    Calculate shipping costs for an order DataFrame.

    This is the main entry point. Takes raw order data and returns the same
    DataFrame with all calculation columns and costs appended.

    Args:
        df: Raw order DataFrame with required columns (see module docstring)
        kind: Strategy applied to every row. When None, the shipping_method
            column is used if present.

    Returns:
        DataFrame with supplemented data, per-strategy quotes and totals
    """
    df = supplement_orders(df)
    df = calculate(df, kind)
    return df


# =============================================================================
# SUPPLEMENT ORDERS
# =============================================================================

def supplement_orders(df: pl.DataFrame) -> pl.DataFrame:
    """
    Validate order rows and add volume and weight calculations.

    Raises:
        ValueError: If required columns are missing
        InvalidOrderError: If any weight or dimension is not a positive finite number

    Returns:
        DataFrame with added columns:
            - cubic_in, volumetric_weight_lbs
            - uses_volumetric_weight, billable_weight_lbs
    """
    _check_required_columns(df)

    df = df.with_columns([pl.col(c).cast(pl.Float64) for c in REQUIRED_INPUT_COLS])
    _check_positive_measurements(df)

    df = _add_volume(df)
    df = _add_billable_weight(df)

    return df


def _check_required_columns(df: pl.DataFrame) -> None:
    missing = [c for c in REQUIRED_INPUT_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required input columns: {', '.join(missing)}")


def _check_positive_measurements(df: pl.DataFrame) -> None:
    """Reject rows with null, non-finite or non-positive weight or dimensions."""
    invalid = pl.any_horizontal([
        ((pl.col(c) <= 0) | ~pl.col(c).is_finite()).fill_null(True)
        for c in REQUIRED_INPUT_COLS
    ])
    invalid_count = df.filter(invalid).height

    if invalid_count:
        raise InvalidOrderError(
            f"{invalid_count} order(s) have missing, non-positive or non-finite "
            f"values in {', '.join(REQUIRED_INPUT_COLS)}"
        )


def _add_volume(df: pl.DataFrame) -> pl.DataFrame:
    return df.with_columns(
        (pl.col("height_in") * pl.col("width_in") * pl.col("length_in")).alias("cubic_in")
    )


def _add_billable_weight(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate volumetric weight and billable weight.

    Billable weight is the greater of actual weight and volumetric weight.
    Only expedited pricing uses it; it is reported for every row.
    """
    df = df.with_columns(
        (pl.col("cubic_in") / VOLUMETRIC_DIVISOR).alias("volumetric_weight_lbs")
    )

    df = df.with_columns([
        (pl.col("volumetric_weight_lbs") > pl.col("weight_lbs")).alias("uses_volumetric_weight"),
        pl.max_horizontal("weight_lbs", "volumetric_weight_lbs").alias("billable_weight_lbs"),
    ])

    return df


# =============================================================================
# CALCULATE COSTS
# =============================================================================

def calculate(
    df: pl.DataFrame,
    kind: ShippingKind | str | None = None
) -> pl.DataFrame:
    """
    Calculate shipping costs for supplemented orders.

    Args:
        df: Supplemented order DataFrame from supplement_orders
        kind: Strategy applied to every row (overrides shipping_method)

    Returns:
        DataFrame with per-strategy quotes, the chosen total and version

    Processing order:
        1. Quotes       - one cost_* column per strategy
        2. Kind         - from kind, else parsed from shipping_method
        3. Total        - cost_total picked from the matching quote column
        4. Version      - calculator_version stamp
    """
    df = _apply_quotes(df)

    if kind is not None:
        df = df.with_columns(pl.lit(ShippingKind.parse(kind).value).alias("shipping_kind"))
    elif METHOD_COL in df.columns:
        df = _resolve_methods(df)

    if "shipping_kind" in df.columns:
        df = _calculate_total(df)

    df = _stamp_version(df)

    return df


def _apply_quotes(df: pl.DataFrame) -> pl.DataFrame:
    """
    Add one cost column per strategy.

    Each cost is the strategy's own quote() for the row, so batch and
    single-order pricing agree exactly. All cost columns share one Decimal
    dtype with enough scale to hold every quote unrounded.
    """
    # Quotes depend on measurements only
    orders = [
        Order(weight, height, width, length, price=Decimal("0"))
        for weight, height, width, length in df.select(REQUIRED_INPUT_COLS).iter_rows()
    ]
    quotes = {s.name: [s().quote(order) for order in orders] for s in ALL}
    dtype = _decimal_dtype([q for values in quotes.values() for q in values])

    return df.with_columns([
        pl.Series(f"cost_{name}", values, dtype=dtype) for name, values in quotes.items()
    ])


def _decimal_dtype(values: list[Decimal]) -> pl.Decimal:
    """Decimal dtype whose scale fits the most fractional digits in values."""
    scale = max((max(0, -v.as_tuple().exponent) for v in values), default=0)
    return pl.Decimal(precision=DECIMAL_PRECISION, scale=scale)


def _resolve_methods(df: pl.DataFrame) -> pl.DataFrame:
    """
    Map each shipping_method value to its canonical kind.

    Raises:
        InvalidStrategyError: If any row has an unknown or missing method
    """
    methods = df.get_column(METHOD_COL).unique().to_list()
    mapping = {m: ShippingKind.parse(m).value for m in methods}

    return df.with_columns(
        pl.col(METHOD_COL).replace_strict(mapping, return_dtype=pl.Utf8).alias("shipping_kind")
    )


def _calculate_total(df: pl.DataFrame) -> pl.DataFrame:
    """Pick cost_total from the quote column of each row's kind."""
    total = None
    for kind in ShippingKind:
        cost_col = f"cost_{get_strategy_class(kind).name}"
        if total is None:
            total = pl.when(pl.col("shipping_kind") == kind.value).then(pl.col(cost_col))
        else:
            total = total.when(pl.col("shipping_kind") == kind.value).then(pl.col(cost_col))

    return df.with_columns(total.otherwise(None).alias("cost_total"))


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


__all__ = [
    "calculate_costs",
    "supplement_orders",
    "calculate",
    "REQUIRED_INPUT_COLS",
]
