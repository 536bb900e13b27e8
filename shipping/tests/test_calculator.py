"""
Unit Tests for ShippingCalculator

Tests delegation, immutability and quote comparison.

Run with: pytest shipping/tests/test_calculator.py -v
"""

from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from shipping.calculator import ShippingCalculator, cheapest_kind, compare_costs
from shipping.exceptions import InvalidStrategyError
from shipping.strategies import (
    EconomyStrategy,
    ExpeditedStrategy,
    ShippingKind,
    StorePickupStrategy,
)
from shipping.tests.helpers import make_order


class FixedStrategy(EconomyStrategy):
    """Strategy that records the orders it priced."""

    def __init__(self):
        self.seen = []

    def cost(self, order):
        self.seen.append(order)
        return Decimal("42.00")


# =============================================================================
# DELEGATION TESTS
# =============================================================================

class TestComputeCost:
    """Tests for compute_cost delegation."""

    def test_delegates_to_strategy(self, medium_order):
        strategy = FixedStrategy()
        calculator = ShippingCalculator(strategy)
        assert calculator.compute_cost(medium_order) == Decimal("42.00")
        assert strategy.seen == [medium_order]

    def test_economy(self, medium_order):
        """15 lbs -> 5.00 + 5 * 0.50 = 7.50."""
        assert ShippingCalculator(EconomyStrategy()).compute_cost(medium_order) == Decimal("7.50")

    def test_expedited(self, medium_order):
        assert ShippingCalculator(ExpeditedStrategy()).compute_cost(medium_order) == Decimal("180.00")

    def test_store_pickup_notifies(self, medium_order, notifier):
        calculator = ShippingCalculator(StorePickupStrategy(notifier))
        assert calculator.compute_cost(medium_order) == Decimal("0.00")
        assert len(notifier.notified) == 1

    def test_for_kind(self, medium_order):
        calculator = ShippingCalculator.for_kind(ShippingKind.EXPEDITED)
        assert isinstance(calculator.strategy, ExpeditedStrategy)
        assert calculator.compute_cost(medium_order) == Decimal("180.00")

    def test_for_kind_passes_notifier(self, medium_order, notifier):
        ShippingCalculator.for_kind("store", notifier).compute_cost(medium_order)
        assert notifier.notified == [medium_order]

    def test_for_kind_rejects_unknown(self):
        with pytest.raises(InvalidStrategyError):
            ShippingCalculator.for_kind("unknown")

    def test_rejects_non_strategy(self):
        with pytest.raises(InvalidStrategyError, match="needs a ShippingStrategy"):
            ShippingCalculator("economy")

    def test_concurrent_use(self, bulky_order, medium_order):
        calculator = ShippingCalculator(ExpeditedStrategy())
        orders = [bulky_order, medium_order] * 50

        with ThreadPoolExecutor(max_workers=8) as pool:
            costs = list(pool.map(calculator.compute_cost, orders))

        assert costs == [calculator.compute_cost(o) for o in orders]


# =============================================================================
# IMMUTABILITY TESTS
# =============================================================================

class TestImmutability:
    """Tests that calculators cannot change strategy in place."""

    def test_strategy_is_read_only(self):
        calculator = ShippingCalculator(EconomyStrategy())
        with pytest.raises(AttributeError):
            calculator.strategy = ExpeditedStrategy()

    def test_no_new_attributes(self):
        calculator = ShippingCalculator(EconomyStrategy())
        with pytest.raises(AttributeError):
            calculator.other = 1

    def test_with_strategy_returns_new_calculator(self, medium_order):
        economy = ShippingCalculator(EconomyStrategy())
        expedited = economy.with_strategy(ExpeditedStrategy())

        assert expedited is not economy
        assert isinstance(economy.strategy, EconomyStrategy)
        assert economy.compute_cost(medium_order) == Decimal("7.50")
        assert expedited.compute_cost(medium_order) == Decimal("180.00")


# =============================================================================
# QUOTE COMPARISON TESTS
# =============================================================================

class TestCompareCosts:
    """Tests for comparing quotes across all strategies."""

    def test_all_kinds_quoted(self, medium_order):
        assert set(compare_costs(medium_order)) == set(ShippingKind)

    def test_cheapest_first(self, medium_order):
        quotes = compare_costs(medium_order)
        assert list(quotes) == [
            ShippingKind.STORE_PICKUP,
            ShippingKind.ECONOMY,
            ShippingKind.EXPEDITED,
        ]
        assert quotes[ShippingKind.ECONOMY] == Decimal("7.50")
        assert quotes[ShippingKind.EXPEDITED] == Decimal("180.00")
        assert quotes[ShippingKind.STORE_PICKUP] == Decimal("0.00")

    def test_cheapest_kind(self, bulky_order):
        assert cheapest_kind(bulky_order) is ShippingKind.STORE_PICKUP

    def test_does_not_notify(self, medium_order, caplog):
        caplog.set_level("INFO", logger="shipping.notifications")
        compare_costs(medium_order)
        assert caplog.records == []

    def test_economy_beats_expedited_for_light_orders(self):
        quotes = compare_costs(make_order(2.0, 8.0, 5.0, 1.0, "25.00"))
        assert quotes[ShippingKind.ECONOMY] < quotes[ShippingKind.EXPEDITED]
