"""
Tests for ledger_analytics/performance/aggregator.py.

What we test
------------
aggregate_entries():
  - SALE adds amount to revenue and quantity to quantity_sold.
  - SALE with no quantity counts 0 units.
  - EXPENSE and STOCK_IN both add to total_cost.
  - Unknown entry types are ignored.
  - Entries without product_id (or with an empty one) are ignored.
  - Result does not depend on entry order.

aggregate_for():
  - Returns a zero aggregate for unknown product ids.
"""

from __future__ import annotations

import pytest

from ledger_analytics.models.ledger import LedgerEntry
from ledger_analytics.performance.aggregator import (
    ProductAggregate,
    aggregate_entries,
    aggregate_for,
)


def _entry(
    type: str = "SALE",
    amount: float = 100.0,
    product_id: str | None = "p1",
    quantity: float | None = 1,
) -> LedgerEntry:
    return LedgerEntry(type=type, amount=amount, product_id=product_id, quantity=quantity)


class TestAggregateEntries:
    def test_sale_accumulates_revenue_and_units(self):
        aggs = aggregate_entries([_entry(amount=100, quantity=2), _entry(amount=50, quantity=1)])
        assert aggs["p1"].revenue == pytest.approx(150.0)
        assert aggs["p1"].quantity_sold == pytest.approx(3.0)
        assert aggs["p1"].total_cost == 0.0

    def test_sale_without_quantity_counts_zero_units(self):
        aggs = aggregate_entries([_entry(amount=80, quantity=None)])
        assert aggs["p1"].revenue == pytest.approx(80.0)
        assert aggs["p1"].quantity_sold == 0.0

    def test_expense_and_stock_in_are_costs(self):
        aggs = aggregate_entries([
            _entry(type="EXPENSE", amount=30, quantity=None),
            _entry(type="STOCK_IN", amount=70, quantity=10),
        ])
        assert aggs["p1"].total_cost == pytest.approx(100.0)
        # STOCK_IN quantity is not a sale
        assert aggs["p1"].quantity_sold == 0.0
        assert aggs["p1"].revenue == 0.0

    def test_unknown_type_ignored(self):
        aggs = aggregate_entries([_entry(type="REFUND", amount=999)])
        assert aggregate_for(aggs, "p1") == ProductAggregate()

    def test_entries_without_product_ignored(self):
        aggs = aggregate_entries([
            _entry(type="EXPENSE", amount=800, product_id=None),
            _entry(amount=10, product_id=""),
        ])
        assert aggs == {}

    def test_groups_by_product(self):
        aggs = aggregate_entries([
            _entry(product_id="a", amount=10),
            _entry(product_id="b", amount=20),
            _entry(product_id="a", amount=5),
        ])
        assert aggs["a"].revenue == pytest.approx(15.0)
        assert aggs["b"].revenue == pytest.approx(20.0)

    def test_order_independent(self, sample_entries):
        forward = aggregate_entries(sample_entries)
        backward = aggregate_entries(list(reversed(sample_entries)))
        assert forward == backward


class TestAggregateFor:
    def test_missing_product_gives_zero_aggregate(self):
        agg = aggregate_for({}, "nope")
        assert agg.revenue == 0.0
        assert agg.quantity_sold == 0.0
        assert agg.total_cost == 0.0
