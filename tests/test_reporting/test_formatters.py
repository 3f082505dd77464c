"""Tests for ledger_analytics.reporting.formatters."""

from __future__ import annotations

import pytest

from ledger_analytics.performance.engine import calculate_product_performance
from ledger_analytics.performance.models import PerformanceSummary
from ledger_analytics.reporting.formatters import (
    filter_products,
    format_category_legend,
    format_integrity_warnings,
    format_ledger_totals,
    format_performance_table,
    format_summary,
    score_band,
    sort_products,
)


@pytest.fixture
def report(sample_entries, sample_stock):
    return calculate_product_performance(sample_entries, sample_stock)


@pytest.mark.parametrize(
    "score, band",
    [(100, "excellent"), (80, "excellent"), (79, "good"), (60, "good"),
     (59, "fair"), (40, "fair"), (39, "poor"), (-12, "poor")],
)
def test_score_band(score, band) -> None:
    assert score_band(score) == band


class TestSortFilter:
    def test_sort_by_score_desc(self, report):
        assert [p.product_id for p in sort_products(report.products)] == ["p2", "p4", "p1"]

    def test_sort_ascending(self, report):
        ids = [p.product_id for p in sort_products(report.products, "total_revenue", descending=False)]
        assert ids == ["p4", "p2", "p1"]

    def test_sort_by_name_case_insensitive(self, report):
        ids = [p.product_id for p in sort_products(report.products, "product_name", descending=False)]
        assert ids == ["p4", "p2", "p1"]  # Basket, Candle, Soap

    def test_sort_empty(self):
        assert sort_products([], "total_revenue") == []

    def test_sort_unknown_field_raises(self, report):
        with pytest.raises(AttributeError):
            sort_products(report.products, "nope")

    def test_filter_case_insensitive(self, report):
        assert [p.product_id for p in filter_products(report.products, "CAN")] == ["p2"]

    def test_filter_empty_search_keeps_all(self, report):
        assert len(filter_products(report.products, "")) == 3
        assert len(filter_products(report.products, None)) == 3


class TestFormatters:
    def test_summary_contains_best_names(self, report):
        text = format_summary(report.summary)
        assert "Portfolio Summary" in text
        assert "Soap" in text      # best by revenue
        assert "Candle" in text    # best by profit / score
        assert "6.8%" in text      # average margin

    def test_empty_summary(self):
        text = format_summary(PerformanceSummary())
        assert "Best by score:     -" in text

    def test_table_rows_and_labels(self, report):
        text = format_performance_table(report.products)
        assert "Soap" in text and "Basket" in text
        assert "In progress (recovering)" in text
        assert "Completed (profit)" in text

    def test_table_top_n(self, report):
        text = format_performance_table(report.products, top_n=1)
        assert "2 more product(s) not shown" in text

    def test_table_empty(self):
        assert "no products with recorded sales" in format_performance_table([])

    def test_infinite_runway_shown_as_never(self):
        from ledger_analytics.models.ledger import LedgerEntry, StockItem

        r = calculate_product_performance(
            [LedgerEntry(type="SALE", product_id="z", amount=10, quantity=1)],
            [StockItem(id="z", name="Pen", quantity=20, total_sold=1)],
            days_to_analyze=0,
        )
        assert "never" in format_performance_table(r.products)

    def test_integrity_warnings(self):
        assert format_integrity_warnings([]) == ""
        assert "p7, p9" in format_integrity_warnings(["p7", "p9"])

    def test_category_legend_lists_all(self):
        text = format_category_legend()
        assert "NOT_STARTED" in text
        assert "UNKNOWN" in text
        assert "IN_PROGRESS_DECLINING" in text

    def test_ledger_totals(self):
        text = format_ledger_totals(4400, 1300, {"Rent": 800.0, "Stock": 500.0})
        assert "3,100" in text
        assert "Rent" in text
