"""
Product performance engine — the full pipeline.

Stages
------
1. ``aggregate_entries``       entries -> per-product revenue / units / cost
2. ``compute_product_metrics`` aggregate + stock item -> ProductMetrics
3. ``classify_lifecycle``      profits + realization + stock -> category
4. ``compute_score``           metrics -> ScoreComponents -> integer score
5. ``assign_rankings``         + ``build_summary`` over products with sales

Products whose ``units_sold`` is 0 are dropped after step 4; they exist as
stock items but have no realized performance to rank.

The engine is a pure function of its inputs.  It never raises for bad data:
unknown entry types contribute nothing, and products classified UNKNOWN are
reported in ``PerformanceReport.integrity_warnings`` and logged at WARNING.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ledger_analytics.models.ledger import LedgerEntry, StockItem
from ledger_analytics.performance.aggregator import aggregate_entries, aggregate_for
from ledger_analytics.performance.lifecycle import classify_lifecycle
from ledger_analytics.performance.metrics import (
    DEFAULT_DAYS_TO_ANALYZE,
    ProductMetrics,
    compute_product_metrics,
)
from ledger_analytics.performance.models import PerformanceReport, ProductPerformance
from ledger_analytics.performance.ranker import assign_rankings, build_summary
from ledger_analytics.performance.scorer import compute_score
from ledger_analytics.taxonomy.lifecycle_taxonomy import LifecycleCategory

logger = logging.getLogger(__name__)


def build_product_performance(
    item: StockItem,
    metrics: ProductMetrics,
) -> ProductPerformance:
    """Score and classify one product from its metrics (ranks left at 0)."""
    components = compute_score(
        revenue=metrics.revenue,
        profit=metrics.actual_profit,
        efficiency=metrics.stock_efficiency,
        turnover=metrics.stock_turnover,
        margin=metrics.profit_margin,
        realization_rate=metrics.realization_rate,
    )
    category = classify_lifecycle(
        actual_profit=metrics.actual_profit,
        projected_profit=metrics.projected_profit,
        realization_rate=metrics.realization_rate,
        current_stock=metrics.current_stock,
    )

    return ProductPerformance(
        product_id=item.id,
        product_name=item.name,
        total_revenue=metrics.revenue,
        units_sold=metrics.quantity_sold,
        realized_profit=metrics.actual_profit,
        profit_margin=metrics.profit_margin,
        projected_revenue=metrics.projected_revenue,
        projected_profit=metrics.projected_profit,
        projected_margin=metrics.projected_margin,
        current_stock=metrics.current_stock,
        initial_stock=metrics.initial_stock,
        realization_rate=metrics.realization_rate,
        stock_efficiency=metrics.stock_efficiency,
        unrealized_value=metrics.unrealized_value,
        days_of_stock_left=metrics.days_of_stock_left,
        stock_turnover=metrics.stock_turnover,
        revenue_per_unit=metrics.avg_price,
        performance_score=components.performance_score,
        performance_category=category,
        components=components,
    )


def calculate_product_performance(
    entries:         Iterable[LedgerEntry],
    stock_items:     Iterable[StockItem],
    days_to_analyze: Optional[int] = DEFAULT_DAYS_TO_ANALYZE,
) -> PerformanceReport:
    """Run the full performance pipeline.

    Args:
        entries:         Ledger entries (already validated upstream).
        stock_items:     Current stock items.
        days_to_analyze: Analysis window in days for the stock runway
                         (default 30).  ``None`` or 0 disables the sales rate.

    Returns:
        PerformanceReport with ranked products (``units_sold > 0`` only),
        the portfolio summary, and any integrity warnings.
    """
    aggregates = aggregate_entries(entries)

    products: list[ProductPerformance] = []
    integrity_warnings: list[str] = []
    known_ids: set[str] = set()

    for item in stock_items:
        known_ids.add(item.id)
        metrics = compute_product_metrics(
            item, aggregate_for(aggregates, item.id), days_to_analyze
        )
        perf = build_product_performance(item, metrics)
        if perf.units_sold <= 0:
            continue
        if perf.performance_category == LifecycleCategory.UNKNOWN:
            logger.warning(
                "Inconsistent stock data for product %s (%s): %.0f units sold "
                "but only %d ever received, %d still on hand",
                item.id, item.name, metrics.quantity_sold,
                metrics.initial_stock, metrics.current_stock,
                extra={
                    "product_id": item.id,
                    "units_sold": metrics.quantity_sold,
                    "initial_stock": metrics.initial_stock,
                },
            )
            integrity_warnings.append(item.id)
        products.append(perf)

    orphaned = sorted(set(aggregates) - known_ids)
    if orphaned:
        logger.debug(
            "%d product id(s) in ledger have no stock item: %s",
            len(orphaned), ", ".join(orphaned),
        )

    assign_rankings(products)
    summary = build_summary(products)

    logger.info(
        "Performance computed: %d product(s) with sales, total revenue %.2f, "
        "total profit %.2f",
        summary.total_products_analyzed, summary.total_revenue, summary.total_profit,
    )

    return PerformanceReport(
        products=products,
        summary=summary,
        days_to_analyze=days_to_analyze,
        integrity_warnings=integrity_warnings,
    )
