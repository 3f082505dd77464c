"""
Product performance engine: turns ledger entries + stock items into a ranked,
categorized per-product scorecard and a portfolio summary.

Modules
-------
aggregator : ProductAggregate + aggregate_entries() — per-product sums.
metrics    : ProductMetrics + compute_product_metrics() — realized, projected
             and inventory-health figures.
lifecycle  : classify_lifecycle() — one LifecycleCategory per product.
scorer     : ScoreComponents + compute_score() — weighted composite score.
ranker     : assign_rankings() + build_summary().
models     : ProductPerformance, PerformanceSummary, PerformanceReport.
engine     : calculate_product_performance() — the full pipeline.

All modules are pure functions with no I/O.
"""

from ledger_analytics.performance.engine import calculate_product_performance

__all__ = ["calculate_product_performance"]
