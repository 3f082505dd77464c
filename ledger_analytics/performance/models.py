"""
Performance report records.

``ProductPerformance`` is built once per product by the engine and is not
mutated afterwards, except for the three ``rank_by_*`` fields which the
ranker fills in.  The caller owns the returned report; the engine keeps no
reference to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ledger_analytics.performance.scorer import ScoreComponents
from ledger_analytics.taxonomy.lifecycle_taxonomy import LifecycleCategory


@dataclass
class ProductPerformance:
    """Scorecard for one product with realized sales.

    Attributes:
        product_id:           ``StockItem.id``.
        product_name:         ``StockItem.name``.
        total_revenue:        Sum of SALE amounts.
        units_sold:           Sum of SALE quantities.
        realized_profit:      Revenue minus attributed costs.
        profit_margin:        Realized profit as % of revenue.
        projected_revenue:    Revenue if remaining stock sells at the average price.
        projected_profit:     Projected revenue minus attributed costs.
        projected_margin:     Projected profit as % of projected revenue.
        current_stock:        Units on hand.
        initial_stock:        Units ever received (sold + on hand).
        realization_rate:     % of received units sold.
        stock_efficiency:     Same value as ``realization_rate``.
        unrealized_value:     Remaining stock valued at the average price.
        days_of_stock_left:   Stock runway in days; ``math.inf`` when no sales rate.
        stock_turnover:       Units sold / average stock held.
        revenue_per_unit:     Average selling price.
        performance_score:    Integer composite score (see ``scorer``).
        performance_category: Lifecycle category.
        components:           Score breakdown.
        rank_by_revenue:      1-based rank by revenue (0 until ranked).
        rank_by_profit:       1-based rank by realized profit (0 until ranked).
        rank_by_efficiency:   1-based rank by stock efficiency (0 until ranked).
    """

    product_id:           str
    product_name:         str
    total_revenue:        float
    units_sold:           float
    realized_profit:      float
    profit_margin:        float
    projected_revenue:    float
    projected_profit:     float
    projected_margin:     float
    current_stock:        int
    initial_stock:        int
    realization_rate:     float
    stock_efficiency:     float
    unrealized_value:     float
    days_of_stock_left:   float
    stock_turnover:       float
    revenue_per_unit:     float
    performance_score:    int
    performance_category: LifecycleCategory
    components:           ScoreComponents
    rank_by_revenue:      int = 0
    rank_by_profit:       int = 0
    rank_by_efficiency:   int = 0

    @property
    def estimated_profit(self) -> float:
        """Older name for ``realized_profit``."""
        return self.realized_profit


@dataclass
class PerformanceSummary:
    """Portfolio-level totals over the ranked products.

    ``best_by_*`` point into the report's product list; they are ``None``
    when no product had realized sales.
    """

    total_revenue:           float = 0.0
    total_profit:            float = 0.0
    average_margin:          float = 0.0
    best_by_revenue:         Optional[ProductPerformance] = None
    best_by_profit:          Optional[ProductPerformance] = None
    best_by_score:           Optional[ProductPerformance] = None
    total_products_analyzed: int = 0


@dataclass
class PerformanceReport:
    """Engine output: ranked products, summary, and data-integrity warnings.

    Attributes:
        products:           Products with ``units_sold > 0``, in stock-item order.
        summary:            Portfolio summary.
        days_to_analyze:    Analysis window used for the stock runway.
        integrity_warnings: Product ids classified UNKNOWN (sold more units
                            than were ever received while stock remains).
    """

    products:           list[ProductPerformance]
    summary:            PerformanceSummary
    days_to_analyze:    Optional[int] = None
    integrity_warnings: list[str] = field(default_factory=list)
