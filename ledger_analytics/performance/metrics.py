"""
Per-product derived metrics.

Combines one product's ``ProductAggregate`` with its current ``StockItem``
state.  Every ratio is guarded: a zero denominator yields 0, except the stock
runway which yields ``math.inf`` ("never runs out at the current pace").

Formulas
--------
    initial_stock     = total_sold + quantity
    actual_profit     = revenue - total_cost
    avg_price         = revenue / quantity_sold
    avg_stock         = (initial_stock + quantity) / 2
    stock_turnover    = quantity_sold / avg_stock
    daily_sales_rate  = quantity_sold / days_to_analyze
    days_of_stock_left= quantity / daily_sales_rate          (inf when rate == 0)
    stock_efficiency  = quantity_sold / initial_stock * 100
    realization_rate  = stock_efficiency                    (same quantity)
    profit_margin     = actual_profit / revenue * 100
    projected_revenue = revenue + quantity * avg_price
    projected_profit  = projected_revenue - total_cost
    projected_margin  = projected_profit / projected_revenue * 100
    unrealized_value  = quantity * avg_price
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ledger_analytics.models.ledger import StockItem
from ledger_analytics.performance.aggregator import ProductAggregate

DEFAULT_DAYS_TO_ANALYZE = 30


@dataclass(frozen=True)
class ProductMetrics:
    """Realized, projected, and inventory-health metrics for one product.

    ``realization_rate`` and ``stock_efficiency`` are the same number (share
    of ever-received stock that has been sold).  Both names are kept because
    report consumers read both.
    """

    revenue:            float
    quantity_sold:      float
    total_cost:         float
    current_stock:      int
    initial_stock:      int
    actual_profit:      float
    avg_price:          float
    avg_stock:          float
    stock_turnover:     float
    daily_sales_rate:   float
    days_of_stock_left: float
    stock_efficiency:   float
    profit_margin:      float
    projected_revenue:  float
    projected_profit:   float
    projected_margin:   float
    unrealized_value:   float

    @property
    def realization_rate(self) -> float:
        return self.stock_efficiency


def compute_product_metrics(
    item: StockItem,
    aggregate: ProductAggregate | None = None,
    days_to_analyze: int | None = DEFAULT_DAYS_TO_ANALYZE,
) -> ProductMetrics:
    """Derive all metrics for one product.

    Args:
        item:            Current inventory state.
        aggregate:       Summed flow data; ``None`` is treated as all zeros.
        days_to_analyze: Analysis window in days, used only for the sales rate
                         and stock runway.  ``None`` or a non-positive value
                         means no rate is computable (rate 0, runway inf).

    Returns:
        A frozen ``ProductMetrics``.
    """
    agg = aggregate or ProductAggregate()
    revenue = agg.revenue
    sold = agg.quantity_sold
    cost = agg.total_cost
    quantity = item.quantity

    initial_stock = item.initial_stock
    actual_profit = revenue - cost
    avg_price = revenue / sold if sold > 0 else 0.0

    avg_stock = (initial_stock + quantity) / 2
    stock_turnover = sold / avg_stock if avg_stock > 0 else 0.0

    if days_to_analyze and days_to_analyze > 0:
        daily_sales_rate = sold / days_to_analyze
    else:
        daily_sales_rate = 0.0
    days_of_stock_left = quantity / daily_sales_rate if daily_sales_rate > 0 else math.inf

    stock_efficiency = sold / initial_stock * 100 if initial_stock > 0 else 0.0
    profit_margin = actual_profit / revenue * 100 if revenue > 0 else 0.0

    unrealized_value = quantity * avg_price
    projected_revenue = revenue + unrealized_value
    projected_profit = projected_revenue - cost
    projected_margin = (
        projected_profit / projected_revenue * 100 if projected_revenue > 0 else 0.0
    )

    return ProductMetrics(
        revenue=revenue,
        quantity_sold=sold,
        total_cost=cost,
        current_stock=quantity,
        initial_stock=initial_stock,
        actual_profit=actual_profit,
        avg_price=avg_price,
        avg_stock=avg_stock,
        stock_turnover=stock_turnover,
        daily_sales_rate=daily_sales_rate,
        days_of_stock_left=days_of_stock_left,
        stock_efficiency=stock_efficiency,
        profit_margin=profit_margin,
        projected_revenue=projected_revenue,
        projected_profit=projected_profit,
        projected_margin=projected_margin,
        unrealized_value=unrealized_value,
    )
