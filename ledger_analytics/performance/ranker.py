"""
Cross-product rankings and portfolio summary.

Rankings
--------
Three independent descending sorts — revenue, realized profit, stock
efficiency — each write a 1-based rank into the product record.  Sorting is
stable, so tied products keep their input order and still get distinct ranks;
each rank field is therefore a permutation of 1..N.

Summary
-------
    total_revenue  = Σ total_revenue
    total_profit   = Σ realized_profit
    average_margin = total_profit / total_revenue * 100   (0 when revenue is 0)

``best_by_*`` is a left-to-right reduction with a strict ``>`` comparison, so
the first product encountered wins on ties.
"""

from __future__ import annotations

from typing import Callable, Optional

from ledger_analytics.performance.models import PerformanceSummary, ProductPerformance


def assign_rankings(products: list[ProductPerformance]) -> list[ProductPerformance]:
    """Fill in ``rank_by_revenue``, ``rank_by_profit`` and ``rank_by_efficiency``.

    Ranks are written in place; the list itself is not reordered.

    Returns:
        The same ``products`` list, for chaining.
    """
    by_revenue = sorted(products, key=lambda p: p.total_revenue, reverse=True)
    for rank, p in enumerate(by_revenue, start=1):
        p.rank_by_revenue = rank

    by_profit = sorted(products, key=lambda p: p.realized_profit, reverse=True)
    for rank, p in enumerate(by_profit, start=1):
        p.rank_by_profit = rank

    by_efficiency = sorted(products, key=lambda p: p.stock_efficiency, reverse=True)
    for rank, p in enumerate(by_efficiency, start=1):
        p.rank_by_efficiency = rank

    return products


def build_summary(products: list[ProductPerformance]) -> PerformanceSummary:
    """Compute portfolio totals and best-by pointers.

    Args:
        products: Ranked products (only those with realized sales).

    Returns:
        PerformanceSummary; all zeros and ``None`` pointers for empty input.
    """
    total_revenue = sum(p.total_revenue for p in products)
    total_profit = sum(p.realized_profit for p in products)
    average_margin = total_profit / total_revenue * 100 if total_revenue > 0 else 0.0

    return PerformanceSummary(
        total_revenue=total_revenue,
        total_profit=total_profit,
        average_margin=average_margin,
        best_by_revenue=_first_max(products, lambda p: p.total_revenue),
        best_by_profit=_first_max(products, lambda p: p.realized_profit),
        best_by_score=_first_max(products, lambda p: p.performance_score),
        total_products_analyzed=len(products),
    )


# ── Helper ────────────────────────────────────────────────────────────────────

def _first_max(
    products: list[ProductPerformance],
    key: Callable[[ProductPerformance], float],
) -> Optional[ProductPerformance]:
    best: Optional[ProductPerformance] = None
    for p in products:
        if best is None or key(p) > key(best):
            best = p
    return best
