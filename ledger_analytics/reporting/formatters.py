"""
ASCII terminal formatters for CLI reporting commands.

All formatters accept report objects and return plain multi-line strings
suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Score bands
-----------
``score_band()`` buckets the integer performance score the same way the
entry-store table colours it::

    >= 80  excellent
    >= 60  good
    >= 40  fair
    else   poor
"""

from __future__ import annotations

import math
from typing import Iterable

from ledger_analytics.performance.models import PerformanceSummary, ProductPerformance
from ledger_analytics.taxonomy.lifecycle_taxonomy import (
    CATEGORY_DISPLAY,
    get_category_display,
)


# ── Table helpers ─────────────────────────────────────────────────────────────


def score_band(score: float) -> str:
    """Return the display band for a performance score."""
    if score >= 80:
        return "excellent"
    if score >= 60:
        return "good"
    if score >= 40:
        return "fair"
    return "poor"


def filter_products(
    products: Iterable[ProductPerformance],
    search: str | None,
) -> list[ProductPerformance]:
    """Keep products whose name contains ``search`` (case-insensitive)."""
    if not search:
        return list(products)
    needle = search.lower()
    return [p for p in products if needle in p.product_name.lower()]


def sort_products(
    products: Iterable[ProductPerformance],
    field: str = "performance_score",
    descending: bool = True,
) -> list[ProductPerformance]:
    """Return products sorted by ``field`` (stable).

    String fields sort case-insensitively.

    Raises:
        AttributeError: If ``field`` is not a ProductPerformance attribute.
    """
    items = list(products)
    if not items:
        return items
    sample = getattr(items[0], field)
    if isinstance(sample, str):
        return sorted(items, key=lambda p: getattr(p, field).lower(), reverse=descending)
    return sorted(items, key=lambda p: getattr(p, field), reverse=descending)


# ── Number formatting ─────────────────────────────────────────────────────────


def _money(value: float) -> str:
    return f"{value:,.0f}"


def _pct(value: float) -> str:
    return f"{value:.1f}%"


def _days(value: float) -> str:
    return "never" if math.isinf(value) else f"{value:.0f}d"


# ── Summary ───────────────────────────────────────────────────────────────────


def format_summary(summary: PerformanceSummary) -> str:
    """Format the portfolio summary block."""
    def _name(p: ProductPerformance | None) -> str:
        return p.product_name if p is not None else "-"

    lines = [
        "",
        "=== Portfolio Summary ===",
        f"  Products analysed: {summary.total_products_analyzed}",
        f"  Total revenue:     {_money(summary.total_revenue)}",
        f"  Total profit:      {_money(summary.total_profit)}",
        f"  Average margin:    {_pct(summary.average_margin)}",
        f"  Best by revenue:   {_name(summary.best_by_revenue)}",
        f"  Best by profit:    {_name(summary.best_by_profit)}",
        f"  Best by score:     {_name(summary.best_by_score)}",
    ]
    return "\n".join(lines)


# ── Product table ─────────────────────────────────────────────────────────────


def format_performance_table(
    products: list[ProductPerformance],
    top_n: int | None = None,
) -> str:
    """Format products as an ASCII table, in the order given.

    Example::

          Product               Revenue     Profit  Margin  Sold%  Runway  Score  Band       Category
          --------------------------------------------------------------------------------------------
          Soap                   12,000      4,000   33.3%  60.0%     20d     41  fair       In progress (strong)

    Args:
        products: Products already sorted / filtered by the caller.
        top_n:    Max rows to show (None = all).

    Returns:
        Multi-line string.
    """
    lines: list[str] = ["", "=== Product Performance ==="]
    if not products:
        lines.append("  (no products with recorded sales)")
        return "\n".join(lines)

    shown = products if top_n is None else products[:top_n]
    header = (
        f"  {'Product':<20}  {'Revenue':>10}  {'Profit':>10}  {'Margin':>7}  "
        f"{'Sold%':>6}  {'Runway':>6}  {'Score':>5}  {'Band':<9}  Category"
    )
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for p in shown:
        display = get_category_display(p.performance_category)
        lines.append(
            f"  {p.product_name[:20]:<20}  {_money(p.total_revenue):>10}  "
            f"{_money(p.realized_profit):>10}  {_pct(p.profit_margin):>7}  "
            f"{_pct(p.realization_rate):>6}  {_days(p.days_of_stock_left):>6}  "
            f"{p.performance_score:>5}  {score_band(p.performance_score):<9}  "
            f"{display.label}"
        )
    if len(shown) < len(products):
        lines.append(f"  ... {len(products) - len(shown)} more product(s) not shown")
    return "\n".join(lines)


def format_integrity_warnings(product_ids: list[str]) -> str:
    """Format the data-quality warning block (empty string when none)."""
    if not product_ids:
        return ""
    return (
        "\n  [DATA WARNING] More units sold than ever received for: "
        + ", ".join(product_ids)
        + "\n  Check stock quantities and sale entries for these products."
    )


# ── Legend / ledger ───────────────────────────────────────────────────────────


def format_category_legend() -> str:
    """List every lifecycle category with its label and style tag."""
    lines = ["", "=== Lifecycle Categories ==="]
    for category, display in CATEGORY_DISPLAY.items():
        lines.append(
            f"  {display.icon}  {str(category):<24}  {display.label:<26}  [{display.style}]"
        )
    return "\n".join(lines)


def format_ledger_totals(
    sales: float,
    expenses: float,
    breakdown: dict[str, float],
) -> str:
    """Format business-wide totals and the expense breakdown."""
    lines = [
        "",
        "=== Ledger Totals ===",
        f"  Sales:    {_money(sales):>12}",
        f"  Expenses: {_money(expenses):>12}",
        f"  Profit:   {_money(sales - expenses):>12}",
        "",
        "  Expenses by category:",
    ]
    for category, amount in breakdown.items():
        lines.append(f"    {category:<12} {_money(amount):>12}")
    return "\n".join(lines)
