"""
Export helpers for spreadsheets and downstream analysis.

All writers create parent directories and return the written ``Path``.

``report_to_dict()`` is the canonical JSON shape of a ``PerformanceReport``
(camelCase keys, matching the field names the entry-store UI reads).
Infinite stock runway has no JSON representation, so ``daysOfStockLeft`` is
written as ``null`` when no sales rate exists.

``flatten_report_for_export()`` produces one flat row per product (score
components as separate ``sc_*`` columns) for CSV and Parquet.
"""

from __future__ import annotations

import csv
import json
import logging
import math
from pathlib import Path
from typing import Any

import pyarrow as pa
import pyarrow.parquet as pq

from ledger_analytics.performance.models import (
    PerformanceReport,
    PerformanceSummary,
    ProductPerformance,
)

logger = logging.getLogger(__name__)

# ── Parquet schema ────────────────────────────────────────────────────────────

REPORT_PA_SCHEMA = pa.schema([
    pa.field("product_id",           pa.string(),  nullable=False),
    pa.field("product_name",         pa.string(),  nullable=False),
    pa.field("performance_category", pa.string(),  nullable=False),
    pa.field("performance_score",    pa.int32(),   nullable=False),
    pa.field("rank_by_revenue",      pa.int32(),   nullable=False),
    pa.field("rank_by_profit",       pa.int32(),   nullable=False),
    pa.field("rank_by_efficiency",   pa.int32(),   nullable=False),
    pa.field("total_revenue",        pa.float64(), nullable=False),
    pa.field("units_sold",           pa.float64(), nullable=False),
    pa.field("realized_profit",      pa.float64(), nullable=False),
    pa.field("profit_margin",        pa.float64(), nullable=False),
    pa.field("projected_revenue",    pa.float64(), nullable=False),
    pa.field("projected_profit",     pa.float64(), nullable=False),
    pa.field("projected_margin",     pa.float64(), nullable=False),
    pa.field("current_stock",        pa.int64(),   nullable=False),
    pa.field("initial_stock",        pa.int64(),   nullable=False),
    pa.field("realization_rate",     pa.float64(), nullable=False),
    pa.field("stock_efficiency",     pa.float64(), nullable=False),
    pa.field("unrealized_value",     pa.float64(), nullable=False),
    pa.field("days_of_stock_left",   pa.float64(), nullable=True),
    pa.field("stock_turnover",       pa.float64(), nullable=False),
    pa.field("revenue_per_unit",     pa.float64(), nullable=False),
    pa.field("sc_revenue",           pa.float64(), nullable=False),
    pa.field("sc_profit",            pa.float64(), nullable=False),
    pa.field("sc_efficiency",        pa.float64(), nullable=False),
    pa.field("sc_turnover",          pa.float64(), nullable=False),
    pa.field("sc_margin",            pa.float64(), nullable=False),
    pa.field("sc_realization",       pa.float64(), nullable=False),
])

EXPORT_FIELDNAMES: list[str] = [f.name for f in REPORT_PA_SCHEMA]


# ── Generic writers ───────────────────────────────────────────────────────────

def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write ``records`` to a UTF-8 CSV file.

    Args:
        records:    List of row dicts.
        path:       Destination file path (parent dirs created if missing).
        fieldnames: Column order.  If None, uses the keys of the first record.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not records:
        path.write_text("", encoding="utf-8")
        return path
    cols = fieldnames or list(records[0].keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    return path


def export_to_json(data: dict | list, path: Path) -> Path:
    """Write ``data`` to a pretty-printed JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
    return path


# ── Report shapes ─────────────────────────────────────────────────────────────

def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


def product_to_dict(p: ProductPerformance) -> dict[str, Any]:
    """Serialise one product with camelCase keys."""
    return {
        "productId":           p.product_id,
        "productName":         p.product_name,
        "totalRevenue":        p.total_revenue,
        "unitsSold":           p.units_sold,
        "realizedProfit":      p.realized_profit,
        "estimatedProfit":     p.estimated_profit,
        "profitMargin":        p.profit_margin,
        "projectedRevenue":    p.projected_revenue,
        "projectedProfit":     p.projected_profit,
        "projectedMargin":     p.projected_margin,
        "currentStock":        p.current_stock,
        "initialStock":        p.initial_stock,
        "realizationRate":     p.realization_rate,
        "stockEfficiency":     p.stock_efficiency,
        "unrealizedValue":     p.unrealized_value,
        "daysOfStockLeft":     _finite_or_none(p.days_of_stock_left),
        "stockTurnover":       p.stock_turnover,
        "revenuePerUnit":      p.revenue_per_unit,
        "performanceScore":    p.performance_score,
        "performanceCategory": str(p.performance_category),
        "scoreComponents":     p.components.as_dict(),
        "rankByRevenue":       p.rank_by_revenue,
        "rankByProfit":        p.rank_by_profit,
        "rankByEfficiency":    p.rank_by_efficiency,
    }


def summary_to_dict(s: PerformanceSummary) -> dict[str, Any]:
    """Serialise the summary; best-by pointers become product ids (or null)."""
    return {
        "totalRevenue":          s.total_revenue,
        "totalProfit":           s.total_profit,
        "averageMargin":         s.average_margin,
        "bestByRevenue":         s.best_by_revenue.product_id if s.best_by_revenue else None,
        "bestByProfit":          s.best_by_profit.product_id if s.best_by_profit else None,
        "bestByScore":           s.best_by_score.product_id if s.best_by_score else None,
        "totalProductsAnalyzed": s.total_products_analyzed,
    }


def report_to_dict(report: PerformanceReport) -> dict[str, Any]:
    """Return the JSON-safe dict form of a full report."""
    return {
        "daysToAnalyze":     report.days_to_analyze,
        "products":          [product_to_dict(p) for p in report.products],
        "summary":           summary_to_dict(report.summary),
        "integrityWarnings": list(report.integrity_warnings),
    }


def flatten_report_for_export(report: PerformanceReport) -> list[dict[str, Any]]:
    """Flatten a report into one row per product (keys = ``EXPORT_FIELDNAMES``)."""
    rows: list[dict[str, Any]] = []
    for p in report.products:
        c = p.components
        rows.append({
            "product_id":           p.product_id,
            "product_name":         p.product_name,
            "performance_category": str(p.performance_category),
            "performance_score":    p.performance_score,
            "rank_by_revenue":      p.rank_by_revenue,
            "rank_by_profit":       p.rank_by_profit,
            "rank_by_efficiency":   p.rank_by_efficiency,
            "total_revenue":        p.total_revenue,
            "units_sold":           p.units_sold,
            "realized_profit":      p.realized_profit,
            "profit_margin":        p.profit_margin,
            "projected_revenue":    p.projected_revenue,
            "projected_profit":     p.projected_profit,
            "projected_margin":     p.projected_margin,
            "current_stock":        p.current_stock,
            "initial_stock":        p.initial_stock,
            "realization_rate":     p.realization_rate,
            "stock_efficiency":     p.stock_efficiency,
            "unrealized_value":     p.unrealized_value,
            "days_of_stock_left":   _finite_or_none(p.days_of_stock_left),
            "stock_turnover":       p.stock_turnover,
            "revenue_per_unit":     p.revenue_per_unit,
            "sc_revenue":           c.revenue_score,
            "sc_profit":            c.profit_score,
            "sc_efficiency":        c.efficiency_score,
            "sc_turnover":          c.turnover_score,
            "sc_margin":            c.margin_score,
            "sc_realization":       c.realization_score,
        })
    return rows


# ── Parquet ───────────────────────────────────────────────────────────────────

def write_report_parquet(report: PerformanceReport, path: Path) -> int:
    """Write the flattened report to Parquet with ``REPORT_PA_SCHEMA``.

    Returns the number of rows written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    rows = flatten_report_for_export(report)
    arrays = {
        field.name: pa.array([r[field.name] for r in rows], type=field.type)
        for field in REPORT_PA_SCHEMA
    }
    table = pa.table(arrays, schema=REPORT_PA_SCHEMA)
    pq.write_table(table, str(path), compression="snappy")
    logger.info("Performance Parquet written: %s (%d rows)", path.name, len(rows))
    return len(rows)
