"""Tests for ledger_analytics.reporting.export."""

from __future__ import annotations

import csv
import json
import math
from pathlib import Path

import pyarrow.parquet as pq
import pytest

from ledger_analytics.models.ledger import LedgerEntry, StockItem
from ledger_analytics.performance.engine import calculate_product_performance
from ledger_analytics.reporting.export import (
    EXPORT_FIELDNAMES,
    export_to_csv,
    export_to_json,
    flatten_report_for_export,
    report_to_dict,
    write_report_parquet,
)


@pytest.fixture
def report(sample_entries, sample_stock):
    return calculate_product_performance(sample_entries, sample_stock)


@pytest.fixture
def infinite_runway_report():
    entries = [LedgerEntry(type="SALE", product_id="z", amount=10, quantity=1)]
    stock = [StockItem(id="z", name="Pen", quantity=20, total_sold=1)]
    return calculate_product_performance(entries, stock, days_to_analyze=0)


# ── export_to_csv / export_to_json ────────────────────────────────────────────


def test_export_to_csv_basic(tmp_path: Path) -> None:
    records = [{"product_id": "p1", "score": 8}, {"product_id": "p2", "score": 56}]
    out = tmp_path / "sub" / "test.csv"
    assert export_to_csv(records, out) == out
    with out.open(encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["product_id"] for r in rows] == ["p1", "p2"]


def test_export_to_csv_empty(tmp_path: Path) -> None:
    out = tmp_path / "empty.csv"
    export_to_csv([], out)
    assert out.read_text(encoding="utf-8") == ""


def test_export_to_json(tmp_path: Path) -> None:
    out = export_to_json({"a": 1}, tmp_path / "x.json")
    assert json.loads(out.read_text(encoding="utf-8")) == {"a": 1}


# ── report_to_dict ────────────────────────────────────────────────────────────


def test_report_to_dict_shape(report) -> None:
    d = report_to_dict(report)
    assert d["daysToAnalyze"] == 30
    assert [p["productId"] for p in d["products"]] == ["p1", "p2", "p4"]
    assert d["summary"]["bestByRevenue"] == "p1"
    assert d["summary"]["bestByProfit"] == "p2"
    assert d["summary"]["totalProductsAnalyzed"] == 3
    assert d["integrityWarnings"] == []

    p1 = d["products"][0]
    assert p1["performanceCategory"] == "IN_PROGRESS_RECOVERING"
    assert p1["estimatedProfit"] == p1["realizedProfit"]
    assert set(p1["scoreComponents"]) == {
        "revenue_score", "profit_score", "efficiency_score",
        "turnover_score", "margin_score", "realization_score",
    }


def test_report_to_dict_is_strict_json(report) -> None:
    # allow_nan=False fails on inf / nan
    json.dumps(report_to_dict(report), allow_nan=False)


def test_infinite_runway_serialised_as_null(infinite_runway_report) -> None:
    d = report_to_dict(infinite_runway_report)
    assert d["products"][0]["daysOfStockLeft"] is None
    json.dumps(d, allow_nan=False)


def test_empty_report_summary_nulls() -> None:
    d = report_to_dict(calculate_product_performance([], []))
    assert d["products"] == []
    assert d["summary"]["bestByScore"] is None
    assert d["summary"]["totalRevenue"] == 0


# ── flatten / parquet ─────────────────────────────────────────────────────────


def test_flatten_rows_match_fieldnames(report) -> None:
    rows = flatten_report_for_export(report)
    assert len(rows) == 3
    for row in rows:
        assert list(row) == EXPORT_FIELDNAMES
    assert rows[1]["product_id"] == "p2"
    assert rows[1]["rank_by_profit"] == 1


def test_csv_round_trip_columns(report, tmp_path: Path) -> None:
    out = export_to_csv(flatten_report_for_export(report), tmp_path / "perf.csv",
                        fieldnames=EXPORT_FIELDNAMES)
    with out.open(encoding="utf-8") as f:
        header = f.readline().strip().split(",")
    assert header == EXPORT_FIELDNAMES


def test_write_report_parquet(report, tmp_path: Path) -> None:
    out = tmp_path / "perf.parquet"
    assert write_report_parquet(report, out) == 3
    table = pq.read_table(str(out))
    assert table.num_rows == 3
    assert table.column_names == EXPORT_FIELDNAMES
    assert table.column("performance_score").to_pylist() == [8, 56, 30]


def test_write_report_parquet_null_runway(infinite_runway_report, tmp_path: Path) -> None:
    out = tmp_path / "inf.parquet"
    write_report_parquet(infinite_runway_report, out)
    values = pq.read_table(str(out)).column("days_of_stock_left").to_pylist()
    assert values == [None]


def test_write_report_parquet_empty(tmp_path: Path) -> None:
    out = tmp_path / "empty.parquet"
    assert write_report_parquet(calculate_product_performance([], []), out) == 0
    assert pq.read_table(str(out)).num_rows == 0


def test_flatten_keeps_finite_runway(report) -> None:
    rows = flatten_report_for_export(report)
    assert not math.isinf(rows[0]["days_of_stock_left"])
    assert rows[0]["days_of_stock_left"] == pytest.approx(45.0)
