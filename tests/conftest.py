"""
Shared pytest fixtures for the Ledger Analytics test suite.

Provides:
  - ``sample_entries`` / ``sample_stock``: a small shop ledger covering a
    recovering product, a sold-out profitable product, a product with no
    sales, and a strong in-progress product.
  - ``sample_business_data``: the same data as a raw export dict
    (camelCase keys) for reader / CLI tests.

Expected figures for the sample shop (30-day window)
----------------------------------------------------
    p1 Soap    revenue 2000  profit -1000  sold 4/10  IN_PROGRESS_RECOVERING  score 8
    p2 Candle  revenue 1500  profit  1000  sold 5/5   COMPLETED_PROFITABLE    score 56
    p3 Towel   no sales                                 (excluded)
    p4 Basket  revenue  900  profit   300  sold 3/5   IN_PROGRESS_STRONG      score 30
"""

from __future__ import annotations

from typing import Any

import pytest

from ledger_analytics.models.ledger import LedgerEntry, StockItem


@pytest.fixture
def sample_business_data() -> dict[str, Any]:
    """Raw business-data export dict (as written by the entry store)."""
    return {
        "settings": {"name": "Corner Shop", "dailyTarget": 500},
        "entries": [
            {"id": "e1", "date": "2026-09-01", "type": "STOCK_IN", "productId": "p1", "amount": 3000},
            {"id": "e2", "date": "2026-09-02", "type": "SALE", "productId": "p1", "amount": 2000, "quantity": 4},
            {"id": "e3", "date": "2026-09-03", "type": "SALE", "productId": "p2", "amount": 1500, "quantity": 5},
            {"id": "e4", "date": "2026-09-03", "type": "EXPENSE", "productId": "p2", "amount": 500, "category": "Stock"},
            {"id": "e5", "date": "2026-09-05", "type": "EXPENSE", "amount": 800, "category": "Rent"},
            {"id": "e6", "date": "2026-09-06", "type": "SALE", "productId": "p4", "amount": 900, "quantity": 3},
            {"id": "e7", "date": "2026-09-06", "type": "STOCK_IN", "productId": "p4", "amount": 600},
        ],
        "stock": [
            {"id": "p1", "name": "Soap", "quantity": 6, "totalSold": 4},
            {"id": "p2", "name": "Candle", "quantity": 0, "totalSold": 5},
            {"id": "p3", "name": "Towel", "quantity": 5, "totalSold": 0},
            {"id": "p4", "name": "Basket", "quantity": 2, "totalSold": 3},
        ],
    }


@pytest.fixture
def sample_entries(sample_business_data: dict[str, Any]) -> list[LedgerEntry]:
    return [LedgerEntry.model_validate(e) for e in sample_business_data["entries"]]


@pytest.fixture
def sample_stock(sample_business_data: dict[str, Any]) -> list[StockItem]:
    return [StockItem.model_validate(s) for s in sample_business_data["stock"]]
