"""
Business-wide ledger totals.

Unlike the performance engine, these helpers look at every entry regardless
of ``product_id``: rent and salaries count toward total expenses even though
they belong to no product.

Only ``SALE`` counts as sales and only ``EXPENSE`` counts as an expense here;
``STOCK_IN`` is an inventory movement and is excluded from the ledger totals
(the performance engine does attribute it to product cost).
"""

from __future__ import annotations

from typing import Iterable

from ledger_analytics.models.ledger import LedgerEntry
from ledger_analytics.taxonomy.entry_taxonomy import EntryType, ExpenseCategory


def sales_amount(entry: LedgerEntry) -> float:
    """Return ``entry.amount`` for a SALE, 0 otherwise."""
    return entry.amount if entry.type == EntryType.SALE else 0.0


def expense_amount(entry: LedgerEntry) -> float:
    """Return ``entry.amount`` for an EXPENSE, 0 otherwise."""
    return entry.amount if entry.type == EntryType.EXPENSE else 0.0


def entry_profit(entry: LedgerEntry) -> float:
    return sales_amount(entry) - expense_amount(entry)


def total_sales(entries: Iterable[LedgerEntry]) -> float:
    return sum(sales_amount(e) for e in entries)


def total_expenses(entries: Iterable[LedgerEntry]) -> float:
    return sum(expense_amount(e) for e in entries)


def expenses_by_category(entries: Iterable[LedgerEntry]) -> dict[str, float]:
    """Break EXPENSE entries down by category.

    The default categories are always present (0 when unused), in
    ``ExpenseCategory`` order; other categories are appended as first seen.
    Expenses without a category are not counted.
    """
    breakdown: dict[str, float] = {str(c): 0.0 for c in ExpenseCategory}
    for entry in entries:
        if entry.type == EntryType.EXPENSE and entry.category:
            breakdown[entry.category] = breakdown.get(entry.category, 0.0) + entry.amount
    return breakdown
