"""
Ledger entry taxonomy.

``EntryType`` names the transaction kinds the performance engine knows how to
attribute to a product.  Entries carry their type as a plain string so that
records written by newer versions of the entry form (with types this module
does not list) still load; such entries simply contribute to nothing.

``ExpenseCategory`` lists the default buckets of the expense breakdown.

This module has NO imports from any other ``ledger_analytics`` package.
"""

from enum import StrEnum


class EntryType(StrEnum):
    """Kind of ledger transaction."""

    SALE = "SALE"
    """Units sold to a customer; ``amount`` is revenue, ``quantity`` is units."""

    EXPENSE = "EXPENSE"
    """Money spent; attributed to a product's cost when ``product_id`` is set."""

    STOCK_IN = "STOCK_IN"
    """Purchase of inventory; always a cost for the referenced product."""


class ExpenseCategory(StrEnum):
    """Default expense categories shown in the ledger breakdown."""

    STOCK = "Stock"
    TRANSPORT = "Transport"
    RENT = "Rent"
    SALARY = "Salary"
    INTERNET = "Internet"
    OTHER = "Other"


# Entry types that count toward a product's total cost.
COST_ENTRY_TYPES: frozenset[str] = frozenset({EntryType.EXPENSE.value, EntryType.STOCK_IN.value})
