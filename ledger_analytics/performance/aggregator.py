"""
Per-product aggregation of ledger entries.

Collapses the flat entry list into one ``ProductAggregate`` per product id:

    SALE               -> revenue += amount, quantity_sold += quantity (or 0)
    EXPENSE, STOCK_IN  -> total_cost += amount
    anything else      -> ignored

Entries without a ``product_id`` are business-wide (rent, salaries) and are
not attributable to any product, so they are skipped.  Summation is
order-independent.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable

from ledger_analytics.models.ledger import LedgerEntry
from ledger_analytics.taxonomy.entry_taxonomy import COST_ENTRY_TYPES, EntryType


@dataclass
class ProductAggregate:
    """Summed flow data for one product.

    Attributes:
        revenue:       Sum of SALE amounts.
        quantity_sold: Sum of SALE quantities.
        total_cost:    Sum of EXPENSE and STOCK_IN amounts.
    """

    revenue: float = 0.0
    quantity_sold: float = 0.0
    total_cost: float = 0.0


def aggregate_entries(entries: Iterable[LedgerEntry]) -> dict[str, ProductAggregate]:
    """Group entries by product and accumulate revenue, units, and cost.

    Args:
        entries: Ledger entries in any order.

    Returns:
        Dict mapping product_id -> ProductAggregate.  Products with no
        attributable entries are absent; use ``aggregate_for()`` to get a
        zero-valued default.
    """
    by_product: dict[str, ProductAggregate] = defaultdict(ProductAggregate)

    for entry in entries:
        if not entry.product_id:
            continue

        if entry.type == EntryType.SALE:
            agg = by_product[entry.product_id]
            agg.revenue += entry.amount
            agg.quantity_sold += entry.quantity or 0
        elif entry.type in COST_ENTRY_TYPES:
            by_product[entry.product_id].total_cost += entry.amount

    return dict(by_product)


def aggregate_for(
    aggregates: dict[str, ProductAggregate],
    product_id: str,
) -> ProductAggregate:
    """Return the aggregate for ``product_id``, or a zero aggregate."""
    return aggregates.get(product_id) or ProductAggregate()
