"""
Ledger and inventory input models.

These models describe the records supplied by the upstream entry store:

``LedgerEntry``
    One immutable transaction (sale, expense, stock receipt, ...).
``StockItem``
    Current inventory state for one product.
``BusinessSettings``
    Business-level settings from the export envelope.

Field names are snake_case in Python; the camelCase names used by the export
format (``productId``, ``totalSold``, ``dailyTarget``) are accepted as aliases
and used when serialising with ``by_alias=True``.

``type`` is a free string and amounts are not range-checked; the performance
engine ignores entry types it does not know.

All models are frozen.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_LEDGER_MODEL_CONFIG = ConfigDict(
    frozen=True,
    populate_by_name=True,
    alias_generator=to_camel,
    coerce_numbers_to_str=True,
)


class LedgerEntry(BaseModel):
    """A single ledger transaction.

    Attributes:
        entry_id: Optional identifier assigned by the entry store.
        product_id: ``StockItem.id`` this entry belongs to, or ``None`` for
            business-wide entries (rent, salaries, ...).
        type: Entry type string; see ``EntryType`` for the known values.
        amount: Currency amount of the transaction.
        quantity: Unit count; meaningful for ``SALE`` entries.
        entry_date: Calendar date of the transaction (``date`` in the export).
        category: Expense category for ``EXPENSE`` entries.
        description: Free-text note.
    """

    model_config = _LEDGER_MODEL_CONFIG

    entry_id: Optional[str] = Field(default=None, alias="id")
    product_id: Optional[str] = None
    type: str
    amount: float = 0.0
    quantity: Optional[float] = None
    entry_date: Optional[date] = Field(default=None, alias="date")
    category: Optional[str] = None
    description: Optional[str] = None


class StockItem(BaseModel):
    """Inventory state for one product.

    ``total_sold + quantity`` is the number of units ever received into
    inventory for this product (see ``initial_stock``).

    Attributes:
        id: Product identifier referenced by ``LedgerEntry.product_id``.
        name: Display name.
        quantity: Units currently on hand.
        total_sold: Cumulative units ever sold.
    """

    model_config = _LEDGER_MODEL_CONFIG

    id: str
    name: str
    quantity: int = 0
    total_sold: int = 0

    @property
    def initial_stock(self) -> int:
        return self.total_sold + self.quantity


class BusinessSettings(BaseModel):
    """Business-level settings stored alongside the ledger."""

    model_config = _LEDGER_MODEL_CONFIG

    name: str = ""
    daily_target: Optional[float] = None

    @field_validator("daily_target")
    @classmethod
    def validate_daily_target(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v < 0:
            raise ValueError(f"daily_target must be non-negative, got {v}.")
        return v
