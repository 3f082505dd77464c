"""
Product lifecycle taxonomy.

Every analysed product falls into exactly one ``LifecycleCategory``:

  NOT_STARTED            — nothing sold yet.
  COMPLETED_*            — stock fully depleted; split by realized profit sign.
  IN_PROGRESS_*          — still selling; split by realized vs projected profit.
  UNKNOWN                — realization >= 100% with stock still on hand.  Only
                           reachable with inconsistent upstream data.

``get_category_display()`` maps a category (or any unrecognised string) to a
``CategoryDisplay`` triple for presentation layers.
"""

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple


class LifecycleCategory(StrEnum):
    """Lifecycle stage of a product's stock, derived from profit and sell-through."""

    NOT_STARTED = "NOT_STARTED"
    COMPLETED_PROFITABLE = "COMPLETED_PROFITABLE"
    COMPLETED_BREAKEVEN = "COMPLETED_BREAKEVEN"
    COMPLETED_LOSS = "COMPLETED_LOSS"
    IN_PROGRESS_STRONG = "IN_PROGRESS_STRONG"
    IN_PROGRESS_RECOVERING = "IN_PROGRESS_RECOVERING"
    IN_PROGRESS_TROUBLED = "IN_PROGRESS_TROUBLED"
    IN_PROGRESS_DECLINING = "IN_PROGRESS_DECLINING"
    IN_PROGRESS_NEUTRAL = "IN_PROGRESS_NEUTRAL"
    UNKNOWN = "UNKNOWN"


class CategoryDisplay(NamedTuple):
    """Presentation triple for a lifecycle category."""

    label: str
    style: str
    icon: str


CATEGORY_DISPLAY: dict[LifecycleCategory, CategoryDisplay] = {
    LifecycleCategory.NOT_STARTED:            CategoryDisplay("Not sold yet",           "gray",   "⏸️"),
    LifecycleCategory.COMPLETED_PROFITABLE:   CategoryDisplay("Completed (profit)",     "green",  "✅"),
    LifecycleCategory.COMPLETED_BREAKEVEN:    CategoryDisplay("Completed (break-even)", "blue",   "➖"),
    LifecycleCategory.COMPLETED_LOSS:         CategoryDisplay("Completed (loss)",       "red",    "❌"),
    LifecycleCategory.IN_PROGRESS_STRONG:     CategoryDisplay("In progress (strong)",   "green",  "📈"),
    LifecycleCategory.IN_PROGRESS_RECOVERING: CategoryDisplay("In progress (recovering)", "yellow", "🔄"),
    LifecycleCategory.IN_PROGRESS_TROUBLED:   CategoryDisplay("In progress (troubled)", "red",    "⚠️"),
    LifecycleCategory.IN_PROGRESS_DECLINING:  CategoryDisplay("In progress (declining)", "orange", "📉"),
    LifecycleCategory.IN_PROGRESS_NEUTRAL:    CategoryDisplay("In progress (neutral)",  "gray",   "➖"),
    LifecycleCategory.UNKNOWN:                CategoryDisplay("Unknown",                "gray",   "❓"),
}


def get_category_display(category: str | None) -> CategoryDisplay:
    """Return the display triple for ``category``.

    Accepts either a ``LifecycleCategory`` member or its string value.
    Anything unrecognised (including ``None``) maps to the UNKNOWN triple.
    """
    try:
        return CATEGORY_DISPLAY[LifecycleCategory(category)]
    except ValueError:
        return CATEGORY_DISPLAY[LifecycleCategory.UNKNOWN]
