"""
Lifecycle classification.

Rules (evaluated in order — first match wins):
    1. realization_rate == 0            -> NOT_STARTED
    2. current_stock == 0               -> COMPLETED_PROFITABLE / _BREAKEVEN / _LOSS
                                           by the sign of actual_profit
    3. realization_rate < 100           -> IN_PROGRESS_STRONG     (actual > 0, projected > 0)
                                           IN_PROGRESS_RECOVERING (actual < 0, projected > 0)
                                           IN_PROGRESS_TROUBLED   (actual < 0, projected < 0)
                                           IN_PROGRESS_DECLINING  (actual > 0, projected < 0)
                                           IN_PROGRESS_NEUTRAL    (either profit exactly 0)
    4. otherwise                        -> UNKNOWN

Rule 2 is checked before rule 3, so a sold-out product with 100% realization
is COMPLETED_*, never UNKNOWN.  UNKNOWN means more units were sold than were
ever received while stock remains; callers surface it as a data-quality
warning.
"""

from __future__ import annotations

from ledger_analytics.taxonomy.lifecycle_taxonomy import LifecycleCategory


def classify_lifecycle(
    actual_profit:    float,
    projected_profit: float,
    realization_rate: float,
    current_stock:    float,
) -> LifecycleCategory:
    """Return the lifecycle category for one product."""
    if realization_rate == 0:
        return LifecycleCategory.NOT_STARTED

    if current_stock == 0:
        if actual_profit > 0:
            return LifecycleCategory.COMPLETED_PROFITABLE
        if actual_profit == 0:
            return LifecycleCategory.COMPLETED_BREAKEVEN
        return LifecycleCategory.COMPLETED_LOSS

    if realization_rate < 100:
        if actual_profit > 0 and projected_profit > 0:
            return LifecycleCategory.IN_PROGRESS_STRONG
        if actual_profit < 0 and projected_profit > 0:
            return LifecycleCategory.IN_PROGRESS_RECOVERING
        if actual_profit < 0 and projected_profit < 0:
            return LifecycleCategory.IN_PROGRESS_TROUBLED
        if actual_profit > 0 and projected_profit < 0:
            return LifecycleCategory.IN_PROGRESS_DECLINING
        return LifecycleCategory.IN_PROGRESS_NEUTRAL

    return LifecycleCategory.UNKNOWN
