"""
Performance scoring: six normalised sub-scores combined into one composite.

Score formula (weighted sum)
----------------------------
    total = (
        revenue_score       * 0.20   # sales volume in currency
        + profit_score      * 0.30   # realized profit
        + efficiency_score  * 0.20   # share of stock sold
        + turnover_score    * 0.15   # units sold vs average stock held
        + margin_score      * 0.15   # profit as % of revenue
        + realization_score * 0.10   # share of stock sold
    )
    performance_score = round_half_up(total)

Component normalisation
-----------------------
revenue_score:     min(revenue / 100_000 * 100, 100)   100k revenue -> 100
profit_score:      min(profit / 50_000 * 100, 100)     50k profit   -> 100
efficiency_score:  min(stock_efficiency, 100)
turnover_score:    min(stock_turnover * 50, 100)       2x turnover  -> 100
margin_score:      min(profit_margin, 100)
realization_score: min(realization_rate, 100)

The weights sum to 1.10, so a product maxing every component scores 110.
Caps are upper-only.  A loss-making product has a negative profit_score and
margin_score, and those negative contributions are weighted in unchanged, so
the composite can drop below 0.  The calibration constants are fixed; every
stored score depends on them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

REVENUE_FULL_SCORE = 100_000.0
PROFIT_FULL_SCORE = 50_000.0
TURNOVER_MULTIPLIER = 50.0
SCORE_CAP = 100.0

SCORE_WEIGHTS: dict[str, float] = {
    "revenue":     0.20,
    "profit":      0.30,
    "efficiency":  0.20,
    "turnover":    0.15,
    "margin":      0.15,
    "realization": 0.10,
}


@dataclass(frozen=True)
class ScoreComponents:
    """Normalised sub-scores of a product's performance score.

    Attributes:
        revenue_score:     <= 100, from total revenue.
        profit_score:      <= 100, from realized profit (negative for losses).
        efficiency_score:  <= 100, from stock efficiency.
        turnover_score:    <= 100, from stock turnover.
        margin_score:      <= 100, from profit margin (negative for losses).
        realization_score: <= 100, from realization rate.
    """

    revenue_score:     float
    profit_score:      float
    efficiency_score:  float
    turnover_score:    float
    margin_score:      float
    realization_score: float

    @property
    def total(self) -> float:
        """Unrounded weighted total."""
        return (
            self.revenue_score       * SCORE_WEIGHTS["revenue"]
            + self.profit_score      * SCORE_WEIGHTS["profit"]
            + self.efficiency_score  * SCORE_WEIGHTS["efficiency"]
            + self.turnover_score    * SCORE_WEIGHTS["turnover"]
            + self.margin_score      * SCORE_WEIGHTS["margin"]
            + self.realization_score * SCORE_WEIGHTS["realization"]
        )

    @property
    def performance_score(self) -> int:
        """Weighted total rounded half-up to an integer."""
        return _round_half_up(self.total)

    def as_dict(self) -> dict[str, float]:
        return {
            "revenue_score":     self.revenue_score,
            "profit_score":      self.profit_score,
            "efficiency_score":  self.efficiency_score,
            "turnover_score":    self.turnover_score,
            "margin_score":      self.margin_score,
            "realization_score": self.realization_score,
        }


def compute_score(
    revenue:          float,
    profit:           float,
    efficiency:       float,
    turnover:         float,
    margin:           float,
    realization_rate: float,
) -> ScoreComponents:
    """Normalise the six raw metrics into score components.

    Args:
        revenue:          Total realized revenue.
        profit:           Realized profit (revenue - cost); may be negative.
        efficiency:       Stock efficiency percentage.
        turnover:         Stock turnover ratio.
        margin:           Profit margin percentage; may be negative.
        realization_rate: Realization rate percentage.

    Returns:
        ScoreComponents; use ``.performance_score`` for the integer composite.
    """
    return ScoreComponents(
        revenue_score=_cap(revenue / REVENUE_FULL_SCORE * 100),
        profit_score=_cap(profit / PROFIT_FULL_SCORE * 100),
        efficiency_score=_cap(efficiency),
        turnover_score=_cap(turnover * TURNOVER_MULTIPLIER),
        margin_score=_cap(margin),
        realization_score=_cap(realization_rate),
    )


# ── Helpers ───────────────────────────────────────────────────────────────────

def _cap(value: float) -> float:
    return min(value, SCORE_CAP)


def _round_half_up(value: float) -> int:
    # round() uses banker's rounding; scores round .5 upward.
    return math.floor(value + 0.5)
