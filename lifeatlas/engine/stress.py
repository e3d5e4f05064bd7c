"""Composite psychosocial stress per month from phase load and cashflow.

Sub-scores (each clamped to 0-100):

- free_time: summed ``load_time_cost`` of active phases, capped at 100. Despite
  the name this measures load, so higher means less free time and more
  stress. The weight table below assumes that orientation.
- financial_surplus: negative cashflow gives ``|cf| / 50``; a surplus still
  leaves a floor of ``30 - cf / 200`` that fades as the surplus grows.
- overlap_count: 20 points per concurrent phase.
- caregiving_load: weekly caregiving hours against a 40 hour week.
- sleep_proxy: zero until the summed load passes 60, then 2.5 points per
  point of load.
- emotional_load: mean ``emotional_intensity`` of active phases.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List, Optional, Sequence

from ..config import DEFAULT_MONTHS, DEFAULT_RED_ZONE_THRESHOLD
from ..data_model import MonthlyProjection, Phase, StressScore
from .calendar import iter_month_dates, month_label

logger = logging.getLogger(__name__)

WEIGHTS: Dict[str, float] = {
    "free_time": 0.20,
    "financial_surplus": 0.20,
    "overlap_count": 0.15,
    "caregiving_load": 0.15,
    "sleep_proxy": 0.15,
    "emotional_load": 0.15,
}


def clamp_score(value: float) -> float:
    return max(0.0, min(100.0, value))


def active_phases_at(phases: Sequence[Phase], on_date: date) -> List[Phase]:
    return [phase for phase in phases if phase.is_active_on(on_date)]


def _financial_surplus_score(projection: Optional[MonthlyProjection]) -> float:
    if projection is None:
        return 0.0
    cashflow = projection.net_cashflow
    if cashflow < 0:
        return clamp_score(min(100.0, abs(cashflow) / 50))
    return clamp_score(max(0.0, 30 - cashflow / 200))


def score_month(label: str, active: Sequence[Phase], projection: Optional[MonthlyProjection]) -> StressScore:
    total_load = min(100.0, sum(phase.load_time_cost for phase in active))
    total_caregiving = sum(phase.caregiving_hours for phase in active)

    components = {
        "free_time": clamp_score(total_load),
        "financial_surplus": _financial_surplus_score(projection),
        "overlap_count": clamp_score(min(100.0, len(active) * 20)),
        "caregiving_load": clamp_score(min(100.0, total_caregiving / 40 * 100)),
        "sleep_proxy": clamp_score(max(0.0, total_load - 60) * 2.5),
        "emotional_load": (
            clamp_score(sum(phase.emotional_intensity for phase in active) / len(active)) if active else 0.0
        ),
    }
    composite = clamp_score(sum(components[key] * weight for key, weight in WEIGHTS.items()))

    return StressScore(
        month=label,
        composite=round(composite),
        **{key: round(value) for key, value in components.items()},
    )


def compute_stress_scores(
    phases: Sequence[Phase],
    projections: Sequence[MonthlyProjection],
    start_date: date,
    months: int = DEFAULT_MONTHS,
) -> List[StressScore]:
    by_month = {projection.month: projection for projection in projections}
    scores: List[StressScore] = []
    for _, current in iter_month_dates(start_date, months):
        label = month_label(current)
        scores.append(score_month(label, active_phases_at(phases, current), by_month.get(label)))

    logger.debug("Scored %d months across %d phases", len(scores), len(phases))
    return scores


def get_peak_stress(scores: Sequence[StressScore]) -> Optional[StressScore]:
    peak: Optional[StressScore] = None
    for score in scores:
        if peak is None or score.composite > peak.composite:
            peak = score
    return peak


def get_red_zone_months(scores: Sequence[StressScore], threshold: float = DEFAULT_RED_ZONE_THRESHOLD) -> int:
    return sum(1 for score in scores if score.composite >= threshold)


def get_minimum_free_time(scores: Sequence[StressScore]) -> int:
    if not scores:
        return 100
    return min(100 - score.free_time for score in scores)
