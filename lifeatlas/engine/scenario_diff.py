from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import pandas as pd

from ..config import DEFAULT_RED_ZONE_THRESHOLD
from ..data_model import MonthlyProjection, StressScore
from .financial import compute_net_worth_at_month, find_worst_month
from .stress import get_minimum_free_time, get_peak_stress, get_red_zone_months
from .timeline import round_half_up


@dataclass(frozen=True)
class MetricDelta:
    a: float
    b: float
    delta: float


@dataclass(frozen=True)
class LabelPair:
    a: str
    b: str


@dataclass(frozen=True)
class ScenarioDiff:
    net_worth_at_retirement: MetricDelta
    peak_stress: MetricDelta
    worst_month: LabelPair
    red_zone_months: MetricDelta
    free_time_minimum: MetricDelta


def _delta(a: float, b: float) -> MetricDelta:
    return MetricDelta(a=a, b=b, delta=b - a)


def compute_scenario_diff(
    a_projections: Sequence[MonthlyProjection],
    b_projections: Sequence[MonthlyProjection],
    a_stress: Sequence[StressScore],
    b_stress: Sequence[StressScore],
    retirement_month: str,
    red_zone_threshold: float = DEFAULT_RED_ZONE_THRESHOLD,
) -> ScenarioDiff:
    a_peak = get_peak_stress(a_stress)
    b_peak = get_peak_stress(b_stress)
    a_worst = find_worst_month(a_projections)
    b_worst = find_worst_month(b_projections)

    return ScenarioDiff(
        net_worth_at_retirement=_delta(
            compute_net_worth_at_month(a_projections, retirement_month),
            compute_net_worth_at_month(b_projections, retirement_month),
        ),
        peak_stress=_delta(a_peak.composite if a_peak else 0, b_peak.composite if b_peak else 0),
        worst_month=LabelPair(a=a_worst.month if a_worst else "", b=b_worst.month if b_worst else ""),
        red_zone_months=_delta(
            get_red_zone_months(a_stress, red_zone_threshold),
            get_red_zone_months(b_stress, red_zone_threshold),
        ),
        free_time_minimum=_delta(get_minimum_free_time(a_stress), get_minimum_free_time(b_stress)),
    )


def format_delta(delta: float, unit: str) -> str:
    if delta == 0:
        return f"Same {unit}"
    direction = "more" if delta > 0 else "fewer"
    return f"{abs(delta)} {direction} {unit}"


def format_delta_neutral(delta: float, label: str) -> str:
    """Describe a difference without judging which scenario is better."""
    if delta == 0:
        return f"No difference in {label}"
    direction = "additional" if delta > 0 else "fewer"
    return f"{abs(round_half_up(delta))} {direction} {label}"


def diff_to_frame(diff: ScenarioDiff) -> pd.DataFrame:
    rows = []
    for metric in ("net_worth_at_retirement", "peak_stress", "red_zone_months", "free_time_minimum"):
        value: MetricDelta = getattr(diff, metric)
        rows.append({"Metric": metric, "A": value.a, "B": value.b, "Delta": value.delta})
    rows.append({"Metric": "worst_month", "A": diff.worst_month.a, "B": diff.worst_month.b, "Delta": None})
    return pd.DataFrame(rows, columns=["Metric", "A", "B", "Delta"])
