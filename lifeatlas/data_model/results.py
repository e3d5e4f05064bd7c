# Derived series shared between engines; never persisted.
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MonthlyProjection:
    month: str  # YYYY-MM
    total_income: int
    total_expenses: int
    net_cashflow: int
    net_worth: int
    net_worth_low: int
    net_worth_high: int


@dataclass(frozen=True)
class StressScore:
    """Composite stress for one month plus its six sub-scores, all 0-100.

    ``free_time`` is named after what it erodes: it is the summed phase load,
    so a higher value means *less* free time and more stress.
    """

    month: str
    composite: int
    free_time: int
    financial_surplus: int
    overlap_count: int
    caregiving_load: int
    sleep_proxy: int
    emotional_load: int
