from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from ..config import SAFE_WITHDRAWAL_RATE
from ..data_model import SavingsGoal, SavingsGoalType
from .calendar import add_months, month_label

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SavingsProjectionMonth:
    month: str
    goal_id: str
    goal_name: str
    balance: int
    contribution: float
    growth: int
    percent_complete: float


@dataclass(frozen=True)
class RetirementGoalStatus:
    name: str
    balance: float
    target: float
    percent: float


@dataclass(frozen=True)
class RetirementReadiness:
    total_retirement_saved: float
    monthly_retirement_income: int  # safe-withdrawal estimate
    retirement_goals: List[RetirementGoalStatus] = field(default_factory=list)


def _percent_complete(balance: float, target: float) -> float:
    if target <= 0:
        return 100.0
    return min(100.0, balance / target * 100.0)


def project_goal(goal: SavingsGoal) -> List[SavingsProjectionMonth]:
    rows: List[SavingsProjectionMonth] = []
    balance = goal.current_balance
    rate_m = goal.annual_return_rate / 100.0 / 12.0
    m = 0
    current = goal.start_date
    while current <= goal.target_date:
        growth = balance * rate_m
        balance += growth + goal.monthly_contribution
        rows.append(
            SavingsProjectionMonth(
                month=month_label(current),
                goal_id=goal.id,
                goal_name=goal.name,
                balance=round(balance),
                contribution=goal.monthly_contribution,
                growth=round(growth),
                percent_complete=round(_percent_complete(balance, goal.target_amount), 1),
            )
        )
        m += 1
        current = add_months(goal.start_date, m)
    return rows


def compute_savings_projection(goals: Sequence[SavingsGoal]) -> List[SavingsProjectionMonth]:
    result: List[SavingsProjectionMonth] = []
    for goal in goals:
        result.extend(project_goal(goal))
    logger.debug("Projected %d savings goals into %d rows", len(goals), len(result))
    return result


def get_retirement_readiness(
    goals: Sequence[SavingsGoal],
    projection: Sequence[SavingsProjectionMonth],
) -> RetirementReadiness:
    statuses: List[RetirementGoalStatus] = []
    for goal in goals:
        if goal.type != SavingsGoalType.RETIREMENT:
            continue
        goal_months = [p for p in projection if p.goal_id == goal.id]
        last = goal_months[-1] if goal_months else None
        statuses.append(
            RetirementGoalStatus(
                name=goal.name,
                balance=last.balance if last else goal.current_balance,
                target=goal.target_amount,
                percent=last.percent_complete if last else 0.0,
            )
        )

    total_saved = sum(status.balance for status in statuses)
    return RetirementReadiness(
        total_retirement_saved=total_saved,
        monthly_retirement_income=round(total_saved * SAFE_WITHDRAWAL_RATE / 12),
        retirement_goals=statuses,
    )
