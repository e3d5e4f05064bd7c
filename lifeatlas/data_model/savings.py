from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List

import pandas as pd

from .base import coerce_enum, iter_rows, number, row_dates, text
from .enums import SavingsGoalType


@dataclass(frozen=True)
class SavingsGoal:
    id: str
    name: str
    type: SavingsGoalType
    current_balance: float
    target_amount: float
    monthly_contribution: float
    annual_return_rate: float  # %
    start_date: date
    target_date: date


def dataframe_to_savings_goals(df: pd.DataFrame | Iterable[dict]) -> List[SavingsGoal]:
    goals: List[SavingsGoal] = []
    for index, row in enumerate(iter_rows(df)):
        name = text(row, "Name")
        if not name:
            continue
        dates = row_dates(row, "Start Date", "Target Date", "savings goal")
        if dates is None:
            continue
        goals.append(
            SavingsGoal(
                id=text(row, "Id", f"goal-{index}"),
                name=name,
                type=coerce_enum(SavingsGoalType, row.get("Type"), SavingsGoalType.CUSTOM),
                current_balance=number(row, "Current Balance"),
                target_amount=number(row, "Target Amount"),
                monthly_contribution=number(row, "Monthly Contribution"),
                annual_return_rate=number(row, "Return Rate (%)"),
                start_date=dates[0],
                target_date=dates[1],
            )
        )
    return goals
