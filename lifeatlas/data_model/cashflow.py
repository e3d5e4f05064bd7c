from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

import pandas as pd

from .base import coerce_enum, is_blank, iter_rows, number, row_dates, text
from .enums import CertaintyLevel


@dataclass(frozen=True)
class IncomeStream:
    id: str
    name: str
    monthly_amount: float
    start_date: date
    end_date: date
    annual_growth_rate: float = 0.0  # %
    phase_id: Optional[str] = None
    certainty: CertaintyLevel = CertaintyLevel.CONFIRMED

    def is_active_on(self, on_date: date) -> bool:
        return self.start_date <= on_date <= self.end_date


@dataclass(frozen=True)
class ExpenseRule:
    id: str
    name: str
    monthly_amount: float
    start_date: date
    end_date: date
    # None means "use the projection's inflation default"
    annual_inflation_rate: Optional[float] = 0.0
    category: str = "living"
    is_required: bool = True
    phase_id: Optional[str] = None

    def is_active_on(self, on_date: date) -> bool:
        return self.start_date <= on_date <= self.end_date


def dataframe_to_income_streams(df: pd.DataFrame | Iterable[dict]) -> List[IncomeStream]:
    rows: List[IncomeStream] = []
    for index, row in enumerate(iter_rows(df)):
        name = text(row, "Name")
        if not name:
            continue
        dates = row_dates(row, "Start Date", "End Date", "income")
        if dates is None:
            continue
        rows.append(
            IncomeStream(
                id=text(row, "Id", f"income-{index}"),
                name=name,
                monthly_amount=number(row, "Monthly Amount"),
                start_date=dates[0],
                end_date=dates[1],
                annual_growth_rate=number(row, "Growth Rate (%)"),
                phase_id=text(row, "Phase") or None,
                certainty=coerce_enum(CertaintyLevel, row.get("Certainty"), CertaintyLevel.CONFIRMED),
            )
        )
    return rows


def dataframe_to_expense_rules(df: pd.DataFrame | Iterable[dict]) -> List[ExpenseRule]:
    rows: List[ExpenseRule] = []
    for index, row in enumerate(iter_rows(df)):
        name = text(row, "Name")
        if not name:
            continue
        dates = row_dates(row, "Start Date", "End Date", "expense")
        if dates is None:
            continue
        inflation = None if is_blank(row.get("Inflation Rate (%)")) else number(row, "Inflation Rate (%)")
        rows.append(
            ExpenseRule(
                id=text(row, "Id", f"expense-{index}"),
                name=name,
                monthly_amount=number(row, "Monthly Amount"),
                start_date=dates[0],
                end_date=dates[1],
                annual_inflation_rate=inflation,
                category=text(row, "Category", "other").lower(),
                is_required=str(row.get("Required", True)).strip().lower() not in {"false", "0", "no"},
                phase_id=text(row, "Phase") or None,
            )
        )
    return rows
