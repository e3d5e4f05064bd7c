from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List

import pandas as pd

from .base import coerce_enum, iter_rows, number, parse_date, text
from .enums import DebtStrategy


@dataclass(frozen=True)
class DebtPlan:
    id: str
    name: str
    principal_balance: float
    annual_interest_rate: float  # %
    minimum_payment: float
    start_date: date
    monthly_payment: float = 0.0  # only used by fixed-payment
    extra_payment: float = 0.0
    strategy: DebtStrategy = DebtStrategy.MINIMUM_PAYMENT

    def monthly_rate(self) -> float:
        return self.annual_interest_rate / 100.0 / 12.0


def dataframe_to_debt_plans(df: pd.DataFrame | Iterable[dict]) -> List[DebtPlan]:
    plans: List[DebtPlan] = []
    for index, row in enumerate(iter_rows(df)):
        name = text(row, "Name")
        start_date = parse_date(row.get("Start Date"))
        if not name or start_date is None:
            continue
        principal = number(row, "Balance")
        if principal <= 0.0:
            continue
        plans.append(
            DebtPlan(
                id=text(row, "Id", f"debt-{index}"),
                name=name,
                principal_balance=principal,
                annual_interest_rate=number(row, "Interest Rate (%)"),
                minimum_payment=number(row, "Minimum Payment"),
                start_date=start_date,
                monthly_payment=number(row, "Monthly Payment"),
                extra_payment=number(row, "Extra Payment"),
                strategy=coerce_enum(DebtStrategy, row.get("Strategy"), DebtStrategy.MINIMUM_PAYMENT),
            )
        )
    return plans
