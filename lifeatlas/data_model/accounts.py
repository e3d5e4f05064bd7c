from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

import pandas as pd

from .base import coerce_enum, iter_rows, number, text
from .enums import AccountType


@dataclass(frozen=True)
class Account:
    id: str
    name: str
    type: AccountType
    balance: float  # debt accounts hold a positive magnitude
    interest_rate: float = 0.0  # annual %, compounded monthly

    def is_debt(self) -> bool:
        return self.type == AccountType.DEBT

    def signed_balance(self) -> float:
        return -abs(self.balance) if self.is_debt() else self.balance

    def monthly_rate(self) -> float:
        return self.interest_rate / 100.0 / 12.0


def dataframe_to_accounts(df: pd.DataFrame | Iterable[dict]) -> List[Account]:
    items: List[Account] = []
    for index, row in enumerate(iter_rows(df)):
        name = text(row, "Name")
        if not name:
            continue
        items.append(
            Account(
                id=text(row, "Id", f"account-{index}"),
                name=name,
                type=coerce_enum(AccountType, row.get("Type"), AccountType.OTHER),
                balance=number(row, "Balance"),
                interest_rate=number(row, "Interest Rate (%)"),
            )
        )
    return items
