# data_model/scenario.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List

from ..config import DEFAULT_MONTHS
from .accounts import Account
from .cashflow import ExpenseRule, IncomeStream
from .debts import DebtPlan
from .phases import FamilyMember, Phase
from .savings import SavingsGoal


@dataclass
class ScenarioInputs:
    name: str
    start_date: date
    months: int = DEFAULT_MONTHS
    phases: List[Phase] = field(default_factory=list)
    family_members: List[FamilyMember] = field(default_factory=list)
    accounts: List[Account] = field(default_factory=list)
    income_streams: List[IncomeStream] = field(default_factory=list)
    expense_rules: List[ExpenseRule] = field(default_factory=list)
    debt_plans: List[DebtPlan] = field(default_factory=list)
    savings_goals: List[SavingsGoal] = field(default_factory=list)
    inflation_default: float | None = None
