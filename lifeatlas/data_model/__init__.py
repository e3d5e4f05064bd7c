from .accounts import Account, dataframe_to_accounts
from .cashflow import (
    ExpenseRule,
    IncomeStream,
    dataframe_to_expense_rules,
    dataframe_to_income_streams,
)
from .debts import DebtPlan, dataframe_to_debt_plans
from .enums import (
    DEBT_STRATEGIES,
    PHASE_CATEGORIES,
    AccountType,
    CertaintyLevel,
    DebtStrategy,
    FlexibilityLevel,
    PhaseCategory,
    Relationship,
    SavingsGoalType,
    Sex,
    ZoomLevel,
)
from .phases import FamilyMember, Phase, dataframe_to_family_members, dataframe_to_phases
from .results import MonthlyProjection, StressScore
from .savings import SavingsGoal, dataframe_to_savings_goals
from .scenario import ScenarioInputs

__all__ = [
    "DEBT_STRATEGIES",
    "PHASE_CATEGORIES",
    "Account",
    "AccountType",
    "CertaintyLevel",
    "DebtPlan",
    "DebtStrategy",
    "ExpenseRule",
    "FamilyMember",
    "FlexibilityLevel",
    "IncomeStream",
    "MonthlyProjection",
    "Phase",
    "PhaseCategory",
    "Relationship",
    "SavingsGoal",
    "SavingsGoalType",
    "ScenarioInputs",
    "Sex",
    "StressScore",
    "ZoomLevel",
    "dataframe_to_accounts",
    "dataframe_to_debt_plans",
    "dataframe_to_expense_rules",
    "dataframe_to_family_members",
    "dataframe_to_income_streams",
    "dataframe_to_phases",
    "dataframe_to_savings_goals",
]
