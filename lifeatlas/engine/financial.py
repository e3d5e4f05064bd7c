import logging
import math
from datetime import date
from typing import List, Optional, Sequence

from ..config import DEFAULT_MONTHS, UNCERTAINTY_SPREAD_PER_MONTH
from ..data_model import Account, ExpenseRule, IncomeStream, MonthlyProjection
from .calendar import iter_month_dates, month_label

logger = logging.getLogger(__name__)


def _build_account_state(item: Account) -> dict:
    return {
        "item": item,
        "balance": item.signed_balance(),
        "rate_m": item.monthly_rate(),
    }


def _growth_factor(annual_rate_pct: float, m: int) -> float:
    if not annual_rate_pct:
        return 1.0
    return (1.0 + annual_rate_pct / 100.0) ** (m / 12.0)


def _sum_income(streams: Sequence[IncomeStream], current: date, m: int) -> float:
    return sum(
        stream.monthly_amount * _growth_factor(stream.annual_growth_rate, m)
        for stream in streams
        if stream.is_active_on(current)
    )


def _sum_expenses(rules: Sequence[ExpenseRule], current: date, m: int, inflation_default: float) -> float:
    total = 0.0
    for rule in rules:
        if not rule.is_active_on(current):
            continue
        rate = inflation_default if rule.annual_inflation_rate is None else rule.annual_inflation_rate
        total += rule.monthly_amount * _growth_factor(rate, m)
    return total


def compute_projection(
    accounts: Sequence[Account],
    income_streams: Sequence[IncomeStream],
    expense_rules: Sequence[ExpenseRule],
    start_date: date,
    months: int = DEFAULT_MONTHS,
    inflation_default: Optional[float] = None,
) -> List[MonthlyProjection]:
    """Project income, expenses, interest and net worth month by month.

    Income and expenses grow by ``(1 + rate/100) ** (m/12)`` from the scenario
    start. Every account accrues ``rate/100/12`` on its own balance, debts
    tracked as negative balances so their interest lowers net worth. The band
    around net worth is ``sqrt(m + 1) * 500`` on each side.
    """
    if months <= 0:
        return []

    default_rate = inflation_default or 0.0
    account_states = [_build_account_state(item) for item in accounts]
    net_worth = sum(state["balance"] for state in account_states)

    records: List[MonthlyProjection] = []
    for m, current in iter_month_dates(start_date, months):
        total_income = _sum_income(income_streams, current, m)
        total_expenses = _sum_expenses(expense_rules, current, m, default_rate)
        net_cashflow = total_income - total_expenses

        interest_earned = 0.0
        for state in account_states:
            interest = state["balance"] * state["rate_m"]
            state["balance"] += interest
            interest_earned += interest

        net_worth += net_cashflow + interest_earned
        spread = math.sqrt(m + 1) * UNCERTAINTY_SPREAD_PER_MONTH

        records.append(
            MonthlyProjection(
                month=month_label(current),
                total_income=round(total_income),
                total_expenses=round(total_expenses),
                net_cashflow=round(net_cashflow),
                net_worth=round(net_worth),
                net_worth_low=round(net_worth - spread),
                net_worth_high=round(net_worth + spread),
            )
        )

    logger.debug(
        "Projected %d months from %s: %d accounts, %d income streams, %d expense rules",
        months,
        month_label(start_date),
        len(account_states),
        len(income_streams),
        len(expense_rules),
    )
    return records


def compute_net_worth_at_month(projections: Sequence[MonthlyProjection], month: str) -> int:
    for projection in projections:
        if projection.month == month:
            return projection.net_worth
    return 0


def find_worst_month(projections: Sequence[MonthlyProjection]) -> Optional[MonthlyProjection]:
    """Month with the most negative net cashflow; the earliest wins ties."""
    worst: Optional[MonthlyProjection] = None
    for projection in projections:
        if worst is None or projection.net_cashflow < worst.net_cashflow:
            worst = projection
    return worst
