"""Debt payoff schedules under minimum, fixed, snowball and avalanche strategies.

A run is either *pooled* or *per-debt*, decided once from the whole plan list:

- pooled: at least one debt uses snowball or avalanche. Every debt's
  ``extra_payment`` (whatever its own strategy) plus the minimums freed by
  debts already paid off form one budget, applied in snowball order
  (smallest balance first) or avalanche order (highest rate first).
- per-debt: fixed-payment debts add ``monthly_payment - minimum_payment``;
  minimum-payment debts pay only their minimum.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, List, Sequence

import pandas as pd

from ..config import DEFAULT_DEBT_MAX_MONTHS, PAID_OFF_EPSILON
from ..data_model import DebtPlan, DebtStrategy
from .calendar import add_months, month_label

logger = logging.getLogger(__name__)


class StrategyMode(str, Enum):
    PER_DEBT = "per-debt"
    POOLED_SNOWBALL = "pooled-snowball"
    POOLED_AVALANCHE = "pooled-avalanche"


@dataclass(frozen=True)
class DebtPayoffMonth:
    month: str
    debt_id: str
    debt_name: str
    starting_balance: float
    payment: float
    interest_charged: float
    principal_paid: float
    ending_balance: float
    is_paid_off: bool


@dataclass(frozen=True)
class DebtPayoffSummary:
    debt_id: str
    debt_name: str
    original_balance: float
    total_interest_paid: float
    total_paid: float
    months_to_payoff: int  # 0 when not paid off within the cap
    payoff_date: str  # YYYY-MM, "" when not paid off


@dataclass(frozen=True)
class DebtPayoffResult:
    schedule: List[DebtPayoffMonth] = field(default_factory=list)
    summaries: List[DebtPayoffSummary] = field(default_factory=list)
    total_interest_paid: float = 0.0
    total_paid: float = 0.0
    last_payoff_date: str = ""
    mode: StrategyMode = StrategyMode.PER_DEBT


def resolve_strategy_mode(plans: Sequence[DebtPlan]) -> StrategyMode:
    """Ordering comes from the first plan that asks for pooling."""
    for plan in plans:
        if plan.strategy == DebtStrategy.SNOWBALL:
            return StrategyMode.POOLED_SNOWBALL
        if plan.strategy == DebtStrategy.AVALANCHE:
            return StrategyMode.POOLED_AVALANCHE
    return StrategyMode.PER_DEBT


def _build_debt_state(plan: DebtPlan) -> dict:
    return {
        "plan": plan,
        "balance": plan.principal_balance,
        "rate_m": plan.monthly_rate(),
        "total_interest": 0.0,
        "total_paid": 0.0,
        "paid_off": False,
        "payoff_month": "",
        "months_to_payoff": 0,
        # per-month scratch values
        "opening": 0.0,
        "interest": 0.0,
        "payment": 0.0,
    }


def _pay(state: dict, amount: float) -> float:
    amount = min(amount, state["balance"])
    state["balance"] -= amount
    state["total_paid"] += amount
    state["payment"] += amount
    return amount


def _own_extra(plan: DebtPlan) -> float:
    if plan.strategy == DebtStrategy.FIXED_PAYMENT:
        return plan.monthly_payment - plan.minimum_payment
    return 0.0


def _apply_pooled_extra(states: List[dict], active: List[dict], mode: StrategyMode, pool: float) -> None:
    freed_minimums = sum(s["plan"].minimum_payment for s in states if s["paid_off"])
    remaining = pool + freed_minimums
    targets = [s for s in active if s["balance"] > PAID_OFF_EPSILON]
    if mode == StrategyMode.POOLED_SNOWBALL:
        targets.sort(key=lambda s: s["balance"])
    else:
        targets.sort(key=lambda s: s["rate_m"], reverse=True)
    for state in targets:
        if remaining <= 0:
            break
        remaining -= _pay(state, remaining)


def _apply_own_extra(active: List[dict]) -> None:
    for state in active:
        if state["balance"] <= PAID_OFF_EPSILON:
            continue
        extra = _own_extra(state["plan"])
        if extra <= 0:
            continue
        _pay(state, extra)


def _schedule_entry(state: dict, label: str) -> DebtPayoffMonth:
    plan = state["plan"]
    return DebtPayoffMonth(
        month=label,
        debt_id=plan.id,
        debt_name=plan.name,
        starting_balance=round(state["opening"], 2),
        payment=round(state["payment"], 2),
        interest_charged=round(state["interest"], 2),
        principal_paid=round(state["payment"] - state["interest"], 2),
        ending_balance=round(state["balance"], 2),
        is_paid_off=state["balance"] <= PAID_OFF_EPSILON,
    )


def compute_debt_payoff(debt_plans: Sequence[DebtPlan], max_months: int = DEFAULT_DEBT_MAX_MONTHS) -> DebtPayoffResult:
    if not debt_plans:
        return DebtPayoffResult()

    states = [_build_debt_state(plan) for plan in debt_plans]
    mode = resolve_strategy_mode(debt_plans)
    pool = sum(plan.extra_payment for plan in debt_plans) if mode != StrategyMode.PER_DEBT else 0.0
    earliest_start = min(plan.start_date for plan in debt_plans)
    schedule: List[DebtPayoffMonth] = []

    for m in range(max_months):
        current = add_months(earliest_start, m)
        label = month_label(current)
        active = [s for s in states if not s["paid_off"] and s["plan"].start_date <= current]
        if not active:
            if all(s["paid_off"] for s in states):
                break
            continue

        for state in active:
            state["opening"] = state["balance"]
            state["interest"] = state["balance"] * state["rate_m"]
            state["balance"] += state["interest"]
            state["total_interest"] += state["interest"]
            state["payment"] = 0.0

        for state in active:
            _pay(state, state["plan"].minimum_payment)

        if mode != StrategyMode.PER_DEBT:
            _apply_pooled_extra(states, active, mode, pool)
        else:
            _apply_own_extra(active)

        for state in active:
            schedule.append(_schedule_entry(state, label))
            if state["balance"] <= PAID_OFF_EPSILON:
                state["paid_off"] = True
                state["balance"] = 0.0
                state["payoff_month"] = label
                state["months_to_payoff"] = m + 1

    unpaid = [s["plan"].name for s in states if not s["paid_off"]]
    if unpaid:
        logger.warning("Debts not paid off within %d months: %s", max_months, ", ".join(unpaid))

    summaries = [
        DebtPayoffSummary(
            debt_id=s["plan"].id,
            debt_name=s["plan"].name,
            original_balance=s["plan"].principal_balance,
            total_interest_paid=round(s["total_interest"], 2),
            total_paid=round(s["total_paid"], 2),
            months_to_payoff=s["months_to_payoff"],
            payoff_date=s["payoff_month"],
        )
        for s in states
    ]
    logger.debug("Debt payoff (%s): %d debts, %d schedule rows", mode.value, len(states), len(schedule))

    return DebtPayoffResult(
        schedule=schedule,
        summaries=summaries,
        total_interest_paid=round(sum(s["total_interest"] for s in states), 2),
        total_paid=round(sum(s["total_paid"] for s in states), 2),
        last_payoff_date=max((s.payoff_date for s in summaries), default=""),
        mode=mode,
    )


def compare_strategies(
    debt_plans: Sequence[DebtPlan],
    strategies: Iterable[DebtStrategy] = tuple(DebtStrategy),
    max_months: int = DEFAULT_DEBT_MAX_MONTHS,
) -> pd.DataFrame:
    """Re-run the payoff with every plan forced onto each strategy."""
    rows = []
    for strategy in strategies:
        result = compute_debt_payoff([replace(plan, strategy=strategy) for plan in debt_plans], max_months)
        rows.append(
            {
                "Strategy": DebtStrategy(strategy).value,
                "TotalInterestPaid": result.total_interest_paid,
                "TotalPaid": result.total_paid,
                "MonthsToPayoff": max((s.months_to_payoff for s in result.summaries), default=0),
                "AllPaidOff": all(s.payoff_date for s in result.summaries),
                "LastPayoffDate": result.last_payoff_date,
            }
        )
    return pd.DataFrame(rows, columns=["Strategy", "TotalInterestPaid", "TotalPaid", "MonthsToPayoff", "AllPaidOff", "LastPayoffDate"])
