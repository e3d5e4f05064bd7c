from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

import pandas as pd

from ..config import DEFAULT_DEBT_MAX_MONTHS
from ..data_model import MonthlyProjection, ScenarioInputs, StressScore
from .aggregate import projection_to_frame, stress_to_frame
from .debt import DebtPayoffResult, compute_debt_payoff
from .financial import compute_projection
from .savings import SavingsProjectionMonth, compute_savings_projection
from .stress import compute_stress_scores

logger = logging.getLogger(__name__)


@dataclass
class ScenarioResult:
    name: str
    projections: List[MonthlyProjection] = field(default_factory=list)
    stress: List[StressScore] = field(default_factory=list)
    debt: DebtPayoffResult = field(default_factory=DebtPayoffResult)
    savings: List[SavingsProjectionMonth] = field(default_factory=list)

    def monthly_frame(self) -> pd.DataFrame:
        """Projection and stress side by side, one row per month."""
        projection_df = projection_to_frame(self.projections, self.name)
        stress_df = stress_to_frame(self.stress, self.name)
        if stress_df.empty:
            return projection_df
        keys = ["Scenario", "MonthIndex", "Month", "CalendarYear", "MonthInYear"]
        return projection_df.merge(stress_df, on=keys, how="left")


def run_scenario(inputs: ScenarioInputs, debt_max_months: int = DEFAULT_DEBT_MAX_MONTHS) -> ScenarioResult:
    """Run every engine that depends on a scenario's entity lists."""
    projections = compute_projection(
        inputs.accounts,
        inputs.income_streams,
        inputs.expense_rules,
        inputs.start_date,
        inputs.months,
        inputs.inflation_default,
    )
    stress = compute_stress_scores(inputs.phases, projections, inputs.start_date, inputs.months)
    debt = compute_debt_payoff(inputs.debt_plans, debt_max_months)
    savings = compute_savings_projection(inputs.savings_goals)
    logger.info("Scenario %s computed: %d months", inputs.name, len(projections))
    return ScenarioResult(name=inputs.name, projections=projections, stress=stress, debt=debt, savings=savings)
