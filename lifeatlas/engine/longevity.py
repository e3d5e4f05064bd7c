"""Longevity engine: survival curves, life expectancy and care phase modeling.

All functions are driven by the life tables in :mod:`lifeatlas.engine.actuarial`.
Ages are in years; curves run over whole ages starting at ``floor(current_age)``.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import date
from typing import List, Tuple

from ..config import DEFAULT_MAX_AGE
from ..data_model import Sex
from .actuarial import interpolate_qx, is_female, table_for_sex
from .calendar import months_between

logger = logging.getLogger(__name__)

CARE_CURVE_MAX_AGE = 100
FEMALE_CARE_FACTOR = 1.15


@dataclass(frozen=True)
class SurvivalPoint:
    age: int
    probability: float


@dataclass(frozen=True)
class LongevityPercentiles:
    p25: float  # 25% of the cohort has died by this age
    p50: float
    p75: float
    p90: float


@dataclass(frozen=True)
class CareNeedsProbability:
    age: int
    independent_living: float  # percent
    light_assistance: float
    moderate_assistance: float
    full_care: float


@dataclass(frozen=True)
class CareCostEstimate:
    independent_living: float
    light_assistance: float
    moderate_assistance: float
    full_care: float


@dataclass(frozen=True)
class ExpectedCareCosts:
    total_expected: int
    yearly_expected: List[Tuple[int, int]] = field(default_factory=list)  # (age, cost)


@dataclass(frozen=True)
class LongevityProfile:
    current_age: float
    sex: str
    life_expectancy: float
    healthy_life_expectancy: float
    percentiles: LongevityPercentiles
    survival_curve: List[SurvivalPoint]
    care_needs: List[CareNeedsProbability]
    care_costs: ExpectedCareCosts


def age_on(birth_date: date, on_date: date) -> float:
    """Fractional age in years at month granularity."""
    return max(0, months_between(birth_date, on_date)) / 12.0


def compute_survival_curve(current_age: float, sex: Sex | str, max_age: int = DEFAULT_MAX_AGE) -> List[SurvivalPoint]:
    table = table_for_sex(sex)
    points: List[SurvivalPoint] = []
    survival = 1.0
    start = math.floor(current_age)
    for age in range(start, max(start, max_age) + 1):
        points.append(SurvivalPoint(age=age, probability=survival))
        survival *= 1.0 - interpolate_qx(table, age)
    return points


def life_expectancy_at_age(current_age: float, sex: Sex | str) -> float:
    """Remaining years, by trapezoid integration of the survival curve."""
    curve = compute_survival_curve(current_age, sex)
    total = sum((prev.probability + curr.probability) / 2 for prev, curr in zip(curve, curve[1:]))
    return round(total, 1)


def _age_at_survival(curve: List[SurvivalPoint], target: float) -> float:
    if not curve:
        return 0.0
    for prev, curr in zip(curve, curve[1:]):
        if curr.probability <= target:
            t = (prev.probability - target) / (prev.probability - curr.probability)
            return round(prev.age + t * (curr.age - prev.age), 1)
    return float(curve[-1].age)


def compute_percentiles(current_age: float, sex: Sex | str) -> LongevityPercentiles:
    curve = compute_survival_curve(current_age, sex)
    return LongevityPercentiles(
        p25=_age_at_survival(curve, 0.75),
        p50=_age_at_survival(curve, 0.50),
        p75=_age_at_survival(curve, 0.25),
        p90=_age_at_survival(curve, 0.10),
    )


def _disability_share(current_age: float) -> float:
    if current_age < 50:
        return 0.12
    if current_age < 65:
        return 0.15
    if current_age < 75:
        return 0.25
    return 0.35


def healthy_life_expectancy(current_age: float, sex: Sex | str) -> float:
    total = life_expectancy_at_age(current_age, sex)
    return round(total - total * _disability_share(current_age), 1)


def _raw_care_needs(age: int, factor: float) -> Tuple[float, float, float, float]:
    # (independent, light, moderate, full) before normalization.
    # Each band starts where the previous one ends for the same factor.
    if age < 60:
        return 0.95, 0.03, 0.015, 0.005
    if age < 70:
        t = (age - 60) / 10
        return (
            0.95 - t * 0.12 * factor,
            0.03 + t * 0.06 * factor,
            0.015 + t * 0.04 * factor,
            0.005 + t * 0.02 * factor,
        )
    if age < 80:
        t = (age - 70) / 10
        return (
            (0.83 - t * 0.25) * (2 - factor),
            0.09 + t * 0.10 * factor,
            0.055 + t * 0.10 * factor,
            0.025 + t * 0.05 * factor,
        )
    if age < 90:
        t = (age - 80) / 10
        return (
            (0.58 - t * 0.30) * (2 - factor),
            0.19 + t * 0.05,
            0.155 + t * 0.15 * factor,
            0.075 + t * 0.10 * factor,
        )
    t = min((age - 90) / 10, 1.0)
    return (
        max((0.28 - t * 0.20) * (2 - factor), 0.05),
        0.24 - t * 0.05,
        0.155 + 0.15 * factor + t * 0.05 * factor,
        0.075 + 0.10 * factor + t * 0.20 * factor,
    )


def compute_care_needs_curve(start_age: float, sex: Sex | str) -> List[CareNeedsProbability]:
    """Probability (percent) of each care level at every age up to 100.

    Women carry higher disability rates, modelled as a 1.15 factor on the
    transition terms; any other value uses the baseline factor of 1.0. The
    four levels are normalized to sum to 100.
    """
    factor = FEMALE_CARE_FACTOR if is_female(sex) else 1.0
    points: List[CareNeedsProbability] = []
    for age in range(math.floor(start_age), CARE_CURVE_MAX_AGE + 1):
        independent, light, moderate, full = _raw_care_needs(age, factor)
        total = independent + light + moderate + full
        points.append(
            CareNeedsProbability(
                age=age,
                independent_living=round(independent / total * 100, 1),
                light_assistance=round(light / total * 100, 1),
                moderate_assistance=round(moderate / total * 100, 1),
                full_care=round(full / total * 100, 1),
            )
        )
    return points


def get_care_cost_estimates() -> CareCostEstimate:
    """Monthly cost of each care level, today's dollars."""
    return CareCostEstimate(
        independent_living=0,
        light_assistance=1500,  # part-time help
        moderate_assistance=4500,  # regular aide
        full_care=9000,  # nursing facility average
    )


def expected_care_costs(current_age: float, sex: Sex | str) -> ExpectedCareCosts:
    survival = {point.age: point.probability for point in compute_survival_curve(current_age, sex)}
    costs = get_care_cost_estimates()

    yearly: List[Tuple[int, int]] = []
    total = 0.0
    for need in compute_care_needs_curve(current_age, sex):
        probability = survival.get(need.age)
        if probability is None:
            continue
        annual = probability * (
            need.light_assistance / 100 * costs.light_assistance * 12
            + need.moderate_assistance / 100 * costs.moderate_assistance * 12
            + need.full_care / 100 * costs.full_care * 12
        )
        yearly.append((need.age, round(annual)))
        total += annual

    return ExpectedCareCosts(total_expected=round(total), yearly_expected=yearly)


def longevity_summary(current_age: float, sex: Sex | str, max_age: int = DEFAULT_MAX_AGE) -> LongevityProfile:
    logger.debug("Building longevity profile for age %.1f, sex %s", current_age, sex)
    return LongevityProfile(
        current_age=current_age,
        sex=str(getattr(sex, "value", sex)),
        life_expectancy=life_expectancy_at_age(current_age, sex),
        healthy_life_expectancy=healthy_life_expectancy(current_age, sex),
        percentiles=compute_percentiles(current_age, sex),
        survival_curve=compute_survival_curve(current_age, sex, max_age),
        care_needs=compute_care_needs_curve(current_age, sex),
        care_costs=expected_care_costs(current_age, sex),
    )
