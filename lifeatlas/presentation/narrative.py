"""Collaborative, non-judgmental wording for phases, stress and cashflow."""
from __future__ import annotations

from typing import Dict

from ..data_model import MonthlyProjection, PhaseCategory

CATEGORY_LABELS: Dict[PhaseCategory, str] = {
    PhaseCategory.CAREER: "Work & Career",
    PhaseCategory.EDUCATION: "Learning & Growth",
    PhaseCategory.FAMILY: "Family Life",
    PhaseCategory.CAREGIVING: "Caring for Others",
    PhaseCategory.HEALTH: "Health & Wellness",
    PhaseCategory.HOUSING: "Home & Living",
    PhaseCategory.FINANCIAL: "Financial Planning",
    PhaseCategory.PERSONAL: "Personal Goals",
    PhaseCategory.RELATIONSHIP: "Relationships",
    PhaseCategory.BIOLOGIC_RHYTHMS: "Body & Rhythms",
}


def get_category_label(category: PhaseCategory) -> str:
    return CATEGORY_LABELS[PhaseCategory(category)]


def stress_narrative(score: float) -> str:
    if score <= 20:
        return "a calm, manageable period"
    if score <= 40:
        return "a balanced time with some activity"
    if score <= 60:
        return "a busy period with moderate demands"
    if score <= 80:
        return "an intensive period requiring careful planning"
    return "a very demanding period, consider support options"


def financial_narrative(projection: MonthlyProjection) -> str:
    if projection.net_cashflow > 2000:
        return "financially comfortable period"
    if projection.net_cashflow > 0:
        return "modest positive cashflow"
    if projection.net_cashflow > -1000:
        return "slightly drawing on savings"
    return "significant reliance on savings or reserves"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_duration_friendly(months: int) -> str:
    years, remaining = divmod(months, 12)
    if years == 0:
        return _plural(remaining, "month")
    if remaining == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')} and {_plural(remaining, 'month')}"
