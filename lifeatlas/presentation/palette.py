# Display palette keyed by the closed enums.
from __future__ import annotations

from typing import Dict

from ..data_model import CertaintyLevel, PhaseCategory

CATEGORY_COLORS: Dict[PhaseCategory, str] = {
    PhaseCategory.CAREER: "hsl(230, 65%, 55%)",
    PhaseCategory.EDUCATION: "hsl(40, 95%, 50%)",
    PhaseCategory.FAMILY: "hsl(340, 75%, 55%)",
    PhaseCategory.CAREGIVING: "hsl(160, 60%, 45%)",
    PhaseCategory.HEALTH: "hsl(0, 70%, 55%)",
    PhaseCategory.HOUSING: "hsl(270, 55%, 55%)",
    PhaseCategory.FINANCIAL: "hsl(25, 85%, 55%)",
    PhaseCategory.PERSONAL: "hsl(195, 75%, 45%)",
    PhaseCategory.RELATIONSHIP: "hsl(320, 65%, 55%)",
    PhaseCategory.BIOLOGIC_RHYTHMS: "hsl(85, 55%, 45%)",
}

CERTAINTY_OPACITY: Dict[CertaintyLevel, float] = {
    CertaintyLevel.CONFIRMED: 1.0,
    CertaintyLevel.LIKELY: 0.8,
    CertaintyLevel.POSSIBLE: 0.55,
    CertaintyLevel.SPECULATIVE: 0.35,
}

# SVG stroke-dasharray values
CERTAINTY_DASH: Dict[CertaintyLevel, str] = {
    CertaintyLevel.CONFIRMED: "none",
    CertaintyLevel.LIKELY: "8 3",
    CertaintyLevel.POSSIBLE: "5 5",
    CertaintyLevel.SPECULATIVE: "2 4",
}


def stress_color(score: float) -> str:
    if score <= 25:
        return "hsl(120, 60%, 45%)"  # green
    if score <= 50:
        return "hsl(50, 80%, 50%)"  # yellow
    if score <= 75:
        return "hsl(30, 85%, 50%)"  # orange
    return "hsl(0, 70%, 50%)"  # red
