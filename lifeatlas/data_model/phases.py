from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

import pandas as pd

from .base import coerce_enum, iter_rows, number, parse_date, row_dates, text
from .enums import CertaintyLevel, FlexibilityLevel, PhaseCategory, Relationship, Sex


@dataclass(frozen=True)
class Phase:
    id: str
    name: str
    category: PhaseCategory
    start_date: date
    end_date: date
    scenario_id: str = ""
    certainty: CertaintyLevel = CertaintyLevel.CONFIRMED
    flexibility: FlexibilityLevel = FlexibilityLevel.FIXED
    load_time_cost: float = 0.0  # % of capacity consumed, 0-100
    emotional_intensity: float = 0.0  # 0-100
    caregiving_hours: float = 0.0  # hours per week
    notes: str = ""
    order: int = 0
    family_member_id: Optional[str] = None
    template_id: Optional[str] = None

    def is_active_on(self, on_date: date) -> bool:
        return self.start_date <= on_date <= self.end_date

    def duration_days(self) -> int:
        return (self.end_date - self.start_date).days


@dataclass(frozen=True)
class FamilyMember:
    id: str
    name: str
    birth_date: date
    sex: Sex = Sex.FEMALE
    relationship: Relationship = Relationship.OTHER


def dataframe_to_phases(df: pd.DataFrame | Iterable[dict], scenario_id: str = "") -> List[Phase]:
    phases: List[Phase] = []
    for index, row in enumerate(iter_rows(df)):
        name = text(row, "Name")
        if not name:
            continue
        dates = row_dates(row, "Start Date", "End Date", "phase")
        if dates is None:
            continue
        phases.append(
            Phase(
                id=text(row, "Id", f"phase-{index}"),
                name=name,
                category=coerce_enum(PhaseCategory, row.get("Category"), PhaseCategory.PERSONAL),
                start_date=dates[0],
                end_date=dates[1],
                scenario_id=text(row, "Scenario", scenario_id),
                certainty=coerce_enum(CertaintyLevel, row.get("Certainty"), CertaintyLevel.CONFIRMED),
                flexibility=coerce_enum(FlexibilityLevel, row.get("Flexibility"), FlexibilityLevel.FIXED),
                load_time_cost=number(row, "Load (%)"),
                emotional_intensity=number(row, "Emotional Intensity"),
                caregiving_hours=max(0.0, number(row, "Caregiving Hours")),
                notes=text(row, "Notes"),
                order=int(number(row, "Order", float(index))),
                family_member_id=text(row, "Family Member") or None,
                template_id=text(row, "Template") or None,
            )
        )
    return phases


def dataframe_to_family_members(df: pd.DataFrame | Iterable[dict]) -> List[FamilyMember]:
    members: List[FamilyMember] = []
    for index, row in enumerate(iter_rows(df)):
        name = text(row, "Name")
        birth_date = parse_date(row.get("Birth Date"))
        if not name or birth_date is None:
            continue
        members.append(
            FamilyMember(
                id=text(row, "Id", f"member-{index}"),
                name=name,
                birth_date=birth_date,
                sex=coerce_enum(Sex, row.get("Sex"), Sex.FEMALE),
                relationship=coerce_enum(Relationship, row.get("Relationship"), Relationship.OTHER),
            )
        )
    return members
