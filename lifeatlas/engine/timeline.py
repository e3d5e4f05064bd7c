from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from dateutil.relativedelta import relativedelta

from ..data_model import FamilyMember, Phase, PhaseCategory, ZoomLevel

MIN_PIXELS_PER_DAY = 0.01
MAX_PIXELS_PER_DAY = 100.0
MIN_PHASE_WIDTH = 4.0

ZOOM_PX_PER_DAY: Dict[ZoomLevel, float] = {
    ZoomLevel.DECADE: 0.05,
    ZoomLevel.YEAR: 1.0,
    ZoomLevel.MONTH: 10.0,
    ZoomLevel.WEEK: 50.0,
}

# One lane per category present, always in this order.
CATEGORY_ROW_ORDER: tuple[PhaseCategory, ...] = (
    PhaseCategory.CAREER,
    PhaseCategory.EDUCATION,
    PhaseCategory.FAMILY,
    PhaseCategory.RELATIONSHIP,
    PhaseCategory.CAREGIVING,
    PhaseCategory.HEALTH,
    PhaseCategory.BIOLOGIC_RHYTHMS,
    PhaseCategory.HOUSING,
    PhaseCategory.FINANCIAL,
    PhaseCategory.PERSONAL,
)


@dataclass(frozen=True)
class ViewportState:
    offset_x: float = 0.0
    offset_y: float = 0.0
    pixels_per_day: float = ZOOM_PX_PER_DAY[ZoomLevel.YEAR]


@dataclass(frozen=True)
class AxisTick:
    date: date
    label: str
    x: float
    is_major: bool


@dataclass(frozen=True)
class PhaseLayout:
    phase: Phase
    x: float
    width: float
    row: int


@dataclass(frozen=True)
class FamilyLane:
    family_member_id: str
    label: str
    row: int


@dataclass(frozen=True)
class PhaseLayoutResult:
    regular_layouts: List[PhaseLayout] = field(default_factory=list)
    family_layouts: List[PhaseLayout] = field(default_factory=list)
    family_lanes: List[FamilyLane] = field(default_factory=list)
    category_row_count: int = 0


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def date_to_pixel(d: date, origin: date, pixels_per_day: float) -> float:
    return (d - origin).days * pixels_per_day


def pixel_to_date(px: float, origin: date, pixels_per_day: float) -> date:
    return origin + timedelta(days=round_half_up(px / pixels_per_day))


def clamp_pixels_per_day(pixels_per_day: float) -> float:
    return max(MIN_PIXELS_PER_DAY, min(MAX_PIXELS_PER_DAY, pixels_per_day))


def _start_of_week(d: date) -> date:
    # weeks start on Sunday
    return d - timedelta(days=(d.weekday() + 1) % 7)


def _tick(d: date, origin: date, viewport: ViewportState, label: str, is_major: bool) -> AxisTick:
    x = date_to_pixel(d, origin, viewport.pixels_per_day) + viewport.offset_x
    return AxisTick(date=d, label=label, x=x, is_major=is_major)


def get_axis_ticks(origin: date, viewport: ViewportState, canvas_width: float) -> List[AxisTick]:
    """Calendar-aligned axis ticks for the visible window.

    The tier follows the density: decades (< 0.3 px/day), years (< 5),
    months (< 30), otherwise weeks.
    """
    ppd = viewport.pixels_per_day
    start_px = -viewport.offset_x
    start_date = pixel_to_date(start_px, origin, ppd)
    end_date = pixel_to_date(start_px + canvas_width, origin, ppd)
    ticks: List[AxisTick] = []

    if ppd < 0.3:
        d = date(start_date.year, 1, 1)
        while d <= end_date:
            ticks.append(_tick(d, origin, viewport, f"{d.year}", d.year % 10 == 0))
            d += relativedelta(years=1)
    elif ppd < 5:
        d = date(start_date.year, start_date.month, 1)
        while d <= end_date:
            label = f"{d.year}" if d.month == 1 else d.strftime("%b")
            ticks.append(_tick(d, origin, viewport, label, d.month == 1))
            d += relativedelta(months=1)
    elif ppd < 30:
        d = _start_of_week(start_date)
        while d <= end_date:
            is_first = d.day <= 7
            label = f"{d:%b} {d.year}" if is_first else f"{d:%b} {d.day}"
            ticks.append(_tick(d, origin, viewport, label, is_first))
            d += timedelta(days=7)
    else:
        d = _start_of_week(start_date)
        while d <= end_date:
            label = f"{d:%a}, {d:%b} {d.day}"
            ticks.append(_tick(d, origin, viewport, label, d.weekday() == 6))
            d += timedelta(days=1)

    return ticks


def _layout(phase: Phase, origin: date, pixels_per_day: float, row: int) -> PhaseLayout:
    x = date_to_pixel(phase.start_date, origin, pixels_per_day)
    width = max(phase.duration_days() * pixels_per_day, MIN_PHASE_WIDTH)
    return PhaseLayout(phase=phase, x=x, width=width, row=row)


def get_phase_layout(
    phases: Sequence[Phase],
    origin: date,
    pixels_per_day: float,
    family_members: Sequence[FamilyMember] = (),
) -> PhaseLayoutResult:
    """Place phases on category rows, with family-member phases in their own lanes."""
    regular = [phase for phase in phases if not phase.family_member_id]
    family = [phase for phase in phases if phase.family_member_id]

    present = {phase.category for phase in regular}
    category_rows: Dict[PhaseCategory, int] = {}
    for category in CATEGORY_ROW_ORDER:
        if category in present:
            category_rows[category] = len(category_rows)

    names = {member.id: member.name for member in family_members}
    lanes: Dict[str, FamilyLane] = {}
    for phase in family:
        member_id = phase.family_member_id
        if member_id not in lanes:
            lanes[member_id] = FamilyLane(member_id, names.get(member_id, member_id), len(lanes))

    return PhaseLayoutResult(
        regular_layouts=[_layout(p, origin, pixels_per_day, category_rows.get(p.category, 0)) for p in regular],
        family_layouts=[_layout(p, origin, pixels_per_day, lanes[p.family_member_id].row) for p in family],
        family_lanes=list(lanes.values()),
        category_row_count=len(category_rows),
    )


def get_visible_phases(
    layouts: Sequence[PhaseLayout],
    viewport: ViewportState,
    canvas_width: float,
) -> List[PhaseLayout]:
    start_px = -viewport.offset_x
    end_px = start_px + canvas_width
    return [layout for layout in layouts if layout.x + layout.width >= start_px and layout.x <= end_px]


def pixels_per_day_for(zoom: ZoomLevel, override: Optional[float] = None) -> float:
    return clamp_pixels_per_day(override if override is not None else ZOOM_PX_PER_DAY[zoom])
