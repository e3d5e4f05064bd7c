from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from ..data_model import ZoomLevel
from ..engine.timeline import ViewportState, clamp_pixels_per_day, pixels_per_day_for


class PresentationMode(str, Enum):
    STRATEGIC = "strategic"
    NARRATIVE = "narrative"


class AccessibilityMode(str, Enum):
    DEFAULT = "default"
    HIGH_CONTRAST = "high-contrast"
    REDUCED_MOTION = "reduced-motion"


@dataclass(frozen=True)
class ViewContext:
    """Caller-owned view state handed to rendering code.

    Immutable: every change returns a new context.
    """

    selected_scenario_id: Optional[str] = None
    compare_scenario_id: Optional[str] = None
    selected_phase_id: Optional[str] = None
    presentation_mode: PresentationMode = PresentationMode.STRATEGIC
    accessibility_mode: AccessibilityMode = AccessibilityMode.DEFAULT
    zoom_level: ZoomLevel = ZoomLevel.YEAR
    viewport: ViewportState = field(default_factory=ViewportState)

    def with_zoom(self, level: ZoomLevel) -> "ViewContext":
        viewport = replace(self.viewport, pixels_per_day=pixels_per_day_for(level))
        return replace(self, zoom_level=level, viewport=viewport)

    def with_pixels_per_day(self, pixels_per_day: float) -> "ViewContext":
        return replace(self, viewport=replace(self.viewport, pixels_per_day=clamp_pixels_per_day(pixels_per_day)))

    def panned(self, dx: float = 0.0, dy: float = 0.0) -> "ViewContext":
        viewport = replace(self.viewport, offset_x=self.viewport.offset_x + dx, offset_y=self.viewport.offset_y + dy)
        return replace(self, viewport=viewport)
