from .context import AccessibilityMode, PresentationMode, ViewContext
from .narrative import (
    CATEGORY_LABELS,
    financial_narrative,
    format_duration_friendly,
    get_category_label,
    stress_narrative,
)
from .palette import CATEGORY_COLORS, CERTAINTY_DASH, CERTAINTY_OPACITY, stress_color

__all__ = [
    "CATEGORY_COLORS",
    "CATEGORY_LABELS",
    "CERTAINTY_DASH",
    "CERTAINTY_OPACITY",
    "AccessibilityMode",
    "PresentationMode",
    "ViewContext",
    "financial_narrative",
    "format_duration_friendly",
    "get_category_label",
    "stress_color",
    "stress_narrative",
]
