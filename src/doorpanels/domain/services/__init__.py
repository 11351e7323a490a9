"""Domain services for door overlay calculations."""

from .constants import (
    HANDLE_BACKPLATE_HALF_HEIGHT,
    RECOMMENDED_RATIO_RANGE,
    UNIT_LABELS,
    format_mm,
    round_mm,
)
from .cut_engine import CutEngine, compute_cut_result
from .handle_clearance import HandleClearanceChecker

__all__ = [
    "HANDLE_BACKPLATE_HALF_HEIGHT",
    "RECOMMENDED_RATIO_RANGE",
    "UNIT_LABELS",
    "CutEngine",
    "HandleClearanceChecker",
    "compute_cut_result",
    "format_mm",
    "round_mm",
]
