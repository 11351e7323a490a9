"""Domain layer - door overlay geometry."""

from .services import (
    CutEngine,
    HandleClearanceChecker,
    compute_cut_result,
)
from .value_objects import (
    BeadingCut,
    CutResult,
    DiagnosticGuide,
    DoorConfig,
    HandleSide,
    UnitPosition,
)

__all__ = [
    "BeadingCut",
    "CutEngine",
    "CutResult",
    "DiagnosticGuide",
    "DoorConfig",
    "HandleClearanceChecker",
    "HandleSide",
    "UnitPosition",
    "compute_cut_result",
]
