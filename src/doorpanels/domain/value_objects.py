"""Door overlay value objects.

All lengths are in millimetres, measured from the door's top-left corner.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any

# Units in the 2x2 grid; each beading length and panel is cut once per unit
UNIT_COUNT = 4


class HandleSide(str, Enum):
    """Side of the door carrying the handle."""

    LEFT = "left"
    RIGHT = "right"


class DiagnosticGuide(str, Enum):
    """Visual guide highlighted in the schematic when a field changes."""

    DIMENSIONS = "dimensions"
    MARGINS = "margins"
    GAPS = "gaps"
    BEADING = "beading"
    RATIO = "ratio"
    HANDLE = "handle"
    OVERLAY = "overlay"


@dataclass(frozen=True)
class DoorConfig:
    """Measurements describing a four-panel door overlay.

    No validation happens here: the cut engine accepts any numbers and
    reports impossible layouts through its result. Range checks belong to
    the configuration schema.

    Attributes:
        door_width: Overall door width.
        door_height: Overall door height.
        top_margin: Door top edge to the top of the beading frames.
        bottom_margin: Door bottom edge to the bottom of the beading frames.
        left_margin: Door left edge to the left beading frames.
        right_margin: Door right edge to the right beading frames.
        horizontal_gap: Space between the left and right columns of units.
        vertical_gap: Space between the top and bottom rows of units.
        beading_width: Width of the mitred beading strip.
        mdf_panel_width: Nominal width of each inset MDF panel.
        top_panel_ratio: Percentage of available height given to the top row.
        handle_side: Door edge carrying the handle.
        handle_height: Handle centre measured down from the door top.
        handle_indent: Handle centre measured in from the handle-side edge.
        handle_spread: Total reach of the handle hardware from the door edge.
    """

    door_width: float = 762.0
    door_height: float = 1981.0
    top_margin: float = 100.0
    bottom_margin: float = 100.0
    left_margin: float = 80.0
    right_margin: float = 80.0
    horizontal_gap: float = 80.0
    vertical_gap: float = 80.0
    beading_width: float = 20.0
    mdf_panel_width: float = 215.0
    top_panel_ratio: float = 40.0
    handle_side: HandleSide = HandleSide.LEFT
    handle_height: float = 1000.0
    handle_indent: float = 55.0
    handle_spread: float = 140.0

    def __post_init__(self) -> None:
        # Accept plain "left"/"right" strings from callers outside the schema
        object.__setattr__(self, "handle_side", HandleSide(self.handle_side))

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Names of every configuration field, in declaration order."""
        return tuple(f.name for f in fields(cls))

    @property
    def bottom_panel_ratio(self) -> float:
        """Percentage of available height given to the bottom row."""
        return 100 - self.top_panel_ratio

    @property
    def handle_margin(self) -> float:
        """Margin on the side of the door carrying the handle."""
        if self.handle_side == HandleSide.LEFT:
            return self.left_margin
        return self.right_margin

    def with_changes(self, **changes: Any) -> DoorConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True)
class UnitPosition:
    """Placement of one unit's top beading strip and its fitting pin.

    Attributes:
        label: Grid cell name, e.g. "Top-Left".
        beading_left_x: Left long-point X of the top beading strip.
        beading_right_x: Right long-point X of the top beading strip.
        beading_y: Y of the top (outer) edge of the top beading strip.
        pin_x: Fitting pin X, the horizontal centre of the unit.
        pin_y: Fitting pin Y, the vertical centre of the top beading strip.
    """

    label: str
    beading_left_x: float
    beading_right_x: float
    beading_y: float
    pin_x: float
    pin_y: float


@dataclass(frozen=True)
class BeadingCut:
    """One mitred beading length shared by several pieces.

    Attributes:
        label: Human-readable piece name, e.g. "Top horizontal".
        long_point: Length along the outer edge.
        short_point: Length along the inner edge.
        quantity: Number of pieces cut to this length.
    """

    label: str
    long_point: float
    short_point: float
    quantity: int


@dataclass(frozen=True)
class CutResult:
    """Cut list derived from a DoorConfig.

    Every number is already rounded to one decimal place. Values may be
    negative when the configuration is impossible; check ``is_valid``
    before using the result as a cut list.
    """

    panel_width: float
    top_panel_height: float
    bottom_panel_height: float
    top_horizontal_beading: float
    top_vertical_beading: float
    bottom_horizontal_beading: float
    bottom_vertical_beading: float
    top_horizontal_beading_short: float
    top_vertical_beading_short: float
    bottom_horizontal_beading_short: float
    bottom_vertical_beading_short: float
    panel_beading_gap: float
    unit_positions: tuple[UnitPosition, ...] = field(default_factory=tuple)
    handle_warnings: tuple[str, ...] = field(default_factory=tuple)
    is_valid: bool = True
    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def beading_cuts(self) -> tuple[BeadingCut, ...]:
        """The four distinct beading lengths, four pieces each."""
        return (
            BeadingCut(
                "Top horizontal",
                self.top_horizontal_beading,
                self.top_horizontal_beading_short,
                UNIT_COUNT,
            ),
            BeadingCut(
                "Top vertical",
                self.top_vertical_beading,
                self.top_vertical_beading_short,
                UNIT_COUNT,
            ),
            BeadingCut(
                "Bottom horizontal",
                self.bottom_horizontal_beading,
                self.bottom_horizontal_beading_short,
                UNIT_COUNT,
            ),
            BeadingCut(
                "Bottom vertical",
                self.bottom_vertical_beading,
                self.bottom_vertical_beading_short,
                UNIT_COUNT,
            ),
        )

    @property
    def panel_count(self) -> int:
        return UNIT_COUNT

    @property
    def beading_piece_count(self) -> int:
        return sum(cut.quantity for cut in self.beading_cuts)

    @property
    def total_beading_length(self) -> float:
        """Sum of all long-point lengths, taken from the rounded values."""
        return sum(cut.long_point * cut.quantity for cut in self.beading_cuts)

    @property
    def has_warnings(self) -> bool:
        return len(self.handle_warnings) > 0
