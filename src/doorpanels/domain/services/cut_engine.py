"""Cut engine for four-panel door overlays.

Derives MDF panel sizes, mitred beading lengths and fitting-pin positions
from a DoorConfig. The derivation is a closed-form formula; every call is
independent and never raises. Impossible layouts come back with
``is_valid=False`` and the offending (possibly negative) numbers intact.
"""

from __future__ import annotations

import logging
import math

from doorpanels.domain.value_objects import CutResult, DoorConfig, UnitPosition

from .constants import UNIT_LABELS, round_mm
from .handle_clearance import HandleClearanceChecker

__all__ = ["CutEngine", "compute_cut_result"]


logger = logging.getLogger(__name__)


class CutEngine:
    """Computes a CutResult from a DoorConfig.

    The layout is always a 2x2 grid of units. Each unit is a beading frame
    enclosing a gap enclosing one MDF panel. The gap is solved from the
    unit width and applied to both axes.
    """

    def __init__(self, clearance_checker: HandleClearanceChecker | None = None) -> None:
        self.clearance_checker = clearance_checker or HandleClearanceChecker()

    def compute(self, config: DoorConfig) -> CutResult:
        """Derive the cut list for a door.

        Args:
            config: Door measurements.

        Returns:
            CutResult with every number rounded to one decimal place.
        """
        c = config
        available_width = c.door_width - c.left_margin - c.right_margin - c.horizontal_gap
        available_height = c.door_height - c.top_margin - c.bottom_margin - c.vertical_gap

        unit_width = available_width / 2
        panel_width = c.mdf_panel_width
        gap = (unit_width - 2 * c.beading_width - panel_width) / 2

        top_unit_height = available_height * (c.top_panel_ratio / 100)
        bottom_unit_height = available_height * ((100 - c.top_panel_ratio) / 100)
        top_panel_height = top_unit_height - 2 * c.beading_width - 2 * gap
        bottom_panel_height = bottom_unit_height - 2 * c.beading_width - 2 * gap

        logger.debug(
            f"Unit width {unit_width}, gap {gap}, "
            f"row heights {top_unit_height}/{bottom_unit_height}"
        )

        errors = self._validate(panel_width, gap, top_panel_height, bottom_panel_height)
        warnings = self.clearance_checker.check(c, top_unit_height, bottom_unit_height)
        positions = self._unit_positions(c, unit_width, top_unit_height)

        # Long-point of a 45 degree mitre spans the full unit edge; the short
        # point is taken from the rounded long point so the two stay exactly
        # one setback apart
        mitre_setback = 2 * c.beading_width
        horizontal = round_mm(unit_width)
        top_vertical = round_mm(top_unit_height)
        bottom_vertical = round_mm(bottom_unit_height)
        return CutResult(
            panel_width=round_mm(panel_width),
            top_panel_height=round_mm(top_panel_height),
            bottom_panel_height=round_mm(bottom_panel_height),
            top_horizontal_beading=horizontal,
            top_vertical_beading=top_vertical,
            bottom_horizontal_beading=horizontal,
            bottom_vertical_beading=bottom_vertical,
            top_horizontal_beading_short=round_mm(horizontal - mitre_setback),
            top_vertical_beading_short=round_mm(top_vertical - mitre_setback),
            bottom_horizontal_beading_short=round_mm(horizontal - mitre_setback),
            bottom_vertical_beading_short=round_mm(bottom_vertical - mitre_setback),
            panel_beading_gap=round_mm(gap),
            unit_positions=positions,
            handle_warnings=tuple(warnings),
            is_valid=not errors,
            errors=tuple(errors),
        )

    def _validate(
        self,
        panel_width: float,
        gap: float,
        top_panel_height: float,
        bottom_panel_height: float,
    ) -> list[str]:
        errors: list[str] = []
        if panel_width <= 0:
            errors.append("MDF panel width must be greater than 0.")
        if gap < 0:
            errors.append(
                "MDF panel is too wide for the available space — reduce panel "
                "width or increase door width/margins."
            )
        if top_panel_height <= 0:
            errors.append(
                "Top panel height is negative — adjust margins, gaps or ratio."
            )
        if bottom_panel_height <= 0:
            errors.append(
                "Bottom panel height is negative — adjust margins, gaps or ratio."
            )
        if not all(
            math.isfinite(value)
            for value in (panel_width, gap, top_panel_height, bottom_panel_height)
        ):
            errors.append("Measurements must be finite numbers.")
        return errors

    def _unit_positions(
        self, c: DoorConfig, unit_width: float, top_unit_height: float
    ) -> tuple[UnitPosition, ...]:
        """Place the top beading strip and fitting pin of each grid cell.

        The pin sits at the horizontal centre of the unit and the vertical
        centre of the top beading strip, not the centre of the unit.
        """
        col_xs = (c.left_margin, c.left_margin + unit_width + c.horizontal_gap)
        row_ys = (c.top_margin, c.top_margin + top_unit_height + c.vertical_gap)

        positions: list[UnitPosition] = []
        for row, y in enumerate(row_ys):
            for col, x in enumerate(col_xs):
                positions.append(
                    UnitPosition(
                        label=UNIT_LABELS[row * 2 + col],
                        beading_left_x=round_mm(x),
                        beading_right_x=round_mm(x + unit_width),
                        beading_y=round_mm(y),
                        pin_x=round_mm(x + unit_width / 2),
                        pin_y=round_mm(y + c.beading_width / 2),
                    )
                )
        return tuple(positions)


_default_engine = CutEngine()


def compute_cut_result(config: DoorConfig) -> CutResult:
    """Compute the cut list for ``config`` with the default engine."""
    return _default_engine.compute(config)
