"""Handle clearance checking for beading frames.

This module provides HandleClearanceChecker for detecting handle hardware
that reaches past the handle-side margin into a row of beading frames.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import HANDLE_BACKPLATE_HALF_HEIGHT, format_mm

if TYPE_CHECKING:
    from doorpanels.domain.value_objects import DoorConfig


class HandleClearanceChecker:
    """Service for checking handle hardware against the beading rows.

    The check is advisory: it only produces warning messages and never
    invalidates a layout.
    """

    def check(
        self,
        config: "DoorConfig",
        top_unit_height: float,
        bottom_unit_height: float,
    ) -> list[str]:
        """Check whether the handle overlaps either row of units.

        Args:
            config: Door configuration being checked.
            top_unit_height: Unrounded height of the top row of units.
            bottom_unit_height: Unrounded height of the bottom row of units.

        Returns:
            A list holding at most one warning message.
        """
        handle_margin = config.handle_margin
        if config.handle_spread <= handle_margin:
            return []

        handle_top = config.handle_height - HANDLE_BACKPLATE_HALF_HEIGHT
        handle_bottom = config.handle_height + HANDLE_BACKPLATE_HALF_HEIGHT

        top_row = (config.top_margin, config.top_margin + top_unit_height)
        bottom_start = config.top_margin + top_unit_height + config.vertical_gap
        bottom_row = (bottom_start, bottom_start + bottom_unit_height)

        if not any(
            self._overlaps(handle_top, handle_bottom, row)
            for row in (top_row, bottom_row)
        ):
            return []

        overlap = config.handle_spread - handle_margin
        side = config.handle_side.value
        return [
            f"Handle hardware extends {overlap:.1f} mm past the {side} margin "
            f"into the beading zone. Increase the {side} margin to at least "
            f"{format_mm(config.handle_spread)} mm or reduce handle spread."
        ]

    def _overlaps(
        self, band_top: float, band_bottom: float, row: tuple[float, float]
    ) -> bool:
        row_top, row_bottom = row
        return band_bottom > row_top and band_top < row_bottom
