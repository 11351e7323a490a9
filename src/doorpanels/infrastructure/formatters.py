"""Text formatters for door overlay cut lists."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from doorpanels.domain.services import format_mm

if TYPE_CHECKING:
    from doorpanels.domain import CutResult, DoorConfig


TIMESTAMP_FORMAT = "%d %b %Y %H:%M"

SECTION_RULE = "-" * 40


class InvalidResultError(ValueError):
    """Raised when an invalid CutResult is used as a cut list."""

    def __init__(self, name: str, errors: tuple[str, ...] | list[str]) -> None:
        self.name = name
        self.errors = list(errors)
        detail = "; ".join(self.errors) or "invalid configuration"
        super().__init__(f"Cannot produce a cut list for '{name}': {detail}")


def ensure_valid(name: str, result: CutResult) -> None:
    """Raise InvalidResultError unless the result is a usable cut list."""
    if not result.is_valid:
        raise InvalidResultError(name, result.errors)


def format_timestamp(moment: datetime | None = None) -> str:
    return (moment or datetime.now()).strftime(TIMESTAMP_FORMAT)


class SummaryFormatter:
    """Formats the full shareable summary for one door.

    Sections: measurements, MDF panels, beading, totals, fitting guide and,
    when present, handle warnings.
    """

    def format(
        self,
        name: str,
        config: DoorConfig,
        result: CutResult,
        timestamp: datetime | None = None,
    ) -> str:
        """Format the summary.

        Raises:
            InvalidResultError: If the result is not a valid cut list.
        """
        ensure_valid(name, result)
        m = format_mm
        c = config

        lines = [
            f"Summary - {name}",
            format_timestamp(timestamp),
            "",
            f"Door: {m(c.door_width)} x {m(c.door_height)} mm",
            f"Margins: T{m(c.top_margin)} B{m(c.bottom_margin)} "
            f"L{m(c.left_margin)} R{m(c.right_margin)} mm",
            f"Gaps: H{m(c.horizontal_gap)} V{m(c.vertical_gap)} mm",
            f"Beading width: {m(c.beading_width)} mm",
            f"Panel-beading gap: {m(result.panel_beading_gap)} mm",
            f"Handle: {c.handle_side.value}, {m(c.handle_height)} mm from top, "
            f"{m(c.handle_spread)} mm spread from edge",
            "",
            "MDF Panels",
            f"  Top panels (x2): {m(result.panel_width)} x {m(result.top_panel_height)} mm",
            f"  Bottom panels (x2): {m(result.panel_width)} x {m(result.bottom_panel_height)} mm",
            "",
            "Beading (45 deg mitres, long-point -> short-point)",
        ]
        for cut in result.beading_cuts:
            lines.append(
                f"  {cut.label} (x{cut.quantity}): "
                f"{m(cut.long_point)} -> {m(cut.short_point)} mm"
            )

        lines.extend(
            [
                "",
                "Totals",
                f"  MDF panels: {result.panel_count} pieces",
                f"  Beading: {result.beading_piece_count} pieces",
                f"  Total beading: {result.total_beading_length:.0f} mm",
                "",
                "Fitting Guide (pin positions from door edges)",
            ]
        )
        for unit in result.unit_positions:
            lines.append(
                f"  {unit.label}: top beading at Y={m(unit.pin_y)} mm, "
                f"pin at ({m(unit.pin_x)}, {m(unit.pin_y)}) mm"
            )

        if result.handle_warnings:
            lines.append("")
            lines.append("Warnings")
            for warning in result.handle_warnings:
                lines.append(f"  {warning}")

        return "\n".join(lines)


class CompactFormatter:
    """Formats a five-line summary suitable for a message or label."""

    def format(
        self,
        name: str,
        config: DoorConfig,
        result: CutResult,
        timestamp: datetime | None = None,
    ) -> str:
        ensure_valid(name, result)
        m = format_mm
        r = result
        beading = ", ".join(
            f"{abbr} {m(cut.long_point)}->{m(cut.short_point)} (x{cut.quantity})"
            for abbr, cut in zip(("TH", "TV", "BH", "BV"), r.beading_cuts)
        )
        return "\n".join(
            [
                f"{name} ({format_timestamp(timestamp)})",
                f"{m(config.door_width)}x{m(config.door_height)}",
                f"MDF: {m(r.panel_width)}x{m(r.top_panel_height)} (x2), "
                f"{m(r.panel_width)}x{m(r.bottom_panel_height)} (x2)",
                f"Beading LP->SP: {beading}",
                f"Gap: {m(r.panel_beading_gap)}mm",
            ]
        )


class AllDoorsSummaryFormatter:
    """Formats every door's summary into one report.

    Invalid doors are listed by name instead of failing the whole report.
    """

    def __init__(self, summary_formatter: SummaryFormatter | None = None) -> None:
        self._summary = summary_formatter or SummaryFormatter()

    def format(
        self,
        doors: list[tuple[str, DoorConfig, CutResult]],
        timestamp: datetime | None = None,
    ) -> str:
        sections: list[str] = []
        for name, config, result in doors:
            if not result.is_valid:
                sections.append(f"{name} - invalid configuration")
            else:
                sections.append(self._summary.format(name, config, result, timestamp))

        count = len(doors)
        plural = "door" if count == 1 else "doors"
        return "\n".join(
            [
                f"All Doors Summary ({count} {plural})",
                format_timestamp(timestamp),
                "",
                f"\n\n{SECTION_RULE}\n\n".join(sections),
            ]
        )


class CutListFormatter:
    """Formats the cut list as a table."""

    def format(self, result: CutResult) -> str:
        """Format panels and beading as aligned columns.

        Invalid results are rendered as their error list instead of a table.
        """
        if not result.is_valid:
            lines = ["INVALID CONFIGURATION"]
            lines.extend(f"  - {error}" for error in result.errors)
            return "\n".join(lines)

        m = format_mm
        lines = [
            "CUT LIST",
            "=" * 60,
            f"{'Piece':<24} {'Qty':<5} {'Long point':<12} {'Short point'}",
            "-" * 60,
            f"{'MDF panel (top)':<24} {2:<5} "
            f"{m(result.panel_width) + ' x ' + m(result.top_panel_height):<12}",
            f"{'MDF panel (bottom)':<24} {2:<5} "
            f"{m(result.panel_width) + ' x ' + m(result.bottom_panel_height):<12}",
        ]
        for cut in result.beading_cuts:
            lines.append(
                f"{cut.label + ' beading':<24} {cut.quantity:<5} "
                f"{m(cut.long_point):<12} {m(cut.short_point)}"
            )
        lines.append("-" * 60)
        lines.append(
            f"{'TOTAL BEADING':<24} {result.beading_piece_count:<5} "
            f"{result.total_beading_length:.0f} mm"
        )
        lines.append(f"Panel-beading gap: {m(result.panel_beading_gap)} mm")
        return "\n".join(lines)
