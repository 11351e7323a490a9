"""Scaled SVG schematic of a door overlay.

Draws the door outline, the four beading frames with their MDF panels,
the handle, and an optional diagnostic guide highlighting the
measurements behind the most recently edited field.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from doorpanels.domain.services import HANDLE_BACKPLATE_HALF_HEIGHT, format_mm
from doorpanels.domain.value_objects import DiagnosticGuide, HandleSide
from doorpanels.infrastructure.formatters import ensure_valid

if TYPE_CHECKING:
    from doorpanels.domain import CutResult, DoorConfig


# Which guide to highlight when a configuration field changes
FIELD_GUIDES: dict[str, DiagnosticGuide] = {
    "door_width": DiagnosticGuide.DIMENSIONS,
    "door_height": DiagnosticGuide.DIMENSIONS,
    "top_margin": DiagnosticGuide.MARGINS,
    "bottom_margin": DiagnosticGuide.MARGINS,
    "left_margin": DiagnosticGuide.MARGINS,
    "right_margin": DiagnosticGuide.MARGINS,
    "horizontal_gap": DiagnosticGuide.GAPS,
    "vertical_gap": DiagnosticGuide.GAPS,
    "beading_width": DiagnosticGuide.BEADING,
    "mdf_panel_width": DiagnosticGuide.BEADING,
    "top_panel_ratio": DiagnosticGuide.RATIO,
    "handle_side": DiagnosticGuide.HANDLE,
    "handle_height": DiagnosticGuide.HANDLE,
    "handle_indent": DiagnosticGuide.HANDLE,
    "handle_spread": DiagnosticGuide.HANDLE,
}

DOOR_FILL = "#f5deb3"  # Wheat
BEADING_FILL = "#deb887"  # Burlywood
PANEL_FILL = "#faf0e6"  # Linen
STROKE = "#000000"
HANDLE_COLOR = "#555555"
GUIDE_COLOR = "#1e90ff"  # Dodger blue
PIN_COLOR = "#dc143c"  # Crimson
WARN_COLOR = "#ff8c00"  # Dark orange

HANDLE_BACKPLATE_WIDTH = 40.0


def _to_snake(name: str) -> str:
    chars: list[str] = []
    for ch in name:
        if ch.isupper():
            chars.append("_")
            chars.append(ch.lower())
        else:
            chars.append(ch)
    return "".join(chars)


def guide_for_field(field_name: str) -> DiagnosticGuide | None:
    """Look up the guide for a field given in snake_case or camelCase."""
    return FIELD_GUIDES.get(field_name) or FIELD_GUIDES.get(_to_snake(field_name))


class DoorDiagramRenderer:
    """Renders a door overlay schematic as SVG.

    Drawing coordinates are millimetres from the door's top-left corner;
    ``scale`` only sets the pixel size of the SVG element.

    Attributes:
        scale: Pixels per millimetre for the SVG width/height attributes.
        padding: Margin around the door, in millimetres, for guide labels.
        font_size: Label font size in millimetres.
    """

    def __init__(
        self, scale: float = 0.4, padding: float = 120.0, font_size: float = 22.0
    ) -> None:
        self.scale = scale
        self.padding = padding
        self.font_size = font_size

    def render_svg(
        self,
        config: DoorConfig,
        result: CutResult,
        guide: DiagnosticGuide | None = None,
        name: str = "door",
    ) -> str:
        """Generate the SVG schematic.

        Args:
            config: Door measurements.
            result: Cut list computed from ``config``.
            guide: Optional diagnostic guide to overlay.
            name: Door name used in error messages.

        Returns:
            SVG document as a string.

        Raises:
            InvalidResultError: If the result is not a valid layout.
        """
        ensure_valid(name, result)
        pad = self.padding
        view_w = config.door_width + 2 * pad
        view_h = config.door_height + 2 * pad

        parts: list[str] = [
            f'<svg width="{self._n(view_w * self.scale)}" '
            f'height="{self._n(view_h * self.scale)}" '
            f'viewBox="{self._n(-pad)} {self._n(-pad)} {self._n(view_w)} {self._n(view_h)}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            "",
            "  <!-- Background -->",
            f'  <rect x="{self._n(-pad)}" y="{self._n(-pad)}" '
            f'width="{self._n(view_w)}" height="{self._n(view_h)}" fill="white"/>',
            "",
            "  <!-- Door -->",
            f'  <rect x="0" y="0" width="{self._n(config.door_width)}" '
            f'height="{self._n(config.door_height)}" fill="{DOOR_FILL}" '
            f'stroke="{STROKE}" stroke-width="3"/>',
            "",
            "  <!-- Units -->",
        ]
        parts.extend(self._render_units(config, result))
        parts.append("")
        parts.append("  <!-- Handle -->")
        parts.extend(self._render_handle(config, result))

        if guide is not None:
            parts.append("")
            parts.append(f"  <!-- Guide: {guide.value} -->")
            parts.extend(self._render_guide(guide, config, result))

        parts.append("")
        parts.append("</svg>")
        return "\n".join(parts)

    def _unit_heights(self, result: CutResult) -> tuple[float, float]:
        return result.top_vertical_beading, result.bottom_vertical_beading

    def _render_units(self, config: DoorConfig, result: CutResult) -> list[str]:
        bw = config.beading_width
        gap = result.panel_beading_gap
        heights = self._unit_heights(result)
        panel_heights = (result.top_panel_height, result.bottom_panel_height)

        parts: list[str] = []
        for index, unit in enumerate(result.unit_positions):
            row = index // 2
            x = unit.beading_left_x
            y = unit.beading_y
            w = unit.beading_right_x - unit.beading_left_x
            h = heights[row]
            parts.append(f'  <g id="unit-{unit.label.lower()}">')
            parts.append(
                f'    <rect x="{self._n(x)}" y="{self._n(y)}" width="{self._n(w)}" '
                f'height="{self._n(h)}" fill="{BEADING_FILL}" stroke="{STROKE}"/>'
            )
            parts.append(
                f'    <rect x="{self._n(x + bw)}" y="{self._n(y + bw)}" '
                f'width="{self._n(w - 2 * bw)}" height="{self._n(h - 2 * bw)}" '
                f'fill="{DOOR_FILL}" stroke="{STROKE}"/>'
            )
            parts.append(
                f'    <rect x="{self._n(x + bw + gap)}" y="{self._n(y + bw + gap)}" '
                f'width="{self._n(result.panel_width)}" '
                f'height="{self._n(panel_heights[row])}" '
                f'fill="{PANEL_FILL}" stroke="{STROKE}"/>'
            )
            # Mitre lines at the four corners
            for cx, cy, dx, dy in (
                (x, y, 1, 1),
                (x + w, y, -1, 1),
                (x, y + h, 1, -1),
                (x + w, y + h, -1, -1),
            ):
                parts.append(
                    f'    <line x1="{self._n(cx)}" y1="{self._n(cy)}" '
                    f'x2="{self._n(cx + dx * bw)}" y2="{self._n(cy + dy * bw)}" '
                    f'stroke="{STROKE}"/>'
                )
            parts.append("  </g>")
        return parts

    def _handle_x(self, config: DoorConfig) -> float:
        if config.handle_side == HandleSide.LEFT:
            return config.handle_indent
        return config.door_width - config.handle_indent

    def _spread_end(self, config: DoorConfig) -> float:
        if config.handle_side == HandleSide.LEFT:
            return config.handle_spread
        return config.door_width - config.handle_spread

    def _render_handle(self, config: DoorConfig, result: CutResult) -> list[str]:
        hx = self._handle_x(config)
        hy = config.handle_height
        half = HANDLE_BACKPLATE_HALF_HEIGHT
        edge = 0.0 if config.handle_side == HandleSide.LEFT else config.door_width
        spread_color = WARN_COLOR if result.handle_warnings else HANDLE_COLOR
        return [
            f'  <rect x="{self._n(hx - HANDLE_BACKPLATE_WIDTH / 2)}" '
            f'y="{self._n(hy - half)}" width="{self._n(HANDLE_BACKPLATE_WIDTH)}" '
            f'height="{self._n(2 * half)}" rx="6" fill="{HANDLE_COLOR}"/>',
            f'  <line x1="{self._n(edge)}" y1="{self._n(hy)}" '
            f'x2="{self._n(self._spread_end(config))}" y2="{self._n(hy)}" '
            f'stroke="{spread_color}" stroke-width="8" stroke-linecap="round"/>',
        ]

    def _render_guide(
        self, guide: DiagnosticGuide, config: DoorConfig, result: CutResult
    ) -> list[str]:
        renderers = {
            DiagnosticGuide.DIMENSIONS: self._guide_dimensions,
            DiagnosticGuide.MARGINS: self._guide_margins,
            DiagnosticGuide.GAPS: self._guide_gaps,
            DiagnosticGuide.BEADING: self._guide_beading,
            DiagnosticGuide.RATIO: self._guide_ratio,
            DiagnosticGuide.HANDLE: self._guide_handle,
            DiagnosticGuide.OVERLAY: self._guide_overlay,
        }
        return renderers[guide](config, result)

    def _guide_dimensions(self, config: DoorConfig, result: CutResult) -> list[str]:
        w, h = config.door_width, config.door_height
        return [
            self._line(0, -40, w, -40),
            self._text(w / 2, -50, format_mm(w), anchor="middle"),
            self._line(w + 40, 0, w + 40, h),
            self._text(w + 50, h / 2, format_mm(h)),
        ]

    def _guide_margins(self, config: DoorConfig, result: CutResult) -> list[str]:
        c = config
        w, h = c.door_width, c.door_height
        return [
            self._line(0, c.top_margin, w, c.top_margin),
            self._text(w + 8, c.top_margin / 2, format_mm(c.top_margin)),
            self._line(0, h - c.bottom_margin, w, h - c.bottom_margin),
            self._text(w + 8, h - c.bottom_margin / 2, format_mm(c.bottom_margin)),
            self._line(c.left_margin, 0, c.left_margin, h),
            self._text(c.left_margin / 2, h + 30, format_mm(c.left_margin), anchor="middle"),
            self._line(w - c.right_margin, 0, w - c.right_margin, h),
            self._text(
                w - c.right_margin / 2, h + 30, format_mm(c.right_margin), anchor="middle"
            ),
        ]

    def _guide_gaps(self, config: DoorConfig, result: CutResult) -> list[str]:
        c = config
        w, h = c.door_width, c.door_height
        gap_left = result.unit_positions[0].beading_right_x
        gap_top = result.unit_positions[0].beading_y + result.top_vertical_beading
        return [
            f'  <rect x="{self._n(gap_left)}" y="0" width="{self._n(c.horizontal_gap)}" '
            f'height="{self._n(h)}" fill="{GUIDE_COLOR}" opacity="0.12"/>',
            self._line(gap_left, 0, gap_left, h),
            self._line(gap_left + c.horizontal_gap, 0, gap_left + c.horizontal_gap, h),
            self._text(
                gap_left + c.horizontal_gap / 2,
                h + 30,
                f"H {format_mm(c.horizontal_gap)}",
                anchor="middle",
            ),
            f'  <rect x="0" y="{self._n(gap_top)}" width="{self._n(w)}" '
            f'height="{self._n(c.vertical_gap)}" fill="{GUIDE_COLOR}" opacity="0.12"/>',
            self._line(0, gap_top, w, gap_top),
            self._line(0, gap_top + c.vertical_gap, w, gap_top + c.vertical_gap),
            self._text(
                w + 8, gap_top + c.vertical_gap / 2, f"V {format_mm(c.vertical_gap)}"
            ),
        ]

    def _guide_beading(self, config: DoorConfig, result: CutResult) -> list[str]:
        bw = config.beading_width
        heights = self._unit_heights(result)
        parts: list[str] = []
        for index, unit in enumerate(result.unit_positions):
            x, y = unit.beading_left_x, unit.beading_y
            w = unit.beading_right_x - unit.beading_left_x
            h = heights[index // 2]
            parts.append(
                f'  <rect x="{self._n(x + bw)}" y="{self._n(y + bw)}" '
                f'width="{self._n(w - 2 * bw)}" height="{self._n(h - 2 * bw)}" '
                f'fill="none" stroke="{GUIDE_COLOR}" stroke-dasharray="4 2"/>'
            )
            parts.append(self._text(x + bw / 2, y - 6, format_mm(bw), anchor="middle"))
            parts.append(
                self._text(
                    x + w / 2,
                    y + h + 26,
                    f"panel {format_mm(result.panel_width)}",
                    anchor="middle",
                )
            )
        return parts

    def _guide_ratio(self, config: DoorConfig, result: CutResult) -> list[str]:
        c = config
        top_h, bottom_h = self._unit_heights(result)
        split_y = c.top_margin + top_h + c.vertical_gap / 2
        bottom_top = c.top_margin + top_h + c.vertical_gap
        return [
            self._line(0, split_y, c.door_width, split_y),
            self._text(
                c.door_width + 8, c.top_margin + top_h / 2, f"{format_mm(c.top_panel_ratio)}%"
            ),
            self._text(
                c.door_width + 8,
                bottom_top + bottom_h / 2,
                f"{format_mm(c.bottom_panel_ratio)}%",
            ),
        ]

    def _guide_handle(self, config: DoorConfig, result: CutResult) -> list[str]:
        c = config
        hx = self._handle_x(c)
        spread_end = self._spread_end(c)
        color = WARN_COLOR if result.handle_warnings else GUIDE_COLOR
        margin_line = (
            c.left_margin if c.handle_side == HandleSide.LEFT else c.door_width - c.right_margin
        )
        edge = 0.0 if c.handle_side == HandleSide.LEFT else c.door_width
        return [
            self._line(
                spread_end, c.handle_height - 90, spread_end, c.handle_height + 90, color=color
            ),
            self._line(margin_line, 0, margin_line, c.door_height),
            self._text(
                (edge + spread_end) / 2,
                c.handle_height - 100,
                f"spread {format_mm(c.handle_spread)}",
                anchor="middle",
                color=color,
            ),
            self._line(hx, 0, hx, c.handle_height),
            self._text(hx + 6, c.handle_height / 2, format_mm(c.handle_height)),
        ]

    def _guide_overlay(self, config: DoorConfig, result: CutResult) -> list[str]:
        parts: list[str] = []
        for unit in result.unit_positions:
            parts.append(
                f'  <circle cx="{self._n(unit.pin_x)}" cy="{self._n(unit.pin_y)}" '
                f'r="6" fill="{PIN_COLOR}"/>'
            )
            parts.append(
                self._text(
                    unit.pin_x,
                    unit.beading_y - 8,
                    f"({format_mm(unit.pin_x)}, {format_mm(unit.pin_y)})",
                    anchor="middle",
                    color=PIN_COLOR,
                )
            )
        return parts

    def _line(
        self, x1: float, y1: float, x2: float, y2: float, color: str = GUIDE_COLOR
    ) -> str:
        return (
            f'  <line x1="{self._n(x1)}" y1="{self._n(y1)}" x2="{self._n(x2)}" '
            f'y2="{self._n(y2)}" stroke="{color}" stroke-width="2.5" '
            f'stroke-dasharray="10 5"/>'
        )

    def _text(
        self,
        x: float,
        y: float,
        label: str,
        anchor: str = "start",
        color: str = GUIDE_COLOR,
    ) -> str:
        return (
            f'  <text x="{self._n(x)}" y="{self._n(y)}" text-anchor="{anchor}" '
            f'dominant-baseline="central" font-family="monospace" '
            f'font-size="{self._n(self.font_size)}" fill="{color}">{label}</text>'
        )

    @staticmethod
    def _n(value: float) -> str:
        """Format an SVG coordinate with at most two decimals."""
        return f"{value:.2f}".rstrip("0").rstrip(".")
