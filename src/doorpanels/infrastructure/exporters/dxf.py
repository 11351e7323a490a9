"""DXF format exporter for door overlay templates.

Generates a full-size 2D DXF drawing (R2010, millimetres) of the door with
beading frames, MDF panels and fitting pins, for printing a marking
template or driving a CNC router.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, cast

import ezdxf
from ezdxf import units

from doorpanels.domain.services import format_mm
from doorpanels.infrastructure.exporters.base import DoorExport, ExporterRegistry
from doorpanels.infrastructure.formatters import ensure_valid

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from doorpanels.domain import CutResult, DoorConfig


logger = logging.getLogger(__name__)


# Layer configuration for DXF output
LAYERS = {
    "OUTLINE": {"color": 7},  # White - door outline
    "BEADING": {"color": 1},  # Red - beading frame outer and inner edges
    "PANELS": {"color": 5},  # Blue - MDF panels
    "PINS": {"color": 3},  # Green - fitting pins
    "LABELS": {"color": 2},  # Yellow - text labels
}

PIN_RADIUS = 3.0
LABEL_HEIGHT = 18.0


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports a door overlay as a full-size DXF drawing.

    DXF's Y axis points up, so door coordinates (measured down from the
    top edge) are flipped; the drawing reads the same way up as the door.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(self, include_labels: bool = True) -> None:
        self.include_labels = include_labels

    def export(self, output: DoorExport, path: Path) -> None:
        """Export the door drawing to a DXF file.

        Raises:
            InvalidResultError: If the door's cut list is invalid.
        """
        doc = self.build(output)
        doc.saveas(path)
        logger.info(f"Exported DXF to {path}")

    def export_string(self, output: DoorExport) -> str:
        doc = self.build(output)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def build(self, output: DoorExport) -> Drawing:
        """Create the DXF document for a door."""
        ensure_valid(output.name, output.result)
        doc = ezdxf.new("R2010")
        doc.units = units.MM
        self._setup_layers(doc)
        msp = doc.modelspace()
        self._draw_door(msp, output.config)
        self._draw_units(msp, output.config, output.result)
        return doc

    def _setup_layers(self, doc: Drawing) -> None:
        for name, props in LAYERS.items():
            doc.layers.add(name, color=cast(int, props["color"]))

    def _rect(
        self,
        msp: Modelspace,
        door_height: float,
        x: float,
        y: float,
        width: float,
        height: float,
        layer: str,
    ) -> None:
        """Draw a rectangle given in door coordinates (top-left origin)."""
        top = door_height - y
        bottom = top - height
        points = [
            (x, bottom),
            (x + width, bottom),
            (x + width, top),
            (x, top),
            (x, bottom),
        ]
        msp.add_lwpolyline(points, dxfattribs={"layer": layer})

    def _draw_door(self, msp: Modelspace, config: DoorConfig) -> None:
        self._rect(
            msp, config.door_height, 0, 0, config.door_width, config.door_height, "OUTLINE"
        )

    def _draw_units(
        self, msp: Modelspace, config: DoorConfig, result: CutResult
    ) -> None:
        door_h = config.door_height
        bw = config.beading_width
        gap = result.panel_beading_gap
        unit_heights = (result.top_vertical_beading, result.bottom_vertical_beading)
        panel_heights = (result.top_panel_height, result.bottom_panel_height)

        for index, unit in enumerate(result.unit_positions):
            row = index // 2
            x, y = unit.beading_left_x, unit.beading_y
            w = unit.beading_right_x - unit.beading_left_x
            h = unit_heights[row]

            self._rect(msp, door_h, x, y, w, h, "BEADING")
            self._rect(msp, door_h, x + bw, y + bw, w - 2 * bw, h - 2 * bw, "BEADING")
            self._rect(
                msp,
                door_h,
                x + bw + gap,
                y + bw + gap,
                result.panel_width,
                panel_heights[row],
                "PANELS",
            )
            msp.add_circle(
                (unit.pin_x, door_h - unit.pin_y),
                PIN_RADIUS,
                dxfattribs={"layer": "PINS"},
            )

            if self.include_labels:
                msp.add_mtext(
                    f"{unit.label}\\P"
                    f"pin ({format_mm(unit.pin_x)}, {format_mm(unit.pin_y)})",
                    dxfattribs={
                        "layer": "LABELS",
                        "char_height": LABEL_HEIGHT,
                        "insert": (x + w / 2, door_h - (y + h / 2)),
                        "attachment_point": 5,  # MIDDLE_CENTER
                    },
                )
