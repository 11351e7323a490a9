"""SVG exporter for door schematics.

This module provides an SVG exporter that wraps DoorDiagramRenderer.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from doorpanels.domain.value_objects import DiagnosticGuide
from doorpanels.infrastructure.door_diagram_renderer import DoorDiagramRenderer
from doorpanels.infrastructure.exporters.base import DoorExport, ExporterRegistry


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for the scaled door schematic.

    The fitting-pin overlay is drawn by default so the exported drawing
    doubles as a fitting guide.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(
        self,
        scale: float = 0.4,
        guide: DiagnosticGuide | None = DiagnosticGuide.OVERLAY,
    ) -> None:
        """Initialize the SVG exporter.

        Args:
            scale: Pixels per millimetre (default 0.4).
            guide: Diagnostic guide to overlay, or None for a plain drawing.
        """
        self.renderer = DoorDiagramRenderer(scale=scale)
        self.guide = guide

    def export(self, output: DoorExport, path: Path) -> None:
        """Export the SVG schematic to file.

        Raises:
            InvalidResultError: If the door's cut list is invalid.
        """
        path.write_text(self.export_string(output), encoding="utf-8")

    def export_string(self, output: DoorExport) -> str:
        return self.renderer.render_svg(
            output.config, output.result, guide=self.guide, name=output.name
        )
