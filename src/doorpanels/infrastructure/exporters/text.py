"""Plain-text summary exporter."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from doorpanels.infrastructure.exporters.base import DoorExport, ExporterRegistry
from doorpanels.infrastructure.formatters import CompactFormatter, SummaryFormatter


@ExporterRegistry.register("txt")
class TextExporter:
    """Exports the shareable text summary of a door.

    Attributes:
        format_name: "txt"
        file_extension: "txt"
    """

    format_name: ClassVar[str] = "txt"
    file_extension: ClassVar[str] = "txt"

    def __init__(self, compact: bool = False) -> None:
        """Initialize the text exporter.

        Args:
            compact: Use the five-line compact summary instead of the full one.
        """
        self.formatter = CompactFormatter() if compact else SummaryFormatter()

    def export(self, output: DoorExport, path: Path) -> None:
        path.write_text(self.export_string(output) + "\n", encoding="utf-8")

    def export_string(self, output: DoorExport) -> str:
        return self.formatter.format(output.name, output.config, output.result)
