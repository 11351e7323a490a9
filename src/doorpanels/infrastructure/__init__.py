"""Infrastructure layer - formatters, rendering and exporters."""

from .door_diagram_renderer import (
    FIELD_GUIDES,
    DoorDiagramRenderer,
    guide_for_field,
)
from .formatters import (
    AllDoorsSummaryFormatter,
    CompactFormatter,
    CutListFormatter,
    InvalidResultError,
    SummaryFormatter,
)
from .exporters import (
    DoorExport,
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonExporter,
    SvgExporter,
    TextExporter,
)

__all__ = [
    "FIELD_GUIDES",
    "AllDoorsSummaryFormatter",
    "CompactFormatter",
    "CutListFormatter",
    "DoorDiagramRenderer",
    "DoorExport",
    "DxfExporter",
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "InvalidResultError",
    "JsonExporter",
    "SummaryFormatter",
    "SvgExporter",
    "TextExporter",
    "guide_for_field",
]
