"""Exporter framework for door overlay outputs.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Writes one file per door and format, checking a whole
  project before anything is written

Registered exporters:
- dxf: Full-size DXF drawing for marking templates and CNC
- json: Normalized input and derived cut list
- svg: Scaled schematic with fitting pins
- txt: Shareable text summary

Usage:
    from doorpanels.infrastructure.exporters import DoorExport, ExportManager

    output = DoorExport.compute("Hall door", config)
    manager = ExportManager(output_dir=Path("./output"))
    paths = manager.export_project(["svg", "txt"], [output], project_name="hall")
"""

from doorpanels.infrastructure.exporters.base import (
    DoorExport,
    ExportConflictError,
    Exporter,
    ExporterRegistry,
    ExportManager,
    door_slug,
)

# Import exporters to trigger registration
from doorpanels.infrastructure.exporters.dxf import DxfExporter
from doorpanels.infrastructure.exporters.json_export import JsonExporter
from doorpanels.infrastructure.exporters.svg import SvgExporter
from doorpanels.infrastructure.exporters.text import TextExporter

__all__ = [
    "DoorExport",
    "DxfExporter",
    "ExportConflictError",
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "JsonExporter",
    "SvgExporter",
    "TextExporter",
    "door_slug",
]
