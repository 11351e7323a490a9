"""JSON exporter with the normalized input and the derived cut list.

Keys use the same camelCase names as project configuration files so the
"input" block can be pasted back into a project file.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, ClassVar

from pydantic.alias_generators import to_camel

from doorpanels.domain import DoorConfig
from doorpanels.infrastructure.exporters.base import DoorExport, ExporterRegistry
from doorpanels.infrastructure.formatters import ensure_valid

logger = logging.getLogger(__name__)


# Current schema version for JSON output
SCHEMA_VERSION = "1.0"


def _camelize(value: Any) -> Any:
    if isinstance(value, dict):
        return {to_camel(key): _camelize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_camelize(item) for item in value]
    return value


@ExporterRegistry.register("json")
class JsonExporter:
    """Exports a door's input and cut list as JSON.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, output: DoorExport, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.debug(f"Wrote JSON for '{output.name}' to {path}")

    def export_string(self, output: DoorExport) -> str:
        return json.dumps(self.build(output), indent=self.indent)

    def build(self, output: DoorExport) -> dict[str, Any]:
        """Build the JSON document as a dictionary.

        Raises:
            InvalidResultError: If the door's cut list is invalid.
        """
        ensure_valid(output.name, output.result)
        result = output.result
        derived = asdict(result)
        derived["totals"] = {
            "panel_count": result.panel_count,
            "beading_piece_count": result.beading_piece_count,
            "total_beading_length": result.total_beading_length,
        }
        return {
            "schemaVersion": SCHEMA_VERSION,
            "name": output.name,
            "input": self._input(output.config),
            "result": _camelize(derived),
        }

    def _input(self, config: DoorConfig) -> dict[str, Any]:
        data = {name: getattr(config, name) for name in DoorConfig.field_names()}
        data["handle_side"] = config.handle_side.value
        return _camelize(data)
