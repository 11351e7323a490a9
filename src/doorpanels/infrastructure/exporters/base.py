"""Exporter protocol, format registry and the per-door file export manager."""

from __future__ import annotations

import logging
import re
from abc import abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Protocol, runtime_checkable

from doorpanels.domain import CutResult, DoorConfig, compute_cut_result
from doorpanels.infrastructure.formatters import ensure_valid


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DoorExport:
    """A named door with its computed cut list, ready for export.

    Attributes:
        name: Door name used in headings and file names.
        config: Door measurements.
        result: Cut list computed from ``config``.
    """

    name: str
    config: DoorConfig
    result: CutResult

    @classmethod
    def compute(cls, name: str, config: DoorConfig) -> DoorExport:
        """Build an export by running the cut engine on ``config``."""
        return cls(name=name, config=config, result=compute_cut_result(config))


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert a DoorExport to a specific format. Each exporter must
    define its format name and file extension, and implement at least the
    export method. Exporters refuse invalid results.

    Attributes:
        format_name: Name of the export format (e.g., "svg", "json").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: DoorExport, path: Path) -> None:
        """Export a door to a file.

        Args:
            output: The door to export.
            path: Path where the file will be saved.
        """
        ...

    def export_string(self, output: DoorExport) -> str:
        """Export a door as a string.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves using the @ExporterRegistry.register
    decorator.

    Example:
        @ExporterRegistry.register("json")
        class JsonExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator to register an exporter class."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


def door_slug(name: str) -> str:
    """File-name form of a door name, e.g. "Hall Door" -> "hall-door"."""
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-") or "door"


class ExportConflictError(ValueError):
    """Raised when two doors of a project would export to the same file."""

    def __init__(self, file_base: str, first: str, second: str) -> None:
        self.file_base = file_base
        self.doors = (first, second)
        super().__init__(
            f"doors '{first}' and '{second}' would both export to "
            f"'{file_base}'; rename one of them"
        )


class ExportManager:
    """Writes doors to files, one file per door and format.

    Files are named ``{file_base}_{format}.{ext}``. A project with a single
    door uses the project name as its file base; with several doors each
    base also carries the door's slug.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def file_bases(self, doors: Sequence[DoorExport], project_name: str) -> list[str]:
        """File base for each door, in order.

        Raises:
            ExportConflictError: If two doors map to the same file base.
        """
        if len(doors) == 1:
            return [project_name]

        owners: dict[str, str] = {}
        bases: list[str] = []
        for door in doors:
            base = f"{project_name}_{door_slug(door.name)}"
            if base in owners:
                raise ExportConflictError(base, owners[base], door.name)
            owners[base] = door.name
            bases.append(base)
        return bases

    def export_project(
        self,
        formats: list[str],
        doors: Sequence[DoorExport],
        project_name: str = "door",
    ) -> list[Path]:
        """Export every door of a project to every format.

        All doors are checked before the first file is written.

        Returns:
            The written paths, door by door.

        Raises:
            InvalidResultError: If any door's cut list is invalid.
            ExportConflictError: If two doors map to the same file base.
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        for door in doors:
            ensure_valid(door.name, door.result)
        bases = self.file_bases(doors, project_name)
        for format_name in formats:
            ExporterRegistry.get(format_name)

        written: list[Path] = []
        for base, door in zip(bases, doors):
            written.extend(self.export_all(formats, door, base).values())
        return written

    def export_all(
        self,
        formats: list[str],
        output: DoorExport,
        project_name: str = "door",
    ) -> dict[str, Path]:
        """Export one door to several formats.

        Args:
            formats: List of format names to export (e.g., ["svg", "json"]).
            output: The door to export.
            project_name: Base name for output files (default "door").

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            InvalidResultError: If the door's cut list is invalid.
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        if not output.result.is_valid:
            logger.warning(f"Refusing to export invalid door '{output.name}'")
        ensure_valid(output.name, output.result)
        exporters = [ExporterRegistry.get(name)() for name in formats]

        self.output_dir.mkdir(parents=True, exist_ok=True)
        results: dict[str, Path] = {}
        for exporter in exporters:
            filepath = (
                self.output_dir
                / f"{project_name}_{exporter.format_name}.{exporter.file_extension}"
            )
            logger.info(f"Exporting '{output.name}' as {exporter.format_name}: {filepath}")
            exporter.export(output, filepath)
            results[exporter.format_name] = filepath
        return results

    def export_single(
        self,
        format_name: str,
        output: DoorExport,
        project_name: str = "door",
    ) -> Path:
        """Export one door to a single format."""
        return self.export_all([format_name], output, project_name)[format_name]
