"""Reading door project files.

A project file is JSON holding one or more named doors. Anything that stops
a file from becoming a DoorProjectConfiguration is raised as ConfigError.
Validation details carry the name of the door they point into, so a
message can say which door of a multi-door project is at fault.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from doorpanels.application.config.schema import DoorProjectConfiguration


class ConfigError(Exception):
    """A door project could not be read, parsed or resolved.

    Attributes:
        message: The primary error message
        error_type: One of file_not_found, permission_denied, file_read_error,
            json_parse, validation or door_not_found
        path: Path to the project file (if applicable)
        details: Per-problem dicts. JSON errors carry line/column; validation
            errors carry path, message, value and, inside a door, its name.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    @property
    def door_names(self) -> list[str]:
        """Doors named by the details, in the order they first appear."""
        names: list[str] = []
        for detail in self.details:
            door = detail.get("door")
            if door is not None and door not in names:
                names.append(door)
        return names


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("doors", 0, "config", "doorWidth"))
        'doors[0].config.doorWidth'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _door_name_at(data: Any, loc: tuple[str | int, ...]) -> str | None:
    """Name of the door entry a location points into, if it has a usable one."""
    if len(loc) < 2 or loc[0] != "doors" or not isinstance(loc[1], int):
        return None
    try:
        name = data["doors"][loc[1]]["name"]
    except (KeyError, IndexError, TypeError):
        return None
    if isinstance(name, str) and name.strip():
        return name.strip()
    return None


def _validation_details(
    error: PydanticValidationError, data: Any
) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        loc = err["loc"]
        detail: dict[str, Any] = {
            "path": _format_json_path(loc),
            "message": err["msg"],
            # A missing field's input is its whole parent object
            "value": None if err["type"] == "missing" else err.get("input"),
            "error_type": err["type"],
        }
        door = _door_name_at(data, loc)
        if door is not None:
            detail["door"] = door
        details.append(detail)
    return details


def _describe_details(details: list[dict[str, Any]]) -> str:
    lines = ["Door project validation failed:"]
    for detail in details:
        where = detail["path"]
        if "door" in detail:
            where = f"{where} (door '{detail['door']}')"
        line = f"  - {where}: {detail['message']}"
        if detail.get("value") is not None:
            line += f" (got: {detail['value']!r})"
        lines.append(line)
    return "\n".join(lines)


def _read_project_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(
            f"Door project file not found: {path}", "file_not_found", path
        ) from None
    except PermissionError:
        raise ConfigError(
            f"Permission denied reading door project: {path}",
            "permission_denied",
            path,
        ) from None
    except OSError as e:
        raise ConfigError(
            f"Could not read door project {path}: {e}", "file_read_error", path
        ) from e


def _validate_project(data: Any, path: Path | None = None) -> DoorProjectConfiguration:
    try:
        return DoorProjectConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e, data)
        raise ConfigError(
            _describe_details(details), "validation", path, details
        ) from None


def load_config(path: Path) -> DoorProjectConfiguration:
    """Load and validate a door project from a JSON file.

    Args:
        path: Path to the JSON project file

    Returns:
        A validated DoorProjectConfiguration instance

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.

    Example:
        >>> try:
        ...     project = load_config(Path("house.json"))
        ... except ConfigError as e:
        ...     print(f"Error: {e}")
    """
    content = _read_project_text(path)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in door project {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from None
    return _validate_project(data, path)


def load_config_from_dict(data: dict[str, Any]) -> DoorProjectConfiguration:
    """Validate a door project held in memory, such as a bundled template."""
    return _validate_project(data)
