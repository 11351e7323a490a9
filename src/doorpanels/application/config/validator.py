"""Validation structures and door layout checks.

Schema validation only checks individual field ranges. This module runs the
cut engine over every door so that impossible layouts surface as blocking
errors and handle clashes surface as warnings, before anything is exported.
"""

from dataclasses import dataclass, field
from typing import Any

from doorpanels.application.config.adapter import schema_to_door_config
from doorpanels.application.config.schema import DoorProjectConfiguration
from doorpanels.domain.services import RECOMMENDED_RATIO_RANGE, compute_cut_result


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid entry (e.g., "doors[0]")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> None:
        self.errors.append(ValidationError(path=path, message=message, value=value))

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> None:
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )


def check_duplicate_names(config: DoorProjectConfiguration) -> list[ValidationError]:
    """Door names identify doors on the command line, so they must be unique."""
    errors: list[ValidationError] = []
    seen: set[str] = set()
    for index, door in enumerate(config.doors):
        if door.name in seen:
            errors.append(
                ValidationError(
                    path=f"doors[{index}].name",
                    message=f"Duplicate door name '{door.name}'",
                    value=door.name,
                )
            )
        seen.add(door.name)
    return errors


def check_door_layouts(config: DoorProjectConfiguration) -> ValidationResult:
    """Run the cut engine over every door and collect its diagnostics."""
    result = ValidationResult()
    low, high = RECOMMENDED_RATIO_RANGE

    for index, door in enumerate(config.doors):
        path = f"doors[{index}]"
        cuts = compute_cut_result(schema_to_door_config(door.config))

        for message in cuts.errors:
            result.add_error(path, f"{door.name}: {message}")

        for message in cuts.handle_warnings:
            result.add_warning(
                f"{path}.config.handleSpread",
                f"{door.name}: handle hardware overlaps the beading",
                suggestion=message,
            )

        ratio = door.config.top_panel_ratio
        if not low <= ratio <= high:
            result.add_warning(
                f"{path}.config.topPanelRatio",
                f"{door.name}: top panel ratio {ratio:g}% is outside the usual "
                f"{low:g}-{high:g}% range",
                suggestion="Unbalanced rows can leave one panel very narrow.",
            )

    return result


def validate_config(config: DoorProjectConfiguration) -> ValidationResult:
    """Perform full validation of a loaded door project.

    Args:
        config: A schema-valid project configuration.

    Returns:
        ValidationResult containing all errors and warnings.
    """
    result = ValidationResult()
    result.errors.extend(check_duplicate_names(config))

    layout_result = check_door_layouts(config)
    result.errors.extend(layout_result.errors)
    result.warnings.extend(layout_result.warnings)
    return result
