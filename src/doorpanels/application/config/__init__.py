"""Configuration schema and loading system for door overlay projects.

This package provides JSON-based configuration loading and validation.
It includes Pydantic models for schema validation, a configuration loader
with comprehensive error handling, adapters to domain objects, and layout
checks that run the cut engine over every door.

Public API:
    - DoorProjectConfiguration: Root configuration model
    - DoorEntrySchema: Named door model
    - DoorConfigSchema: Door measurement model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - validate_config: Perform full configuration validation
    - config_to_doors / config_to_door: Convert to domain DoorConfig objects

Example:
    >>> from pathlib import Path
    >>> from doorpanels.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("hall-door.json"))
    ...     print(f"{len(config.doors)} door(s)")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from doorpanels.application.config.adapter import (
    config_to_door,
    config_to_doors,
    door_config_to_schema,
    doors_to_config,
    schema_to_door_config,
)
from doorpanels.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from doorpanels.application.config.schema import (
    CURRENT_VERSION,
    SUPPORTED_VERSIONS,
    DoorConfigSchema,
    DoorEntrySchema,
    DoorProjectConfiguration,
)
from doorpanels.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "CURRENT_VERSION",
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "DoorConfigSchema",
    "DoorEntrySchema",
    "DoorProjectConfiguration",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_door",
    "config_to_doors",
    "door_config_to_schema",
    "doors_to_config",
    "load_config",
    "load_config_from_dict",
    "schema_to_door_config",
    "validate_config",
]
