"""Conversion between configuration schemas and domain objects."""

from __future__ import annotations

from doorpanels.application.config.loader import ConfigError
from doorpanels.application.config.schema import (
    CURRENT_VERSION,
    DoorConfigSchema,
    DoorEntrySchema,
    DoorProjectConfiguration,
)
from doorpanels.domain.value_objects import DoorConfig


def schema_to_door_config(schema: DoorConfigSchema) -> DoorConfig:
    """Convert a validated DoorConfigSchema to a domain DoorConfig."""
    return DoorConfig(**schema.model_dump())


def door_config_to_schema(config: DoorConfig) -> DoorConfigSchema:
    """Convert a domain DoorConfig back to its schema.

    Raises:
        pydantic.ValidationError: If the config holds out-of-range values.
    """
    return DoorConfigSchema.model_validate(
        {name: getattr(config, name) for name in DoorConfig.field_names()}
    )


def config_to_doors(config: DoorProjectConfiguration) -> list[tuple[str, DoorConfig]]:
    """Extract the named domain configurations from a project, in file order."""
    return [(door.name, schema_to_door_config(door.config)) for door in config.doors]


def config_to_door(
    config: DoorProjectConfiguration, name: str | None = None
) -> tuple[str, DoorConfig]:
    """Select one door from a project.

    Without a name the project's active door is used, falling back to the
    first door.

    Raises:
        ConfigError: If no door has the given name (error_type
            ``door_not_found``).
    """
    if name is None:
        name = config.active
    if name is None:
        entry = config.doors[0]
    else:
        entry = config.get_door(name)
        if entry is None:
            raise _door_not_found(config, name)
    return entry.name, schema_to_door_config(entry.config)


def _door_not_found(config: DoorProjectConfiguration, name: str) -> ConfigError:
    names = [door.name for door in config.doors]
    message = f"No door named '{name}'. Available doors: {', '.join(names)}"
    # Names are matched exactly; point out a near miss in case or spacing
    wanted = " ".join(name.split()).casefold()
    close = [n for n in names if " ".join(n.split()).casefold() == wanted]
    if close:
        message += f". Did you mean '{close[0]}'?"
    return ConfigError(
        message,
        "door_not_found",
        details=[{"door": name, "available": names}],
    )


def doors_to_config(
    doors: list[tuple[str, DoorConfig]], active: str | None = None
) -> DoorProjectConfiguration:
    """Build a project configuration from named domain configurations."""
    return DoorProjectConfiguration(
        schema_version=CURRENT_VERSION,
        doors=[
            DoorEntrySchema(name=name, config=door_config_to_schema(door_config))
            for name, door_config in doors
        ],
        active=active,
    )
