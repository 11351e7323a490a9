"""Pydantic configuration schema for door overlay project files.

A project file holds one or more named doors. Field names are accepted in
either snake_case or camelCase (``mdf_panel_width`` or ``mdfPanelWidth``);
files are written with camelCase.

Example:
    {
      "schema_version": "1.0",
      "doors": [
        {"name": "Hall door", "config": {"doorWidth": 762, "doorHeight": 1981}}
      ]
    }
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from doorpanels.domain.value_objects import HandleSide

# Supported schema versions for configuration files
# Version 1.0: Named doors with full overlay measurements
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

CURRENT_VERSION = "1.0"


class DoorConfigSchema(BaseModel):
    """Measurements for one door, in millimetres.

    Every field defaults to a standard UK interior door (762 x 1981).
    """

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    door_width: float = Field(default=762.0, gt=0, description="Door width")
    door_height: float = Field(default=1981.0, gt=0, description="Door height")
    top_margin: float = Field(default=100.0, ge=0, description="Top margin")
    bottom_margin: float = Field(default=100.0, ge=0, description="Bottom margin")
    left_margin: float = Field(default=80.0, ge=0, description="Left margin")
    right_margin: float = Field(default=80.0, ge=0, description="Right margin")
    horizontal_gap: float = Field(
        default=80.0, ge=0, description="Gap between left and right units"
    )
    vertical_gap: float = Field(
        default=80.0, ge=0, description="Gap between top and bottom units"
    )
    beading_width: float = Field(default=20.0, ge=0, description="Beading strip width")
    mdf_panel_width: float = Field(
        default=215.0, ge=0, description="Inset MDF panel width"
    )
    top_panel_ratio: float = Field(
        default=40.0,
        ge=0,
        le=100,
        description="Percentage of available height given to the top row",
    )
    handle_side: HandleSide = Field(
        default=HandleSide.LEFT, description="Door edge carrying the handle"
    )
    handle_height: float = Field(
        default=1000.0, ge=0, description="Handle centre from the door top"
    )
    handle_indent: float = Field(
        default=55.0, ge=0, description="Handle centre from the handle-side edge"
    )
    handle_spread: float = Field(
        default=140.0,
        ge=0,
        description="Total reach of the handle hardware from the door edge",
    )


class DoorEntrySchema(BaseModel):
    """A named door configuration."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Door name")
    config: DoorConfigSchema = Field(
        default_factory=DoorConfigSchema, description="Door measurements"
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        """Reject names that are only whitespace."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Door name must not be blank")
        return stripped


class DoorProjectConfiguration(BaseModel):
    """Root configuration model for a door overlay project file.

    Attributes:
        schema_version: Configuration format version.
        doors: Named doors, in display order.
        active: Optional name of the door selected by default.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., description="Configuration schema version")
    doors: list[DoorEntrySchema] = Field(..., min_length=1, description="Doors")
    active: str | None = Field(default=None, description="Active door name")

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Only accept known schema versions."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v

    @model_validator(mode="after")
    def validate_active(self) -> "DoorProjectConfiguration":
        """The active door, when given, must name one of the doors."""
        if self.active is not None:
            names = [door.name for door in self.doors]
            if self.active not in names:
                raise ValueError(
                    f"Active door '{self.active}' does not match any door name"
                )
        return self

    def get_door(self, name: str) -> DoorEntrySchema | None:
        """Look up a door by name."""
        for door in self.doors:
            if door.name == name:
                return door
        return None
