"""Unit tests for schema to domain conversion."""

from __future__ import annotations

import pytest

from doorpanels.application.config import (
    ConfigError,
    DoorConfigSchema,
    config_to_door,
    config_to_doors,
    door_config_to_schema,
    doors_to_config,
    load_config_from_dict,
    schema_to_door_config,
)
from doorpanels.domain import DoorConfig, HandleSide


@pytest.fixture
def project():
    return load_config_from_dict(
        {
            "schema_version": "1.0",
            "doors": [
                {"name": "Hall", "config": {"doorWidth": 762}},
                {"name": "Landing", "config": {"doorWidth": 838, "handleSide": "right"}},
            ],
        }
    )


class TestSchemaConversion:
    """Tests for single-door conversion."""

    def test_schema_to_door_config(self) -> None:
        config = schema_to_door_config(DoorConfigSchema(door_width=826, handle_side="right"))

        assert isinstance(config, DoorConfig)
        assert config.door_width == 826
        assert config.handle_side is HandleSide.RIGHT

    def test_default_schema_matches_default_config(self) -> None:
        assert schema_to_door_config(DoorConfigSchema()) == DoorConfig()

    def test_door_config_to_schema(self) -> None:
        schema = door_config_to_schema(DoorConfig(top_panel_ratio=55))
        assert schema.top_panel_ratio == 55


class TestProjectConversion:
    """Tests for multi-door conversion."""

    def test_config_to_doors_keeps_order(self, project) -> None:
        doors = config_to_doors(project)

        assert [name for name, _ in doors] == ["Hall", "Landing"]
        assert doors[1][1].door_width == 838

    def test_config_to_door_defaults_to_first(self, project) -> None:
        name, config = config_to_door(project)
        assert name == "Hall"

    def test_config_to_door_uses_active(self, project) -> None:
        project.active = "Landing"
        name, _ = config_to_door(project)
        assert name == "Landing"

    def test_config_to_door_by_name(self, project) -> None:
        name, config = config_to_door(project, "Landing")

        assert name == "Landing"
        assert config.handle_side is HandleSide.RIGHT

    def test_config_to_door_unknown_name(self, project) -> None:
        with pytest.raises(ConfigError, match="Available doors: Hall, Landing") as exc_info:
            config_to_door(project, "Kitchen")

        error = exc_info.value
        assert error.error_type == "door_not_found"
        assert error.details == [{"door": "Kitchen", "available": ["Hall", "Landing"]}]
        assert "Did you mean" not in str(error)

    def test_config_to_door_suggests_case_mismatch(self, project) -> None:
        with pytest.raises(ConfigError, match=r"Did you mean 'Landing'\?"):
            config_to_door(project, "landing")

    def test_doors_to_config(self) -> None:
        project = doors_to_config(
            [("Hall", DoorConfig()), ("Landing", DoorConfig(door_width=838))],
            active="Landing",
        )

        assert project.schema_version == "1.0"
        assert [door.name for door in project.doors] == ["Hall", "Landing"]
        assert project.active == "Landing"
        assert config_to_doors(project)[1][1] == DoorConfig(door_width=838)
