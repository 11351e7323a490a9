"""Unit tests for DoorRegistry."""

from __future__ import annotations

import pytest

from doorpanels.application import (
    DoorNotFoundError,
    DoorRegistry,
    RegistryError,
    SavedDoor,
)
from doorpanels.domain import DoorConfig, HandleSide


@pytest.fixture
def registry() -> DoorRegistry:
    return DoorRegistry()


class TestDoorRegistryInit:
    """Tests for registry construction."""

    def test_starts_with_one_default_door(self, registry: DoorRegistry) -> None:
        assert len(registry) == 1
        assert registry.active.name == "Door 1"
        assert registry.active.config == DoorConfig()

    def test_from_named_configs(self) -> None:
        registry = DoorRegistry(
            [("Hall", DoorConfig()), ("Landing", DoorConfig(door_width=838))]
        )

        assert [door.name for door in registry] == ["Hall", "Landing"]
        assert registry.active.name == "Hall"

    def test_empty_list_falls_back_to_default(self) -> None:
        assert DoorRegistry([]).active.name == "Door 1"

    def test_ids_are_unique(self) -> None:
        registry = DoorRegistry([("A", DoorConfig()), ("A", DoorConfig())])
        ids = [door.id for door in registry]
        assert len(set(ids)) == 2


class TestAddRemove:
    """Tests for adding and removing doors."""

    def test_add_copies_active_config(self, registry: DoorRegistry) -> None:
        registry.update(registry.active.id, "door_width", 826)
        door = registry.add()

        assert door.name == "Door 2"
        assert door.config.door_width == 826
        assert registry.active.id == door.id

    def test_add_with_name(self, registry: DoorRegistry) -> None:
        assert registry.add("  Landing ").name == "Landing"

    def test_add_with_blank_name_uses_default(self, registry: DoorRegistry) -> None:
        assert registry.add("   ").name == "Door 2"

    def test_remove(self, registry: DoorRegistry) -> None:
        first = registry.active
        second = registry.add()
        registry.remove(first.id)

        assert len(registry) == 1
        assert first.id not in registry
        assert registry.active.id == second.id

    def test_remove_active_activates_first(self, registry: DoorRegistry) -> None:
        first = registry.active
        registry.add()
        third = registry.add()
        registry.remove(third.id)

        assert registry.active.id == first.id

    def test_cannot_remove_last_door(self, registry: DoorRegistry) -> None:
        with pytest.raises(RegistryError, match="last door"):
            registry.remove(registry.active.id)

    def test_remove_unknown(self, registry: DoorRegistry) -> None:
        with pytest.raises(DoorNotFoundError):
            registry.remove("nope")


class TestEditing:
    """Tests for renaming, activating and updating doors."""

    def test_rename(self, registry: DoorRegistry) -> None:
        door = registry.rename(registry.active.id, " Hall door ")

        assert door.name == "Hall door"
        assert registry.active.name == "Hall door"

    def test_blank_rename_is_ignored(self, registry: DoorRegistry) -> None:
        door = registry.rename(registry.active.id, "  ")
        assert door.name == "Door 1"

    def test_rename_keeps_id(self, registry: DoorRegistry) -> None:
        original = registry.active
        assert registry.rename(original.id, "Hall").id == original.id

    def test_activate(self, registry: DoorRegistry) -> None:
        first = registry.active
        registry.add()
        registry.activate(first.id)
        assert registry.active.id == first.id

    def test_activate_unknown(self, registry: DoorRegistry) -> None:
        with pytest.raises(DoorNotFoundError) as exc_info:
            registry.activate("missing")
        assert exc_info.value.door_id == "missing"

    def test_update(self, registry: DoorRegistry) -> None:
        door = registry.update(registry.active.id, "handle_side", "right")

        assert isinstance(door, SavedDoor)
        assert door.config.handle_side is HandleSide.RIGHT
        assert registry.get(door.id).config.handle_side is HandleSide.RIGHT

    def test_update_unknown_field(self, registry: DoorRegistry) -> None:
        with pytest.raises(RegistryError, match="Unknown door field"):
            registry.update(registry.active.id, "colour", "white")

    def test_replace_config(self, registry: DoorRegistry) -> None:
        config = DoorConfig(door_width=900)
        door = registry.replace_config(registry.active.id, config)
        assert door.config is config

    def test_find_by_name(self, registry: DoorRegistry) -> None:
        registry.add("Landing")
        assert registry.find_by_name("Landing").name == "Landing"
        assert registry.find_by_name("Kitchen") is None


class TestResults:
    """Tests for computing cut lists from the registry."""

    def test_result(self, registry: DoorRegistry) -> None:
        result = registry.result(registry.active.id)
        assert result.panel_beading_gap == 3

    def test_results_follow_door_order(self, registry: DoorRegistry) -> None:
        registry.add("Wide")
        registry.update(registry.active.id, "mdf_panel_width", 400)

        pairs = list(registry.results())

        assert [door.name for door, _ in pairs] == ["Door 1", "Wide"]
        assert [result.is_valid for _, result in pairs] == [True, False]
