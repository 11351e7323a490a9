"""In-memory registry of named door configurations.

Doors are keyed by a generated identifier so that renaming a door never
changes how it is addressed. The registry always holds at least one door
and always has exactly one active door.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from typing import Any

from doorpanels.domain import CutResult, DoorConfig, compute_cut_result

logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """Raised when a registry operation cannot be applied."""


class DoorNotFoundError(RegistryError):
    """Raised when a door id is not in the registry."""

    def __init__(self, door_id: str) -> None:
        self.door_id = door_id
        super().__init__(f"Door not found: {door_id}")


@dataclass(frozen=True)
class SavedDoor:
    """A named door configuration.

    Attributes:
        id: Generated identifier, stable across renames.
        name: Display name.
        config: Door measurements.
    """

    id: str
    name: str
    config: DoorConfig


def _new_id() -> str:
    return uuid.uuid4().hex


class DoorRegistry:
    """Ordered collection of doors with an active selection.

    Example:
        registry = DoorRegistry()
        door = registry.add()
        registry.update(door.id, "door_width", 826)
        result = registry.result(door.id)
    """

    def __init__(self, doors: Iterable[tuple[str, DoorConfig]] | None = None) -> None:
        """Initialize the registry.

        Args:
            doors: Optional (name, config) pairs. When empty or omitted the
                registry starts with a single default door named "Door 1".
        """
        self._doors: dict[str, SavedDoor] = {}
        for name, config in doors or ():
            door = SavedDoor(id=_new_id(), name=name, config=config)
            self._doors[door.id] = door
        if not self._doors:
            door = SavedDoor(id=_new_id(), name="Door 1", config=DoorConfig())
            self._doors[door.id] = door
        self._active_id = next(iter(self._doors))

    def __len__(self) -> int:
        return len(self._doors)

    def __iter__(self) -> Iterator[SavedDoor]:
        return iter(list(self._doors.values()))

    def __contains__(self, door_id: object) -> bool:
        return door_id in self._doors

    @property
    def doors(self) -> list[SavedDoor]:
        return list(self._doors.values())

    @property
    def active(self) -> SavedDoor:
        return self._doors[self._active_id]

    def get(self, door_id: str) -> SavedDoor:
        """Look up a door by id.

        Raises:
            DoorNotFoundError: If the id is unknown.
        """
        try:
            return self._doors[door_id]
        except KeyError:
            raise DoorNotFoundError(door_id) from None

    def find_by_name(self, name: str) -> SavedDoor | None:
        for door in self._doors.values():
            if door.name == name:
                return door
        return None

    def activate(self, door_id: str) -> SavedDoor:
        door = self.get(door_id)
        self._active_id = door.id
        return door

    def add(self, name: str | None = None) -> SavedDoor:
        """Add a door copying the active door's measurements.

        The new door becomes active.
        """
        if name is None or not name.strip():
            name = f"Door {len(self._doors) + 1}"
        door = SavedDoor(id=_new_id(), name=name.strip(), config=self.active.config)
        self._doors[door.id] = door
        self._active_id = door.id
        logger.debug(f"Added door '{door.name}' ({door.id})")
        return door

    def remove(self, door_id: str) -> None:
        """Remove a door.

        Removing the active door activates the first remaining door.

        Raises:
            DoorNotFoundError: If the id is unknown.
            RegistryError: If this is the last door.
        """
        self.get(door_id)
        if len(self._doors) <= 1:
            raise RegistryError("Cannot remove the last door")
        del self._doors[door_id]
        if self._active_id == door_id:
            self._active_id = next(iter(self._doors))
        logger.debug(f"Removed door {door_id}")

    def rename(self, door_id: str, name: str) -> SavedDoor:
        """Rename a door. Blank names leave the door unchanged."""
        door = self.get(door_id)
        if not name.strip():
            return door
        renamed = replace(door, name=name.strip())
        self._doors[door_id] = renamed
        return renamed

    def update(self, door_id: str, field_name: str, value: Any) -> SavedDoor:
        """Replace a single measurement of a door.

        Raises:
            DoorNotFoundError: If the id is unknown.
            RegistryError: If ``field_name`` is not a DoorConfig field.
        """
        door = self.get(door_id)
        if field_name not in DoorConfig.field_names():
            raise RegistryError(f"Unknown door field: {field_name}")
        updated = replace(door, config=door.config.with_changes(**{field_name: value}))
        self._doors[door_id] = updated
        return updated

    def replace_config(self, door_id: str, config: DoorConfig) -> SavedDoor:
        door = self.get(door_id)
        updated = replace(door, config=config)
        self._doors[door_id] = updated
        return updated

    def result(self, door_id: str) -> CutResult:
        """Compute a fresh cut list for one door."""
        return compute_cut_result(self.get(door_id).config)

    def results(self) -> Iterator[tuple[SavedDoor, CutResult]]:
        """Compute a fresh cut list for every door, in order."""
        for door in self.doors:
            yield door, compute_cut_result(door.config)
