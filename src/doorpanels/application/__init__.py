"""Application layer - configuration, door management and templates."""

from .door_registry import (
    DoorNotFoundError,
    DoorRegistry,
    RegistryError,
    SavedDoor,
)

__all__ = [
    "DoorNotFoundError",
    "DoorRegistry",
    "RegistryError",
    "SavedDoor",
]
