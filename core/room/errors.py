# core/room/errors.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any

# Returned to the caller, never raised.
@dataclass(frozen=True)
class RoomError:
    value: Any = None

    @property
    def message(self) -> str:
        return "Error"

    def __str__(self) -> str:
        return self.message

@dataclass(frozen=True)
class InvalidCapacityError(RoomError):
    """Capacity was not a non-negative integer; no room was created."""

    @property
    def message(self) -> str:
        return "Error: Parameter 'capacity' must be a positive integer"

@dataclass(frozen=True)
class InvalidItemError(RoomError):
    """Zombie was not a non-empty string; the room is left untouched."""

    @property
    def message(self) -> str:
        return f'Error: Wrong format. No zombie was added to the room since you tried to add "{self.value}".'
