"""Single battlefield cell: its occupants and shot marker."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from .ship import Coordinate, Ship


class Marker(Enum):
    """Shot marker recorded on a field."""

    NONE = "none"
    MISSED = "missed"
    HIT = "hit"


class Field:
    """Occupancy and marker state of one coordinate.

    Several ships may share a field; overlap is reported by validation,
    not prevented here.
    """

    def __init__(self, position: Coordinate) -> None:
        self.position = position
        self.marker = Marker.NONE
        self._ships: dict[int, Ship] = {}

    def __repr__(self) -> str:
        return f"Field(id={self.id!r}, ships={list(self._ships)}, marker={self.marker.name})"

    @property
    def id(self) -> str:
        return field_id(self.position)

    @property
    def ships(self) -> list[Ship]:
        return list(self._ships.values())

    @property
    def length(self) -> int:
        return len(self._ships)

    @property
    def is_marked(self) -> bool:
        return self.marker is not Marker.NONE

    def __len__(self) -> int:
        return len(self._ships)

    def __iter__(self) -> Iterator[Ship]:
        return iter(tuple(self._ships.values()))

    def add_ship(self, ship: Ship) -> None:
        self._ships.setdefault(ship.id, ship)

    def remove_ship(self, ship_id: int) -> None:
        self._ships.pop(ship_id, None)

    def get_ship(self, ship_id: int) -> Ship | None:
        return self._ships.get(ship_id)

    def has_ship(self, ship_id: int) -> bool:
        return ship_id in self._ships

    def mark_as_missed(self) -> None:
        self.marker = Marker.MISSED

    def mark_as_hit(self) -> None:
        self.marker = Marker.HIT


def field_id(position: Coordinate) -> str:
    """Return the canonical ``"{x}x{y}"`` id of a coordinate."""
    return f"{position.x}x{position.y}"
