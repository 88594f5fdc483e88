"""Ship domain model for the battlefield engine."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Tuple, Union

_next_ship_id = itertools.count(1)


def next_ship_id() -> int:
    """Return a process-wide unique ship id, starting from 1 and never repeated."""
    return next(_next_ship_id)


@dataclass(frozen=True)
class Coordinate:
    """Immutable battlefield coordinate."""

    x: int
    y: int


PositionLike = Union[Coordinate, Tuple[int, int]]


def as_coordinate(position: PositionLike) -> Coordinate:
    """Normalise an ``(x, y)`` pair into a :class:`Coordinate`.

    Components must already be integers; nothing is rounded or truncated.
    """
    if isinstance(position, Coordinate):
        return position
    x, y = position
    for value in (x, y):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Coordinates must be integers, got {position!r}.")
    return Coordinate(x, y)


@dataclass(eq=False)
class Ship:
    """A fleet entity occupying ``length`` contiguous cells.

    ``position`` is the head cell, ``None`` while the ship is unplaced.
    Horizontal ships extend along +x, rotated ships along +y. Position and
    orientation are meant to be changed through ``Battlefield.move_ship`` so
    the field index stays consistent.
    """

    length: int
    position: Coordinate | None = None
    is_rotated: bool = False
    is_collision: bool = False
    id: int = field(default_factory=next_ship_id)

    def __post_init__(self) -> None:
        if self.length < 1:
            raise ValueError("Ship length must be a positive integer.")
        if self.position is not None:
            self.position = as_coordinate(self.position)

    @property
    def coordinates(self) -> list[Coordinate]:
        return self.get_coordinates()

    @property
    def tail(self) -> Coordinate | None:
        """Return the last occupied cell, ``None`` when unplaced."""
        coords = self.get_coordinates()
        return coords[-1] if coords else None

    def get_coordinates(self) -> list[Coordinate]:
        """Return the ordered cells occupied by the ship (empty when unplaced)."""
        if self.position is None:
            return []
        x, y = self.position.x, self.position.y
        if self.is_rotated:
            return [Coordinate(x, y + offset) for offset in range(self.length)]
        return [Coordinate(x + offset, y) for offset in range(self.length)]

    def has_position(self) -> bool:
        return self.position is not None

    def rotate(self) -> None:
        """Flip orientation without touching the head position."""
        self.is_rotated = not self.is_rotated

    def reset(self) -> None:
        self.position = None
        self.is_rotated = False
        self.is_collision = False
