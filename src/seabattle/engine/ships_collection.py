"""Ordered, observable fleet of ships."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from .events import EventEmitter, Listener
from .ship import Ship

ShipsSchema = Mapping[int, int]


class ShipsCollection:
    """Insertion-ordered ships, unique by id.

    Emits ``add`` and ``remove`` with the affected ship.
    """

    def __init__(self, ships: Iterable[Ship] = ()) -> None:
        self._ships: dict[int, Ship] = {}
        self.events = EventEmitter()
        self.add(ships)

    def __len__(self) -> int:
        return len(self._ships)

    def __iter__(self) -> Iterator[Ship]:
        return iter(tuple(self._ships.values()))

    def __contains__(self, ship: object) -> bool:
        return isinstance(ship, Ship) and self._ships.get(ship.id) is ship

    def __repr__(self) -> str:
        return f"ShipsCollection({[ship.length for ship in self._ships.values()]})"

    def on(self, event_name: str, listener: Listener) -> Listener:
        return self.events.on(event_name, listener)

    def off(self, event_name: str, listener: Listener) -> None:
        self.events.off(event_name, listener)

    def add(self, ships: Ship | Iterable[Ship]) -> None:
        """Append one ship or many; ships already present are skipped."""
        if isinstance(ships, Ship):
            ships = (ships,)
        for ship in ships:
            if ship.id in self._ships:
                continue
            self._ships[ship.id] = ship
            self.events.fire("add", ship)

    def remove(self, ship: Ship | int) -> Ship | None:
        ship_id = ship if isinstance(ship, int) else ship.id
        removed = self._ships.pop(ship_id, None)
        if removed is not None:
            self.events.fire("remove", removed)
        return removed

    def get(self, ship_id: int) -> Ship | None:
        return self._ships.get(ship_id)

    def get_reversed(self) -> Iterator[Ship]:
        """Iterate from the last added ship to the first."""
        return reversed(list(self._ships.values()))

    @staticmethod
    def create_ships_from_schema(schema: ShipsSchema) -> list[Ship]:
        """Create ``count`` unplaced ships per length, in ascending length order."""
        ships: list[Ship] = []
        for length in sorted(schema):
            ships.extend(Ship(length) for _ in range(schema[length]))
        return ships
