"""Battlefield: the cell index and the ship arrangement API."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from seabattle.telemetry import get_meter, get_tracer

from .events import EventEmitter, Listener
from .field import Field, Marker
from .placement import PlacementStrategy, RandomPlacementStrategy
from .ship import Coordinate, PositionLike, Ship, as_coordinate
from .ships_collection import ShipsCollection, ShipsSchema

logger = logging.getLogger(__name__)
tracer = get_tracer("seabattle.engine.battlefield")
meter = get_meter("seabattle.engine.battlefield")

MOVE_COUNTER = meter.create_counter(
    "seabattle_engine_ship_moves",
    unit="1",
    description="Number of ship moves applied to a battlefield",
)

MARKER_COUNTER = meter.create_counter(
    "seabattle_engine_markers",
    unit="1",
    description="Markers placed on battlefield fields",
)

class Battlefield:
    """Stores the ships placed on a ``size`` x ``size`` grid and arranges them.

    Fields are kept in a sparse index keyed by coordinate. A field exists
    while at least one ship occupies it or once it carries a marker.

    Events (see :meth:`on`): ``shipMoved(ship)``, ``hit(position)``,
    ``missed(position)`` and ``change:is_locked(value, old_value)``.
    """

    def __init__(
        self,
        size: int,
        ships_schema: ShipsSchema | None = None,
        placement_strategy: PlacementStrategy | None = None,
    ) -> None:
        if size < 1:
            raise ValueError("Battlefield size must be a positive integer.")
        self.size = size
        self.ships_schema: dict[int, int] = dict(ships_schema or {})
        self.placement_strategy = placement_strategy or RandomPlacementStrategy()
        self.events = EventEmitter()
        self._is_locked = False
        self._fields: dict[Coordinate, Field] = {}

        self.ships_collection = ShipsCollection()
        self.ships_collection.on("add", self._on_ship_added)
        self.ships_collection.on("remove", self._detach_ship)

    def __repr__(self) -> str:
        return (
            f"Battlefield(size={self.size}, ships={len(self.ships_collection)}, "
            f"fields={len(self._fields)}, is_locked={self._is_locked})"
        )

    def __iter__(self) -> Iterator[Field]:
        return iter(tuple(self._fields.values()))

    def __len__(self) -> int:
        return len(self._fields)

    @property
    def is_locked(self) -> bool:
        """When ``True`` every placement operation is a no-op."""
        return self._is_locked

    @is_locked.setter
    def is_locked(self, value: bool) -> None:
        old_value = self._is_locked
        self._is_locked = bool(value)
        if old_value != self._is_locked:
            self.events.fire("change:is_locked", self._is_locked, old_value)

    def on(self, event_name: str, listener: Listener) -> Listener:
        return self.events.on(event_name, listener)

    def off(self, event_name: str, listener: Listener) -> None:
        self.events.off(event_name, listener)

    # ------------------------------------------------------------------
    # Fields and markers
    # ------------------------------------------------------------------
    def get_field(self, position: PositionLike) -> Field | None:
        return self._fields.get(as_coordinate(position))

    def _get_field_or_create(self, position: PositionLike) -> Field:
        coord = as_coordinate(position)
        field = self._fields.get(coord)
        if field is None:
            field = Field(coord)
            self._fields[coord] = field
        return field

    def mark_as(self, position: PositionLike, kind: Marker | str) -> None:
        """Mark a field as ``missed`` or ``hit``."""
        marker = kind if isinstance(kind, Marker) else Marker(kind)
        if marker is Marker.MISSED:
            self.mark_as_missed(position)
        elif marker is Marker.HIT:
            self.mark_as_hit(position)
        else:
            raise ValueError(f"Unsupported marker: {marker.value!r}")

    def mark_as_missed(self, position: PositionLike) -> None:
        self._mark(position, Marker.MISSED)

    def mark_as_hit(self, position: PositionLike) -> None:
        self._mark(position, Marker.HIT)

    def _mark(self, position: PositionLike, marker: Marker) -> None:
        coord = as_coordinate(position)
        with tracer.start_as_current_span(f"battlefield.mark_as_{marker.value}") as span:
            span.set_attribute("field.x", coord.x)
            span.set_attribute("field.y", coord.y)
            field = self._get_field_or_create(coord)
            if marker is Marker.HIT:
                field.mark_as_hit()
            else:
                field.mark_as_missed()
            MARKER_COUNTER.add(1, attributes={"marker": marker.value})
            logger.info(
                "field_marked",
                extra={"x": coord.x, "y": coord.y, "marker": marker.value, "occupants": len(field)},
            )
            self.events.fire(marker.value, coord)

    # ------------------------------------------------------------------
    # Ship placement
    # ------------------------------------------------------------------
    def move_ship(
        self, ship: Ship, position: PositionLike, is_rotated: bool | None = None
    ) -> None:
        """Place ``ship`` with its head at ``position``.

        The head is clamped so the ship stays inside the board along its own
        axis; the other axis is left untouched and checked by
        :meth:`is_ship_in_bound`. Overlapping other ships is allowed here and
        reported by :meth:`validate_ship_collision`.
        """
        if self._is_locked:
            return

        if is_rotated is None:
            is_rotated = ship.is_rotated

        coord = as_coordinate(position)
        max_head = self.size - ship.length
        x, y = coord.x, coord.y
        if is_rotated:
            y = min(max(y, 0), max_head)
        else:
            x = min(max(x, 0), max_head)

        self._detach_ship(ship)

        ship.is_rotated = bool(is_rotated)
        ship.position = Coordinate(x, y)

        for cell in ship.get_coordinates():
            self._get_field_or_create(cell).add_ship(ship)

        MOVE_COUNTER.add(1, attributes={"rotated": ship.is_rotated})
        logger.debug(
            "ship_moved",
            extra={"ship_id": ship.id, "length": ship.length, "x": x, "y": y, "rotated": ship.is_rotated},
        )
        self.events.fire("shipMoved", ship)

    def rotate_ship(self, ship: Ship) -> None:
        """Flip the orientation of a placed ship, re-clamping its head."""
        if ship.position is None:
            return
        self.move_ship(ship, ship.position, not ship.is_rotated)

    def _detach_ship(self, ship: Ship) -> None:
        """Unregister ``ship`` from its current cells, pruning empty unmarked fields."""
        for cell in ship.get_coordinates():
            field = self._fields.get(cell)
            if field is None or not field.has_ship(ship.id):
                continue
            field.remove_ship(ship.id)
            if not len(field) and not field.is_marked:
                del self._fields[cell]

    def _on_ship_added(self, ship: Ship) -> None:
        if ship.has_position():
            self.move_ship(ship, ship.position, ship.is_rotated)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def is_ship_in_bound(self, ship: Ship) -> bool:
        """Return ``True`` if neither end of the ship sticks out of the board."""
        head, tail = ship.position, ship.tail
        if head is None or tail is None:
            return False
        return 0 <= head.x and tail.x < self.size and 0 <= head.y and tail.y < self.size

    def validate_ship_collision(self, ship: Ship) -> bool:
        """Flag every ship sharing a field with ``ship`` and report ``ship.is_collision``.

        Flags are only ever raised here. Ships that share no field with
        ``ship`` keep whatever flag earlier checks gave them.
        """
        for cell in ship.get_coordinates():
            field = self._fields.get(cell)
            if field is None or len(field) < 2:
                continue
            for occupant in field:
                occupant.is_collision = True
        return ship.is_collision

    def check_ship_collision(self, ship: Ship) -> bool:
        """Return ``True`` if the ship is out of bounds or shares a field, without flagging."""
        if not self.is_ship_in_bound(ship):
            return True
        for cell in ship.get_coordinates():
            field = self._fields.get(cell)
            if field is not None and len(field) > 1:
                return True
        return False

    def validate_ships(self, ships: Iterable[Ship] | None = None) -> bool:
        """Check that every ship is in bound and not flagged as colliding.

        Defaults to the whole fleet.
        """
        ships = list(self.ships_collection if ships is None else ships)
        with tracer.start_as_current_span("battlefield.validate_ships") as span:
            valid = all(not ship.is_collision and self.is_ship_in_bound(ship) for ship in ships)
            span.set_attribute("ships.count", len(ships))
            span.set_attribute("ships.valid", valid)
            return valid

    # ------------------------------------------------------------------
    # Whole-board operations
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Clear every field and return all ships to the unplaced state."""
        self._fields.clear()
        for ship in self.ships_collection:
            ship.reset()

    def random_placement(self) -> None:
        """Arrange the whole fleet with the configured placement strategy."""
        self.placement_strategy.arrange(self)

    @staticmethod
    def get_position_at_the_top_of(position: PositionLike) -> Coordinate:
        coord = as_coordinate(position)
        return Coordinate(coord.x, coord.y - 1)

    @staticmethod
    def get_position_at_the_right_of(position: PositionLike) -> Coordinate:
        coord = as_coordinate(position)
        return Coordinate(coord.x + 1, coord.y)

    @staticmethod
    def get_position_at_the_bottom_of(position: PositionLike) -> Coordinate:
        coord = as_coordinate(position)
        return Coordinate(coord.x, coord.y + 1)

    @staticmethod
    def get_position_at_the_left_of(position: PositionLike) -> Coordinate:
        coord = as_coordinate(position)
        return Coordinate(coord.x - 1, coord.y)

    @classmethod
    def create_with_ships(
        cls,
        size: int,
        ships_schema: ShipsSchema,
        placement_strategy: PlacementStrategy | None = None,
    ) -> Battlefield:
        """Create a battlefield whose collection holds the fleet described by ``ships_schema``."""
        battlefield = cls(size, ships_schema, placement_strategy=placement_strategy)
        battlefield.ships_collection.add(ShipsCollection.create_ships_from_schema(ships_schema))
        return battlefield
