"""Tests for single battlefield cells."""

from seabattle.engine.field import Field, Marker
from seabattle.engine.ship import Coordinate, Ship


def test_field_id_combines_coordinates() -> None:
    assert Field(Coordinate(3, 7)).id == "3x7"
    assert Field(Coordinate(37, 0)).id != Field(Coordinate(3, 70)).id


def test_add_ship_is_idempotent() -> None:
    field = Field(Coordinate(0, 0))
    ship = Ship(1)
    field.add_ship(ship)
    field.add_ship(ship)
    assert field.length == 1
    assert len(field) == 1
    assert field.get_ship(ship.id) is ship


def test_field_keeps_occupants_in_insertion_order() -> None:
    field = Field(Coordinate(0, 0))
    first, second = Ship(1), Ship(2)
    field.add_ship(first)
    field.add_ship(second)
    assert field.ships == [first, second]
    assert list(field) == [first, second]


def test_remove_ship_ignores_unknown_ids() -> None:
    field = Field(Coordinate(0, 0))
    ship = Ship(1)
    field.add_ship(ship)
    field.remove_ship(ship.id + 1000)
    assert field.has_ship(ship.id)
    field.remove_ship(ship.id)
    assert field.get_ship(ship.id) is None
    assert len(field) == 0


def test_markers_overwrite_each_other() -> None:
    field = Field(Coordinate(1, 1))
    assert field.marker is Marker.NONE
    assert not field.is_marked
    field.mark_as_hit()
    assert field.marker is Marker.HIT
    field.mark_as_missed()
    assert field.marker is Marker.MISSED
    assert field.is_marked
