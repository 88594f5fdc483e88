"""Tests for Ship domain logic."""

import pytest

from seabattle.engine.ship import Coordinate, Ship


def test_ship_coordinates_horizontal() -> None:
    ship = Ship(2, position=Coordinate(1, 1))
    assert ship.coordinates == [Coordinate(1, 1), Coordinate(2, 1)]
    assert ship.tail == Coordinate(2, 1)


def test_ship_coordinates_vertical() -> None:
    ship = Ship(3, position=Coordinate(4, 0), is_rotated=True)
    assert ship.get_coordinates() == [Coordinate(4, 0), Coordinate(4, 1), Coordinate(4, 2)]
    assert ship.tail == Coordinate(4, 2)


def test_unplaced_ship_has_no_coordinates() -> None:
    ship = Ship(4)
    assert not ship.has_position()
    assert ship.coordinates == []
    assert ship.tail is None


def test_rotate_keeps_position() -> None:
    ship = Ship(2, position=Coordinate(3, 3))
    ship.rotate()
    assert ship.is_rotated is True
    assert ship.position == Coordinate(3, 3)
    ship.rotate()
    assert ship.is_rotated is False


def test_reset_returns_ship_to_unplaced_state() -> None:
    ship = Ship(2, position=Coordinate(0, 0), is_rotated=True, is_collision=True)
    ship.reset()
    assert ship.position is None
    assert ship.is_rotated is False
    assert ship.is_collision is False


def test_ship_ids_are_unique() -> None:
    ids = {Ship(1).id for _ in range(50)}
    assert len(ids) == 50
    assert all(isinstance(ship_id, int) and ship_id >= 1 for ship_id in ids)


def test_ship_rejects_non_positive_length() -> None:
    with pytest.raises(ValueError):
        Ship(0)
