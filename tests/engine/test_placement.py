"""Tests for automatic fleet arrangement."""

from collections.abc import Iterator

from seabattle.engine.battlefield import Battlefield
from seabattle.engine.placement import RandomPlacementStrategy
from seabattle.engine.ship import Coordinate

CLASSIC_SCHEMA = {1: 4, 2: 3, 3: 2, 4: 1}


def scripted_source(values: list[int]):
    draws: Iterator[int] = iter(values)
    calls: list[tuple[int, int]] = []

    def source(low: int, high: int) -> int:
        calls.append((low, high))
        return next(draws)

    return source, calls


def test_random_placement_populates_fleet_without_overlap() -> None:
    battlefield = Battlefield.create_with_ships(
        10, CLASSIC_SCHEMA, placement_strategy=RandomPlacementStrategy(seed=123)
    )
    battlefield.random_placement()

    ships = list(battlefield.ships_collection)
    assert len(ships) == 10
    assert battlefield.validate_ships()
    coords = [coord for ship in ships for coord in ship.coordinates]
    assert len(coords) == len(set(coords)), "Ships should not overlap"
    assert all(len(field) == 1 for field in battlefield)
    assert len(battlefield) == sum(length * count for length, count in CLASSIC_SCHEMA.items())


def test_random_placement_is_reproducible_with_seed() -> None:
    layouts = []
    for _ in range(2):
        battlefield = Battlefield.create_with_ships(
            8, {2: 2, 3: 1}, placement_strategy=RandomPlacementStrategy(seed=7)
        )
        battlefield.random_placement()
        layouts.append([ship.coordinates for ship in battlefield.ships_collection])
    assert layouts[0] == layouts[1]


def test_random_placement_places_largest_ships_first_and_retries() -> None:
    # (is_rotated, x, y) triples: the 3-ship lands first, the 2-ship's first
    # draw overlaps it and is rejected.
    source, calls = scripted_source([0, 4, 0, 0, 3, 0, 1, 0, 0])
    battlefield = Battlefield.create_with_ships(
        5, {2: 1, 3: 1}, placement_strategy=RandomPlacementStrategy(random_source=source)
    )
    small, large = list(battlefield.ships_collection)

    battlefield.random_placement()

    assert large.coordinates == [Coordinate(2, 0), Coordinate(3, 0), Coordinate(4, 0)]
    assert small.is_rotated is True
    assert small.coordinates == [Coordinate(0, 0), Coordinate(0, 1)]
    assert calls == [(0, 1), (0, 4), (0, 4)] * 3
    assert large.is_collision is False
    assert battlefield.validate_ships()
    assert battlefield.get_field((3, 0)).ships == [large]


def test_random_placement_rearranges_existing_board() -> None:
    battlefield = Battlefield.create_with_ships(
        6, {1: 2, 2: 1}, placement_strategy=RandomPlacementStrategy(seed=1)
    )
    first = list(battlefield.ships_collection)[0]
    battlefield.move_ship(first, (0, 0))
    battlefield.mark_as_missed((5, 5))
    first.is_collision = True

    battlefield.random_placement()

    assert battlefield.validate_ships()
    assert all(ship.has_position() for ship in battlefield.ships_collection)
    field = battlefield.get_field((5, 5))
    assert field is None or len(field) == 1


def test_random_placement_skipped_while_locked() -> None:
    battlefield = Battlefield.create_with_ships(5, {2: 1})
    ship = list(battlefield.ships_collection)[0]
    battlefield.move_ship(ship, (1, 1))
    battlefield.is_locked = True

    battlefield.random_placement()

    assert ship.position == Coordinate(1, 1)
    assert len(battlefield) == 2


def test_custom_strategy_is_used() -> None:
    arranged: list[Battlefield] = []

    class RecordingStrategy:
        def arrange(self, battlefield: Battlefield) -> None:
            arranged.append(battlefield)

    battlefield = Battlefield(4, placement_strategy=RecordingStrategy())
    battlefield.random_placement()
    assert arranged == [battlefield]
