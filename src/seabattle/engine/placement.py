"""Automatic fleet arrangement strategies."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from seabattle.telemetry import get_meter, get_tracer

from .ship import Coordinate

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .battlefield import Battlefield

logger = logging.getLogger(__name__)
tracer = get_tracer("seabattle.engine.placement")
meter = get_meter("seabattle.engine.placement")

ATTEMPT_COUNTER = meter.create_counter(
    "seabattle_engine_placement_attempts",
    unit="1",
    description="Random draws needed to place ships",
)

RandomSource = Callable[[int, int], int]
"""Returns a uniformly distributed integer in ``[min, max]`` inclusive."""


class PlacementStrategy(Protocol):
    def arrange(self, battlefield: Battlefield) -> None: ...


class RandomPlacementStrategy:
    """Rejection sampling: re-roll each ship until it overlaps nothing.

    Larger ships go first. There is no retry limit, so a fleet that cannot
    fit on the board never finishes.
    """

    def __init__(self, random_source: RandomSource | None = None, seed: int | None = None) -> None:
        self.random_source: RandomSource = random_source or random.Random(seed).randint

    def arrange(self, battlefield: Battlefield) -> None:
        with tracer.start_as_current_span("placement.random_arrange") as span:
            span.set_attribute("battlefield.size", battlefield.size)
            span.set_attribute("fleet.size", len(battlefield.ships_collection))
            if battlefield.is_locked:
                logger.warning("random_placement_skipped", extra={"reason": "locked"})
                return

            battlefield.reset()
            max_coord = battlefield.size - 1
            total_attempts = 0
            for ship in battlefield.ships_collection.get_reversed():
                attempts = 0
                placed = False
                while not placed:
                    is_rotated = bool(self.random_source(0, 1))
                    x = self.random_source(0, max_coord)
                    y = self.random_source(0, max_coord)
                    battlefield.move_ship(ship, Coordinate(x, y), is_rotated)
                    attempts += 1
                    placed = not battlefield.check_ship_collision(ship)
                total_attempts += attempts
                ATTEMPT_COUNTER.add(attempts, attributes={"length": ship.length})
                logger.debug(
                    "random_ship_placed",
                    extra={"ship_id": ship.id, "length": ship.length, "attempts": attempts},
                )
            span.set_attribute("placement.attempts", total_attempts)
            logger.info(
                "random_placement_finished",
                extra={"ships": len(battlefield.ships_collection), "attempts": total_attempts},
            )
