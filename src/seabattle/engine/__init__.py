"""Battlefield placement engine."""

from .battlefield import Battlefield
from .events import EventEmitter
from .field import Field, Marker
from .placement import PlacementStrategy, RandomPlacementStrategy
from .ship import Coordinate, Ship, as_coordinate
from .ships_collection import ShipsCollection

__all__ = [
    "Battlefield",
    "Coordinate",
    "EventEmitter",
    "Field",
    "Marker",
    "PlacementStrategy",
    "RandomPlacementStrategy",
    "Ship",
    "ShipsCollection",
    "as_coordinate",
]
