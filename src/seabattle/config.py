"""Battlefield configuration."""

from __future__ import annotations

import os
from typing import Any, Dict

from pydantic import BaseModel, Field, PositiveInt, field_validator, model_validator

from seabattle.engine import Battlefield, RandomPlacementStrategy

DEFAULT_SHIPS_SCHEMA: dict[int, int] = {1: 4, 2: 3, 3: 2, 4: 1}


def parse_schema(text: str) -> dict[int, int]:
    """Parse ``"4:1,3:2"`` into ``{4: 1, 3: 2}``."""
    schema: dict[int, int] = {}
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        if ":" not in part:
            raise ValueError(f"Schema entries look like 'length:count', got {part!r}.")
        length_text, count_text = part.split(":", 1)
        try:
            length, count = int(length_text), int(count_text)
        except ValueError as exc:
            raise ValueError(f"Schema entry {part!r} must contain integers.") from exc
        schema[length] = schema.get(length, 0) + count
    if not schema:
        raise ValueError("Schema must describe at least one ship.")
    return schema


class BattlefieldConfig(BaseModel):
    """Board size, fleet composition and RNG seed."""

    size: PositiveInt = 10
    ships_schema: dict[PositiveInt, PositiveInt] = Field(
        default_factory=lambda: dict(DEFAULT_SHIPS_SCHEMA)
    )
    seed: int | None = None

    @field_validator("ships_schema", mode="before")
    @classmethod
    def _parse_schema_string(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_schema(value)
        return value

    @model_validator(mode="after")
    def _ships_fit_board(self) -> "BattlefieldConfig":
        too_long = sorted(length for length in self.ships_schema if length > self.size)
        if too_long:
            raise ValueError(f"Ships of length {too_long} do not fit a {self.size}x{self.size} board.")
        return self

    @classmethod
    def from_env(cls, **overrides: Any) -> "BattlefieldConfig":
        """Construct config from `SEABATTLE_SIZE`, `SEABATTLE_SHIPS_SCHEMA`, `SEABATTLE_SEED`."""
        data: Dict[str, Any] = {}
        env_fields = {
            "size": "SEABATTLE_SIZE",
            "ships_schema": "SEABATTLE_SHIPS_SCHEMA",
            "seed": "SEABATTLE_SEED",
        }
        for field, env_name in env_fields.items():
            value = os.getenv(env_name)
            if value is not None and value.strip():
                data[field] = value.strip()
        data.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**data)

    @property
    def occupied_cells(self) -> int:
        return sum(length * count for length, count in self.ships_schema.items())

    def build_battlefield(self) -> Battlefield:
        """Create a battlefield holding the configured fleet and a seeded random strategy."""
        return Battlefield.create_with_ships(
            self.size,
            self.ships_schema,
            placement_strategy=RandomPlacementStrategy(seed=self.seed),
        )
