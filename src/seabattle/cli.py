"""Command-line driver: arrange a fleet at random and print the battlefield."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from seabattle.config import BattlefieldConfig
from seabattle.engine import Battlefield, Coordinate, Marker
from seabattle.telemetry import configure_console_logging, init_telemetry, record_metric

logger = logging.getLogger(__name__)


def _cell_symbol(battlefield: Battlefield, coord: Coordinate) -> str:
    field = battlefield.get_field(coord)
    if field is None:
        return "."
    if field.marker is Marker.HIT:
        return "X"
    if field.marker is Marker.MISSED:
        return "o"
    if len(field) > 1:
        return "!"
    if len(field) == 1:
        length = field.ships[0].length
        return str(length) if length < 10 else "#"
    return "."


def format_battlefield(battlefield: Battlefield) -> str:
    """Render the grid with x growing to the right and y growing downwards."""
    header = "    " + " ".join(f"{x:>2}" for x in range(battlefield.size))
    rows = [header]
    for y in range(battlefield.size):
        symbols = [f"{_cell_symbol(battlefield, Coordinate(x, y)):>2}" for x in range(battlefield.size)]
        rows.append(f"{y:>2} |" + " ".join(symbols))
    return "\n".join(rows)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Arrange a fleet on a battlefield at random.")
    parser.add_argument("--size", type=int, default=None, help="Board size (default 10).")
    parser.add_argument(
        "--schema",
        default=None,
        help="Fleet as 'length:count' pairs, e.g. '4:1,3:2,2:3,1:4'.",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Optional RNG seed for reproducibility."
    )
    parser.add_argument(
        "--telemetry",
        action="store_true",
        help="Initialise OpenTelemetry exporters from the environment.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_console_logging(logging.DEBUG if args.verbose else logging.WARNING)
    if args.telemetry:
        init_telemetry()

    try:
        config = BattlefieldConfig.from_env(size=args.size, ships_schema=args.schema, seed=args.seed)
    except ValueError as exc:
        parser.error(str(exc))

    if config.occupied_cells > config.size * config.size:
        parser.error(
            f"The fleet needs {config.occupied_cells} cells but the board only has "
            f"{config.size * config.size}."
        )

    battlefield = config.build_battlefield()
    battlefield.random_placement()
    valid = battlefield.validate_ships()

    print(format_battlefield(battlefield))
    print(
        f"\n{len(battlefield.ships_collection)} ships on a {config.size}x{config.size} board: "
        f"{'valid' if valid else 'invalid'} arrangement"
    )
    record_metric(
        "seabattle_cli_arrangements_total",
        1,
        {"size": config.size, "ships": len(battlefield.ships_collection), "valid": valid},
    )
    logger.info("cli_arrangement", extra={"ships": len(battlefield.ships_collection), "valid": valid})
    return 0 if valid else 1


if __name__ == "__main__":
    raise SystemExit(main())
