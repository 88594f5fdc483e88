"""Tests for the command-line driver."""

import pytest

from seabattle import cli
from seabattle.engine import Battlefield, Coordinate, Ship


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SEABATTLE_SIZE", "SEABATTLE_SHIPS_SCHEMA", "SEABATTLE_SEED"):
        monkeypatch.delenv(name, raising=False)


def test_format_battlefield() -> None:
    battlefield = Battlefield(3)
    battlefield.ships_collection.add(Ship(2, position=Coordinate(0, 0)))
    battlefield.mark_as_missed((2, 2))

    lines = cli.format_battlefield(battlefield).splitlines()
    assert lines[0].split() == ["0", "1", "2"]
    assert lines[1].split() == ["0", "|", "2", "2", "."]
    assert lines[3].split() == ["2", "|", ".", ".", "o"]


def test_main_arranges_fleet(
    capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    metric_calls: list[tuple[str, float, dict | None]] = []
    monkeypatch.setattr(
        cli,
        "record_metric",
        lambda name, value, attrs=None: metric_calls.append((name, value, attrs)),
    )

    exit_code = cli.main(["--size", "6", "--schema", "3:1,2:2", "--seed", "7"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert metric_calls == [
        ("seabattle_cli_arrangements_total", 1, {"size": 6, "ships": 3, "valid": True})
    ]
    assert "3 ships on a 6x6 board: valid arrangement" in output
    grid = output.splitlines()[1:7]
    cells = [symbol for line in grid for symbol in line.split("|")[1].split()]
    assert cells.count("3") == 3
    assert cells.count("2") == 4


@pytest.mark.parametrize(
    "argv",
    [
        ["--schema", "oops"],
        ["--size", "2", "--schema", "2:3"],
        ["--size", "3", "--schema", "4:1"],
    ],
)
def test_main_rejects_bad_input(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)
    assert excinfo.value.code == 2
