"""Basic project scaffolding tests."""

import importlib


def test_package_importable() -> None:
    """Verify the top-level package is importable."""
    import seabattle  # noqa: F401  (import used to ensure availability)

    assert seabattle.__version__


def test_submodules_exist() -> None:
    modules = [
        "seabattle.engine",
        "seabattle.engine.battlefield",
        "seabattle.engine.placement",
        "seabattle.telemetry",
        "seabattle.config",
        "seabattle.cli",
    ]

    for module in modules:
        assert importlib.import_module(module) is not None
