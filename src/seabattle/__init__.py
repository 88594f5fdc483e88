"""Board-state engine for grid-based naval combat games."""

__version__ = "0.1.0"
