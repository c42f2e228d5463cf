"""Solutions to short programming-contest problems as plain functions."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "cli",
    "decisions",
    "graphs",
    "ingredients",
    "paintball",
    "strings",
]