"""Command-line entry point that greets the world."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

GREETING = "Hello World!"


def hello() -> str:
    """Return the greeting the program prints."""
    return GREETING


def _parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="katsolve",
        description="Print a greeting to standard output.",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting and return the exit status."""
    _parser().parse_args(argv)
    print(hello())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())