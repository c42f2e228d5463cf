"""Solutions to small problems that pick between a few fixed answers."""

from __future__ import annotations

import math
from collections.abc import Iterable

# Indexed by parity: even first, odd second.
_KNIGHT_PACKING_WINNERS = ("second", "first")
_TWO_STONES_WINNERS = ("Bob", "Alice")


def knight_packing(n: int) -> str:
    """Return which player wins knight packing on an ``n`` by ``n`` board."""
    return _KNIGHT_PACKING_WINNERS[n % 2]


def nasty_hacks(revenue: int, expected: int, cost: int) -> str:
    """Decide whether advertising pays off."""
    gain = expected - cost
    if gain > revenue:
        return "advertise"
    if gain < revenue:
        return "do not advertise"
    return "does not matter"


def oddity(x: int) -> str:
    """Describe whether ``x`` is odd or even."""
    return f"{x} is odd" if x % 2 else f"{x} is even"


def sibice(width: float, height: float, lengths: Iterable[int]) -> list[str]:
    """For each match length, say whether it fits in the box (DA) or not (NE)."""
    diagonal = math.hypot(width, height)
    return ["DA" if length <= diagonal else "NE" for length in lengths]


def two_stones(n: int) -> str:
    """Return the winner of the two-stones game with ``n`` stones."""
    return _TWO_STONES_WINNERS[n % 2]


def quadrant(x: int, y: int) -> int:
    """Return the quadrant of the point (x, y)."""
    if x > 0:
        return 1 if y > 0 else 4
    return 2 if y > 0 else 3


def time_loop(n: int) -> list[str]:
    """Return the numbered incantation lines from 1 to ``n``."""
    return [f"{i} Abracadabra" for i in range(1, n + 1)]


def count_to_ten() -> list[str]:
    """Return the numbers 1 to 10, each but the multiples of three followed by ``hi``."""
    return [f"{i} " if i % 3 == 0 else f"{i}  hi" for i in range(1, 11)]