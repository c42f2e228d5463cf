"""Solutions to small problems that come down to arithmetic on the input."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def betting(percent: float) -> tuple[float, float]:
    """Return the payout ratios for option one (``percent`` of bets) and option two."""
    return 100 / percent, 100 / (100 - percent)


def carrots(contestants: Iterable[str], problems: int) -> int:
    """Return the number of carrots earned: one per solved problem.

    The contestants' descriptions are read but do not change the answer.
    """
    for description in contestants:
        if not isinstance(description, str):
            raise TypeError(f"contestant description {description!r} is not a string")
    return problems


def gcvwr(gross: int, tare: int, weights: Iterable[int]) -> float:
    """Return the towing capacity left once items are loaded until 90% of the limit is passed."""
    limit = 0.9 * (gross - tare)
    loaded = 0
    for weight in weights:
        if loaded > limit:
            break
        loaded += weight
    return limit - loaded


def jackolantern(n: int, t: int, m: int) -> int:
    """Return the number of distinct jack-o'-lanterns from the given part counts."""
    return n * t * m


def jumbo_javelin(lengths: Sequence[int]) -> int:
    """Return the length of rods fused end to end, losing one unit per joint."""
    return sum(lengths) - (len(lengths) - 1)


def nsum(numbers: Iterable[int]) -> int:
    """Return the sum of the numbers."""
    return sum(numbers)


def planina(iterations: int) -> int:
    """Return the number of points after the given midpoint-displacement iterations."""
    side = 2**iterations + 1
    return side * side


def pot(terms: Iterable[str]) -> int:
    """Sum terms whose last digit was meant to be an exponent of the rest."""
    total = 0
    for term in terms:
        if len(term) < 2:
            raise ValueError(f"term {term!r} needs a base and an exponent digit")
        exponent = int(term[-1])
        total += int(term[:-1]) ** exponent
    return total


def qaly(periods: Iterable[tuple[float, float]]) -> float:
    """Return quality-adjusted life years: the sum of quality times years."""
    return sum(quality * years for quality, years in periods)


def r2(r1: int, mean: int) -> int:
    """Return the second number given the first and the mean of both."""
    return 2 * mean - r1


def rating_bounds(n: int, ratings: Sequence[int]) -> tuple[float, float]:
    """Return the lowest and highest possible average rating over ``n`` judges."""
    missing = n - len(ratings)
    total = sum(ratings)
    return (missing * -3 + total) / n, (missing * 3 + total) / n


def shattered_cake(width: int, pieces: Iterable[tuple[int, int]]) -> int:
    """Return the length of the cake whose pieces (width, length) cover it at ``width``."""
    area = sum(w * length for w, length in pieces)
    return area // width


def tarifa(allowance: int, usage: Iterable[int]) -> int:
    """Return the megabytes available next month after carrying over unused allowance."""
    return sum(allowance - used for used in usage) + allowance


def two_sum(a: int, b: int) -> int:
    """Return the sum of two numbers."""
    return a + b


def triangle_area(height: float, base: float) -> float:
    """Return the area of a triangle."""
    return height * base / 2


def sort_two(a: int, b: int) -> tuple[int, int]:
    """Return the two numbers in ascending order."""
    return min(a, b), max(a, b)


def which_is_greater(a: int, b: int) -> int:
    """Return 1 if ``a`` is greater than ``b``, otherwise 0."""
    return int(a > b)


def spavanac(hour: int, minute: int) -> tuple[int, int]:
    """Return the time 45 minutes earlier on a 24-hour clock."""
    if hour == 0:
        hour = 24
    return divmod(hour * 60 + minute - 45, 60)


def stopwatch(presses: Sequence[int]) -> int | None:
    """Return seconds shown after the button presses, or None while it is still running."""
    if len(presses) % 2:
        return None
    starts = presses[::2]
    stops = presses[1::2]
    return sum(stop - start for start, stop in zip(starts, stops))


def digit_sum(x: int) -> int:
    """Return the sum of the decimal digits of ``x``, negative for negative ``x``."""
    sign = -1 if x < 0 else 1
    return sign * sum(int(digit) for digit in str(abs(x)))


def zamka(low: int, high: int, target: int) -> tuple[int, int]:
    """Return the smallest and largest numbers in [low, high] whose digits sum to ``target``."""
    matches = [value for value in range(low, high + 1) if digit_sum(value) == target]
    if not matches:
        raise ValueError(f"no number in [{low}, {high}] has digit sum {target}")
    return matches[0], matches[-1]