"""Solutions to small problems that work on words and strings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from string import ascii_uppercase

_UPPERCASE = frozenset(ascii_uppercase)
_INFORMATION_PREFIX = "555"


def autori(name: str) -> str:
    """Return the short form of a hyphenated name: its capital letters in order."""
    return "".join(ch for ch in name if ch in _UPPERCASE)


def digit_swap(digits: str) -> str:
    """Return the digits in reverse order."""
    return digits[::-1]


def echo(word: str) -> str:
    """Return the word said three times, separated by spaces."""
    return " ".join([word] * 3)


def finding_a(word: str) -> str | None:
    """Return the suffix of ``word`` starting at its first ``a``, or None if it has none."""
    index = word.find("a")
    if index < 0:
        return None
    return word[index:]


def fyi(number: str) -> int:
    """Return 1 if the phone number is a directory-information number (prefix 555), else 0."""
    prefix = number[: len(_INFORMATION_PREFIX)]
    return int(prefix == _INFORMATION_PREFIX)


def greetings(greeting: str) -> str:
    """Answer a greeting of the form ``he...y`` with twice as many ``e`` letters."""
    return "h" + "e" * ((len(greeting) - 2) * 2) + "y"


def pokechat(text: str, ids: str) -> str:
    """Decode a message given as three-digit, one-based positions into ``text``."""
    chunks = (ids[start:start + 3] for start in range(0, len(ids), 3))
    letters = []
    for chunk in chunks:
        position = int(chunk)
        if not 1 <= position <= len(text):
            raise IndexError(f"position {position} is outside the text")
        letters.append(text[position - 1])
    return "".join(letters)


def odd_echo(words: Iterable[str]) -> list[str]:
    """Return the words at the odd positions (first, third, ...)."""
    sequence: Sequence[str] = list(words)
    return list(sequence[::2])