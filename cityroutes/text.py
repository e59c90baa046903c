"""Parsing helpers for the plain-text input format."""

from __future__ import annotations

from typing import NamedTuple


class Triple(NamedTuple):
    """Two names and a number taken from one input line."""

    first: str
    second: str
    number: int


def _slice(text: str, start: int, end: int) -> str:
    """Return ``text[start:end]``, or an empty string when the bounds are not valid."""
    if start < 0 or start >= len(text) or end < start or end > len(text):
        return ""
    return text[start:end]


def to_int(text: str) -> int:
    """Fold the characters of ``text`` into a number as decimal digits.

    Each character contributes its offset from ``'0'``; no validation is done,
    and an empty string gives 0.
    """
    value = 0
    for char in text:
        value = value * 10 + (ord(char) - ord("0"))
    return value


def parse_triple(line: str) -> Triple:
    """Split ``"<name> <name> <number>"`` into its three parts."""
    first_space = line.find(" ")
    first = _slice(line, 0, first_space).replace(" ", "")
    rest = _slice(line, first_space + 1, len(line))
    second_space = rest.find(" ")
    second = _slice(rest, 0, second_space).replace(" ", "")
    number = to_int(_slice(rest, second_space + 1, len(rest)))
    return Triple(first, second, number)