"""Predefined starting patterns for the automaton."""

from __future__ import annotations

from enum import Enum


class Pattern(Enum):
    """Known starting patterns."""

    SUN = "sun"


# One line per row, starting at y = 0. Each token is a live column or an
# inclusive run of live columns written as "first-last".
_SUN_ROWS = """\
8 10 12 14 24-26 36 38 40
9 11 13 23-26 37 39 41
10 12 14 22-27 38 40 42
11 13 23-26 39 41
12 14 22-27 38 40 42
8 10 12 14 21-28 36 38 40
9 11 13 21-28 37 39 41
10 12 14 20-28 31 33 35 37
11 13 21-28 32 34 36
17 19 21 24-26 29 31 33
18 20 22 24-26 28 30 32
19 21 23-26 29 31 33
20 22 24-26 28 30 32
21 23-26 29 31
22 24-26 28 30
8 10 12 14 22-27 36 38 40
9 11 13 22-26 37 39 41
10 12 14 22-27 38 40 42
11 13 23-26 39 41
12 14 22-27 38 40 42
8 10 12 14 21-28 36 38 40
9 11 13 21-28 37 39 41
10 12 14 22-28 31 33 35 37
11 13 23-26 32 34 36
12 14 22-27 38 40 42
8 10 12 14 24-26 36 38 40
9 11 13 23-26 37 39 41
10 12 14 22-27 38 40 42
11 13 23-26 39 41
12 14 22-27 38 40 42
17 19 21 24-26 29 31 33
18 20 22 24-26 28 30 32
4 6 8 10 19 21 23-26 38 40 42 44
5 7 9 23-26 39 41 43 45
6 8 23-26 40 42 44
7 41 43
42
"""


def _columns(token: str) -> range:
    first, _, last = token.partition("-")
    start = int(first)
    return range(start, int(last or first) + 1)


def _parse_rows(text: str) -> tuple[tuple[int, int], ...]:
    return tuple(
        (x, y)
        for y, line in enumerate(text.splitlines())
        for token in line.split()
        for x in _columns(token)
    )


_PATTERNS: dict[Pattern, tuple[tuple[int, int], ...]] = {
    Pattern.SUN: _parse_rows(_SUN_ROWS),
}


def pattern_coordinates(pattern: Pattern) -> list[tuple[int, int]]:
    """Return the (x, y) cells that are alive in ``pattern``."""
    return list(_PATTERNS[pattern])


def create_sun_pattern() -> tuple[Pattern, int, int]:
    """Return the sun pattern with its default placement offset."""
    return Pattern.SUN, 15, 15