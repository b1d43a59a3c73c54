"""Square value and coordinate helpers.

Board layout (row-major, Black at the top):
    row 0 = rank 8 (a8 .. h8)
    row 7 = rank 1 (a1 .. h1)
    col 0 = a-file, col 7 = h-file
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

_FILES = "abcdefgh"
_RANKS = "12345678"


class Square(NamedTuple):
    """A (row, col) board coordinate, both in 0-7."""

    row: int
    col: int

    def __str__(self) -> str:
        return square_name(self)


def is_valid_square(row: int, col: int) -> bool:
    """Check whether (row, col) addresses a board square."""
    return 0 <= row < 8 and 0 <= col < 8


def all_squares() -> Iterator[Square]:
    """All 64 squares in row-major order."""
    for row in range(8):
        for col in range(8):
            yield Square(row, col)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. Square(6, 4) → 'e2'."""
    return _FILES[sq.col] + str(8 - sq.row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e2' → Square(6, 4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(8 - int(name[1]), _FILES.index(name[0]))
