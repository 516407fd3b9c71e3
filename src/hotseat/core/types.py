"""Square type and coordinate helpers.

Board layout (row-major, black at the top):
    row 0 = black's back rank  (a8 ... h8)
    row 1 = black's pawns      (a7 ... h7)
    ...
    row 7 = white's back rank  (a1 ... h1)

Columns run from the a-file (col 0) to the h-file (col 7).
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8


class Square(NamedTuple):
    """A board cell addressed by ``(row, col)``, both in ``[0, 7]``."""

    row: int
    col: int

    def __str__(self) -> str:
        return square_name(self)


def is_on_board(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the 8x8 grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_name(sq: tuple[int, int]) -> str:
    """Human-readable name, e.g. (0, 0) → 'a8', (7, 4) → 'e1'."""
    row, col = sq
    return chr(ord("a") + col) + str(BOARD_SIZE - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e2' → Square(6, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))
