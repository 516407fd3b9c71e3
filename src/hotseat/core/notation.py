"""Piece-placement text (the board field of FEN).

The first segment describes row 0 (black's back rank), the last one row 7.
"""

from __future__ import annotations

from hotseat.core.board import Board
from hotseat.core.piece import Piece
from hotseat.core.types import BOARD_SIZE

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(text: str) -> Board:
    """Parse placement text into a :class:`Board`."""
    rows = text.strip().split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 rows): {text!r}")

    board = Board()
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid placement digit {ch!r}: {text!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement row width: {text!r}")
                board[row, col] = Piece.from_char(ch)
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid placement row width: {text!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid placement row width: {text!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise *board* to placement text."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        parts: list[str] = []
        empty = 0
        for col in range(BOARD_SIZE):
            piece = board[row, col]
            if piece is None:
                empty += 1
                continue
            if empty:
                parts.append(str(empty))
                empty = 0
            parts.append(str(piece))
        if empty:
            parts.append(str(empty))
        rows.append("".join(parts))
    return "/".join(rows)
