"""Rule policies applied on top of the geometric move generator.

Both policies are placeholders for a real rules engine.  They are kept as
named, injectable functions so that check detection can be added later by
swapping one callable, without touching the generator or the game state.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hotseat.core.board import Board
    from hotseat.core.enums import Color
    from hotseat.core.move import Move

MoveFilter = Callable[["Board", "Move", "Color"], bool]
CheckmateRule = Callable[["Board", "Color"], bool]


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_valid_move(board: Board, move: Move, color: Color) -> bool:
        """Whether *move* by *color* is acceptable.

        Currently accepts every generated move: a move that leaves the
        mover's own king attacked is not rejected.
        """
        return True

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        """Whether *color* (the side to move) is checkmated.

        Currently always ``False``; the game never ends through play.
        """
        return False
