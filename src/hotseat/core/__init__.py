"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from hotseat.core import Board, MoveGenerator, Square

    board = Board.initial()
    gen = MoveGenerator(board)
    print(gen.destinations(Square(6, 4)))   # [Square(row=5, col=4), Square(row=4, col=4)]
"""

from hotseat.core.board import Board
from hotseat.core.enums import Color, PieceType
from hotseat.core.move import Move
from hotseat.core.move_generator import MoveGenerator
from hotseat.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from hotseat.core.piece import Piece
from hotseat.core.rules import Rules
from hotseat.core.types import (
    BOARD_SIZE,
    Square,
    is_on_board,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
