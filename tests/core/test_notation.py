"""Tests for piece-placement text."""

import pytest

from hotseat.core.board import Board
from hotseat.core.enums import Color, PieceType
from hotseat.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from hotseat.core.piece import Piece


class TestPlacement:
    def test_starting_placement_matches_initial_board(self) -> None:
        assert board_from_placement(STARTING_PLACEMENT) == Board.initial()
        assert board_to_placement(Board.initial()) == STARTING_PLACEMENT

    def test_first_segment_is_row_zero(self) -> None:
        board = board_from_placement("k7/8/8/8/8/8/8/7K")
        assert board[0, 0] == Piece(Color.BLACK, PieceType.KING)
        assert board[7, 7] == Piece(Color.WHITE, PieceType.KING)

    def test_empty_runs_are_compressed(self) -> None:
        board = Board()
        board[3, 2] = Piece(Color.WHITE, PieceType.ROOK)
        assert board_to_placement(board) == "8/8/8/2R5/8/8/8/8"

    @pytest.mark.parametrize(
        "text",
        [
            "8/8/8/8/8/8/8",  # seven rows
            "9/8/8/8/8/8/8/8",  # bad digit
            "7/8/8/8/8/8/8/8",  # short row
            "ppppppppp/8/8/8/8/8/8/8",  # long row
            "8/8/8/8/8/8/8/7x",  # unknown piece
        ],
    )
    def test_invalid_placement_raises(self, text: str) -> None:
        with pytest.raises(ValueError):
            board_from_placement(text)
