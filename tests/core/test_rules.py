"""Tests for the rule policies."""

from hotseat.core.board import Board
from hotseat.core.enums import Color
from hotseat.core.move import Move
from hotseat.core.notation import board_from_placement
from hotseat.core.rules import Rules
from hotseat.core.types import Square


class TestRulePolicies:
    def test_every_move_is_valid(self) -> None:
        # White king walks next to the black rook: still accepted.
        board = board_from_placement("8/8/8/8/8/8/3r4/4K3")
        move = Move(Square(7, 4), Square(7, 3))
        assert Rules.is_valid_move(board, move, Color.WHITE) is True

    def test_checkmate_is_never_reported(self) -> None:
        # Fool's mate final position, white to move.
        board = board_from_placement("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR")
        assert Rules.is_checkmate(board, Color.WHITE) is False
        assert Rules.is_checkmate(Board.initial(), Color.BLACK) is False

    def test_missing_king_is_not_checkmate(self) -> None:
        assert Rules.is_checkmate(Board(), Color.WHITE) is False
