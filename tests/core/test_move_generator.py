"""Tests for the per-piece geometric move generator."""

from __future__ import annotations

import pytest

from hotseat.core.board import Board
from hotseat.core.enums import Color
from hotseat.core.move import Move
from hotseat.core.move_generator import MoveGenerator
from hotseat.core.notation import board_from_placement


def dests(board: Board, row: int, col: int) -> set[tuple[int, int]]:
    return set(MoveGenerator(board).destinations((row, col)))


# ── Starting position ────────────────────────────────────────────────────────


class TestStartingPosition:
    def test_white_has_twenty_moves(self) -> None:
        board = Board.initial()
        gen = MoveGenerator(board)
        total = sum(len(gen.destinations(sq)) for sq in board.all_pieces(Color.WHITE))
        assert total == 20

    def test_black_has_twenty_moves(self) -> None:
        board = Board.initial()
        gen = MoveGenerator(board)
        total = sum(len(gen.destinations(sq)) for sq in board.all_pieces(Color.BLACK))
        assert total == 20

    def test_e2_pawn(self) -> None:
        assert MoveGenerator(Board.initial()).destinations((6, 4)) == [(5, 4), (4, 4)]

    def test_black_pawn_moves_down(self) -> None:
        assert MoveGenerator(Board.initial()).destinations((1, 3)) == [(2, 3), (3, 3)]

    def test_b1_knight(self) -> None:
        assert dests(Board.initial(), 7, 1) == {(5, 0), (5, 2)}

    @pytest.mark.parametrize("col", [0, 2, 3, 4, 5, 7])
    def test_back_rank_sliders_and_king_are_boxed_in(self, col: int) -> None:
        board = Board.initial()
        assert dests(board, 7, col) == set()
        assert dests(board, 0, col) == set()

    def test_empty_square_has_no_destinations(self) -> None:
        assert MoveGenerator(Board.initial()).destinations((4, 4)) == []


# ── Pawns ────────────────────────────────────────────────────────────────────


class TestPawn:
    def test_no_double_step_off_start_row(self) -> None:
        board = board_from_placement("8/8/8/8/4P3/8/8/8")
        assert dests(board, 4, 4) == {(3, 4)}

    def test_double_step_blocked_on_destination(self) -> None:
        board = board_from_placement("8/8/8/8/4p3/8/4P3/8")
        assert dests(board, 6, 4) == {(5, 4)}

    def test_blocked_single_step_suppresses_everything(self) -> None:
        # Black pawn straight ahead, black knight capturable diagonally.
        board = board_from_placement("8/8/8/8/8/3np3/4P3/8")
        assert dests(board, 6, 4) == set()

    def test_blocked_by_own_piece_suppresses_captures(self) -> None:
        board = board_from_placement("8/8/8/3pNp2/4P3/8/8/8")
        assert dests(board, 4, 4) == set()

    def test_diagonal_captures(self) -> None:
        board = board_from_placement("8/8/8/3p1p2/4P3/8/8/8")
        gen = MoveGenerator(board)
        assert gen.destinations((4, 4)) == [(3, 4), (3, 3), (3, 5)]

    def test_no_capture_of_own_piece(self) -> None:
        board = board_from_placement("8/8/8/3p1P2/4P3/8/8/8")
        assert dests(board, 4, 4) == {(3, 4), (3, 3)}

    def test_edge_file_capture(self) -> None:
        board = board_from_placement("8/8/8/8/8/1n6/P7/8")
        assert dests(board, 6, 0) == {(5, 0), (4, 0), (5, 1)}

    def test_black_pawn_captures_downward(self) -> None:
        board = board_from_placement("8/4p3/3P1N2/8/8/8/8/8")
        assert dests(board, 1, 4) == {(2, 4), (3, 4), (2, 3), (2, 5)}

    def test_pawn_on_far_row_has_no_moves(self) -> None:
        board = board_from_placement("4P3/8/8/8/8/8/8/3p4")
        assert dests(board, 0, 4) == set()
        assert dests(board, 7, 3) == set()

    def test_no_en_passant(self) -> None:
        # Black pawn beside the white pawn; the square behind it is empty.
        board = board_from_placement("8/8/8/3pP3/8/8/8/8")
        assert dests(board, 3, 4) == {(2, 4)}


# ── Sliders ──────────────────────────────────────────────────────────────────


class TestSliding:
    def test_rook_on_empty_board(self) -> None:
        board = board_from_placement("8/8/8/8/4R3/8/8/8")
        assert len(dests(board, 4, 4)) == 14

    def test_rook_stops_at_first_piece(self) -> None:
        board = board_from_placement("8/8/4p3/8/4R1P1/8/8/8")
        gen = MoveGenerator(board)
        assert gen.destinations((4, 4)) == [
            (4, 5),
            (4, 3),
            (4, 2),
            (4, 1),
            (4, 0),
            (5, 4),
            (6, 4),
            (7, 4),
            (3, 4),
            (2, 4),
        ]

    def test_rook_does_not_pass_capture(self) -> None:
        board = board_from_placement("4r3/8/4p3/8/4R3/8/8/8")
        result = dests(board, 4, 4)
        assert (2, 4) in result
        assert (1, 4) not in result
        assert (0, 4) not in result

    def test_bishop_on_empty_board(self) -> None:
        board = board_from_placement("8/8/8/8/4B3/8/8/8")
        assert len(dests(board, 4, 4)) == 13

    def test_bishop_capture_and_block(self) -> None:
        board = board_from_placement("8/8/2p5/5P2/4b3/8/8/8")
        result = dests(board, 4, 4)
        assert (3, 5) in result  # white pawn captured
        assert (2, 6) not in result
        assert (3, 3) in result
        assert (2, 2) not in result  # own pawn
        assert result >= {(5, 5), (6, 6), (7, 7), (5, 3), (6, 2), (7, 1)}

    def test_queen_is_rook_plus_bishop(self) -> None:
        placement = "8/1p6/8/8/4Q3/8/6P1/8"
        queen = MoveGenerator(board_from_placement(placement)).destinations((4, 4))
        rook = MoveGenerator(
            board_from_placement(placement.replace("Q", "R"))
        ).destinations((4, 4))
        bishop = MoveGenerator(
            board_from_placement(placement.replace("Q", "B"))
        ).destinations((4, 4))
        assert queen == rook + bishop

    def test_queen_on_empty_board(self) -> None:
        board = board_from_placement("8/8/8/8/4q3/8/8/8")
        assert len(dests(board, 4, 4)) == 27


# ── Steppers ─────────────────────────────────────────────────────────────────


class TestKnightAndKing:
    def test_knight_in_corner(self) -> None:
        board = board_from_placement("N7/8/8/8/8/8/8/8")
        assert dests(board, 0, 0) == {(1, 2), (2, 1)}

    def test_knight_occupancy(self) -> None:
        board = board_from_placement("8/8/3p1P2/8/4N3/8/8/8")
        result = dests(board, 4, 4)
        assert len(result) == 7
        assert (2, 3) in result
        assert (2, 5) not in result

    def test_king_in_centre(self) -> None:
        board = board_from_placement("8/8/8/8/4k3/8/8/8")
        assert len(dests(board, 4, 4)) == 8

    def test_king_occupancy(self) -> None:
        board = board_from_placement("8/8/8/3pP3/4K3/8/8/8")
        result = dests(board, 4, 4)
        assert (3, 3) in result
        assert (3, 4) not in result
        assert len(result) == 7

    def test_no_castling(self) -> None:
        board = board_from_placement("8/8/8/8/8/8/8/R3K2R")
        assert dests(board, 7, 4) == {(7, 3), (7, 5), (6, 3), (6, 4), (6, 5)}

    def test_king_may_step_into_attack(self) -> None:
        board = board_from_placement("8/8/8/8/8/8/3r4/4K3")
        assert (7, 3) in dests(board, 7, 4)
        assert (6, 3) in dests(board, 7, 4)


# ── Filtering policy ─────────────────────────────────────────────────────────


class TestMoveFilter:
    def test_pinned_piece_still_moves(self) -> None:
        board = board_from_placement("4r3/8/8/8/8/8/4R3/4K3")
        assert (6, 0) in dests(board, 6, 4)

    def test_custom_filter_receives_moves(self) -> None:
        seen: list[tuple[Move, Color]] = []

        def only_forward(_board: Board, move: Move, color: Color) -> bool:
            seen.append((move, color))
            return move.to_sq.col == move.from_sq.col

        board = board_from_placement("8/8/8/3p1p2/4P3/8/8/8")
        gen = MoveGenerator(board, only_forward)
        assert gen.destinations((4, 4)) == [(3, 4)]
        assert gen.candidate_destinations((4, 4)) == [(3, 4), (3, 3), (3, 5)]
        assert [str(m) for m, _ in seen] == ["e4e5", "e4d5", "e4f5"]
        assert all(c == Color.WHITE for _, c in seen)

    def test_generation_does_not_mutate_board(self) -> None:
        board = Board.initial()
        before = board.copy()
        gen = MoveGenerator(board)
        for sq, _piece in list(board.occupied()):
            gen.destinations(sq)
        assert board == before
