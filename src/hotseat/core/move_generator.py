"""Geometric move generation, one rule per piece kind.

Destinations ignore check and pins; the only filtering is the injectable
move policy (see :mod:`hotseat.core.rules`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from hotseat.core.enums import Color, PieceType
from hotseat.core.move import Move
from hotseat.core.rules import MoveFilter, Rules
from hotseat.core.types import BOARD_SIZE, Square, is_on_board

if TYPE_CHECKING:
    from hotseat.core.board import Board


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))

# Forward row step and starting row per color.
_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


# -- Precomputed lookup tables ---------------------------------------------


def _all_squares() -> list[Square]:
    return [Square(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in _all_squares():
        targets[sq] = tuple(
            Square(sq.row + dr, sq.col + dc)
            for dr, dc in offsets
            if is_on_board(sq.row + dr, sq.col + dc)
        )
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in _all_squares():
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            r, c = sq.row + dr, sq.col + dc
            ray: list[Square] = []
            while is_on_board(r, c):
                ray.append(Square(r, c))
                r += dr
                c += dc
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)


class MoveGenerator:
    """Enumerates destinations for the piece on a square of *board*.

    The generator never mutates the board.
    """

    __slots__ = ("_board", "_move_filter")

    def __init__(
        self,
        board: Board,
        move_filter: MoveFilter = Rules.is_valid_move,
    ) -> None:
        self._board = board
        self._move_filter = move_filter

    # -- Public API ---------------------------------------------------------

    def destinations(self, sq: tuple[int, int]) -> list[Square]:
        """Candidate destinations of the piece on *sq* accepted by the filter.

        An empty square yields an empty list.
        """
        piece = self._board[sq]
        if piece is None:
            return []
        origin = Square(*sq)
        return [
            to_sq
            for to_sq in self.candidate_destinations(origin)
            if self._move_filter(self._board, Move(origin, to_sq), piece.color)
        ]

    def candidate_destinations(self, sq: tuple[int, int]) -> list[Square]:
        """Unfiltered geometric destinations of the piece on *sq*."""
        piece = self._board[sq]
        if piece is None:
            return []
        origin = Square(*sq)
        color = piece.color

        match piece.piece_type:
            case PieceType.PAWN:
                return self._gen_pawn(origin, color)
            case PieceType.KNIGHT:
                return self._gen_stepping(color, _KNIGHT_TARGETS[origin])
            case PieceType.BISHOP:
                return self._gen_sliding(color, _BISHOP_RAYS[origin])
            case PieceType.ROOK:
                return self._gen_sliding(color, _ROOK_RAYS[origin])
            case PieceType.QUEEN:
                return self._gen_sliding(
                    color, _ROOK_RAYS[origin] + _BISHOP_RAYS[origin]
                )
            case PieceType.KING:
                return self._gen_stepping(color, _KING_TARGETS[origin])
            case _:
                assert_never(piece.piece_type)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color) -> list[Square]:
        board = self._board
        direction = _PAWN_DIRECTION[color]
        one_row = sq.row + direction

        # A blocked (or off-board) single step suppresses every pawn move,
        # diagonal captures included.
        if not is_on_board(one_row, sq.col) or not board.is_empty((one_row, sq.col)):
            return []

        moves = [Square(one_row, sq.col)]

        two_row = sq.row + 2 * direction
        if (
            sq.row == _PAWN_START_ROW[color]
            and is_on_board(two_row, sq.col)
            and board.is_empty((two_row, sq.col))
        ):
            moves.append(Square(two_row, sq.col))

        for dc in (-1, 1):
            cap_col = sq.col + dc
            if not is_on_board(one_row, cap_col):
                continue
            target = board[one_row, cap_col]
            if target is not None and target.color != color:
                moves.append(Square(one_row, cap_col))

        return moves

    def _gen_stepping(
        self,
        color: Color,
        targets: tuple[Square, ...],
    ) -> list[Square]:
        board = self._board
        moves: list[Square] = []
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(to_sq)
        return moves

    def _gen_sliding(
        self,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
    ) -> list[Square]:
        board = self._board
        moves: list[Square] = []
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.color != color:
                    moves.append(to_sq)
                break
        return moves
