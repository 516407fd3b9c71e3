"""Game state: board, turn, selection and the game-over flag."""

from __future__ import annotations

from dataclasses import dataclass, field

from hotseat.core.board import Board
from hotseat.core.enums import Color
from hotseat.core.move import Move
from hotseat.core.move_generator import MoveGenerator
from hotseat.core.piece import Piece
from hotseat.core.rules import CheckmateRule, MoveFilter, Rules
from hotseat.core.types import Square
from hotseat.game.interfaces import GamePhase


@dataclass
class GameState:
    """Single in-memory game session.

    This is a pure data/logic class with no threading and no UI.  The rule
    policies default to :class:`Rules` and may be replaced per instance.
    """

    move_filter: MoveFilter = Rules.is_valid_move
    checkmate_rule: CheckmateRule = Rules.is_checkmate

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    selected: Square | None = field(default=None, init=False)
    destinations: list[Square] = field(default_factory=list, init=False)
    phase: GamePhase = field(default=GamePhase.AWAITING_MOVE, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self) -> None:
        """Initialise (or reset) the game."""
        self.board = Board.initial()
        self.side_to_move = Color.WHITE
        self.selected = None
        self.destinations = []
        self.phase = GamePhase.AWAITING_MOVE

    # ── Selection ────────────────────────────────────────────────────────

    def legal_destinations(self, sq: tuple[int, int]) -> list[Square]:
        """Generated destinations for the piece on *sq*, after filtering."""
        return MoveGenerator(self.board, self.move_filter).destinations(sq)

    def select(self, sq: tuple[int, int]) -> None:
        """Select *sq* and cache its destinations."""
        self.selected = Square(*sq)
        self.destinations = self.legal_destinations(sq)

    def clear_selection(self) -> None:
        self.selected = None
        self.destinations = []

    def is_destination(self, sq: tuple[int, int]) -> bool:
        return sq in self.destinations

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_sq: tuple[int, int], to_sq: tuple[int, int]) -> Move:
        """Move the piece on *from_sq* to *to_sq* unconditionally.

        Whatever stood on *to_sq* is overwritten (that is how captures
        happen).  The turn flips, then the checkmate policy is consulted
        for the new side to move.  Caller is responsible for legality.
        """
        move = Move(Square(*from_sq), Square(*to_sq))
        self.board[to_sq] = self.board[from_sq]
        self.board[from_sq] = None

        self.side_to_move = self.side_to_move.opposite

        if self.checkmate_rule(self.board, self.side_to_move):
            self.phase = GamePhase.GAME_OVER
        return move

    # ── Query helpers ────────────────────────────────────────────────────

    def piece_at(self, sq: tuple[int, int]) -> Piece | None:
        return self.board[sq]

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Color | None:
        """Opposite of the side to move, once the game is over."""
        if not self.is_game_over:
            return None
        return self.side_to_move.opposite
