"""GameController: turns square clicks into selections and moves.

Coordinates: GameState, MoveGenerator (through the state).
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from hotseat.core.enums import Color
from hotseat.core.move import Move
from hotseat.core.rules import CheckmateRule, MoveFilter, Rules
from hotseat.core.types import Square, is_on_board
from hotseat.game.interfaces import ClickResult, IGameController
from hotseat.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, GameState], None]
SelectionCallback = Callable[[Square | None, list[Square]], None]
GameOverCallback = Callable[[Color], None]  # winner
ResetCallback = Callable[[GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Selection state machine for two players sharing one board.

    States are ``{no selection, piece selected} x {white, black to move}
    x {playing, game over}``.  Invalid clicks are normal control flow:
    they either do nothing or clear the selection.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_state", "_move_filter", "_checkmate_rule", "events")

    def __init__(
        self,
        move_filter: MoveFilter = Rules.is_valid_move,
        checkmate_rule: CheckmateRule = Rules.is_checkmate,
    ) -> None:
        self._move_filter = move_filter
        self._checkmate_rule = checkmate_rule
        self._state = self._new_state()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    # ── IGameController impl ─────────────────────────────────────────────

    def handle_square_click(self, row: int, col: int) -> ClickResult:
        state = self._state
        if state.is_game_over:
            return ClickResult.IGNORED
        if not is_on_board(row, col):
            return ClickResult.IGNORED

        sq = Square(row, col)
        piece = state.piece_at(sq)
        own_piece = piece is not None and piece.color == state.side_to_move

        if state.selected is not None:
            if state.is_destination(sq):
                self._play(state.selected, sq)
                return ClickResult.MOVED
            if own_piece:
                self._select(sq)
                return ClickResult.SELECTED
            state.clear_selection()
            self._emit_selection()
            return ClickResult.DESELECTED

        if own_piece:
            self._select(sq)
            return ClickResult.SELECTED
        return ClickResult.IGNORED

    def reset(self) -> None:
        self._state = self._new_state()
        _LOGGER.info("Game reset")
        for cb in self.events.on_reset:
            cb(self._state)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _new_state(self) -> GameState:
        return GameState(
            move_filter=self._move_filter,
            checkmate_rule=self._checkmate_rule,
        )

    def _select(self, sq: Square) -> None:
        state = self._state
        state.select(sq)
        _LOGGER.debug(
            "Selected %s (%d destinations)", sq, len(state.destinations)
        )
        self._emit_selection()

    def _play(self, from_sq: Square, to_sq: Square) -> None:
        state = self._state
        mover = state.side_to_move
        move = state.apply_move(from_sq, to_sq)
        state.clear_selection()
        _LOGGER.debug("%s %s", mover, move)

        for cb in self.events.on_move:
            cb(move, state)
        self._emit_selection()

        winner = state.winner
        if winner is not None:
            _LOGGER.info("Game over, %s wins", winner)
            for cb in self.events.on_game_over:
                cb(winner)

    def _emit_selection(self) -> None:
        state = self._state
        for cb in self.events.on_selection_changed:
            cb(state.selected, list(state.destinations))
