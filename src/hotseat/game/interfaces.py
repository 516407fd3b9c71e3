"""Abstract interfaces and state enums for the game layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto


# ── FSM states ───────────────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Whether the game still accepts clicks."""

    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class ClickResult(IntEnum):
    """What a square click did to the game state."""

    IGNORED = auto()  # nothing changed
    SELECTED = auto()  # a piece was (re-)selected
    DESELECTED = auto()  # selection cleared without moving
    MOVED = auto()  # a move was applied and the turn flipped


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the click-driven game orchestrator."""

    @abstractmethod
    def handle_square_click(self, row: int, col: int) -> ClickResult:
        """React to a click on ``(row, col)``."""

    @abstractmethod
    def reset(self) -> None:
        """Discard the current game and start from the initial position."""
