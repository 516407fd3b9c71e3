"""MainWindow: top-level window assembling all UI components."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QWidget,
)

from hotseat.core.enums import Color
from hotseat.core.move import Move
from hotseat.core.types import Square
from hotseat.game.controller import GameController
from hotseat.game.state import GameState
from hotseat.ui.board.board_view import BoardView
from hotseat.ui.dialogs.settings_dialog import AppSettings, SettingsDialog
from hotseat.ui.i18n import t
from hotseat.ui.main_window_parts import settings as settings_part
from hotseat.ui.panels.control_panel import ControlPanel

_LOGGER = logging.getLogger(__name__)

TCallback = TypeVar("TCallback", bound=Callable[..., None])


class MainWindow(QMainWindow):
    """Main application window: board on the left, turn and reset on the right."""

    def __init__(self, controller: GameController | None = None) -> None:
        super().__init__()
        self.setWindowTitle(t().window_title)
        self.setMinimumSize(640, 520)
        self.resize(860, 680)

        self._controller = controller if controller is not None else GameController()
        self._settings = AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()

        self._board_view.board_scene.set_state(self._controller.state)
        self._update_status()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Board (center)
        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        # Right panel
        self._control_panel = ControlPanel()
        self._control_panel.setFixedWidth(220)
        root.addWidget(self._control_panel)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel(t().status_ready)
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        s = t()

        # Game menu
        self._menu_game = menu_bar.addMenu(s.menu_game)
        assert self._menu_game is not None

        self._act_new_game = QAction(s.menu_new_game, self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_reset)
        self._menu_game.addAction(self._act_new_game)

        self._menu_game.addSeparator()

        self._act_quit = QAction(s.menu_quit, self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        # Settings menu
        self._menu_settings = menu_bar.addMenu(s.menu_settings)
        assert self._menu_settings is not None

        self._act_settings = QAction(s.menu_settings_action, self)
        self._act_settings.setShortcut("Ctrl+,")
        self._act_settings.triggered.connect(self._on_settings)
        self._menu_settings.addAction(self._act_settings)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.square_clicked.connect(self._on_square_clicked)
        self._control_panel.reset_clicked.connect(self._on_reset)

    def _connect_game_events(self) -> None:
        """Subscribe to GameController callbacks (idempotent)."""
        events = self._controller.events
        self._replace_callback(events.on_move, self._on_game_move)
        self._replace_callback(events.on_selection_changed, self._on_selection_changed)
        self._replace_callback(events.on_game_over, self._on_game_over)
        self._replace_callback(events.on_reset, self._on_game_reset)

    def _disconnect_game_events(self) -> None:
        """Detach this window from GameController callbacks."""
        events = self._controller.events
        self._remove_callback(events.on_move, self._on_game_move)
        self._remove_callback(events.on_selection_changed, self._on_selection_changed)
        self._remove_callback(events.on_game_over, self._on_game_over)
        self._remove_callback(events.on_reset, self._on_game_reset)

    @staticmethod
    def _replace_callback(
        callbacks: list[TCallback],
        callback: TCallback,
    ) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    @staticmethod
    def _remove_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]

    # ── User actions ─────────────────────────────────────────────────────

    def _on_square_clicked(self, row: int, col: int) -> None:
        self._controller.handle_square_click(row, col)

    def _on_reset(self) -> None:
        self._controller.reset()

    def _on_settings(self) -> None:
        settings_part.on_settings(self, settings_dialog_cls=SettingsDialog)

    def _apply_settings(self) -> None:
        settings_part.apply_settings(self)

    def retranslate_ui(self) -> None:
        """Update all translatable strings when the locale changes."""
        s = t()
        self.setWindowTitle(s.window_title)
        # Menu bar
        self._menu_game.setTitle(s.menu_game)
        self._act_new_game.setText(s.menu_new_game)
        self._act_quit.setText(s.menu_quit)
        self._menu_settings.setTitle(s.menu_settings)
        self._act_settings.setText(s.menu_settings_action)
        # Child widgets
        self._control_panel.retranslate_ui()
        self._status_label.setText(s.status_ready)

    # ── Game event callbacks ─────────────────────────────────────────────

    def _on_game_move(self, move: Move, state: GameState) -> None:
        """Called after every applied move."""
        self._board_view.board_scene.refresh()
        self._update_status()
        s = t()
        mover = s.color_name(state.side_to_move.opposite == Color.WHITE)
        self._status_label.setText(s.status_moved.format(color=mover, move=move))

    def _on_selection_changed(
        self, _selected: Square | None, _destinations: list[Square]
    ) -> None:
        self._board_view.board_scene.refresh()

    def _on_game_over(self, winner: Color) -> None:
        self._update_status()
        s = t()
        text = s.wins.format(color=s.color_name(winner == Color.WHITE))
        self._status_label.setText(text)
        QMessageBox.information(self, s.game_over_title, text)

    def _on_game_reset(self, state: GameState) -> None:
        self._board_view.board_scene.set_state(state)
        self._status_label.setText(t().status_ready)
        self._update_status()

    def _update_status(self) -> None:
        state = self._controller.state
        self._control_panel.set_turn(state.side_to_move, state.is_game_over)

    # ── Window lifecycle ─────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._disconnect_game_events()
        _LOGGER.debug("Main window closed")
        super().closeEvent(event)
