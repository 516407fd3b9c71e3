"""ControlPanel: turn indicator and the reset button."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from hotseat.core.enums import Color
from hotseat.ui.i18n import t


class ControlPanel(QWidget):
    """Shows whose turn it is and offers a reset."""

    reset_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._side_to_move = Color.WHITE
        self._game_over = False
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._turn_label = QLabel()
        self._turn_label.setFont(QFont("Helvetica Neue", 14, QFont.Weight.Bold))
        self._turn_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._turn_label)

        self._btn_reset = QPushButton()
        self._btn_reset.setMinimumHeight(36)
        self._btn_reset.clicked.connect(self.reset_clicked)
        layout.addWidget(self._btn_reset)
        layout.addStretch()

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_reset.setText(s.btn_reset)
        self._update_turn_label()

    def set_turn(self, side_to_move: Color, game_over: bool) -> None:
        """Update the turn indicator."""
        self._side_to_move = side_to_move
        self._game_over = game_over
        self._update_turn_label()

    @property
    def turn_text(self) -> str:
        return self._turn_label.text()

    def _update_turn_label(self) -> None:
        s = t()
        if self._game_over:
            self._turn_label.setText(s.turn_game_over)
            return
        color = s.color_name(self._side_to_move == Color.WHITE)
        self._turn_label.setText(s.turn_indicator.format(color=color))
