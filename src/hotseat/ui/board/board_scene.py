"""BoardScene: QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from hotseat.core.enums import Color
from hotseat.core.types import BOARD_SIZE, Square, is_on_board
from hotseat.ui.board.piece_item import PieceItem
from hotseat.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from hotseat.game.state import GameState


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items.

    The scene holds no game logic: it draws a :class:`GameState` and
    reports clicks.  Row 0 (black's back rank) is always at the top.

    Signals:
        square_clicked(int, int): Row and column of a press on the board.
    """

    square_clicked = pyqtSignal(int, int)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._state: GameState | None = None
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._selection_items: list[QGraphicsRectItem] = []
        self._move_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_state(self, state: GameState) -> None:
        """Display *state* (full redraw of pieces and highlights)."""
        self._state = state
        self.refresh()

    def refresh(self) -> None:
        """Redraw pieces and highlights from the current state."""
        self._sync_pieces()
        self._sync_highlights()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide possible-destination highlights."""
        self._show_legal_moves = visible
        self._sync_highlights()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont()
        font.setPixelSize(max(9, t // 7))

        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                is_light = (row + col) % 2 == 0
                color = self._theme.light_square if is_light else self._theme.dark_square
                rect = QGraphicsRectItem(col * t, row * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[Square(row, col)] = rect

                coord_color = (
                    self._theme.coord_dark if is_light else self._theme.coord_light
                )
                # Rank numbers (left edge)
                if col == 0:
                    label = str(BOARD_SIZE - row)
                    self._add_coord(label, col * t + 2, row * t + 1, font, coord_color)
                # File letters (bottom edge)
                if row == BOARD_SIZE - 1:
                    letter = chr(ord("a") + col)
                    self._add_coord(
                        letter, col * t + t - 12, row * t + t - 16, font, coord_color
                    )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(
        self, label: str, x: float, y: float, font: QFont, color: QColor
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece / highlight synchronisation ────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._state is None:
            return

        for sq, piece in self._state.board.occupied():
            color = (
                self._theme.piece_white
                if piece.color == Color.WHITE
                else self._theme.piece_black
            )
            item = PieceItem(piece, sq, self.TILE, color)
            self.addItem(item)
            self._piece_items[sq] = item

    def _sync_highlights(self) -> None:
        self._clear_items(self._selection_items)
        self._clear_items(self._move_items)
        state = self._state
        if state is None or state.selected is None:
            return

        self._selection_items.append(
            self._make_highlight(state.selected, self._theme.highlight_selected)
        )
        if self._show_legal_moves:
            for sq in state.destinations:
                self._move_items.append(
                    self._make_highlight(sq, self._theme.highlight_move)
                )

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.square_clicked.emit(sq.row, sq.col)
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square (``None`` outside the board)."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not is_on_board(row, col):
            return None
        return Square(row, col)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        rect = QGraphicsRectItem(sq.col * t, sq.row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
