"""PieceItem: a chess piece drawn as a Unicode glyph on the scene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont
from PyQt6.QtWidgets import QGraphicsSimpleTextItem

from hotseat.core.piece import Piece
from hotseat.core.types import Square
from hotseat.ui.resources import piece_glyph


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece on the board.

    Stores its logical *square*; clicks are handled by the scene.
    """

    _FONT_RATIO = 0.72

    def __init__(
        self, piece: Piece, square: Square, tile_size: int, color: QColor
    ) -> None:
        super().__init__(piece_glyph(piece))
        self.piece = piece
        self.square = square
        self._tile_size = tile_size

        self.setBrush(QBrush(color))
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)
        self._update_size(tile_size)

    def _update_size(self, size: int) -> None:
        self._tile_size = size
        font = QFont()
        font.setPixelSize(max(int(size * self._FONT_RATIO), 1))
        self.setFont(font)

        bounds = self.boundingRect()
        t = float(size)
        self.setPos(
            self.square.col * t + (t - bounds.width()) / 2,
            self.square.row * t + (t - bounds.height()) / 2,
        )
