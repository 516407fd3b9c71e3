"""Piece glyph lookup for rendering."""

from __future__ import annotations

from hotseat.core.enums import Color, PieceType
from hotseat.core.piece import Piece

PIECE_GLYPHS: dict[tuple[PieceType, Color], str] = {
    (PieceType.KING, Color.WHITE): "♔",
    (PieceType.QUEEN, Color.WHITE): "♕",
    (PieceType.ROOK, Color.WHITE): "♖",
    (PieceType.BISHOP, Color.WHITE): "♗",
    (PieceType.KNIGHT, Color.WHITE): "♘",
    (PieceType.PAWN, Color.WHITE): "♙",
    (PieceType.KING, Color.BLACK): "♚",
    (PieceType.QUEEN, Color.BLACK): "♛",
    (PieceType.ROOK, Color.BLACK): "♜",
    (PieceType.BISHOP, Color.BLACK): "♝",
    (PieceType.KNIGHT, Color.BLACK): "♞",
    (PieceType.PAWN, Color.BLACK): "♟",
}


def piece_glyph(piece: Piece) -> str:
    """Unicode chess symbol for *piece*, e.g. ♞."""
    return PIECE_GLYPHS[(piece.piece_type, piece.color)]
