"""PieceItem: a chess figurine on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCursor, QFont
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsTextItem

from gridchess.core.piece import Piece
from gridchess.core.types import Square


class PieceItem(QGraphicsTextItem):
    """A single chess piece drawn as its Unicode symbol.

    Stores its logical *square*. Being a QGraphicsObject, its ``pos``
    property can be animated.
    """

    _FONT_RATIO = 0.62

    def __init__(self, piece: Piece, square: Square, tile_size: int) -> None:
        super().__init__(piece.symbol)
        self.piece = piece
        self.square = square
        self._tile_size = tile_size

        font = QFont("DejaVu Sans")
        font.setPixelSize(max(int(tile_size * self._FONT_RATIO), 1))
        self.setFont(font)

        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
        self.setCacheMode(QGraphicsItem.CacheMode.NoCache)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)

    def offset(self) -> tuple[float, float]:
        """Top-left offset that centres the glyph inside its tile."""
        bounds = self.boundingRect()
        return (
            (self._tile_size - bounds.width()) / 2,
            (self._tile_size - bounds.height()) / 2,
        )

