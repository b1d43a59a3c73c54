"""BoardScene: QGraphicsScene that draws the grid, pieces and highlights."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from PyQt6.QtCore import (
    QAbstractAnimation,
    QEasingCurve,
    QObject,
    QPointF,
    QPropertyAnimation,
    Qt,
    pyqtSignal,
)
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from gridchess.core.move import Move
from gridchess.core.state import GameState
from gridchess.core.types import Square, all_squares
from gridchess.game.controller import GameController
from gridchess.ui.board.piece_item import PieceItem
from gridchess.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

TCallback = TypeVar("TCallback", bound=Callable[..., None])


class BoardScene(QGraphicsScene):
    """Renders the board and forwards square clicks to a game controller.

    Signals:
        move_made(Move): Emitted after the controller applied a move.
    """

    move_made = pyqtSignal(Move)

    TILE = 80  # px per square

    _ANIM_DURATION_MS = 400

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._controller: GameController | None = None
        self._state: GameState | None = None
        self._flipped = False

        self._show_coordinates = True
        self._show_legal_moves = True
        self._animate_moves = True
        self._active_anim: QPropertyAnimation | None = None

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._target_items: list[QGraphicsRectItem] = []
        self._last_move_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_controller(self, controller: GameController) -> None:
        """Attach *controller*; the scene redraws on its events."""
        self._controller = controller
        events = controller.events
        _replace_callback(events.on_move, self._on_controller_move)
        _replace_callback(events.on_selection_changed, self._on_selection_changed)
        _replace_callback(events.on_new_game, self.set_state)
        self.set_state(controller.state)

    def set_state(self, state: GameState) -> None:
        """Update the displayed state (full redraw of pieces)."""
        self._stop_animation()
        self._state = state
        self._clear_items(self._last_move_items)
        self._refresh_selection()
        self._sync_pieces()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._draw_board()
        self._clear_items(self._last_move_items)
        self._refresh_selection()
        self._sync_pieces()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._refresh_selection()
        self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-destination highlights."""
        self._show_legal_moves = visible
        self._refresh_selection()

    def set_animate_moves(self, enabled: bool) -> None:
        self._animate_moves = enabled

    def highlight_last_move(self, move: Move | None) -> None:
        """Highlight origin/destination of the last played move."""
        self._clear_items(self._last_move_items)
        if move is None:
            return
        for sq in (move.from_sq, move.to_sq):
            rect = self._make_highlight(sq, self._theme.last_move)
            rect.setZValue(0.5)
            self._last_move_items.append(rect)

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
        font = QFont("DejaVu Sans", max(9, t // 8))

        for sq in all_squares():
            vc, vr = self._visual_coords(sq)
            is_light = (sq.row + sq.col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(vc * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_light else self._theme.coord_light
            # Rank numbers on the left edge, file letters on the bottom edge.
            if vc == 0:
                self._add_coord(
                    str(8 - sq.row), vc * t + 2, vr * t + 1, font, text_color
                )
            if vr == 7:
                self._add_coord(
                    "abcdefgh"[sq.col],
                    vc * t + t - 12,
                    vr * t + t - 16,
                    font,
                    text_color,
                )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

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

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current state."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._state is None:
            return

        for sq, piece in self._state.board.occupied():
            item = PieceItem(piece, sq, self.TILE)
            item.setDefaultTextColor(self._theme.piece_text)
            item.setPos(self._item_pos(item, sq))
            self.addItem(item)
            self._piece_items[sq] = item

    def animate_move(
        self,
        move: Move,
        *,
        on_done: Callable[[], None] | None = None,
    ) -> None:
        """Slide the moved piece to its destination, then full-sync.

        The state has already been updated; the slide is cosmetic. Falls
        back to an instant sync when animation is disabled or a previous
        animation is still running.
        """
        if self._active_anim is not None:
            _LOGGER.debug("Animation interrupted by %s, syncing instantly", move)
            self._stop_animation()
            self._sync_pieces()
            if on_done:
                on_done()
            return

        item = self._piece_items.get(move.from_sq)
        if not self._animate_moves or item is None:
            self._sync_pieces()
            if on_done:
                on_done()
            return

        captured = self._piece_items.pop(move.to_sq, None)
        if captured is not None:
            self.removeItem(captured)

        side = move.castling_side
        if side is not None:
            row = move.to_sq.row
            rook_from = Square(row, side.rook_from_col)
            rook_to = Square(row, side.rook_to_col)
            rook_item = self._piece_items.pop(rook_from, None)
            if rook_item is not None:
                rook_item.setPos(self._item_pos(rook_item, rook_to))
                rook_item.square = rook_to
                self._piece_items[rook_to] = rook_item

        # Bookkeeping first so clicks during the slide see a consistent scene.
        del self._piece_items[move.from_sq]
        self._piece_items[move.to_sq] = item
        item.square = move.to_sq
        item.setZValue(2)

        anim = QPropertyAnimation(item, b"pos", self)
        anim.setDuration(self._ANIM_DURATION_MS)
        anim.setStartValue(item.pos())
        anim.setEndValue(self._item_pos(item, move.to_sq))
        anim.setEasingCurve(QEasingCurve.Type.InOutQuad)

        def _on_finished() -> None:
            self._active_anim = None
            self._sync_pieces()
            if on_done:
                on_done()

        anim.finished.connect(_on_finished)
        self._active_anim = anim
        anim.start(QAbstractAnimation.DeletionPolicy.DeleteWhenStopped)

    def _stop_animation(self) -> None:
        if self._active_anim is not None:
            anim = self._active_anim
            self._active_anim = None
            anim.stop()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._controller is None or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            self._controller.clear_selection()
            return super().mousePressEvent(event)

        self.handle_square_click(sq)
        event.accept()

    def handle_square_click(self, sq: Square) -> bool:
        """Forward a click on *sq* to the controller."""
        if self._controller is None:
            return False
        return self._controller.click(sq)

    # ── Controller events ────────────────────────────────────────────────

    def _on_controller_move(self, move: Move, state: GameState) -> None:
        self._state = state
        self.highlight_last_move(move)
        self.animate_move(move)
        self.move_made.emit(move)

    def _on_selection_changed(self, _square: Square | None) -> None:
        self._refresh_selection()

    def _refresh_selection(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._target_items)
        controller = self._controller
        if controller is None or controller.selected_square is None:
            return

        rect = self._make_highlight(
            controller.selected_square, self._theme.highlight_selected
        )
        self._highlight_items.append(rect)

        if not self._show_legal_moves:
            return
        for sq in controller.highlighted_squares:
            self._target_items.append(
                self._make_highlight(sq, self._theme.highlight_target)
            )

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, sq: Square) -> tuple[int, int]:
        """Board square → visual (column, row); row 0 is drawn at the top."""
        if self._flipped:
            return 7 - sq.col, 7 - sq.row
        return sq.col, sq.row

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            return Square(7 - row, 7 - col)
        return Square(row, col)

    def _item_pos(self, item: PieceItem, sq: Square) -> QPointF:
        t = self.TILE
        vc, vr = self._visual_coords(sq)
        dx, dy = item.offset()
        return QPointF(vc * t + dx, vr * t + dy)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vc, vr = self._visual_coords(sq)
        rect = QGraphicsRectItem(vc * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect


def _replace_callback(callbacks: list[TCallback], callback: TCallback) -> None:
    callbacks[:] = [cb for cb in callbacks if cb != callback]
    callbacks.append(callback)
