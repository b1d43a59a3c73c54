"""Move legality: per-piece geometry, occupancy and the castling rule.

Only movement geometry and occupancy are judged. King safety is never
checked, so a move may leave the mover's king attacked and a king can be
captured like any other piece.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from gridchess.core.enums import CastlingSide, Color, PieceType
from gridchess.core.piece import Piece
from gridchess.core.types import Square

if TYPE_CHECKING:
    from gridchess.core.state import GameState

_KING_HOME_COL = 4


class MoveValidator:
    """Decides legality of (from, to) pairs against a :class:`GameState`.

    The validator is read-only; it never mutates the state it inspects.
    """

    __slots__ = ("_state", "_board", "_rules")

    def __init__(self, state: GameState) -> None:
        self._state = state
        self._board = state.board
        self._rules: dict[PieceType, Callable[[Piece, Square, Square], bool]] = {
            PieceType.PAWN: self._pawn,
            PieceType.KNIGHT: self._knight,
            PieceType.BISHOP: self._bishop,
            PieceType.ROOK: self._rook,
            PieceType.QUEEN: self._queen,
            PieceType.KING: self._king,
        }

    # -- Public API ---------------------------------------------------------

    def is_legal(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether the side to move may play *from_sq* → *to_sq*."""
        mover = self._board[from_sq]
        if mover is None or mover.color != self._state.side_to_move:
            return False

        target = self._board[to_sq]
        if target is not None and target.same_color(mover):
            return False

        rule = self._rules.get(mover.piece_type)
        if rule is None:
            return False
        return rule(mover, from_sq, to_sq)

    def legal_destinations(self, from_sq: Square) -> set[Square]:
        """Every square the piece on *from_sq* may legally move to."""
        return {
            to_sq for to_sq in self._board.squares() if self.is_legal(from_sq, to_sq)
        }

    def all_legal_moves(self) -> dict[Square, set[Square]]:
        """Destinations for each piece of the side to move that has any."""
        moves: dict[Square, set[Square]] = {}
        for sq, piece in self._board.occupied():
            if piece.color != self._state.side_to_move:
                continue
            destinations = self.legal_destinations(sq)
            if destinations:
                moves[sq] = destinations
        return moves

    # -- Per-piece rules ----------------------------------------------------

    def _pawn(self, mover: Piece, from_sq: Square, to_sq: Square) -> bool:
        direction = mover.color.forward
        drow = to_sq.row - from_sq.row
        dcol = to_sq.col - from_sq.col
        target = self._board[to_sq]

        if dcol == 0:
            if drow == direction and target is None:
                return True
            if (
                from_sq.row == mover.color.pawn_row
                and drow == 2 * direction
                and target is None
                and self._board.is_empty(Square(from_sq.row + direction, from_sq.col))
            ):
                return True
            return False

        # Diagonal capture; the friendly-target case was rejected earlier.
        return abs(dcol) == 1 and drow == direction and target is not None

    def _knight(self, mover: Piece, from_sq: Square, to_sq: Square) -> bool:
        delta = (abs(to_sq.row - from_sq.row), abs(to_sq.col - from_sq.col))
        return delta in ((2, 1), (1, 2))

    def _rook(self, mover: Piece, from_sq: Square, to_sq: Square) -> bool:
        straight = (from_sq.row == to_sq.row) != (from_sq.col == to_sq.col)
        return straight and self._board.is_path_clear(from_sq, to_sq)

    def _bishop(self, mover: Piece, from_sq: Square, to_sq: Square) -> bool:
        drow = abs(to_sq.row - from_sq.row)
        dcol = abs(to_sq.col - from_sq.col)
        if drow != dcol or drow == 0:
            return False
        return self._board.is_path_clear(from_sq, to_sq)

    def _queen(self, mover: Piece, from_sq: Square, to_sq: Square) -> bool:
        return self._rook(mover, from_sq, to_sq) or self._bishop(
            mover, from_sq, to_sq
        )

    def _king(self, mover: Piece, from_sq: Square, to_sq: Square) -> bool:
        drow = abs(to_sq.row - from_sq.row)
        dcol = abs(to_sq.col - from_sq.col)
        if drow <= 1 and dcol <= 1:
            return True
        if drow == 0 and dcol == 2:
            return self._can_castle(mover.color, from_sq, to_sq)
        return False

    # -- Castling -----------------------------------------------------------

    def _can_castle(self, color: Color, from_sq: Square, to_sq: Square) -> bool:
        side = CastlingSide.from_king_col(to_sq.col)
        if side is None:
            return False

        row = color.back_row
        if from_sq.row != row:
            return False
        if not self._state.castling.may_castle(color, side):
            return False

        # Squares between king home and rook home.
        lo, hi = sorted((_KING_HOME_COL, side.rook_from_col))
        for col in range(lo + 1, hi):
            if self._board[Square(row, col)] is not None:
                return False

        # Squares the king stands on, crosses and lands on.
        step = 1 if side.king_to_col > _KING_HOME_COL else -1
        oracle = self._state.attack_oracle
        enemy = color.opposite
        for col in range(_KING_HOME_COL, side.king_to_col + step, step):
            if oracle.is_attacked(self._board, Square(row, col), enemy):
                return False
        return True


# -- Functional helpers -----------------------------------------------------


def is_legal(state: GameState, from_sq: Square, to_sq: Square) -> bool:
    """Whether *from_sq* → *to_sq* is legal in *state*."""
    return MoveValidator(state).is_legal(from_sq, to_sq)


def legal_moves(state: GameState, from_sq: Square) -> set[Square]:
    """Legal destinations of the piece on *from_sq* (empty set if none)."""
    return MoveValidator(state).legal_destinations(from_sq)
