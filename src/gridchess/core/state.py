"""GameState: board + side to move + castling rights, with apply-move."""

from __future__ import annotations

import logging

from gridchess.core.attacks import AttackOracle, NullAttackOracle
from gridchess.core.board import Board
from gridchess.core.castling import CastlingRights
from gridchess.core.enums import CastlingSide, Color, MoveFlag, PieceType
from gridchess.core.move import Move
from gridchess.core.rules import MoveValidator
from gridchess.core.types import Square

_LOGGER = logging.getLogger(__name__)


class GameState:
    """Complete mutable game state for one session.

    Legality is decided by :class:`~gridchess.core.rules.MoveValidator`;
    :meth:`apply_move` only performs the transition and must be gated by it.
    """

    __slots__ = ("board", "side_to_move", "castling", "attack_oracle")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights | None = None,
        attack_oracle: AttackOracle | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling if castling is not None else CastlingRights()
        self.attack_oracle = (
            attack_oracle if attack_oracle is not None else NullAttackOracle()
        )

    @classmethod
    def initial(cls) -> GameState:
        """Standard starting position, White to move, no pieces moved."""
        return cls()

    # ── Queries ──────────────────────────────────────────────────────────

    def is_legal(self, from_sq: Square, to_sq: Square) -> bool:
        return MoveValidator(self).is_legal(from_sq, to_sq)

    def legal_moves(self, from_sq: Square) -> set[Square]:
        return MoveValidator(self).legal_destinations(from_sq)

    # ── Transition ───────────────────────────────────────────────────────

    def apply_move(self, from_sq: Square, to_sq: Square) -> Move:
        """Play *from_sq* → *to_sq* and flip the side to move.

        No legality check is made here; callers must consult
        :meth:`is_legal` first.
        """
        piece = self.board[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")

        flag = MoveFlag.NORMAL
        if self.board[to_sq] is not None:
            flag = MoveFlag.CAPTURE

        self.board[to_sq] = piece
        self.board[from_sq] = None

        if piece.piece_type == PieceType.KING:
            self.castling.mark_king_moved(piece.color)
            side = (
                CastlingSide.from_king_col(to_sq.col)
                if to_sq.row == from_sq.row and abs(to_sq.col - from_sq.col) == 2
                else None
            )
            if side is not None:
                self._slide_castling_rook(piece.color, to_sq.row, side)
                flag = (
                    MoveFlag.CASTLE_KINGSIDE
                    if side == CastlingSide.KINGSIDE
                    else MoveFlag.CASTLE_QUEENSIDE
                )
        elif piece.piece_type == PieceType.ROOK:
            self.castling.mark_rook_left(from_sq)
        elif piece.piece_type == PieceType.PAWN and abs(to_sq.row - from_sq.row) == 2:
            flag = MoveFlag.DOUBLE_PAWN

        move = Move(from_sq, to_sq, flag)
        _LOGGER.debug("%s played %s (%s)", self.side_to_move, move, flag.name)
        self.side_to_move = self.side_to_move.opposite
        return move

    def _slide_castling_rook(self, color: Color, row: int, side: CastlingSide) -> None:
        rook_from = Square(row, side.rook_from_col)
        rook_to = Square(row, side.rook_to_col)
        self.board[rook_to] = self.board[rook_from]
        self.board[rook_from] = None
        self.castling.mark_rook_moved(color, side)

    # ── Copying ──────────────────────────────────────────────────────────

    def copy(self) -> GameState:
        """Independent copy sharing only the (stateless) attack oracle."""
        return GameState(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling.copy(),
            attack_oracle=self.attack_oracle,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
        )

    def __repr__(self) -> str:
        return f"GameState(side_to_move={self.side_to_move!s}, {self.castling})"


def apply_move(state: GameState, from_sq: Square, to_sq: Square) -> Move:
    """Functional alias for :meth:`GameState.apply_move`."""
    return state.apply_move(from_sq, to_sq)
