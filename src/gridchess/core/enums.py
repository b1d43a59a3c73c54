"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def back_row(self) -> int:
        """Row holding this side's pieces at the start (row 0 is rank 8)."""
        return 7 if self == Color.WHITE else 0

    @property
    def pawn_row(self) -> int:
        return 6 if self == Color.WHITE else 1

    @property
    def forward(self) -> int:
        """Row delta of a single pawn step."""
        return -1 if self == Color.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastlingSide(IntEnum):
    """Wing a king castles towards."""

    KINGSIDE = 0
    QUEENSIDE = 1

    @classmethod
    def from_king_col(cls, col: int) -> CastlingSide | None:
        """Wing whose king destination is column *col*, if any."""
        for side in cls:
            if side.king_to_col == col:
                return side
        return None

    @property
    def king_to_col(self) -> int:
        return 6 if self == CastlingSide.KINGSIDE else 2

    @property
    def rook_from_col(self) -> int:
        return 7 if self == CastlingSide.KINGSIDE else 0

    @property
    def rook_to_col(self) -> int:
        return 5 if self == CastlingSide.KINGSIDE else 3


class MoveFlag(IntEnum):
    """Classification of an applied move."""

    NORMAL = 0
    DOUBLE_PAWN = 1
    CAPTURE = 2
    CASTLE_KINGSIDE = 3
    CASTLE_QUEENSIDE = 4
