"""Castling rights as monotonic "has moved" flags."""

from __future__ import annotations

from dataclasses import dataclass

from gridchess.core.enums import CastlingSide, Color
from gridchess.core.types import Square

# Corner square → (owner, wing) for the four rook starting squares.
ROOK_HOMES: dict[Square, tuple[Color, CastlingSide]] = {
    Square(Color.WHITE.back_row, 0): (Color.WHITE, CastlingSide.QUEENSIDE),
    Square(Color.WHITE.back_row, 7): (Color.WHITE, CastlingSide.KINGSIDE),
    Square(Color.BLACK.back_row, 0): (Color.BLACK, CastlingSide.QUEENSIDE),
    Square(Color.BLACK.back_row, 7): (Color.BLACK, CastlingSide.KINGSIDE),
}


@dataclass(slots=True)
class CastlingRights:
    """Per-side flags recording whether the king or a corner rook has moved.

    Flags only ever go from False to True.
    """

    white_king_moved: bool = False
    white_rook_a_moved: bool = False
    white_rook_h_moved: bool = False
    black_king_moved: bool = False
    black_rook_a_moved: bool = False
    black_rook_h_moved: bool = False

    # ── Queries ──────────────────────────────────────────────────────────

    def king_moved(self, color: Color) -> bool:
        if color == Color.WHITE:
            return self.white_king_moved
        return self.black_king_moved

    def rook_moved(self, color: Color, side: CastlingSide) -> bool:
        return bool(getattr(self, self._rook_attr(color, side)))

    def may_castle(self, color: Color, side: CastlingSide) -> bool:
        """Neither the king nor the *side* rook of *color* has moved."""
        return not (self.king_moved(color) or self.rook_moved(color, side))

    # ── Updates ──────────────────────────────────────────────────────────

    def mark_king_moved(self, color: Color) -> None:
        if color == Color.WHITE:
            self.white_king_moved = True
        else:
            self.black_king_moved = True

    def mark_rook_moved(self, color: Color, side: CastlingSide) -> None:
        setattr(self, self._rook_attr(color, side), True)

    def mark_rook_left(self, origin: Square) -> None:
        """Record a rook leaving *origin* if that is a corner starting square."""
        home = ROOK_HOMES.get(origin)
        if home is not None:
            self.mark_rook_moved(*home)

    def copy(self) -> CastlingRights:
        return CastlingRights(
            white_king_moved=self.white_king_moved,
            white_rook_a_moved=self.white_rook_a_moved,
            white_rook_h_moved=self.white_rook_h_moved,
            black_king_moved=self.black_king_moved,
            black_rook_a_moved=self.black_rook_a_moved,
            black_rook_h_moved=self.black_rook_h_moved,
        )

    @staticmethod
    def _rook_attr(color: Color, side: CastlingSide) -> str:
        file = "h" if side == CastlingSide.KINGSIDE else "a"
        return f"{color.name.lower()}_rook_{file}_moved"
