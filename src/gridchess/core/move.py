"""Move value object (coordinate notation)."""

from __future__ import annotations

from dataclasses import dataclass

from gridchess.core.enums import CastlingSide, MoveFlag
from gridchess.core.types import Square, square_name

_CASTLE_FLAGS: dict[MoveFlag, CastlingSide] = {
    MoveFlag.CASTLE_KINGSIDE: CastlingSide.KINGSIDE,
    MoveFlag.CASTLE_QUEENSIDE: CastlingSide.QUEENSIDE,
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single applied move."""

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL

    @property
    def is_castle(self) -> bool:
        return self.flag in _CASTLE_FLAGS

    @property
    def castling_side(self) -> CastlingSide | None:
        return _CASTLE_FLAGS.get(self.flag)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
