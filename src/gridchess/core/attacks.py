"""Attack oracle consulted by the castling rule.

Check detection is not part of this engine, so the shipped oracle never
reports an attack. A real implementation can be passed to
:class:`~gridchess.core.state.GameState` without touching the rules: it
would test whether *square* is among the destinations of any *by_color*
piece.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridchess.core.board import Board
    from gridchess.core.enums import Color
    from gridchess.core.types import Square


class AttackOracle(ABC):
    """Answers "is *square* attacked by *by_color*" for a given board."""

    @abstractmethod
    def is_attacked(self, board: Board, square: Square, by_color: Color) -> bool: ...


class NullAttackOracle(AttackOracle):
    """Stub oracle: no square is ever attacked."""

    def is_attacked(self, board: Board, square: Square, by_color: Color) -> bool:
        return False
