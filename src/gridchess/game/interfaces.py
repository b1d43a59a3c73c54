"""Abstract interfaces for the game layer.

:class:`~gridchess.game.controller.GameController` implements
:class:`IGameController`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridchess.core.enums import Color
    from gridchess.core.state import GameState
    from gridchess.core.types import Square


class IGameController(ABC):
    """Interface for the click-driven game orchestrator."""

    @property
    @abstractmethod
    def state(self) -> GameState: ...

    @property
    @abstractmethod
    def side_to_move(self) -> Color: ...

    @property
    @abstractmethod
    def selected_square(self) -> Square | None: ...

    @abstractmethod
    def new_game(self) -> None:
        """Reset to the starting position."""

    @abstractmethod
    def click(self, square: Square) -> bool:
        """Handle a click on *square*. Returns True if a move was applied."""

    @abstractmethod
    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Apply *from_sq* → *to_sq* if legal. Returns True on success."""
