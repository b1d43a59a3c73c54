"""GameController: click-to-select / click-to-move orchestration.

Owns the single :class:`GameState` of a session and is its only writer.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from gridchess.core.enums import Color
from gridchess.core.move import Move
from gridchess.core.rules import MoveValidator
from gridchess.core.state import GameState
from gridchess.core.types import Square
from gridchess.game.interfaces import IGameController

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, GameState], None]
SelectionCallback = Callable[[Square | None], None]
NewGameCallback = Callable[[GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_new_game: list[NewGameCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Turns square clicks into legal moves on a single game state.

    A first click on one of the mover's pieces selects it; the next click
    attempts a move to that square. The selection is dropped after the
    second click whether or not the move was legal.

    Thread-safety: call from a single thread (the Qt main thread).
    """

    __slots__ = ("_state", "_selected", "_targets", "events")

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state if state is not None else GameState.initial()
        self._selected: Square | None = None
        self._targets: set[Square] = set()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    @property
    def selected_square(self) -> Square | None:
        return self._selected

    @property
    def highlighted_squares(self) -> frozenset[Square]:
        """Legal destinations of the selected piece."""
        return frozenset(self._targets)

    @property
    def status_text(self) -> str:
        return f"Current turn: {self.side_to_move.name.capitalize()}"

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self) -> None:
        self._state = GameState.initial()
        self._set_selection(None)
        _LOGGER.info("New game started")
        for cb in self.events.on_new_game:
            cb(self._state)

    def click(self, square: Square) -> bool:
        if self._selected is None:
            self.select(square)
            return False

        from_sq = self._selected
        self.clear_selection()
        return self.submit_move(from_sq, square)

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        if not MoveValidator(self._state).is_legal(from_sq, to_sq):
            _LOGGER.debug("Rejected move %s-%s", from_sq, to_sq)
            return False

        if self._selected is not None:
            self.clear_selection()
        move = self._state.apply_move(from_sq, to_sq)
        self._emit_move(move)
        return True

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, square: Square) -> bool:
        """Select *square* if it holds a piece of the side to move."""
        piece = self._state.board[square]
        if piece is None or piece.color != self._state.side_to_move:
            return False
        self._set_selection(square)
        return True

    def clear_selection(self) -> None:
        self._set_selection(None)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _set_selection(self, square: Square | None) -> None:
        self._selected = square
        if square is None:
            self._targets = set()
        else:
            self._targets = MoveValidator(self._state).legal_destinations(square)
        for cb in self.events.on_selection_changed:
            cb(square)

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)
