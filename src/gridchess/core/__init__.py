"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from gridchess.core import GameState, legal_moves, parse_square

    state = GameState.initial()
    e2 = parse_square("e2")
    for sq in legal_moves(state, e2):
        print(sq)
    state.apply_move(e2, parse_square("e4"))
"""

from gridchess.core.attacks import AttackOracle, NullAttackOracle
from gridchess.core.board import Board
from gridchess.core.castling import CastlingRights
from gridchess.core.enums import CastlingSide, Color, MoveFlag, PieceType
from gridchess.core.move import Move
from gridchess.core.piece import Piece
from gridchess.core.rules import MoveValidator, is_legal, legal_moves
from gridchess.core.state import GameState, apply_move
from gridchess.core.types import (
    Square,
    all_squares,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "CastlingSide",
    "Color",
    "MoveFlag",
    "PieceType",
    # Types / helpers
    "Square",
    "all_squares",
    "parse_square",
    "square_name",
    # Domain objects
    "AttackOracle",
    "Board",
    "CastlingRights",
    "GameState",
    "Move",
    "MoveValidator",
    "NullAttackOracle",
    "Piece",
    # Operations
    "apply_move",
    "is_legal",
    "legal_moves",
]
