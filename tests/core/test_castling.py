"""Tests for castling rights and the castling rule."""

import pytest

from gridchess.core.attacks import AttackOracle, NullAttackOracle
from gridchess.core.board import Board
from gridchess.core.castling import CastlingRights
from gridchess.core.enums import CastlingSide, Color, MoveFlag, PieceType
from gridchess.core.piece import Piece
from gridchess.core.rules import is_legal
from gridchess.core.state import GameState
from gridchess.core.types import Square, parse_square, square_name

E1, G1, C1 = parse_square("e1"), parse_square("g1"), parse_square("c1")
E8, G8, C8 = parse_square("e8"), parse_square("g8"), parse_square("c8")


def sq(name: str) -> Square:
    return parse_square(name)


def cleared(*names: str) -> GameState:
    """Initial position with *names* emptied."""
    state = GameState.initial()
    for name in names:
        state.board[sq(name)] = None
    return state


class _RecordingOracle(AttackOracle):
    def __init__(self, attacked: set[Square] | None = None) -> None:
        self.attacked = attacked or set()
        self.calls: list[tuple[str, Color]] = []

    def is_attacked(self, board: Board, square: Square, by_color: Color) -> bool:
        self.calls.append((square_name(square), by_color))
        return square in self.attacked


class TestCastlingRights:
    def test_initially_all_false(self) -> None:
        rights = CastlingRights()
        for color in Color:
            assert not rights.king_moved(color)
            for side in CastlingSide:
                assert not rights.rook_moved(color, side)
                assert rights.may_castle(color, side)

    def test_mark_rook_by_corner(self) -> None:
        rights = CastlingRights()
        rights.mark_rook_left(sq("h1"))
        rights.mark_rook_left(sq("a8"))
        assert rights.white_rook_h_moved
        assert rights.black_rook_a_moved
        assert not rights.white_rook_a_moved
        assert not rights.black_rook_h_moved

    def test_non_corner_origin_ignored(self) -> None:
        rights = CastlingRights()
        rights.mark_rook_left(sq("d4"))
        assert rights == CastlingRights()

    def test_king_flag_blocks_both_sides(self) -> None:
        rights = CastlingRights()
        rights.mark_king_moved(Color.BLACK)
        assert rights.black_king_moved
        assert not rights.may_castle(Color.BLACK, CastlingSide.KINGSIDE)
        assert not rights.may_castle(Color.BLACK, CastlingSide.QUEENSIDE)
        assert rights.may_castle(Color.WHITE, CastlingSide.KINGSIDE)

    def test_copy_independence(self) -> None:
        rights = CastlingRights()
        copy = rights.copy()
        copy.mark_king_moved(Color.WHITE)
        assert not rights.white_king_moved


class TestKingside:
    def test_blocked_in_initial_position(self) -> None:
        assert not is_legal(GameState.initial(), E1, G1)

    def test_one_blocker_is_enough(self) -> None:
        assert not is_legal(cleared("f1"), E1, G1)
        assert not is_legal(cleared("g1"), E1, G1)

    def test_white_castles_after_clearing(self) -> None:
        state = cleared("f1", "g1")
        assert is_legal(state, E1, G1)

        move = state.apply_move(E1, G1)

        assert move.flag == MoveFlag.CASTLE_KINGSIDE
        assert state.board[G1] == Piece(Color.WHITE, PieceType.KING)
        assert state.board[sq("f1")] == Piece(Color.WHITE, PieceType.ROOK)
        assert state.board.is_empty(E1)
        assert state.board.is_empty(sq("h1"))
        assert state.castling.white_king_moved
        assert state.castling.white_rook_h_moved
        assert not state.castling.white_rook_a_moved
        assert state.side_to_move == Color.BLACK

    def test_black_castles(self) -> None:
        state = cleared("f8", "g8")
        state.side_to_move = Color.BLACK
        assert is_legal(state, E8, G8)
        state.apply_move(E8, G8)
        assert state.board.to_rows()[0] == "rnbq.rk."
        assert state.castling.black_king_moved
        assert state.castling.black_rook_h_moved


class TestQueenside:
    def test_white_castles_queenside(self) -> None:
        state = cleared("b1", "c1", "d1")
        assert is_legal(state, E1, C1)

        move = state.apply_move(E1, C1)

        assert move.flag == MoveFlag.CASTLE_QUEENSIDE
        assert state.board.to_rows()[7] == "..KR.BNR"
        assert state.castling.white_rook_a_moved
        assert not state.castling.white_rook_h_moved

    def test_b_file_blocker(self) -> None:
        assert not is_legal(cleared("c1", "d1"), E1, C1)

    def test_black_queenside(self) -> None:
        state = cleared("b8", "c8", "d8")
        state.side_to_move = Color.BLACK
        assert is_legal(state, E8, C8)


class TestRightsConsumed:
    def test_king_there_and_back(self) -> None:
        state = cleared("f1", "g1")
        state.apply_move(E1, sq("f1"))
        state.apply_move(sq("a7"), sq("a6"))
        state.apply_move(sq("f1"), E1)
        state.apply_move(sq("a6"), sq("a5"))

        assert state.castling.white_king_moved
        assert state.board.to_rows()[7] == "RNBQK..R"
        assert not is_legal(state, E1, G1)

    def test_flag_alone_forbids_castling(self) -> None:
        state = cleared("f1", "g1", "b1", "c1", "d1")
        state.castling.white_king_moved = True
        assert not is_legal(state, E1, G1)
        assert not is_legal(state, E1, C1)

    def test_rook_there_and_back(self) -> None:
        state = cleared("f1", "g1", "b1", "c1", "d1")
        state.apply_move(sq("h1"), G1)
        state.apply_move(sq("a7"), sq("a6"))
        state.apply_move(G1, sq("h1"))
        state.apply_move(sq("a6"), sq("a5"))

        assert state.castling.white_rook_h_moved
        assert not is_legal(state, E1, G1)
        assert is_legal(state, E1, C1)

    def test_capture_on_corner_does_not_touch_rights(self) -> None:
        rows = [
            "....k...",
            "........",
            "..b.....",
            "........",
            "........",
            "........",
            "........",
            "....K..R",
        ]
        state = GameState(board=Board.from_rows(rows), side_to_move=Color.BLACK)
        state.apply_move(sq("c6"), sq("h1"))
        assert state.board[sq("h1")] == Piece(Color.BLACK, PieceType.BISHOP)
        assert state.castling == CastlingRights()


class TestCastlingGeometry:
    def test_must_start_on_back_rank(self) -> None:
        rows = [
            "....k...",
            "........",
            "........",
            "........",
            "........",
            "........",
            "....K..R",
            "........",
        ]
        state = GameState(board=Board.from_rows(rows))
        assert not is_legal(state, sq("e2"), sq("g2"))

    def test_only_columns_two_and_six(self) -> None:
        rows = [
            "....k...",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            "...K...R",
        ]
        state = GameState(board=Board.from_rows(rows))
        assert not is_legal(state, sq("d1"), sq("f1"))
        assert not is_legal(state, sq("d1"), sq("b1"))


class TestAttackOracle:
    def test_null_oracle_never_reports(self) -> None:
        oracle = NullAttackOracle()
        board = Board.initial()
        assert not any(
            oracle.is_attacked(board, Square(r, c), color)
            for r in range(8)
            for c in range(8)
            for color in Color
        )

    def test_oracle_consulted_for_king_path(self) -> None:
        oracle = _RecordingOracle()
        state = cleared("f1", "g1")
        state.attack_oracle = oracle
        assert is_legal(state, E1, G1)
        assert oracle.calls == [
            ("e1", Color.BLACK),
            ("f1", Color.BLACK),
            ("g1", Color.BLACK),
        ]

    def test_queenside_path_excludes_b_file(self) -> None:
        oracle = _RecordingOracle({sq("b1")})
        state = cleared("b1", "c1", "d1")
        state.attack_oracle = oracle
        assert is_legal(state, E1, C1)
        assert [name for name, _ in oracle.calls] == ["e1", "d1", "c1"]

    def test_attacked_square_blocks_castling(self) -> None:
        for attacked in ("e1", "f1", "g1"):
            state = GameState(
                board=cleared("f1", "g1").board,
                attack_oracle=_RecordingOracle({sq(attacked)}),
            )
            assert not is_legal(state, E1, G1)


class TestRuleAndApplyAgree:
    @pytest.mark.parametrize(
        ("king_to", "flag", "side", "rook_from", "rook_to"),
        [
            ("g1", MoveFlag.CASTLE_KINGSIDE, CastlingSide.KINGSIDE, "h1", "f1"),
            ("c1", MoveFlag.CASTLE_QUEENSIDE, CastlingSide.QUEENSIDE, "a1", "d1"),
        ],
    )
    def test_destination_column_decides_wing(
        self,
        king_to: str,
        flag: MoveFlag,
        side: CastlingSide,
        rook_from: str,
        rook_to: str,
    ) -> None:
        state = cleared("b1", "c1", "d1", "f1", "g1")
        assert is_legal(state, E1, sq(king_to))

        move = state.apply_move(E1, sq(king_to))

        assert move.flag == flag
        assert move.castling_side == side
        assert state.board[sq(rook_to)] == Piece(Color.WHITE, PieceType.ROOK)
        assert state.board.is_empty(sq(rook_from))
        assert state.castling.rook_moved(Color.WHITE, side)
        assert not state.castling.rook_moved(Color.WHITE, CastlingSide(1 - side))

    def test_a_file_king_castles_queenside(self) -> None:
        rows = [
            "....k...",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            "K......R",
        ]
        state = GameState(board=Board.from_rows(rows))
        assert is_legal(state, sq("a1"), C1)

        move = state.apply_move(sq("a1"), C1)

        assert move.flag == MoveFlag.CASTLE_QUEENSIDE
        assert move.castling_side == CastlingSide.QUEENSIDE
        assert state.board.to_rows()[7] == "..K....R"
        assert state.castling.white_rook_a_moved
        assert not state.castling.white_rook_h_moved

    def test_from_king_col(self) -> None:
        assert CastlingSide.from_king_col(6) == CastlingSide.KINGSIDE
        assert CastlingSide.from_king_col(2) == CastlingSide.QUEENSIDE
        assert CastlingSide.from_king_col(5) is None
