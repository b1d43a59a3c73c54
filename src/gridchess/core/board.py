"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from gridchess.core.enums import Color, PieceType
from gridchess.core.piece import Piece
from gridchess.core.types import Square, all_squares, is_valid_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

_EMPTY_CHARS = frozenset(". ")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Board:
    """Mutable 64-square board. No legality checking happens here."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    @staticmethod
    def _index(sq: Square) -> int:
        row, col = sq
        if not is_valid_square(row, col):
            raise ValueError(f"Square out of range: ({row}, {col})")
        return row * 8 + col

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[self._index(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[self._index(sq)] = piece

    def piece_at(self, sq: Square) -> Piece | None:
        return self[sq]

    def set_piece(self, sq: Square, piece: Piece | None) -> None:
        """Overwrite (or clear, with None) the occupant of *sq*."""
        self[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def is_path_clear(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether every square strictly between *from_sq* and *to_sq* is empty.

        Only meaningful when the two squares share a rank, file or diagonal.
        """
        row_step = _sign(to_sq.row - from_sq.row)
        col_step = _sign(to_sq.col - from_sq.col)
        row = from_sq.row + row_step
        col = from_sq.col + col_step
        while (row, col) != (to_sq.row, to_sq.col):
            if self._squares[row * 8 + col] is not None:
                return False
            row += row_step
            col += col_step
        return True

    def squares(self) -> Iterator[Square]:
        """All 64 squares, row-major."""
        return all_squares()

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """(square, piece) for every occupied square, row-major."""
        for sq in self.squares():
            piece = self._squares[sq.row * 8 + sq.col]
            if piece is not None:
                yield sq, piece

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, Black on rows 0-1, White on rows 6-7."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Square(Color.BLACK.back_row, col)] = Piece(Color.BLACK, pt)
            b[Square(Color.BLACK.pawn_row, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(Color.WHITE.pawn_row, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(Color.WHITE.back_row, col)] = Piece(Color.WHITE, pt)
        return b

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Board:
        """Build a board from 8 strings of 8 letters, row 0 first.

        Uppercase letters are white, lowercase black, ``.`` or space empty::

            Board.from_rows([
                "rnbqkbnr",
                "pppppppp",
                "........",
                ...
            ])
        """
        if len(rows) != 8:
            raise ValueError(f"Expected 8 rows, got {len(rows)}")
        b = cls()
        for row, line in enumerate(rows):
            if len(line) != 8:
                raise ValueError(f"Row {row} must have 8 squares: {line!r}")
            for col, char in enumerate(line):
                if char not in _EMPTY_CHARS:
                    b[Square(row, col)] = Piece.from_char(char)
        return b

    def to_rows(self) -> list[str]:
        """Inverse of :meth:`from_rows`."""
        return [
            "".join(
                str(p) if (p := self._squares[row * 8 + col]) is not None else "."
                for col in range(8)
            )
            for row in range(8)
        ]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, line in enumerate(self.to_rows()):
            rows.append(f"{8 - row} {' '.join(line)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
