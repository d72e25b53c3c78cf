"""Board - piece placement on a 7x7 grid."""

from __future__ import annotations

from sajcredez.core.enums import Color, PieceType
from sajcredez.core.piece import Piece
from sajcredez.core.types import BOARD_COLS, BOARD_ROWS, Square

_BACK_ROW: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 7x7 grid. Empty cells hold :attr:`Piece.EMPTY`, never ``None``."""

    __slots__ = ("_rows",)

    def __init__(self) -> None:
        self._rows: list[list[Piece]] = [
            [Piece.EMPTY] * BOARD_COLS for _ in range(BOARD_ROWS)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece:
        if not sq.in_bounds():
            raise IndexError(f"Square off the board: {sq}")
        return self._rows[sq.row][sq.col]

    def __setitem__(self, sq: Square, piece: Piece) -> None:
        if not sq.in_bounds():
            raise IndexError(f"Square off the board: {sq}")
        self._rows[sq.row][sq.col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is Piece.EMPTY

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Square]:
        """Squares occupied by *color*."""
        return [
            Square(col, row)
            for row, cells in enumerate(self._rows)
            for col, piece in enumerate(cells)
            if piece.color == color
        ]

    def king_square(self, color: Color) -> Square:
        """Return the first king square found for *color*."""
        king = Piece.of(color, PieceType.KING)
        for row, cells in enumerate(self._rows):
            for col, piece in enumerate(cells):
                if piece is king:
                    return Square(col, row)
        raise ValueError(f"No {color.name} king on board")

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._rows = [cells.copy() for cells in self._rows]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Starting layout: back rows on rows 0/6, pawns on rows 1/5."""
        b = cls()
        for col, pt in enumerate(_BACK_ROW):
            b[Square(col, 0)] = Piece.of(Color.WHITE, pt)
            b[Square(col, 1)] = Piece.WHITE_PAWN
            b[Square(col, BOARD_ROWS - 2)] = Piece.BLACK_PAWN
            b[Square(col, BOARD_ROWS - 1)] = Piece.of(Color.BLACK, pt)
        return b

    @classmethod
    def from_rows(cls, rows: list[str]) -> Board:
        """Build from seven 7-character strings, row 0 first.

        Characters follow :meth:`Piece.from_char` (``_`` or ``.`` for empty).
        """
        if len(rows) != BOARD_ROWS:
            raise ValueError(f"Expected {BOARD_ROWS} rows, got {len(rows)}")
        b = cls()
        for row, text in enumerate(rows):
            if len(text) != BOARD_COLS:
                raise ValueError(f"Invalid row width: {text!r}")
            for col, ch in enumerate(text):
                b[Square(col, row)] = Piece.EMPTY if ch == "." else Piece.from_char(ch)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        lines = [
            f"{row} {' '.join(str(p) for p in self._rows[row])}"
            for row in range(BOARD_ROWS - 1, -1, -1)
        ]
        lines.append("  " + " ".join(str(col) for col in range(BOARD_COLS)))
        return "\n".join(lines)
