"""Piece enumeration: the empty cell plus five kinds for each color."""

from __future__ import annotations

from enum import IntEnum

from sajcredez.core.enums import Color, PieceType


class Piece(IntEnum):
    """Closed set of board occupants.

    ``EMPTY`` is a regular occupant value. Its :attr:`color` and
    :attr:`piece_type` are ``None`` rather than a default side.
    """

    EMPTY = 0
    WHITE_PAWN = 1
    WHITE_KNIGHT = 2
    WHITE_BISHOP = 3
    WHITE_ROOK = 4
    WHITE_KING = 5
    BLACK_PAWN = 6
    BLACK_KNIGHT = 7
    BLACK_BISHOP = 8
    BLACK_ROOK = 9
    BLACK_KING = 10

    # ── Decomposition ────────────────────────────────────────────────────

    @property
    def color(self) -> Color | None:
        return _COLOR_OF[self]

    @property
    def piece_type(self) -> PieceType | None:
        return _TYPE_OF[self]

    @property
    def is_empty(self) -> bool:
        return self is Piece.EMPTY

    @classmethod
    def of(cls, color: Color, piece_type: PieceType) -> Piece:
        """Compose, e.g. ``Piece.of(Color.BLACK, PieceType.ROOK)``."""
        return _BY_PARTS[(color, piece_type)]

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN-style letter (uppercase = white, lowercase = black, ``_`` = empty)."""
        return _CHARS[self]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        try:
            return _FROM_CHAR[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None

    @property
    def symbol(self) -> str:
        """Unicode glyph, e.g. ♞."""
        return _UNICODE[self]


_BY_PARTS: dict[tuple[Color, PieceType], Piece] = {
    (Color.WHITE, PieceType.PAWN): Piece.WHITE_PAWN,
    (Color.WHITE, PieceType.KNIGHT): Piece.WHITE_KNIGHT,
    (Color.WHITE, PieceType.BISHOP): Piece.WHITE_BISHOP,
    (Color.WHITE, PieceType.ROOK): Piece.WHITE_ROOK,
    (Color.WHITE, PieceType.KING): Piece.WHITE_KING,
    (Color.BLACK, PieceType.PAWN): Piece.BLACK_PAWN,
    (Color.BLACK, PieceType.KNIGHT): Piece.BLACK_KNIGHT,
    (Color.BLACK, PieceType.BISHOP): Piece.BLACK_BISHOP,
    (Color.BLACK, PieceType.ROOK): Piece.BLACK_ROOK,
    (Color.BLACK, PieceType.KING): Piece.BLACK_KING,
}

_COLOR_OF: dict[Piece, Color | None] = {p: c for (c, _), p in _BY_PARTS.items()}
_COLOR_OF[Piece.EMPTY] = None

_TYPE_OF: dict[Piece, PieceType | None] = {p: t for (_, t), p in _BY_PARTS.items()}
_TYPE_OF[Piece.EMPTY] = None

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.KING: "k",
}

_CHARS: dict[Piece, str] = {
    Piece.EMPTY: "_",
    **{
        p: _LETTERS[t].upper() if c == Color.WHITE else _LETTERS[t]
        for (c, t), p in _BY_PARTS.items()
    },
}

_FROM_CHAR: dict[str, Piece] = {v: k for k, v in _CHARS.items()}

_UNICODE: dict[Piece, str] = {
    Piece.EMPTY: "_",
    Piece.WHITE_PAWN: "♙",
    Piece.WHITE_KNIGHT: "♘",
    Piece.WHITE_BISHOP: "♗",
    Piece.WHITE_ROOK: "♖",
    Piece.WHITE_KING: "♔",
    Piece.BLACK_PAWN: "♟",
    Piece.BLACK_KNIGHT: "♞",
    Piece.BLACK_BISHOP: "♝",
    Piece.BLACK_ROOK: "♜",
    Piece.BLACK_KING: "♚",
}
