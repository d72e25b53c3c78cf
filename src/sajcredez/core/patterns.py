"""Movement pattern tables: jump offsets, slide directions, pawn steps.

Offsets are ``Square(d_col, d_row)`` deltas. Pawns advance along the column
axis (white towards higher columns, black towards lower ones). Both colors
capture towards ``col + 1``; that asymmetry is part of the variant.
"""

from __future__ import annotations

from sajcredez.core.enums import Color
from sajcredez.core.types import Square

KNIGHT_OFFSETS: tuple[Square, ...] = (
    Square(2, 1),
    Square(-2, 1),
    Square(-2, -1),
    Square(2, -1),
    Square(1, 2),
    Square(-1, 2),
    Square(-1, -2),
    Square(1, -2),
)

KING_OFFSETS: tuple[Square, ...] = (
    Square(1, 1),
    Square(1, 0),
    Square(1, -1),
    Square(0, 1),
    Square(0, -1),
    Square(-1, 1),
    Square(-1, 0),
    Square(-1, -1),
)

ROOK_DIRS: tuple[Square, ...] = (
    Square(0, -1),
    Square(0, 1),
    Square(1, 0),
    Square(-1, 0),
)

BISHOP_DIRS: tuple[Square, ...] = (
    Square(1, 1),
    Square(-1, 1),
    Square(-1, -1),
    Square(1, -1),
)

_PAWN_FORWARD: dict[Color, Square] = {
    Color.WHITE: Square(1, 0),
    Color.BLACK: Square(-1, 0),
}

_PAWN_DIAGONALS: tuple[Square, Square] = (Square(1, 1), Square(1, -1))


def pawn_forward(color: Color) -> Square:
    """Straight-ahead step for a pawn of *color*."""
    return _PAWN_FORWARD[color]


def pawn_diagonals(color: Color) -> tuple[Square, Square]:
    """Diagonal capture steps (identical for both colors)."""
    return _PAWN_DIAGONALS


def jump_targets(origin: Square, offsets: tuple[Square, ...]) -> list[Square]:
    """On-board squares one offset away from *origin*."""
    targets: list[Square] = []
    for offset in offsets:
        sq = origin + offset
        if sq.in_bounds():
            targets.append(sq)
    return targets


def ray(origin: Square, direction: Square) -> list[Square]:
    """Squares from *origin* (exclusive) towards the board edge."""
    squares: list[Square] = []
    sq = origin + direction
    while sq.in_bounds():
        squares.append(sq)
        sq = sq + direction
    return squares
