"""Core enumerations and flags for the Sajcredez domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, StrEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Piece kinds of the variant (there is no queen)."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    KING = 5


class Enhancement(IntEnum):
    """Whether a move spends an enhancement charge."""

    NONE = 0
    ENHANCE_MOVE = 1


class CastlingRights(IntFlag):
    """Bitmask for castling availability.

    Tracked on the position but not consulted by any legality rule yet.
    """

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH


class RejectReason(StrEnum):
    """Why the legality checker refused a move."""

    OUT_OF_BOUNDS = "out-of-bounds"
    STATE_MISMATCH = "state-mismatch"
    WRONG_TURN = "wrong-turn"
    INSUFFICIENT_RESOURCE = "insufficient-resource"
    SAME_COLOR_VIOLATION = "same-color-violation"
    UNREACHABLE_DESTINATION = "unreachable"
