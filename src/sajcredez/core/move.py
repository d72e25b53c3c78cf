"""Move claim value object."""

from __future__ import annotations

from dataclasses import dataclass

from sajcredez.core.enums import Enhancement
from sajcredez.core.piece import Piece
from sajcredez.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """A move as submitted by a caller.

    ``from_piece`` and ``to_piece`` are what the caller *believes* occupies
    each square; the legality checker compares them against the board.
    ``promotion`` is carried but no rule uses it.
    """

    from_sq: Square
    to_sq: Square
    from_piece: Piece
    to_piece: Piece = Piece.EMPTY
    enhancement: Enhancement = Enhancement.NONE
    promotion: Piece | None = None

    @property
    def is_enhanced(self) -> bool:
        return self.enhancement != Enhancement.NONE

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.from_piece!s}{self.from_sq}-{self.to_sq}"
        if not self.to_piece.is_empty:
            base += f"x{self.to_piece!s}"
        if self.is_enhanced:
            base += "+"
        return base
