"""Square value type and board geometry helpers.

Coordinates are ``(col, row)``. Row 0 holds white's back row and row 6
black's; pawns advance along the column axis::

    row 6   r n b k b n r
    row 5   p p p p p p p
    ...
    row 1   P P P P P P P
    row 0   R N B K B N R
            0 1 2 3 4 5 6   <- col
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_COLS = 7
BOARD_ROWS = 7
BOARD_CELLS = BOARD_COLS * BOARD_ROWS


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable board coordinate.

    Out-of-range values are allowed so that bad move claims can be built
    and rejected; use :meth:`in_bounds` before indexing a board.
    """

    col: int
    row: int

    def __add__(self, other: object) -> Square:
        if not isinstance(other, Square):
            return NotImplemented
        return Square(self.col + other.col, self.row + other.row)

    def in_bounds(self) -> bool:
        return 0 <= self.col < BOARD_COLS and 0 <= self.row < BOARD_ROWS

    def wrapped(self) -> Square:
        """Map onto the board as if its edges were glued together (a torus)."""
        return Square(self.col % BOARD_COLS, self.row % BOARD_ROWS)

    def __str__(self) -> str:
        return f"({self.col},{self.row})"


def all_squares() -> list[Square]:
    """Every on-board square, row by row."""
    return [Square(col, row) for row in range(BOARD_ROWS) for col in range(BOARD_COLS)]
