"""Move legality: structural checks plus per-piece reachability.

Checks run in a fixed order and the first failure decides the reason::

    bounds -> claimed pieces match board -> turn -> enhancement charge
    -> same-color gate -> piece reachability (normal or enhanced rules)

Enhanced moves change reachability per piece:

* knight, king: same jumps (an enhanced knight may also land on a friend);
* rook: slides straight through occupied squares;
* bishop: diagonal slides wrap around the board edges;
* pawn: forward and both diagonals regardless of what occupies them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, assert_never

from sajcredez.core.enums import Color, PieceType, RejectReason
from sajcredez.core.errors import InvariantViolation
from sajcredez.core.patterns import (
    BISHOP_DIRS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    ROOK_DIRS,
    jump_targets,
    pawn_diagonals,
    pawn_forward,
    ray,
)
from sajcredez.core.types import BOARD_CELLS, Square

if TYPE_CHECKING:
    from sajcredez.core.board import Board
    from sajcredez.core.move import Move
    from sajcredez.core.position import Position

_LOGGER = logging.getLogger(__name__)

# A wrapped diagonal comes back to its origin after 7 steps, so this cap
# only trips if the slide stops advancing.
_WRAP_STEP_LIMIT = BOARD_CELLS


@dataclass(frozen=True, slots=True)
class LegalityResult:
    """Outcome of a legality check. Truthy when the move is accepted."""

    reason: RejectReason | None = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def accepted(cls) -> LegalityResult:
        return _ACCEPTED

    @classmethod
    def rejected(cls, reason: RejectReason) -> LegalityResult:
        return cls(reason)


_ACCEPTED = LegalityResult()


def check_move_legality(move: Move, position: Position) -> LegalityResult:
    """Decide whether *move* is legal in *position*. Never mutates anything.

    Raises:
        InvariantViolation: the engine reached a state that should be
            impossible (e.g. an empty source past the turn check).
    """
    board = position.board

    if not (move.from_sq.in_bounds() and move.to_sq.in_bounds()):
        return _reject(move, RejectReason.OUT_OF_BOUNDS)

    if move.from_piece != board[move.from_sq] or move.to_piece != board[move.to_sq]:
        return _reject(move, RejectReason.STATE_MISMATCH)

    # An empty source has no color and fails here.
    mover = move.from_piece.color
    if mover is None or mover != position.turn:
        return _reject(move, RejectReason.WRONG_TURN)

    if move.is_enhanced and position.enhancement_charges_for(mover) < 1:
        return _reject(move, RejectReason.INSUFFICIENT_RESOURCE)

    friendly_landing_allowed = (
        move.is_enhanced and move.from_piece.piece_type == PieceType.KNIGHT
    )
    if not friendly_landing_allowed and move.to_piece.color == mover:
        return _reject(move, RejectReason.SAME_COLOR_VIOLATION)

    if not _is_reachable(move, board, mover):
        return _reject(move, RejectReason.UNREACHABLE_DESTINATION)

    return _ACCEPTED


class LegalityChecker:
    """Static legality checker that operates on a :class:`Position`."""

    @staticmethod
    def check(move: Move, position: Position) -> LegalityResult:
        return check_move_legality(move, position)

    @staticmethod
    def is_legal(move: Move, position: Position) -> bool:
        return check_move_legality(move, position).ok


# -- Internals -------------------------------------------------------------


def _reject(move: Move, reason: RejectReason) -> LegalityResult:
    _LOGGER.debug("Rejected %s: %s", move, reason)
    return LegalityResult.rejected(reason)


def _is_reachable(move: Move, board: Board, mover: Color) -> bool:
    piece_type = move.from_piece.piece_type
    enhanced = move.is_enhanced

    match piece_type:
        case PieceType.KNIGHT:
            return _is_jump(move, KNIGHT_OFFSETS)
        case PieceType.KING:
            return _is_jump(move, KING_OFFSETS)
        case PieceType.ROOK:
            if enhanced:
                return _on_ray(move, ROOK_DIRS)
            return _slide_reaches(move, board, ROOK_DIRS)
        case PieceType.BISHOP:
            if enhanced:
                return _wrapping_slide_reaches(move, board, BISHOP_DIRS)
            return _slide_reaches(move, board, BISHOP_DIRS)
        case PieceType.PAWN:
            return _pawn_reaches(move, board, mover, enhanced)
        case None:
            _LOGGER.error("Reachability requested for empty source in %s", move)
            raise InvariantViolation(f"No piece to move from {move.from_sq}")
        case _:
            assert_never(piece_type)


def _is_jump(move: Move, offsets: tuple[Square, ...]) -> bool:
    return move.to_sq in jump_targets(move.from_sq, offsets)


def _on_ray(move: Move, directions: tuple[Square, ...]) -> bool:
    return any(move.to_sq in ray(move.from_sq, d) for d in directions)


def _slide_reaches(move: Move, board: Board, directions: tuple[Square, ...]) -> bool:
    for direction in directions:
        for sq in ray(move.from_sq, direction):
            if sq == move.to_sq:
                return True
            if not board.is_empty(sq):
                break
    return False


def _wrapping_slide_reaches(
    move: Move, board: Board, directions: tuple[Square, ...]
) -> bool:
    for direction in directions:
        sq = move.from_sq
        for _ in range(_WRAP_STEP_LIMIT):
            sq = (sq + direction).wrapped()
            if sq == move.to_sq:
                return True
            if not board.is_empty(sq):
                break
        else:
            _LOGGER.error(
                "Wrapping slide from %s along %s exceeded %d steps",
                move.from_sq,
                direction,
                _WRAP_STEP_LIMIT,
            )
            raise InvariantViolation(
                f"Wrapping slide did not terminate within {_WRAP_STEP_LIMIT} steps"
            )
    return False


def _pawn_reaches(move: Move, board: Board, mover: Color, enhanced: bool) -> bool:
    if move.to_sq == move.from_sq + pawn_forward(mover):
        return enhanced or board.is_empty(move.to_sq)
    for diagonal in pawn_diagonals(mover):
        if move.to_sq == move.from_sq + diagonal:
            return enhanced or not board.is_empty(move.to_sq)
    return False
