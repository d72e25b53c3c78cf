"""Core domain layer — Sajcredez rules with zero external dependencies.

Quick start::

    from sajcredez.core import Move, Piece, Position, Square, check_move_legality

    pos = Position.initial()
    move = Move(Square(1, 0), Square(2, 2), Piece.WHITE_KNIGHT)
    result = check_move_legality(move, pos)
    if result:
        pos.apply_move(move)
    else:
        print(result.reason)
"""

from sajcredez.core.board import Board
from sajcredez.core.enums import (
    CastlingRights,
    Color,
    Enhancement,
    PieceType,
    RejectReason,
)
from sajcredez.core.errors import IllegalMoveError, InvariantViolation, SajcredezError
from sajcredez.core.interfaces import (
    IBoardFormatter,
    IMoveLister,
    IMoveParser,
    IThreatDetector,
)
from sajcredez.core.legality import LegalityChecker, LegalityResult, check_move_legality
from sajcredez.core.move import Move
from sajcredez.core.options import Options
from sajcredez.core.piece import Piece
from sajcredez.core.position import Position
from sajcredez.core.types import BOARD_CELLS, BOARD_COLS, BOARD_ROWS, Square

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "Enhancement",
    "PieceType",
    "RejectReason",
    # Types / geometry
    "BOARD_CELLS",
    "BOARD_COLS",
    "BOARD_ROWS",
    "Square",
    # Domain objects
    "Board",
    "Move",
    "Options",
    "Piece",
    "Position",
    # Legality
    "LegalityChecker",
    "LegalityResult",
    "check_move_legality",
    # Errors
    "IllegalMoveError",
    "InvariantViolation",
    "SajcredezError",
    # Capability interfaces
    "IBoardFormatter",
    "IMoveLister",
    "IMoveParser",
    "IThreatDetector",
]
