"""Position — complete game state (board + turn + charges + castling + history)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sajcredez.core.board import Board
from sajcredez.core.enums import CastlingRights, Color, PieceType
from sajcredez.core.errors import IllegalMoveError, InvariantViolation
from sajcredez.core.legality import check_move_legality
from sajcredez.core.options import Options
from sajcredez.core.piece import Piece
from sajcredez.core.types import BOARD_COLS, BOARD_ROWS, Square

if TYPE_CHECKING:
    from sajcredez.core.move import Move

_LOGGER = logging.getLogger(__name__)


class Position:
    """Authoritative Sajcredez state.

    Only :meth:`apply_move` (and :meth:`grant_enhancement`) mutate it after
    construction. A position has a single writer; sharing one across threads
    is the owner's job (see :class:`sajcredez.game.GameSession`).
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "_enhancements",
        "_history",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        white_enhancements: int = 0,
        black_enhancements: int = 0,
        castling: CastlingRights = CastlingRights.ALL,
    ) -> None:
        if white_enhancements < 0 or black_enhancements < 0:
            raise ValueError(
                "Enhancement charges must be non-negative: "
                f"white={white_enhancements!r} black={black_enhancements!r}"
            )
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self._enhancements: list[int] = [white_enhancements, black_enhancements]
        self._history: list[Move] = []

    # ── Read access ──────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece:
        return self.board[sq]

    @property
    def turn(self) -> Color:
        return self.side_to_move

    def enhancement_charges_for(self, color: Color) -> int:
        return self._enhancements[int(color)]

    @property
    def history(self) -> tuple[Move, ...]:
        """Applied moves, oldest first."""
        return tuple(self._history)

    # ── Mutation ─────────────────────────────────────────────────────────

    def grant_enhancement(self, color: Color, count: int = 1) -> None:
        """Add *count* enhancement charges to *color*'s pool."""
        if count < 0:
            raise ValueError(f"Cannot grant a negative number of charges: {count!r}")
        self._enhancements[int(color)] += count

    def apply_move(self, move: Move, *, validate: bool = True) -> None:
        """Apply *move* and hand the turn to the opponent.

        With ``validate=False`` the caller vouches for legality (engines and
        UIs that already ran the checker). Whatever stands on the
        destination is replaced, including a friendly piece under an
        enhanced knight move.

        Nothing is modified when an exception is raised.

        Raises:
            IllegalMoveError: validation is on and the checker rejects *move*.
            ValueError: a square is off the board or the source is empty.
            InvariantViolation: an enhanced move with no charge left got
                past the caller.
        """
        if validate:
            result = check_move_legality(move, self)
            if result.reason is not None:
                raise IllegalMoveError(move, result.reason)

        for sq in (move.from_sq, move.to_sq):
            if not sq.in_bounds():
                raise ValueError(f"Square {sq} is off the board")

        piece = self.board[move.from_sq]
        mover = piece.color
        if mover is None:
            raise ValueError(f"No piece on {move.from_sq}")

        idx = int(mover)
        if move.is_enhanced and self._enhancements[idx] < 1:
            _LOGGER.error("Enhanced move %s applied with no %s charges", move, mover)
            raise InvariantViolation(f"{mover!s} has no enhancement charges left")

        self.board[move.from_sq] = Piece.EMPTY
        self.board[move.to_sq] = piece

        if move.is_enhanced:
            self._enhancements[idx] -= 1

        self._update_castling(move, piece)
        self._history.append(move)
        self.side_to_move = self.side_to_move.opposite
        _LOGGER.debug("Applied %s; %s to move", move, self.side_to_move)

    # ── Castling bookkeeping ─────────────────────────────────────────────

    _ROOK_CORNERS: dict[Square, CastlingRights] = {
        Square(0, 0): CastlingRights.WHITE_QUEENSIDE,
        Square(BOARD_COLS - 1, 0): CastlingRights.WHITE_KINGSIDE,
        Square(0, BOARD_ROWS - 1): CastlingRights.BLACK_QUEENSIDE,
        Square(BOARD_COLS - 1, BOARD_ROWS - 1): CastlingRights.BLACK_KINGSIDE,
    }

    def _update_castling(self, move: Move, piece: Piece) -> None:
        if piece.piece_type == PieceType.KING:
            if piece.color == Color.WHITE:
                self.castling &= ~CastlingRights.WHITE_BOTH
            else:
                self.castling &= ~CastlingRights.BLACK_BOTH

        for sq in (move.from_sq, move.to_sq):
            if sq in self._ROOK_CORNERS:
                self.castling &= ~self._ROOK_CORNERS[sq]

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy, history included."""
        pos = Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            white_enhancements=self._enhancements[0],
            black_enhancements=self._enhancements[1],
            castling=self.castling,
        )
        pos._history = self._history.copy()
        return pos

    @classmethod
    def initial(cls, options: Options | None = None) -> Position:
        """Starting layout, white to move, pools taken from *options*."""
        opts = options or Options()
        return cls(
            white_enhancements=opts.white_enhancements,
            black_enhancements=opts.black_enhancements,
            castling=opts.castling,
        )

    def __repr__(self) -> str:
        return (
            f"Position(turn={self.side_to_move!s}, "
            f"enhancements=W{self._enhancements[0]}/B{self._enhancements[1]}, "
            f"castling={self.castling!r}, moves={len(self._history)})"
        )
