"""Exception types raised by the rules core.

Ordinary illegal moves are *not* exceptions: the checker returns a
:class:`~sajcredez.core.legality.LegalityResult`. Exceptions here signal
either a caller asking to apply a rejected move or a broken engine invariant.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sajcredez.core.enums import RejectReason
    from sajcredez.core.move import Move


class SajcredezError(Exception):
    """Base class for errors raised by this package."""


class InvariantViolation(SajcredezError):
    """A state that should be structurally impossible was reached.

    Indicates a bug in the caller or the engine, never a legal-move outcome.
    """


class IllegalMoveError(SajcredezError, ValueError):
    """Raised when applying a move that the legality checker rejects."""

    def __init__(self, move: Move, reason: RejectReason) -> None:
        super().__init__(f"Illegal move {move}: {reason}")
        self.move = move
        self.reason = reason
