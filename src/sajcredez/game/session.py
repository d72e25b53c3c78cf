"""GameSession — owns one Position and serializes access to it.

Coordinates: Position, legality checks, move application.
Emits events via simple callbacks so a server / UI / tests can subscribe.
Not a game loop: nobody is prompted to move and no result is adjudicated.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from sajcredez.core.enums import Color
from sajcredez.core.legality import LegalityResult, check_move_legality
from sajcredez.core.move import Move
from sajcredez.core.options import Options
from sajcredez.core.position import Position

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Position], None]  # move, position after
RejectCallback = Callable[[Move, LegalityResult], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Exclusive owner of a :class:`Position`.

    Thread-safety: every read and write of the position goes through one
    lock, so concurrent callers see each move applied atomically. Callbacks
    run while the lock is held and must not call back into the session.
    """

    __slots__ = ("_position", "_options", "_lock", "events")

    def __init__(self, options: Options | None = None) -> None:
        self._options = options or Options()
        self._position = Position.initial(self._options)
        self._lock = threading.Lock()
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def options(self) -> Options:
        return self._options

    @property
    def turn(self) -> Color:
        with self._lock:
            return self._position.turn

    @property
    def history(self) -> tuple[Move, ...]:
        with self._lock:
            return self._position.history

    def enhancement_charges_for(self, color: Color) -> int:
        with self._lock:
            return self._position.enhancement_charges_for(color)

    def snapshot(self) -> Position:
        """Independent copy of the current position."""
        with self._lock:
            return self._position.copy()

    # ── Moves ────────────────────────────────────────────────────────────

    def check(self, move: Move) -> LegalityResult:
        with self._lock:
            return check_move_legality(move, self._position)

    def submit(self, move: Move) -> LegalityResult:
        """Validate *move* and apply it when legal. Returns the check result."""
        with self._lock:
            result = check_move_legality(move, self._position)
            if result.reason is not None:
                _LOGGER.info("Move %s rejected: %s", move, result.reason)
                for reject_cb in self.events.on_rejected:
                    reject_cb(move, result)
                return result

            self._position.apply_move(move, validate=False)
            _LOGGER.debug("Move %s accepted", move)
            for move_cb in self.events.on_move:
                move_cb(move, self._position)
            return result

    def grant_enhancement(self, color: Color, count: int = 1) -> None:
        with self._lock:
            self._position.grant_enhancement(color, count)

    def reset(self) -> None:
        """Start over from the session's options."""
        with self._lock:
            self._position = Position.initial(self._options)
