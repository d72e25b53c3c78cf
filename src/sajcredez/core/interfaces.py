"""Capability interfaces the rules core leaves to collaborators.

Move listing, threat maps, notation parsing and board dumps are not part of
the core. Components that provide them implement these ABCs and drive the
core through :func:`~sajcredez.core.legality.check_move_legality`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sajcredez.core.enums import Color
    from sajcredez.core.move import Move
    from sajcredez.core.position import Position
    from sajcredez.core.types import Square


class IMoveLister(ABC):
    """Enumerates legal moves for the side to move."""

    @abstractmethod
    def legal_moves(self, position: Position) -> list[Move]: ...


class IThreatDetector(ABC):
    """Reports squares attacked by a side."""

    @abstractmethod
    def threatened_squares(self, position: Position, by_color: Color) -> list[Square]:
        """Squares *by_color* could move onto next turn."""


class IMoveParser(ABC):
    """Turns move text into a :class:`Move` claim."""

    @abstractmethod
    def parse(self, text: str, position: Position) -> Move:
        """Raise ``ValueError`` when *text* is not a valid move."""


class IBoardFormatter(ABC):
    """Renders a position for people or storage."""

    @abstractmethod
    def format(self, position: Position) -> str: ...
