"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from sajcredez.core.board import Board
from sajcredez.core.enums import Color
from sajcredez.core.position import Position

PositionFactory = Callable[..., Position]


@pytest.fixture
def start_position() -> Position:
    """Standard starting position, white to move, no charges."""
    return Position()


@pytest.fixture
def make_position() -> PositionFactory:
    """Build a position from seven row strings (row 0 first)."""

    def _make(
        rows: list[str],
        turn: Color = Color.WHITE,
        white: int = 0,
        black: int = 0,
    ) -> Position:
        return Position(
            board=Board.from_rows(rows),
            side_to_move=turn,
            white_enhancements=white,
            black_enhancements=black,
        )

    return _make
