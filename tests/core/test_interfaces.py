"""Tests for the capability interfaces."""

import pytest

from sajcredez.core.interfaces import (
    IBoardFormatter,
    IMoveLister,
    IMoveParser,
    IThreatDetector,
)
from sajcredez.core.legality import check_move_legality
from sajcredez.core.move import Move
from sajcredez.core.patterns import KNIGHT_OFFSETS, jump_targets
from sajcredez.core.piece import Piece
from sajcredez.core.position import Position
from sajcredez.core.types import Square, all_squares


class _KnightLister(IMoveLister):
    """Lists knight moves by asking the checker about every candidate."""

    def legal_moves(self, position: Position) -> list[Move]:
        moves: list[Move] = []
        for src in all_squares():
            piece = position.piece_at(src)
            if piece not in (Piece.WHITE_KNIGHT, Piece.BLACK_KNIGHT):
                continue
            for dst in jump_targets(src, KNIGHT_OFFSETS):
                move = Move(src, dst, piece, position.piece_at(dst))
                if check_move_legality(move, position):
                    moves.append(move)
        return moves


class _LetterFormatter(IBoardFormatter):
    def format(self, position: Position) -> str:
        return repr(position.board)


class TestInterfaces:
    @pytest.mark.parametrize(
        "iface", [IMoveLister, IThreatDetector, IMoveParser, IBoardFormatter]
    )
    def test_abstract(self, iface: type) -> None:
        with pytest.raises(TypeError):
            iface()

    def test_lister_drives_the_checker(self, start_position: Position) -> None:
        moves = _KnightLister().legal_moves(start_position)
        assert {(m.from_sq, m.to_sq) for m in moves} == {
            (Square(1, 0), Square(0, 2)),
            (Square(1, 0), Square(2, 2)),
            (Square(5, 0), Square(4, 2)),
            (Square(5, 0), Square(6, 2)),
        }

    def test_formatter(self, start_position: Position) -> None:
        assert "R N B K B N R" in _LetterFormatter().format(start_position)
