"""Tests for the Piece enumeration."""

import pytest

from sajcredez.core.enums import Color, PieceType
from sajcredez.core.piece import Piece


class TestDecomposition:
    def test_empty_has_no_color(self) -> None:
        assert Piece.EMPTY.color is None
        assert Piece.EMPTY.piece_type is None
        assert Piece.EMPTY.is_empty

    @pytest.mark.parametrize("color", list(Color))
    @pytest.mark.parametrize("piece_type", list(PieceType))
    def test_of_round_trips(self, color: Color, piece_type: PieceType) -> None:
        piece = Piece.of(color, piece_type)
        assert piece.color == color
        assert piece.piece_type == piece_type
        assert not piece.is_empty

    def test_eleven_members(self) -> None:
        assert len(Piece) == 11

    def test_no_queen(self) -> None:
        assert "QUEEN" not in PieceType.__members__


class TestCharacters:
    def test_str(self) -> None:
        assert str(Piece.WHITE_KNIGHT) == "N"
        assert str(Piece.BLACK_KING) == "k"
        assert str(Piece.EMPTY) == "_"

    def test_from_char(self) -> None:
        assert Piece.from_char("R") == Piece.WHITE_ROOK
        assert Piece.from_char("b") == Piece.BLACK_BISHOP
        assert Piece.from_char("_") == Piece.EMPTY

    @pytest.mark.parametrize("char", ["q", "Q", "x", "", "NN"])
    def test_invalid_char(self, char: str) -> None:
        with pytest.raises(ValueError):
            Piece.from_char(char)

    def test_symbols(self) -> None:
        assert Piece.WHITE_KING.symbol == "♔"
        assert Piece.BLACK_PAWN.symbol == "♟"
        assert Piece.EMPTY.symbol == "_"
