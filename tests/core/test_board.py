"""Tests for Board."""

import pytest

from sajcredez.core.board import Board
from sajcredez.core.enums import Color, PieceType
from sajcredez.core.piece import Piece
from sajcredez.core.types import Square

BACK_ROW = [
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
]


class TestBoardInitial:
    def test_white_back_row(self) -> None:
        board = Board.initial()
        for col, pt in enumerate(BACK_ROW):
            assert board[Square(col, 0)] == Piece.of(Color.WHITE, pt), f"col {col}"

    def test_black_back_row_mirrors_white(self) -> None:
        board = Board.initial()
        for col, pt in enumerate(BACK_ROW):
            assert board[Square(col, 6)] == Piece.of(Color.BLACK, pt), f"col {col}"

    def test_pawn_rows(self) -> None:
        board = Board.initial()
        for col in range(7):
            assert board[Square(col, 1)] == Piece.WHITE_PAWN
            assert board[Square(col, 5)] == Piece.BLACK_PAWN

    def test_three_empty_rows(self) -> None:
        board = Board.initial()
        for row in (2, 3, 4):
            for col in range(7):
                assert board.is_empty(Square(col, row))

    def test_one_king_each(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == Square(3, 0)
        assert board.king_square(Color.BLACK) == Square(3, 6)
        assert len(board.pieces(Color.WHITE)) == 14
        assert len(board.pieces(Color.BLACK)) == 14


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        board[Square(4, 4)] = Piece.BLACK_ROOK
        assert board[Square(4, 4)] == Piece.BLACK_ROOK
        assert board.is_empty(Square(4, 3))

    @pytest.mark.parametrize("sq", [Square(7, 0), Square(0, -1)])
    def test_off_board_access(self, sq: Square) -> None:
        board = Board()
        with pytest.raises(IndexError):
            board[sq]
        with pytest.raises(IndexError):
            board[sq] = Piece.WHITE_PAWN

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[Square(3, 0)] = Piece.EMPTY
        assert board != copy
        assert board[Square(3, 0)] == Piece.WHITE_KING

    def test_missing_king(self) -> None:
        with pytest.raises(ValueError):
            Board().king_square(Color.WHITE)


class TestFromRows:
    def test_matches_initial(self) -> None:
        board = Board.from_rows(
            [
                "RNBKBNR",
                "PPPPPPP",
                ".......",
                "_______",
                ".......",
                "ppppppp",
                "rnbkbnr",
            ]
        )
        assert board == Board.initial()

    def test_wrong_row_count(self) -> None:
        with pytest.raises(ValueError):
            Board.from_rows(["......."] * 6)

    def test_wrong_row_width(self) -> None:
        with pytest.raises(ValueError):
            Board.from_rows(["......"] + ["......."] * 6)

    def test_unknown_piece(self) -> None:
        with pytest.raises(ValueError):
            Board.from_rows(["...Q..."] + ["......."] * 6)


class TestRepr:
    def test_top_row_is_black(self) -> None:
        lines = repr(Board.initial()).splitlines()
        assert lines[0] == "6 r n b k b n r"
        assert lines[-2] == "0 R N B K B N R"
        assert lines[-1] == "  0 1 2 3 4 5 6"
