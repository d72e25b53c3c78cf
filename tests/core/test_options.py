"""Tests for per-game Options."""

import pytest

from sajcredez.core.enums import CastlingRights
from sajcredez.core.options import Options


class TestOptions:
    def test_defaults(self) -> None:
        opts = Options()
        assert opts.white_enhancements == 0
        assert opts.black_enhancements == 0
        assert opts.castling == CastlingRights.ALL
        assert Options.standard() == opts

    def test_with_charges(self) -> None:
        opts = Options.with_charges(3)
        assert (opts.white_enhancements, opts.black_enhancements) == (3, 3)

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            Options(black_enhancements=-2)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Options().white_enhancements = 1  # type: ignore[misc]
