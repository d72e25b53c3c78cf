"""Per-game configuration."""

from __future__ import annotations

from dataclasses import dataclass

from sajcredez.core.enums import CastlingRights


@dataclass(slots=True, frozen=True)
class Options:
    """Starting conditions for a new game.

    Args:
        white_enhancements: Enhancement charges white starts with.
        black_enhancements: Enhancement charges black starts with.
        castling: Initial castling-rights flags.
    """

    white_enhancements: int = 0
    black_enhancements: int = 0
    castling: CastlingRights = CastlingRights.ALL

    def __post_init__(self) -> None:
        if self.white_enhancements < 0 or self.black_enhancements < 0:
            raise ValueError(
                "Starting enhancement charges must be non-negative: "
                f"white={self.white_enhancements!r} "
                f"black={self.black_enhancements!r}"
            )

    # Common presets
    @classmethod
    def standard(cls) -> Options:
        """No charges, full castling rights."""
        return cls()

    @classmethod
    def with_charges(cls, count: int) -> Options:
        """Both sides start with *count* enhancement charges."""
        return cls(white_enhancements=count, black_enhancements=count)
