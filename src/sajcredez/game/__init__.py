"""Session layer — serialized ownership of a game's position.

Quick start::

    from sajcredez.core import Options
    from sajcredez.game import GameSession

    session = GameSession(Options.with_charges(2))
    result = session.submit(move)
"""

from sajcredez.game.session import GameSession, SessionEvents

__all__ = [
    "GameSession",
    "SessionEvents",
]
