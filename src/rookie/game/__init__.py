"""Game management layer — a board with turn alternation and move events.

Quick start::

    from rookie.core import E2, E4
    from rookie.game import GameSession

    session = GameSession()
    session.events.on_move.append(lambda move, board: print(move))
    session.submit_move(E2, E4)
"""

from rookie.game.session import GameSession, SessionEvents

__all__ = [
    "GameSession",
    "SessionEvents",
]
