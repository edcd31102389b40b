"""GameSession — one board, alternating turns, serialised move submission.

The session is a two-state alternation (White to move / Black to move) with a
single transition: a legal move.  There is no terminal state; the owner keeps
submitting moves until it decides to stop.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from rookie.core.board import Board
from rookie.core.enums import Color, IllegalReason
from rookie.core.move import LegalMove, MoveCheck
from rookie.core.piece import Piece
from rookie.core.rules import RuleOptions, check_move, legal_destinations
from rookie.core.types import Square, square_name

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[LegalMove, Board], None]  # move, snapshot after the move
RejectCallback = Callable[[Square, Square, IllegalReason], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Owns a :class:`Board` and applies moves to it one at a time.

    Thread-safety: the check and the apply of :meth:`submit_move` run under
    one lock, so concurrent callers cannot apply a move checked against a
    position that has since changed.  Callbacks run after the lock is
    released, on the submitting thread, and receive a copy of the board taken
    while the lock was held.
    """

    __slots__ = ("_board", "_options", "_ply_count", "_lock", "events")

    def __init__(
        self,
        board: Board | None = None,
        options: RuleOptions | None = None,
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._options = options if options is not None else RuleOptions()
        self._ply_count = 0
        self._lock = threading.Lock()
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def options(self) -> RuleOptions:
        return self._options

    @property
    def side_to_move(self) -> Color:
        return self._board.side_to_move

    @property
    def ply_count(self) -> int:
        """Moves applied since the session started or was reset."""
        return self._ply_count

    def piece_at(self, sq: Square) -> Piece | None:
        return self._board.piece_at(sq)

    # ── Moves ────────────────────────────────────────────────────────────

    def is_legal_move(self, from_sq: Square, to_sq: Square) -> bool:
        with self._lock:
            return check_move(self._board, from_sq, to_sq, self._options).is_legal

    def legal_destinations(self, from_sq: Square) -> list[Square]:
        with self._lock:
            return legal_destinations(self._board, from_sq, self._options)

    def submit_move(self, from_sq: Square, to_sq: Square) -> MoveCheck:
        """Check and, if legal, play *from_sq* → *to_sq*.

        Rejected moves leave the board and the side to move untouched.
        """
        snapshot: Board | None = None
        ply = 0
        with self._lock:
            verdict = check_move(self._board, from_sq, to_sq, self._options)
            if verdict.move is not None:
                self._board.apply_move(verdict.move)
                self._ply_count += 1
                ply = self._ply_count
                snapshot = self._board.copy()

        if verdict.move is None:
            _LOGGER.debug(
                "Rejected %s%s: %s",
                square_name(from_sq),
                square_name(to_sq),
                verdict.reason.name,
            )
            self._emit_rejected(from_sq, to_sq, verdict.reason)
        else:
            assert snapshot is not None
            _LOGGER.debug("Ply %d: %s %s", ply, verdict.move.piece, verdict.move)
            self._emit_move(verdict.move, snapshot)
        return verdict

    def reset(self, board: Board | None = None) -> None:
        """Start over from *board*, or from the standard setup."""
        with self._lock:
            self._board = board if board is not None else Board.initial()
            self._ply_count = 0
            side = self._board.side_to_move
        _LOGGER.debug("Session reset, %s to move", side)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, move: LegalMove, board: Board) -> None:
        for cb in self.events.on_move:
            cb(move, board)

    def _emit_rejected(
        self, from_sq: Square, to_sq: Square, reason: IllegalReason
    ) -> None:
        for cb in self.events.on_rejected:
            cb(from_sq, to_sq, reason)
