"""Move value objects: verdicts and applyable tokens."""

from __future__ import annotations

from dataclasses import dataclass, field

from rookie.core.enums import IllegalReason
from rookie.core.piece import Piece
from rookie.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class LegalMove:
    """A move that passed the rule check against one specific board state.

    Only :func:`rookie.core.rules.check_move` creates these.  The token carries
    a private marker of the position it was checked on, so
    :meth:`Board.apply_move` refuses hand-built tokens and ones the board has
    moved past.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    stamp: object = field(default=None, repr=False, compare=False)

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"


@dataclass(frozen=True, slots=True)
class MoveCheck:
    """Verdict for a candidate move.

    Truthy when legal; then :attr:`move` holds the token to apply.
    """

    reason: IllegalReason
    move: LegalMove | None = None

    @property
    def is_legal(self) -> bool:
        return self.reason == IllegalReason.NONE

    def __bool__(self) -> bool:
        return self.is_legal
