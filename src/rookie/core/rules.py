"""Move legality: turn and capture guards plus one shape check per piece type.

Sliding pieces are validated on shape only unless
:attr:`RuleOptions.path_blocking` is enabled, in which case every square
strictly between origin and destination must be empty as well.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from rookie.core.board import Board, _position_stamp
from rookie.core.enums import Color, IllegalReason, PieceType
from rookie.core.move import LegalMove, MoveCheck
from rookie.core.types import ALL_SQUARES, Square

ShapeCheck = Callable[[Board, Square, Square, Color], bool]


@dataclass(frozen=True, slots=True)
class RuleOptions:
    """Rule-variant switches."""

    # Reject rook/bishop/queen moves that pass over an occupied square.
    path_blocking: bool = False


DEFAULT_OPTIONS = RuleOptions()

_SLIDERS = frozenset({PieceType.ROOK, PieceType.BISHOP, PieceType.QUEEN})


# ── Per-piece shape checks ───────────────────────────────────────────────────


def is_rook_shape(from_sq: Square, to_sq: Square) -> bool:
    return from_sq[0] == to_sq[0] or from_sq[1] == to_sq[1]


def is_bishop_shape(from_sq: Square, to_sq: Square) -> bool:
    return abs(to_sq[0] - from_sq[0]) == abs(to_sq[1] - from_sq[1])


def is_queen_shape(from_sq: Square, to_sq: Square) -> bool:
    return is_rook_shape(from_sq, to_sq) or is_bishop_shape(from_sq, to_sq)


def is_knight_shape(from_sq: Square, to_sq: Square) -> bool:
    dr = abs(to_sq[0] - from_sq[0])
    df = abs(to_sq[1] - from_sq[1])
    return (dr, df) in ((2, 1), (1, 2))


def is_king_shape(from_sq: Square, to_sq: Square) -> bool:
    return abs(to_sq[0] - from_sq[0]) <= 1 and abs(to_sq[1] - from_sq[1]) <= 1


def is_pawn_move(board: Board, from_sq: Square, to_sq: Square, color: Color) -> bool:
    """Single push, double push from the start rank, or diagonal capture."""
    direction = color.pawn_direction
    forward = from_sq[0] + direction
    same_file = to_sq[1] == from_sq[1]

    if to_sq[0] == forward and same_file and board.is_empty(to_sq):
        return True

    if (
        from_sq[0] == color.pawn_start_rank
        and to_sq[0] == from_sq[0] + 2 * direction
        and same_file
    ):
        return board.is_empty((forward, from_sq[1])) and board.is_empty(to_sq)

    # Same-side targets are rejected before we get here.
    if to_sq[0] == forward and abs(to_sq[1] - from_sq[1]) == 1:
        return not board.is_empty(to_sq)

    return False


def _geometry(check: Callable[[Square, Square], bool]) -> ShapeCheck:
    def shape(board: Board, from_sq: Square, to_sq: Square, color: Color) -> bool:
        return check(from_sq, to_sq)

    return shape


_SHAPE_CHECKS: dict[PieceType, ShapeCheck] = {
    PieceType.PAWN: is_pawn_move,
    PieceType.KNIGHT: _geometry(is_knight_shape),
    PieceType.BISHOP: _geometry(is_bishop_shape),
    PieceType.ROOK: _geometry(is_rook_shape),
    PieceType.QUEEN: _geometry(is_queen_shape),
    PieceType.KING: _geometry(is_king_shape),
}


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def squares_between(from_sq: Square, to_sq: Square) -> list[Square]:
    """Squares strictly between two squares on a shared rank, file or diagonal.

    Empty for adjacent squares and for pairs that are not aligned.
    """
    dr = to_sq[0] - from_sq[0]
    df = to_sq[1] - from_sq[1]
    if not (dr == 0 or df == 0 or abs(dr) == abs(df)):
        return []
    step_r, step_f = _sign(dr), _sign(df)
    squares: list[Square] = []
    r, f = from_sq[0] + step_r, from_sq[1] + step_f
    while (r, f) != (to_sq[0], to_sq[1]):
        squares.append(Square(r, f))
        r += step_r
        f += step_f
    return squares


def is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    return all(board.is_empty(sq) for sq in squares_between(from_sq, to_sq))


# ── Public entry points ──────────────────────────────────────────────────────


def check_move(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    options: RuleOptions | None = None,
) -> MoveCheck:
    """Decide whether moving *from_sq* → *to_sq* is legal on *board*.

    Squares must already be on the board; they are not re-validated here.
    The first failing guard determines the reported reason.  A legal verdict
    carries a :class:`LegalMove` bound to the current board state.
    """
    opts = options if options is not None else DEFAULT_OPTIONS

    if (from_sq[0], from_sq[1]) == (to_sq[0], to_sq[1]):
        return MoveCheck(IllegalReason.NULL_MOVE)

    piece = board.piece_at(from_sq)
    if piece is None:
        return MoveCheck(IllegalReason.NO_PIECE)

    if piece.color != board.side_to_move:
        return MoveCheck(IllegalReason.WRONG_TURN)

    target = board.piece_at(to_sq)
    if target is not None and target.color == piece.color:
        return MoveCheck(IllegalReason.SELF_CAPTURE)

    if not _SHAPE_CHECKS[piece.piece_type](board, from_sq, to_sq, piece.color):
        return MoveCheck(IllegalReason.ILLEGAL_SHAPE)

    if (
        opts.path_blocking
        and piece.piece_type in _SLIDERS
        and not is_path_clear(board, from_sq, to_sq)
    ):
        return MoveCheck(IllegalReason.PATH_BLOCKED)

    return MoveCheck(
        IllegalReason.NONE,
        LegalMove(
            from_sq=Square(from_sq[0], from_sq[1]),
            to_sq=Square(to_sq[0], to_sq[1]),
            piece=piece,
            captured=target,
            stamp=_position_stamp(board),
        ),
    )


def is_legal_move(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    options: RuleOptions | None = None,
) -> bool:
    return check_move(board, from_sq, to_sq, options).is_legal


def make_move(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    options: RuleOptions | None = None,
) -> bool:
    """Check and, if legal, apply the move. Returns whether it was played."""
    verdict = check_move(board, from_sq, to_sq, options)
    if verdict.move is None:
        return False
    board.apply_move(verdict.move)
    return True


def legal_destinations(
    board: Board,
    from_sq: Square,
    options: RuleOptions | None = None,
) -> list[Square]:
    """Every square the piece on *from_sq* may move to, in index order."""
    return [sq for sq in ALL_SQUARES if is_legal_move(board, from_sq, sq, options)]
