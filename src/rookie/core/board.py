"""Board - piece placement on an 8x8 board plus the side to move."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from rookie.core.enums import Color, PieceType
from rookie.core.piece import Piece
from rookie.core.types import Square, square_at, square_index

if TYPE_CHECKING:
    from rookie.core.move import LegalMove

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

_FILE_LABELS = "  a b c d e f g h"


class StaleMoveError(ValueError):
    """A :class:`LegalMove` was applied to a board it was not checked against."""


class Board:
    """64-square board and side to move.

    After construction the only writer is :meth:`apply_move`, which accepts
    nothing but a token produced by the rule check on this exact board state.
    """

    __slots__ = ("_squares", "_side_to_move", "_stamp")

    def __init__(self, side_to_move: Color = Color.WHITE) -> None:
        self._squares: list[Piece | None] = [None] * 64
        self._side_to_move = side_to_move
        # Identifies the current position; renewed on every applied move.
        self._stamp = object()

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: tuple[int, int]) -> Piece | None:
        return self.piece_at(sq)

    def piece_at(self, sq: tuple[int, int]) -> Piece | None:
        """Piece on *sq*, or ``None`` if the square is empty."""
        return self._squares[square_index(sq)]

    def is_empty(self, sq: tuple[int, int]) -> bool:
        return self._squares[square_index(sq)] is None

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square in index order."""
        for idx, piece in enumerate(self._squares):
            if piece is not None:
                yield square_at(idx), piece

    # -- Mutation / copying -------------------------------------------------

    def apply_move(self, move: LegalMove) -> None:
        """Play a move returned by the rule check on this board.

        The piece lands on the destination (replacing whatever stood there),
        the origin is emptied and the turn passes to the other side.

        Raises:
            StaleMoveError: *move* was not produced by the rule check on the
                current position of this board.
        """
        if move.stamp is not self._stamp:
            raise StaleMoveError(f"Move {move} was not checked on this position")
        from_idx = square_index(move.from_sq)
        to_idx = square_index(move.to_sq)
        if (
            self._squares[from_idx] != move.piece
            or move.piece.color != self._side_to_move
            or self._squares[to_idx] != move.captured
        ):
            raise StaleMoveError(f"Move {move} does not match the board")
        self._squares[to_idx] = move.piece
        self._squares[from_idx] = None
        self._side_to_move = self._side_to_move.opposite
        self._stamp = object()

    def copy(self) -> Board:
        """Independent board with the same placement and side to move.

        Tokens checked on the original do not apply to the copy.
        """
        b = Board(self._side_to_move)
        b._squares = self._squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, White to move."""
        b = cls()
        for f in range(8):
            b._squares[square_index((1, f))] = Piece(Color.WHITE, PieceType.PAWN)
            b._squares[square_index((6, f))] = Piece(Color.BLACK, PieceType.PAWN)

        for f, pt in enumerate(BACK_RANK):
            b._squares[square_index((0, f))] = Piece(Color.WHITE, pt)
            b._squares[square_index((7, f))] = Piece(Color.BLACK, pt)
        return b

    @classmethod
    def from_placement(
        cls,
        placement: Mapping[tuple[int, int], Piece],
        side_to_move: Color = Color.WHITE,
    ) -> Board:
        """Arbitrary position; squares missing from *placement* are empty."""
        b = cls(side_to_move)
        for sq, piece in placement.items():
            b._squares[square_index(sq)] = piece
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._squares == other._squares
            and self._side_to_move == other._side_to_move
        )

    def __str__(self) -> str:
        rows: list[str] = [_FILE_LABELS]
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self._squares[square_index((rank, file))]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)} {rank + 1}")
        rows.append(_FILE_LABELS)
        return "\n".join(rows)

    def __repr__(self) -> str:
        count = sum(1 for _ in self.occupied())
        return f"Board(side_to_move={self._side_to_move.name}, pieces={count})"


def new_board() -> Board:
    """Standard starting position, White to move."""
    return Board.initial()


def _position_stamp(board: Board) -> object:
    """Marker of *board*'s current position, for the rule check only."""
    return board._stamp
