"""Square type and coordinate helpers.

A square is a ``(rank, file)`` pair, both 0–7. Rank 0 is White's home rank and
file 0 is the a-file. The board stores squares in a flat list indexed by
``rank * 8 + file``:

    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from typing import NamedTuple

_FILES = "abcdefgh"
_RANKS = "12345678"


class Square(NamedTuple):
    """Board coordinate. Plain ``(rank, file)`` tuples are accepted wherever a
    square is expected."""

    rank: int
    file: int

    def __str__(self) -> str:
        return square_name(self)


def square_index(sq: tuple[int, int]) -> int:
    """Flat board index of *sq* (no bounds check)."""
    return sq[0] * 8 + sq[1]


def square_at(index: int) -> Square:
    """Inverse of :func:`square_index`."""
    return Square(index >> 3, index & 7)


def is_valid_square(sq: tuple[int, int]) -> bool:
    """Whether both coordinates of *sq* lie in 0–7."""
    return 0 <= sq[0] < 8 and 0 <= sq[1] < 8


def make_square(rank: int, file: int) -> Square:
    """Create a square, rejecting coordinates off the board."""
    sq = Square(rank, file)
    if not is_valid_square(sq):
        raise ValueError(f"Square out of range: rank={rank}, file={file}")
    return sq


def square_name(sq: tuple[int, int]) -> str:
    """Human-readable name, e.g. (0, 0) → 'a1', (7, 7) → 'h8'."""
    return _FILES[sq[1]] + _RANKS[sq[0]]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(rank=3, file=4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(_RANKS.index(name[1]), _FILES.index(name[0]))


ALL_SQUARES: tuple[Square, ...] = tuple(square_at(i) for i in range(64))

# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]
