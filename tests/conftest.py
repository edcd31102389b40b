"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from rookie.core.board import Board
from rookie.core.enums import Color
from rookie.core.piece import Piece

BoardFactory = Callable[..., Board]


@pytest.fixture
def start_board() -> Board:
    """Fresh standard position, White to move."""
    return Board.initial()


@pytest.fixture
def make_board() -> BoardFactory:
    """Build a sparse position from ``{square: "N"}`` style placement."""

    def _make(
        placement: dict[tuple[int, int], str],
        side_to_move: Color = Color.WHITE,
    ) -> Board:
        return Board.from_placement(
            {sq: Piece.from_char(ch) for sq, ch in placement.items()},
            side_to_move,
        )

    return _make
