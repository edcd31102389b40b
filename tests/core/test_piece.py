"""Tests for Piece."""

import pytest

from rookie.core.enums import Color, PieceType
from rookie.core.piece import Piece


class TestPiece:
    def test_white_is_uppercase(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"

    def test_black_is_lowercase(self) -> None:
        assert str(Piece(Color.BLACK, PieceType.QUEEN)) == "q"

    def test_from_char(self) -> None:
        assert Piece.from_char("k") == Piece(Color.BLACK, PieceType.KING)
        assert Piece.from_char("P") == Piece(Color.WHITE, PieceType.PAWN)

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_immutable(self) -> None:
        piece = Piece(Color.WHITE, PieceType.ROOK)
        with pytest.raises(AttributeError):
            piece.color = Color.BLACK  # type: ignore[misc]


class TestColor:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    def test_pawn_geometry(self) -> None:
        assert Color.WHITE.pawn_direction == 1
        assert Color.BLACK.pawn_direction == -1
        assert Color.WHITE.pawn_start_rank == 1
        assert Color.BLACK.pawn_start_rank == 6
