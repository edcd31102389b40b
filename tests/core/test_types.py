"""Tests for square coordinates and helpers."""

import pytest

from rookie.core.types import (
    A1,
    ALL_SQUARES,
    E4,
    H8,
    Square,
    is_valid_square,
    make_square,
    parse_square,
    square_at,
    square_index,
    square_name,
)


class TestSquare:
    def test_rank_and_file(self) -> None:
        sq = Square(3, 4)
        assert sq.rank == 3
        assert sq.file == 4

    def test_equals_plain_tuple(self) -> None:
        assert Square(1, 2) == (1, 2)

    def test_str_is_name(self) -> None:
        assert str(E4) == "e4"

    def test_named_constants(self) -> None:
        assert A1 == Square(0, 0)
        assert E4 == Square(3, 4)
        assert H8 == Square(7, 7)


class TestIndexing:
    def test_index_layout(self) -> None:
        assert square_index(A1) == 0
        assert square_index(H8) == 63
        assert square_index((1, 0)) == 8

    def test_square_at_inverts_index(self) -> None:
        for i in range(64):
            assert square_index(square_at(i)) == i

    def test_all_squares(self) -> None:
        assert len(ALL_SQUARES) == 64
        assert len(set(ALL_SQUARES)) == 64


class TestValidation:
    @pytest.mark.parametrize("sq", [(0, 0), (7, 7), (3, 5)])
    def test_valid(self, sq: tuple[int, int]) -> None:
        assert is_valid_square(sq)

    @pytest.mark.parametrize("sq", [(-1, 0), (0, 8), (8, 8), (3, -2)])
    def test_invalid(self, sq: tuple[int, int]) -> None:
        assert not is_valid_square(sq)

    def test_make_square(self) -> None:
        assert make_square(6, 4) == Square(6, 4)

    def test_make_square_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            make_square(8, 0)


class TestNames:
    def test_square_name(self) -> None:
        assert square_name((0, 0)) == "a1"
        assert square_name((7, 7)) == "h8"
        assert square_name((1, 4)) == "e2"

    def test_parse_square(self) -> None:
        assert parse_square("e2") == Square(1, 4)
        assert parse_square("h8") == Square(7, 7)

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "E2", "e22", "2e"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)
