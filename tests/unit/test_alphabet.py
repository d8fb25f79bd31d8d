"""Tests for the symbol alphabet."""

import pytest

from digipin.alphabet import POSITIONS, SYMBOL_GRID, SYMBOLS, is_symbol, position_for, symbol_for
from digipin.errors import InvalidCharacter


class TestSymbolGrid:
    """Tests for the 4x4 symbol table."""

    def test_grid_shape(self) -> None:
        """Test the table is 4 rows of 4 symbols."""
        assert len(SYMBOL_GRID) == 4
        assert all(len(row) == 4 for row in SYMBOL_GRID)

    def test_symbols_distinct(self) -> None:
        """Test the 16 symbols have no duplicates."""
        assert len(set(SYMBOLS)) == 16

    def test_symbols_order(self) -> None:
        """Test SYMBOLS is the row-major reading of the grid."""
        assert SYMBOLS == "FC98J327K456LMPT"

    def test_positions_read_only(self) -> None:
        """Test the inverse lookup cannot be mutated."""
        with pytest.raises(TypeError):
            POSITIONS["X"] = (0, 0)  # type: ignore


class TestSymbolFor:
    """Tests for symbol_for."""

    def test_corners(self) -> None:
        """Test the corner symbols."""
        assert symbol_for(0, 0) == "F"
        assert symbol_for(0, 3) == "8"
        assert symbol_for(3, 0) == "L"
        assert symbol_for(3, 3) == "T"

    def test_out_of_range(self) -> None:
        """Test indices outside the grid raise IndexError."""
        with pytest.raises(IndexError):
            symbol_for(4, 0)
        with pytest.raises(IndexError):
            symbol_for(0, -1)


class TestPositionFor:
    """Tests for position_for."""

    def test_inverse_of_symbol_for(self) -> None:
        """Test position_for undoes symbol_for for every cell."""
        for row in range(4):
            for col in range(4):
                assert position_for(symbol_for(row, col)) == (row, col)

    def test_case_insensitive(self) -> None:
        """Test lower-case letters resolve like upper-case."""
        for char in "FCJKLMPT":
            assert position_for(char.lower()) == position_for(char)

    @pytest.mark.parametrize("char", ["A", "Z", "0", "1", "I", "O", "-", " ", "", "FC"])
    def test_invalid_character(self, char: str) -> None:
        """Test characters outside the alphabet raise InvalidCharacter."""
        with pytest.raises(InvalidCharacter) as exc_info:
            position_for(char)
        assert exc_info.value.char == char

    def test_is_symbol(self) -> None:
        """Test is_symbol returns correct values."""
        assert is_symbol("F") is True
        assert is_symbol("t") is True
        assert is_symbol("Z") is False
        assert is_symbol("") is False
