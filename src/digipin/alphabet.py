"""The 16-symbol DIGIPIN alphabet and its inverse lookup.

The alphabet is a fixed 4x4 table. Row 0 labels the northernmost latitude
band of a subdivision level and column 0 the westernmost longitude band.

Usage:
    from digipin.alphabet import position_for, symbol_for

    symbol_for(1, 1)  # '3'
    position_for("j")  # (1, 0)
"""

from types import MappingProxyType
from typing import Final

from digipin.errors import InvalidCharacter

SYMBOL_GRID: Final[tuple[tuple[str, ...], ...]] = (
    ("F", "C", "9", "8"),
    ("J", "3", "2", "7"),
    ("K", "4", "5", "6"),
    ("L", "M", "P", "T"),
)

# Row-major, matches SYMBOL_GRID
SYMBOLS: Final[str] = "".join("".join(row) for row in SYMBOL_GRID)


def _build_positions() -> MappingProxyType:
    positions: dict[str, tuple[int, int]] = {}
    for row, symbols in enumerate(SYMBOL_GRID):
        for col, symbol in enumerate(symbols):
            positions[symbol] = (row, col)
            positions[symbol.lower()] = (row, col)
    return MappingProxyType(positions)


# Case-insensitive inverse of SYMBOL_GRID
POSITIONS: Final[MappingProxyType] = _build_positions()


def symbol_for(row: int, col: int) -> str:
    """Return the symbol labelling grid cell (row, col).

    Args:
        row: Latitude band, 0 (north) to 3 (south)
        col: Longitude band, 0 (west) to 3 (east)

    Returns:
        Single upper-case symbol

    Raises:
        IndexError: If either index is outside [0, 3]
    """
    if not (0 <= row < len(SYMBOL_GRID) and 0 <= col < len(SYMBOL_GRID[row])):
        raise IndexError(f"Grid position ({row}, {col}) is outside the 4x4 alphabet")
    return SYMBOL_GRID[row][col]


def position_for(char: str) -> tuple[int, int]:
    """Return the (row, col) of a symbol, ignoring case.

    Raises:
        InvalidCharacter: If ``char`` is not one of the 16 symbols
    """
    try:
        return POSITIONS[char]
    except (KeyError, TypeError):
        raise InvalidCharacter(char) from None


def is_symbol(char: str) -> bool:
    """Check if a string is a single alphabet symbol."""
    return char in POSITIONS
