"""Centralized constants for the DIGIPIN grid and encode domain."""

from typing import Final

# =============================================================================
# Encode Domain
# =============================================================================

# Coordinates accepted by the encoder (inclusive)
LAT_MIN: Final[float] = 6.0
LAT_MAX: Final[float] = 38.0
LON_MIN: Final[float] = 68.0
LON_MAX: Final[float] = 98.0

# =============================================================================
# Grid Geometry
# =============================================================================

# Outer box of the first subdivision level (south, north, west, east).
# The encode domain lies strictly inside it.
GRID_MIN_LAT: Final[float] = 2.5
GRID_MAX_LAT: Final[float] = 38.5
GRID_MIN_LON: Final[float] = 63.5
GRID_MAX_LON: Final[float] = 99.5

# Bands per axis at every level
GRID_SIZE: Final[int] = 4

# Subdivision levels, one symbol each
CODE_LENGTH: Final[int] = 10

# Edge of a final cell in degrees (36 / 4**10)
CELL_SIZE: Final[float] = (GRID_MAX_LAT - GRID_MIN_LAT) / GRID_SIZE**CODE_LENGTH

# =============================================================================
# Formatting
# =============================================================================

SEPARATOR: Final[str] = "-"

# Symbols per hyphen-separated group: XXX-XXX-XXXX
GROUPS: Final[tuple[int, ...]] = (3, 3, 4)

FORMATTED_LENGTH: Final[int] = CODE_LENGTH + len(GROUPS) - 1
