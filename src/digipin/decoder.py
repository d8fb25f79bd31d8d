"""Decode DIGIPIN codes back into coordinates."""

from digipin.bounds import GRID_BOUNDS, BoundingBox
from digipin.coordinates import Coordinate
from digipin.formatting import parse


def decode_bounds(code: str) -> BoundingBox:
    """Return the final grid cell a code identifies.

    Args:
        code: Ten symbols, hyphens optional, any letter case

    Returns:
        Bounding box of the level-10 cell

    Raises:
        InvalidLength: If the code does not hold ten symbols once hyphens are removed
        InvalidCharacter: For the first character outside the alphabet
    """
    box = GRID_BOUNDS
    for row, col in parse(code):
        box = box.cell(row, col)
    return box


def decode(code: str) -> Coordinate:
    """Decode a code into the center of its grid cell.

    The result is within half a cell (about 1.9 m) of any coordinate that
    encodes to the same code.

    Args:
        code: Ten symbols, hyphens optional, any letter case

    Returns:
        Coordinate at the center of the final cell

    Raises:
        InvalidLength: If the code does not hold ten symbols once hyphens are removed
        InvalidCharacter: For the first character outside the alphabet
    """
    return decode_bounds(code).center
