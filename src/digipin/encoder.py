"""Encode coordinates into DIGIPIN codes."""

from digipin.alphabet import symbol_for
from digipin.bounds import GRID_BOUNDS
from digipin.constants import CODE_LENGTH, LAT_MAX, LAT_MIN, LON_MAX, LON_MIN
from digipin.coordinates import Coordinate
from digipin.errors import LatitudeOutOfRange, LongitudeOutOfRange
from digipin.formatting import format_code


def validate_coordinate(latitude: float, longitude: float) -> None:
    """Check a point against the encode domain, latitude first.

    Raises:
        LatitudeOutOfRange: If latitude is outside [6.0, 38.0] or NaN
        LongitudeOutOfRange: If longitude is outside [68.0, 98.0] or NaN
    """
    if not (LAT_MIN <= latitude <= LAT_MAX):
        raise LatitudeOutOfRange(latitude)
    if not (LON_MIN <= longitude <= LON_MAX):
        raise LongitudeOutOfRange(longitude)


def encode(latitude: float, longitude: float) -> str:
    """Encode a coordinate into a formatted 10-symbol DIGIPIN.

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees

    Returns:
        Code in XXX-XXX-XXXX form, e.g. "39J-438-TJC7" for (28.6139, 77.2090)

    Raises:
        LatitudeOutOfRange: If latitude is outside the encode domain
        LongitudeOutOfRange: If longitude is outside the encode domain
    """
    validate_coordinate(latitude, longitude)

    box = GRID_BOUNDS
    symbols = []
    for _ in range(CODE_LENGTH):
        row, col, box = box.subdivide(latitude, longitude)
        symbols.append(symbol_for(row, col))

    return format_code(symbols)


def encode_coordinate(coordinate: Coordinate) -> str:
    """Encode a Coordinate value."""
    return encode(coordinate.latitude, coordinate.longitude)
