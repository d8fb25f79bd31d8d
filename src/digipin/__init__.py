"""DIGIPIN - grid codec for coordinates across India."""

from digipin.bounds import GRID_BOUNDS, BoundingBox
from digipin.coordinates import Coordinate
from digipin.decoder import decode, decode_bounds
from digipin.encoder import encode, encode_coordinate
from digipin.errors import (
    DigipinError,
    InvalidCharacter,
    InvalidLength,
    LatitudeOutOfRange,
    LongitudeOutOfRange,
)
from digipin.formatting import compact, format_code, is_valid, normalize

__version__ = "0.1.0"

__all__ = [
    "encode",
    "encode_coordinate",
    "decode",
    "decode_bounds",
    "Coordinate",
    "BoundingBox",
    "GRID_BOUNDS",
    "compact",
    "format_code",
    "normalize",
    "is_valid",
    "DigipinError",
    "LatitudeOutOfRange",
    "LongitudeOutOfRange",
    "InvalidLength",
    "InvalidCharacter",
]
