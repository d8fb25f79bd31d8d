"""Vectorized encoding and decoding over numpy arrays.

Each element goes through the same float64 arithmetic as the scalar codec,
so ``encode_many`` agrees with ``encode`` element by element.
"""

import logging
from collections.abc import Iterable

import numpy as np

from digipin.alphabet import SYMBOL_GRID
from digipin.bounds import GRID_BOUNDS
from digipin.constants import CODE_LENGTH, GRID_SIZE, LAT_MAX, LAT_MIN, LON_MAX, LON_MIN
from digipin.errors import LatitudeOutOfRange, LongitudeOutOfRange
from digipin.formatting import format_code, parse

logger = logging.getLogger(__name__)

_SYMBOLS = np.array(SYMBOL_GRID)
_LAST_BAND = GRID_SIZE - 1


def _band_indices(values: np.ndarray, start: np.ndarray, width: np.ndarray) -> np.ndarray:
    return np.clip(np.floor((values - start) / width), 0, _LAST_BAND).astype(np.int64)


def _validate(lats: np.ndarray, lons: np.ndarray) -> None:
    """Raise for the first out-of-domain element, latitude before longitude."""
    bad_lat = ~((lats >= LAT_MIN) & (lats <= LAT_MAX))
    bad_lon = ~((lons >= LON_MIN) & (lons <= LON_MAX))
    bad = np.flatnonzero(bad_lat | bad_lon)
    if bad.size == 0:
        return
    i = bad[0]
    if bad_lat[i]:
        raise LatitudeOutOfRange(float(lats[i]))
    raise LongitudeOutOfRange(float(lons[i]))


def encode_many(latitudes: Iterable[float], longitudes: Iterable[float]) -> np.ndarray:
    """Encode arrays of coordinates into formatted codes.

    Args:
        latitudes: Latitudes, any array-like shape
        longitudes: Longitudes, same shape as latitudes

    Returns:
        String array of codes with the input shape

    Raises:
        ValueError: If the shapes differ
        LatitudeOutOfRange: For the first element with a bad latitude
        LongitudeOutOfRange: For the first element with a bad longitude
    """
    lats = np.asarray(latitudes, dtype=np.float64)
    lons = np.asarray(longitudes, dtype=np.float64)
    if lats.shape != lons.shape:
        raise ValueError(f"Shape mismatch: latitudes {lats.shape}, longitudes {lons.shape}")

    shape = lats.shape
    lats = lats.ravel()
    lons = lons.ravel()
    _validate(lats, lons)
    logger.debug(f"Encoding {lats.size} coordinates")

    min_lat = np.full(lats.shape, GRID_BOUNDS.min_lat)
    max_lat = np.full(lats.shape, GRID_BOUNDS.max_lat)
    min_lon = np.full(lons.shape, GRID_BOUNDS.min_lon)
    max_lon = np.full(lons.shape, GRID_BOUNDS.max_lon)
    symbols = np.empty((lats.size, CODE_LENGTH), dtype="<U1")

    for level in range(CODE_LENGTH):
        band_height = (max_lat - min_lat) / GRID_SIZE
        band_width = (max_lon - min_lon) / GRID_SIZE
        lat_index = _band_indices(lats, min_lat, band_height)
        col = _band_indices(lons, min_lon, band_width)
        symbols[:, level] = _SYMBOLS[_LAST_BAND - lat_index, col]

        min_lat = min_lat + lat_index * band_height
        max_lat = min_lat + band_height
        min_lon = min_lon + col * band_width
        max_lon = min_lon + band_width

    codes = [format_code(row) for row in symbols]
    return np.array(codes, dtype=f"<U{len(codes[0])}" if codes else "<U1").reshape(shape)


def decode_many(codes: Iterable[str]) -> tuple[np.ndarray, np.ndarray]:
    """Decode a sequence of codes into cell centers.

    Args:
        codes: Codes with or without hyphens

    Returns:
        Tuple of (latitudes, longitudes), one entry per code

    Raises:
        InvalidLength: For the first code of the wrong length
        InvalidCharacter: For the first invalid character of the first bad code
    """
    positions = np.array([parse(code) for code in codes], dtype=np.int64)
    if positions.size == 0:
        return np.empty(0), np.empty(0)
    logger.debug(f"Decoding {len(positions)} codes")

    min_lat = np.full(len(positions), GRID_BOUNDS.min_lat)
    max_lat = np.full(len(positions), GRID_BOUNDS.max_lat)
    min_lon = np.full(len(positions), GRID_BOUNDS.min_lon)
    max_lon = np.full(len(positions), GRID_BOUNDS.max_lon)

    for level in range(CODE_LENGTH):
        rows = positions[:, level, 0]
        cols = positions[:, level, 1]
        band_height = (max_lat - min_lat) / GRID_SIZE
        band_width = (max_lon - min_lon) / GRID_SIZE

        min_lat = min_lat + (_LAST_BAND - rows) * band_height
        max_lat = min_lat + band_height
        min_lon = min_lon + cols * band_width
        max_lon = min_lon + band_width

    return (min_lat + max_lat) / 2, (min_lon + max_lon) / 2
