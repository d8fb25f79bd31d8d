"""Bounding boxes and their 4x4 subdivision."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final

from digipin.constants import GRID_MAX_LAT, GRID_MAX_LON, GRID_MIN_LAT, GRID_MIN_LON, GRID_SIZE
from digipin.coordinates import Coordinate

_LAST_BAND: Final[int] = GRID_SIZE - 1


def _band_index(value: float, start: float, width: float) -> int:
    # Clamped so a point on the upper edge falls in the last band
    return max(0, min(math.floor((value - start) / width), _LAST_BAND))


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned latitude/longitude rectangle, bounds inclusive.

    Subdivision splits each axis into four equal bands. Grid rows count
    latitude bands from the north (row 0 is the northernmost band) and
    columns count longitude bands from the west, so a cell's row is
    ``3 - lat_index`` where ``lat_index`` counts from the south.
    """

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    @property
    def band_height(self) -> float:
        return (self.max_lat - self.min_lat) / GRID_SIZE

    @property
    def band_width(self) -> float:
        return (self.max_lon - self.min_lon) / GRID_SIZE

    @property
    def center(self) -> Coordinate:
        return Coordinate(
            latitude=(self.min_lat + self.max_lat) / 2,
            longitude=(self.min_lon + self.max_lon) / 2,
        )

    def contains(self, lat: float, lon: float) -> bool:
        return self.min_lat <= lat <= self.max_lat and self.min_lon <= lon <= self.max_lon

    def locate(self, lat: float, lon: float) -> tuple[int, int]:
        """Find the grid (row, col) of the sub-cell holding a point.

        Args:
            lat: Latitude, expected within the box
            lon: Longitude, expected within the box

        Returns:
            Tuple of (row, col), each in [0, 3]
        """
        lat_index = _band_index(lat, self.min_lat, self.band_height)
        col = _band_index(lon, self.min_lon, self.band_width)
        return _LAST_BAND - lat_index, col

    def cell(self, row: int, col: int) -> BoundingBox:
        """Return the sub-cell at grid position (row, col).

        Args:
            row: Latitude band counted from the north, 0 to 3
            col: Longitude band counted from the west, 0 to 3

        Returns:
            The narrowed box
        """
        band_height = self.band_height
        band_width = self.band_width
        min_lat = self.min_lat + (_LAST_BAND - row) * band_height
        min_lon = self.min_lon + col * band_width
        return BoundingBox(
            min_lat=min_lat,
            max_lat=min_lat + band_height,
            min_lon=min_lon,
            max_lon=min_lon + band_width,
        )

    def subdivide(self, lat: float, lon: float) -> tuple[int, int, BoundingBox]:
        """Narrow the box to the sub-cell containing a point.

        Never fails: points outside the box are clamped into the edge cells.

        Returns:
            Tuple of (row, col, sub-cell)
        """
        row, col = self.locate(lat, lon)
        return row, col, self.cell(row, col)

    def cells(self) -> list[BoundingBox]:
        """Return all 16 sub-cells in row-major grid order."""
        return [self.cell(row, col) for row in range(GRID_SIZE) for col in range(GRID_SIZE)]


# First subdivision level of every code
GRID_BOUNDS: Final[BoundingBox] = BoundingBox(
    min_lat=GRID_MIN_LAT,
    max_lat=GRID_MAX_LAT,
    min_lon=GRID_MIN_LON,
    max_lon=GRID_MAX_LON,
)
