"""Coordinate value type."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from pydantic import TypeAdapter


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def is_close(self, other: Coordinate, lat_tol: float, lon_tol: float | None = None) -> bool:
        """Check if another coordinate lies within a per-axis tolerance.

        Args:
            other: Coordinate to compare against
            lat_tol: Maximum absolute latitude difference in degrees
            lon_tol: Maximum absolute longitude difference (defaults to lat_tol)

        Returns:
            True if both axes are within tolerance
        """
        lon_tol = lat_tol if lon_tol is None else lon_tol
        return (
            abs(self.latitude - other.latitude) <= lat_tol
            and abs(self.longitude - other.longitude) <= lon_tol
        )

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Coordinate:
        return _adapter.validate_python(data)

    def to_json(self) -> str:
        """Serialize as ``{"latitude": ..., "longitude": ...}``."""
        return _adapter.dump_json(self).decode()

    @classmethod
    def from_json(cls, data: str | bytes) -> Coordinate:
        """Parse a JSON object with ``latitude`` and ``longitude`` keys.

        Raises:
            pydantic.ValidationError: If keys are missing or not numeric
        """
        return _adapter.validate_json(data)


_adapter: TypeAdapter[Coordinate] = TypeAdapter(Coordinate)
