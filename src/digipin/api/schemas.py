"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field


class EncodeResponse(BaseModel):
    """Response for the encode endpoint."""

    digipin: str = Field(..., description="Formatted DIGIPIN, XXX-XXX-XXXX")
    latitude: float
    longitude: float


class DecodeResponse(BaseModel):
    """Response for the decode endpoint."""

    digipin: str = Field(..., description="Canonical form of the requested code")
    latitude: float = Field(..., description="Latitude of the cell center")
    longitude: float = Field(..., description="Longitude of the cell center")


class BoundsResponse(BaseModel):
    """Response for the bounds endpoint."""

    digipin: str
    min_latitude: float
    max_latitude: float
    min_longitude: float
    max_longitude: float


class InfoResponse(BaseModel):
    """Response for info endpoint."""

    version: str
    status: str
    latitude_range: tuple[float, float]
    longitude_range: tuple[float, float]
