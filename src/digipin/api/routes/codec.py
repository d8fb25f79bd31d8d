"""DIGIPIN codec API routes."""

import logging

from fastapi import APIRouter, HTTPException, Query

from digipin import __version__
from digipin.api.schemas import BoundsResponse, DecodeResponse, EncodeResponse, InfoResponse
from digipin.config import Config
from digipin.constants import LAT_MAX, LAT_MIN, LON_MAX, LON_MIN
from digipin.decoder import decode_bounds
from digipin.encoder import encode
from digipin.errors import DigipinError
from digipin.formatting import normalize

logger = logging.getLogger(__name__)

router = APIRouter(tags=["digipin"])


def _bad_request(error: DigipinError) -> HTTPException:
    logger.info(f"Rejected request: {error}")
    return HTTPException(
        status_code=400,
        detail=str(error),
        headers={"X-Digipin-Error": type(error).__name__},
    )


@router.get("/encode", response_model=EncodeResponse)
async def get_encode(
    latitude: float = Query(..., description="Latitude of the location"),
    longitude: float = Query(..., description="Longitude of the location"),
) -> EncodeResponse:
    """Encode a location into its DIGIPIN.

    Args:
        latitude: Latitude coordinate (must be within 6.0 to 38.0)
        longitude: Longitude coordinate (must be within 68.0 to 98.0)

    Returns:
        The formatted code and the requested coordinate

    Raises:
        HTTPException: If coordinates are outside the encode domain
    """
    try:
        digipin = encode(latitude, longitude)
    except DigipinError as e:
        raise _bad_request(e) from e
    return EncodeResponse(digipin=digipin, latitude=latitude, longitude=longitude)


@router.get("/decode", response_model=DecodeResponse)
async def get_decode(
    digipin: str = Query(..., description="DIGIPIN, hyphens optional"),
) -> DecodeResponse:
    """Decode a DIGIPIN into the center of its cell.

    Raises:
        HTTPException: If the code is malformed
    """
    try:
        box = decode_bounds(digipin)
    except DigipinError as e:
        raise _bad_request(e) from e

    center = box.center
    precision = Config.coordinate_precision
    return DecodeResponse(
        digipin=normalize(digipin),
        latitude=round(center.latitude, precision),
        longitude=round(center.longitude, precision),
    )


@router.get("/bounds", response_model=BoundsResponse)
async def get_bounds(
    digipin: str = Query(..., description="DIGIPIN, hyphens optional"),
) -> BoundsResponse:
    """Get the grid cell covered by a DIGIPIN.

    Raises:
        HTTPException: If the code is malformed
    """
    try:
        box = decode_bounds(digipin)
    except DigipinError as e:
        raise _bad_request(e) from e

    return BoundsResponse(
        digipin=normalize(digipin),
        min_latitude=box.min_lat,
        max_latitude=box.max_lat,
        min_longitude=box.min_lon,
        max_longitude=box.max_lon,
    )


@router.get("/info", response_model=InfoResponse)
async def get_info() -> InfoResponse:
    """Get API status information."""
    return InfoResponse(
        version=__version__,
        status="operational",
        latitude_range=(LAT_MIN, LAT_MAX),
        longitude_range=(LON_MIN, LON_MAX),
    )
