"""Pytest fixtures for DIGIPIN tests."""

import numpy as np
import pytest

from digipin.constants import LAT_MAX, LAT_MIN, LON_MAX, LON_MIN


@pytest.fixture
def reference_vectors() -> dict[str, tuple[float, float]]:
    """Published codes and the coordinates they were generated from."""
    return {
        "39J-438-TJC7": (28.6139, 77.2090),  # New Delhi
        "39J-49L-L8T4": (28.622788, 77.213033),  # Dak Bhawan
        "4P3-JK8-52C9": (12.9716, 77.5946),  # Bengaluru
    }


@pytest.fixture
def domain_corners() -> list[tuple[float, float]]:
    """The four corners of the encode domain."""
    return [
        (LAT_MIN, LON_MIN),
        (LAT_MIN, LON_MAX),
        (LAT_MAX, LON_MIN),
        (LAT_MAX, LON_MAX),
    ]


@pytest.fixture
def random_coordinates() -> tuple[np.ndarray, np.ndarray]:
    """Uniform sample of in-domain coordinates with a fixed seed."""
    rng = np.random.default_rng(42)
    lats = rng.uniform(LAT_MIN, LAT_MAX, size=500)
    lons = rng.uniform(LON_MIN, LON_MAX, size=500)
    return lats, lons
