"""Unified configuration with environment variable support.

Settings for the HTTP surface and logging. The codec itself has no tunable
parameters: grid, alphabet and encode domain are fixed in
``digipin.constants``. Every field can be overridden by an environment
variable with the DIGIPIN_ prefix.
"""

import os
from dataclasses import dataclass, field


@dataclass
class _Config:
    """Configuration for the DIGIPIN API service."""

    # API configuration
    api_host: str = field(default_factory=lambda: os.getenv("DIGIPIN_API_HOST", "0.0.0.0"))
    api_port: int = field(default_factory=lambda: int(os.getenv("DIGIPIN_API_PORT", "8888")))

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv("DIGIPIN_LOG_LEVEL", "INFO").upper()
    )

    # Decimal places of decoded coordinates in API responses
    coordinate_precision: int = field(
        default_factory=lambda: int(os.getenv("DIGIPIN_COORDINATE_PRECISION", "6"))
    )


# Default configuration instance - use this throughout the codebase
Config = _Config()
