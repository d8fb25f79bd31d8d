"""Exceptions raised by the DIGIPIN codec.

Every failure is an input-validation error: the codec raises immediately,
returns no partial result and never retries.
"""

from digipin.constants import CODE_LENGTH, LAT_MAX, LAT_MIN, LON_MAX, LON_MIN


class DigipinError(ValueError):
    """Base class for all DIGIPIN validation failures."""


class LatitudeOutOfRange(DigipinError):
    """Latitude outside the encode domain."""

    def __init__(self, value: float):
        self.value = value
        super().__init__(f"Latitude {value} is out of range ({LAT_MIN} to {LAT_MAX})")


class LongitudeOutOfRange(DigipinError):
    """Longitude outside the encode domain."""

    def __init__(self, value: float):
        self.value = value
        super().__init__(f"Longitude {value} is out of range ({LON_MIN} to {LON_MAX})")


class InvalidLength(DigipinError):
    """Code does not hold exactly ten symbols once hyphens are removed."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Invalid DIGIPIN length: {count} (expected {CODE_LENGTH})")


class InvalidCharacter(DigipinError):
    """Character outside the 16-symbol alphabet."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Invalid character {char!r} in DIGIPIN")
