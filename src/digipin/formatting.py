"""Validation and textual forms of DIGIPIN codes.

A code has one formatted form, ``XXX-XXX-XXXX``, and one compact form with
the hyphens removed. Parsing strips every hyphen before checking length and
symbols, so separator placement is never validated on its own: ``F-CJ3F98273``
parses the same as ``FCJ-3F9-8273``.
"""

from collections.abc import Iterable

from digipin.alphabet import SYMBOL_GRID, position_for
from digipin.constants import CODE_LENGTH, GROUPS, SEPARATOR
from digipin.errors import DigipinError, InvalidLength


def compact(code: str) -> str:
    """Remove every hyphen from a code."""
    return code.replace(SEPARATOR, "")


def format_code(symbols: Iterable[str]) -> str:
    """Group ten symbols as XXX-XXX-XXXX.

    Args:
        symbols: The symbols in level order, as a string or any iterable

    Returns:
        Hyphenated code

    Raises:
        InvalidLength: If there are not exactly ten symbols
    """
    text = "".join(symbols)
    if len(text) != CODE_LENGTH:
        raise InvalidLength(len(text))

    groups = []
    start = 0
    for size in GROUPS:
        groups.append(text[start : start + size])
        start += size
    return SEPARATOR.join(groups)


def parse(code: str) -> list[tuple[int, int]]:
    """Resolve a code into its grid positions, one per level.

    Args:
        code: Code with or without hyphens, any letter case

    Returns:
        List of ten (row, col) tuples in level order

    Raises:
        InvalidLength: If the code does not hold ten symbols once hyphens are removed
        InvalidCharacter: For the first character, left to right, outside the alphabet
    """
    symbols = compact(code)
    if len(symbols) != CODE_LENGTH:
        raise InvalidLength(len(symbols))
    return [position_for(char) for char in symbols]


def normalize(code: str) -> str:
    """Return the canonical upper-case formatted form of a code.

    Raises:
        DigipinError: If the code is malformed
    """
    return format_code(SYMBOL_GRID[row][col] for row, col in parse(code))


def is_valid(code: str) -> bool:
    """Check if a code would decode successfully."""
    try:
        parse(code)
    except DigipinError:
        return False
    return True
