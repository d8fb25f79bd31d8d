"""Tests for code formatting and validation."""

import pytest

from digipin.errors import InvalidCharacter, InvalidLength
from digipin.formatting import compact, format_code, is_valid, normalize, parse


class TestFormatCode:
    """Tests for format_code."""

    def test_groups(self) -> None:
        """Test ten symbols are grouped 3-3-4."""
        assert format_code("FCJ3F98273") == "FCJ-3F9-8273"

    def test_accepts_iterable(self) -> None:
        """Test a list of symbols formats like a string."""
        assert format_code(list("39J438TJC7")) == "39J-438-TJC7"

    def test_wrong_length(self) -> None:
        """Test anything but ten symbols is rejected."""
        with pytest.raises(InvalidLength) as exc_info:
            format_code("FCJ3F9")
        assert exc_info.value.count == 6


class TestCompact:
    """Tests for compact."""

    def test_removes_hyphens(self) -> None:
        """Test every hyphen is removed."""
        assert compact("FCJ-3F9-8273") == "FCJ3F98273"
        assert compact("F-C-J") == "FCJ"

    def test_compact_form_unchanged(self) -> None:
        """Test a compact code is returned as-is."""
        assert compact("FCJ3F98273") == "FCJ3F98273"


class TestParse:
    """Tests for parse."""

    def test_positions(self) -> None:
        """Test each symbol resolves to its grid position."""
        positions = parse("FCJ-3F9-8273")
        assert len(positions) == 10
        assert positions[:3] == [(0, 0), (0, 1), (1, 0)]

    def test_reports_first_bad_character(self) -> None:
        """Test parsing stops at the first invalid character."""
        with pytest.raises(InvalidCharacter) as exc_info:
            parse("FCJ-AB9-8273")
        assert exc_info.value.char == "A"


class TestNormalize:
    """Tests for normalize."""

    def test_canonical_form(self) -> None:
        """Test codes are upper-cased and re-grouped."""
        assert normalize("39j438tjc7") == "39J-438-TJC7"
        assert normalize("3-9J4-38TJC7") == "39J-438-TJC7"

    def test_invalid(self) -> None:
        """Test malformed codes raise."""
        with pytest.raises(InvalidLength):
            normalize("39J-438")


class TestIsValid:
    """Tests for is_valid."""

    def test_valid_codes(self) -> None:
        """Test well-formed codes in either form are valid."""
        assert is_valid("FCJ-3F9-8273") is True
        assert is_valid("fcj3f98273") is True

    def test_invalid_codes(self) -> None:
        """Test malformed codes are invalid."""
        assert is_valid("FCJ-3F9") is False
        assert is_valid("INVALID123") is False
        assert is_valid("") is False
