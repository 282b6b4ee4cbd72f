# SPDX-License-Identifier: MIT
"""Unit tests for identifier validation."""

import pytest

from tbx_semver import (
    InvalidChar,
    InvalidPattern,
    LeadingZero,
    NonAsciiAlphaNumeric,
    ParseError,
    ParsePart,
    validate_alphanumeric,
    validate_numeric,
)
from tbx_semver.identifier import is_identifier_character, is_non_digit, is_numeric_identifier


class TestCharacterClasses:
    """Tests for the character class helpers."""

    def test_non_digit(self):
        assert is_non_digit("a")
        assert is_non_digit("Z")
        assert is_non_digit("-")
        assert not is_non_digit("0")
        assert not is_non_digit("é")

    def test_identifier_character(self):
        assert is_identifier_character("7")
        assert is_identifier_character("x")
        assert not is_identifier_character(".")
        assert not is_identifier_character("+")

    def test_numeric_identifier_is_ascii_only(self):
        assert is_numeric_identifier("0123")
        assert not is_numeric_identifier("")
        assert not is_numeric_identifier("١٢")
        assert not is_numeric_identifier("1a")


class TestValidateNumericStrict:
    """Tests for validate_numeric in strict mode."""

    @pytest.mark.parametrize("identifier", ["0", "1", "10", "1234567890"])
    def test_valid(self, identifier):
        assert validate_numeric(identifier, True) == identifier

    def test_leading_zero(self):
        with pytest.raises(ParseError) as exc_info:
            validate_numeric("01", True)
        assert exc_info.value.part is ParsePart.NUMERIC_IDENTIFIER
        assert exc_info.value.reason == LeadingZero()

    def test_invalid_char_reports_first_non_digit(self):
        with pytest.raises(ParseError) as exc_info:
            validate_numeric("12a4b", True)
        assert exc_info.value.reason == InvalidChar("a")

    def test_empty(self):
        with pytest.raises(ParseError) as exc_info:
            validate_numeric("", True)
        assert exc_info.value.reason == InvalidPattern()


class TestValidateNumericLenient:
    """Tests for validate_numeric in lenient mode."""

    @pytest.mark.parametrize("identifier", ["0", "00", "007", "42"])
    def test_valid(self, identifier):
        assert validate_numeric(identifier, False) == identifier

    def test_non_digit(self):
        with pytest.raises(ParseError) as exc_info:
            validate_numeric("4x", False)
        assert exc_info.value.part is ParsePart.NUMERIC_IDENTIFIER
        assert exc_info.value.reason == NonAsciiAlphaNumeric("4x")


class TestValidateAlphanumericStrict:
    """Tests for validate_alphanumeric in strict mode."""

    @pytest.mark.parametrize(
        "identifier", ["a", "-", "alpha", "Alpha1", "1a", "1-2", "0a0", "x-y-z", "--"]
    )
    def test_valid(self, identifier):
        assert validate_alphanumeric(identifier, True) == identifier

    @pytest.mark.parametrize("identifier", ["", "0", "123", "a.b", "a+b", "ä", "1 a"])
    def test_invalid(self, identifier):
        with pytest.raises(ParseError) as exc_info:
            validate_alphanumeric(identifier, True)
        assert exc_info.value.part is ParsePart.ALPHANUMERIC_IDENTIFIER
        assert exc_info.value.reason == InvalidPattern()


class TestValidateAlphanumericLenient:
    """Tests for validate_alphanumeric in lenient mode."""

    @pytest.mark.parametrize("identifier", ["a", "21AF26D3", "123", "01"])
    def test_valid(self, identifier):
        assert validate_alphanumeric(identifier, False) == identifier

    def test_invalid(self):
        with pytest.raises(ParseError) as exc_info:
            validate_alphanumeric("abc$", False)
        assert exc_info.value.reason == NonAsciiAlphaNumeric("abc$")

    def test_empty(self):
        with pytest.raises(ParseError):
            validate_alphanumeric("", False)
