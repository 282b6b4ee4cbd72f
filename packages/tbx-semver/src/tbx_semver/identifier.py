# SPDX-License-Identifier: MIT
"""Validation of numeric and alphanumeric identifiers.

Grammar (SemVer 2.0.0, CC-BY 3.0, https://semver.org)::

    <numeric identifier>      ::= "0" | <positive digit> | <positive digit> <digits>
    <alphanumeric identifier> ::= <non-digit>
                                | <non-digit> <identifier characters>
                                | <identifier characters> <non-digit>
                                | <identifier characters> <non-digit> <identifier characters>
    <identifier character>    ::= <digit> | <non-digit>
    <non-digit>               ::= <letter> | "-"

Only ASCII letters and digits are identifier characters; non-ASCII digits
such as ``"١"`` are rejected.
"""

from __future__ import annotations

import string

from .errors import (
    InvalidChar,
    InvalidPattern,
    LeadingZero,
    NonAsciiAlphaNumeric,
    ParseError,
    ParsePart,
)

_DIGITS = frozenset(string.digits)
_NON_DIGITS = frozenset(string.ascii_letters + "-")
_IDENTIFIER_CHARACTERS = _DIGITS | _NON_DIGITS


def is_digit(ch: str) -> bool:
    return ch in _DIGITS


def is_non_digit(ch: str) -> bool:
    """Return True for an ASCII letter or a hyphen."""
    return ch in _NON_DIGITS


def is_identifier_character(ch: str) -> bool:
    return ch in _IDENTIFIER_CHARACTERS


def is_numeric_identifier(identifier: str) -> bool:
    """Return True if ``identifier`` is non-empty and made of ASCII digits only."""
    return bool(identifier) and all(ch in _DIGITS for ch in identifier)


def _identifier_run(identifier: str, start: int) -> int:
    """Return the index of the first non-identifier character at or after ``start``."""
    pos = start
    while pos < len(identifier) and is_identifier_character(identifier[pos]):
        pos += 1
    return pos


def validate_numeric(identifier: str, strict: bool) -> str:
    """Validate a numeric identifier and return it unchanged.

    In strict mode ``0`` is accepted, any other value must start with a
    positive digit. Lenient mode accepts leading zeros.

    Raises:
        ParseError: With part ``NumericIdentifier``
    """
    if not strict:
        if is_numeric_identifier(identifier):
            return identifier
        raise ParseError(ParsePart.NUMERIC_IDENTIFIER, NonAsciiAlphaNumeric(identifier))

    if identifier == "0":
        return identifier
    if not identifier:
        raise ParseError(ParsePart.NUMERIC_IDENTIFIER, InvalidPattern())
    if identifier[0] == "0":
        raise ParseError(ParsePart.NUMERIC_IDENTIFIER, LeadingZero())
    for ch in identifier:
        if not is_digit(ch):
            raise ParseError(ParsePart.NUMERIC_IDENTIFIER, InvalidChar(ch))
    return identifier


def validate_alphanumeric(identifier: str, strict: bool) -> str:
    """Validate an alphanumeric identifier and return it unchanged.

    Strict mode requires at least one non-digit; an all-digit string is a
    numeric identifier and is rejected here. Lenient mode only checks that
    every character is an identifier character.

    Raises:
        ParseError: With part ``AlphaNumericIdentifier``
    """
    if not strict:
        if identifier and _identifier_run(identifier, 0) == len(identifier):
            return identifier
        raise ParseError(
            ParsePart.ALPHANUMERIC_IDENTIFIER, NonAsciiAlphaNumeric(identifier)
        )

    # Leading digits, then the mandatory non-digit, then any identifier characters.
    pos_non_digit = 0
    while pos_non_digit < len(identifier) and is_digit(identifier[pos_non_digit]):
        pos_non_digit += 1
    if pos_non_digit == len(identifier) or not is_non_digit(identifier[pos_non_digit]):
        raise ParseError(ParsePart.ALPHANUMERIC_IDENTIFIER, InvalidPattern())
    if _identifier_run(identifier, pos_non_digit + 1) != len(identifier):
        raise ParseError(ParsePart.ALPHANUMERIC_IDENTIFIER, InvalidPattern())
    return identifier
