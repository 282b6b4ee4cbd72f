# SPDX-License-Identifier: MIT
"""Parsing of the ``<major>.<minor>.<patch>`` head of a version string."""

from __future__ import annotations

from typing import Optional

from .errors import InvalidPattern, ParseError, ParsePart
from .identifier import is_digit, validate_numeric
from .text import substring, substring_to_end

# Version numbers are unsigned 64-bit values
MAX_VERSION_NUMBER = 2**64 - 1


def _invalid_version_number() -> ParseError:
    return ParseError(ParsePart.VERSION_NUMBER, InvalidPattern())


def _parse_number(part: Optional[str], strict: bool) -> int:
    if part is None:
        raise _invalid_version_number()
    try:
        validate_numeric(part, strict)
    except ParseError as e:
        raise e.with_part(ParsePart.VERSION_NUMBER) from e
    value = int(part)
    if value > MAX_VERSION_NUMBER:
        raise _invalid_version_number()
    return value


def parse_core(text: str, strict: bool) -> tuple[int, int, int, Optional[str]]:
    """Split off and validate the version core.

    Args:
        text: A full version string, e.g. ``"1.2.3-alpha+001"``
        strict: Reject leading zeros when True

    Returns:
        ``(major, minor, patch, remainder)`` where remainder is the unparsed
        tail (``"-alpha+001"``) or None when the core is the whole string

    Raises:
        ParseError: With part ``VersionNumber``

    Examples:
        >>> parse_core("1.0.0-alpha", True)
        (1, 0, 0, '-alpha')
    """
    dot1 = text.find(".")
    dot2 = text.find(".", dot1 + 1) if dot1 > 0 else -1
    if dot1 <= 0 or dot2 <= dot1 + 1:
        raise _invalid_version_number()

    patch_start = dot2 + 1
    patch_end = patch_start
    while patch_end < len(text) and is_digit(text[patch_end]):
        patch_end += 1
    if patch_end == patch_start:
        raise _invalid_version_number()

    major = _parse_number(substring(text, 0, dot1), strict)
    minor = _parse_number(substring(text, dot1 + 1, dot2), strict)
    patch = _parse_number(substring(text, patch_start, patch_end), strict)
    return major, minor, patch, substring_to_end(text, patch_end)
