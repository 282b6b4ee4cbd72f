# SPDX-License-Identifier: MIT
"""Build metadata.

Examples: ``1.0.0-alpha+001``, ``1.0.0+20130313144700``,
``1.0.0-beta+exp.sha.5114f85``, ``1.0.0+21AF26D3-117B344092BD``.

Build metadata never takes part in precedence, so Build only supports
equality.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidPattern, ParseError, ParsePart
from .identifier import is_numeric_identifier, validate_alphanumeric


def _parse_identifier(identifier: str, strict: bool) -> str:
    # <build identifier> ::= <alphanumeric identifier> | <digits>
    try:
        return validate_alphanumeric(identifier, strict)
    except ParseError as e:
        if is_numeric_identifier(identifier):
            return identifier
        raise ParseError(ParsePart.BUILD, InvalidPattern()) from e


@dataclass(frozen=True, slots=True)
class Build:
    """Dot separated build identifiers, kept in input order."""

    identifiers: tuple[str, ...]

    @classmethod
    def parse(cls, text: str, strict: bool) -> Build:
        """Parse the part after ``+`` (without the plus sign).

        Digit-only identifiers may carry leading zeros in either mode.

        Raises:
            ParseError: With part ``Build`` if any identifier is empty or invalid
        """
        return cls(tuple(_parse_identifier(part, strict) for part in text.split(".")))

    def __str__(self) -> str:
        return ".".join(self.identifiers)
