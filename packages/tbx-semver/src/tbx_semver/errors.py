# SPDX-License-Identifier: MIT
"""Structured parse errors for semantic version strings.

Every failure names the grammar part it was detected in and the reason it was
rejected, e.g. ``invalid character '*' found in part PreRelease``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ParsePart(Enum):
    """Grammar part in which a parse error was detected."""

    MAJOR = "Major"
    MINOR = "Minor"
    PATCH = "Patch"
    VERSION_NUMBER = "VersionNumber"
    PRE_RELEASE = "PreRelease"
    PRERELEASE_OR_BUILD = "PrereleaseOrBuild"
    BUILD = "Build"
    NUMERIC_IDENTIFIER = "NumericIdentifier"
    ALPHANUMERIC_IDENTIFIER = "AlphaNumericIdentifier"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


class ErrorReason:
    """Base class for the reason a parse failed."""

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class InvalidChar(ErrorReason):
    """A character that the grammar does not allow at this position."""

    char: str

    def __str__(self) -> str:
        return f"invalid character '{self.char}' found"


@dataclass(frozen=True, slots=True)
class InvalidPattern(ErrorReason):
    """The input does not match the grammar of the part."""

    def __str__(self) -> str:
        return "invalid pattern"


@dataclass(frozen=True, slots=True)
class NonAsciiAlphaNumeric(ErrorReason):
    """The identifier contains characters outside ``[0-9A-Za-z-]``."""

    text: str

    def __str__(self) -> str:
        return f"non ASCII alpha-numeric character '{self.text}' found"


@dataclass(frozen=True, slots=True)
class LeadingZero(ErrorReason):
    """A numeric identifier other than ``0`` starts with ``0`` (strict mode)."""

    def __str__(self) -> str:
        return "number identifier should not have leading zero"


class ParseError(ValueError):
    """Raised when a version string, or one of its parts, cannot be parsed.

    Attributes:
        part: The grammar part in which the failure was detected
        reason: Why the part was rejected
    """

    def __init__(self, part: ParsePart, reason: ErrorReason):
        self.part = part
        self.reason = reason
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.part is ParsePart.OTHER:
            return str(self.reason)
        return f"{self.reason} in part {self.part}"

    def with_part(self, part: ParsePart) -> ParseError:
        """Return a new error with the same reason attributed to ``part``."""
        return ParseError(part, self.reason)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.part is other.part and self.reason == other.reason

    def __hash__(self) -> int:
        return hash((self.part, self.reason))

    def __repr__(self) -> str:
        return f"ParseError(part={self.part.name}, reason={self.reason!r})"
