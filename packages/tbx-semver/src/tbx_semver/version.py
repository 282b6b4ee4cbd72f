# SPDX-License-Identifier: MIT
"""The Version aggregate: construction, parsing, formatting and precedence.

Grammar (SemVer 2.0.0, CC-BY 3.0, https://semver.org)::

    <valid semver> ::= <version core>
                     | <version core> "-" <pre-release>
                     | <version core> "+" <build>
                     | <version core> "-" <pre-release> "+" <build>
    <version core> ::= <major> "." <minor> "." <patch>
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .build import Build
from .core import MAX_VERSION_NUMBER, parse_core
from .errors import InvalidPattern, ParseError, ParsePart
from .prerelease import PreRelease, compare_prerelease
from .text import substring, substring_to_end

logger = logging.getLogger(__name__)

# Strictness used when a caller does not choose one
DEFAULT_STRICT = True


def _parse_prerelease_and_build(
    remainder: str, strict: bool
) -> tuple[Optional[PreRelease], Optional[Build]]:
    plus = remainder.find("+")
    first = remainder[0]

    if first == "-" and plus >= 0:
        pre_text = substring(remainder, 1, plus)
        build_text = substring_to_end(remainder, plus + 1)
        if pre_text is None or build_text is None:
            raise ParseError(ParsePart.PRERELEASE_OR_BUILD, InvalidPattern())
        return PreRelease.parse(pre_text, strict), Build.parse(build_text, strict)

    if first == "-":
        pre_text = substring_to_end(remainder, 1)
        if pre_text is None:
            raise ParseError(ParsePart.PRE_RELEASE, InvalidPattern())
        return PreRelease.parse(pre_text, strict), None

    if first == "+":
        build_text = substring_to_end(remainder, 1)
        if build_text is None:
            raise ParseError(ParsePart.BUILD, InvalidPattern())
        return None, Build.parse(build_text, strict)

    raise ParseError(ParsePart.PRERELEASE_OR_BUILD, InvalidPattern())


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Equality (``==``) compares all fields including build metadata, while
    ordering (``<``, ``compare``) follows SemVer precedence and ignores build
    metadata. ``1.0.0+a`` and ``1.0.0+b`` therefore compare equal in
    precedence but are not ``==``.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        pre_release: Optional pre-release identifiers (e.g. "alpha.1", "rc.2")
        build: Optional build metadata (e.g. "build.123", "20240101")
    """

    major: int
    minor: int
    patch: int
    pre_release: Optional[PreRelease] = None
    build: Optional[Build] = None

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {type(value).__name__}")
            if not 0 <= value <= MAX_VERSION_NUMBER:
                raise ValueError(f"{name} out of range: {value}")

    @classmethod
    def zero(cls) -> Version:
        """Return version 0.0.0."""
        return cls(0, 0, 0)

    @classmethod
    def new(cls, major: int, minor: int, patch: int) -> Version:
        """Return a release version without pre-release or build metadata."""
        return cls(major, minor, patch)

    @classmethod
    def parse(cls, text: str, strict: bool = DEFAULT_STRICT) -> Version:
        """Parse a semantic version string.

        Args:
            text: ``MAJOR.MINOR.PATCH[-prerelease][+build]``
            strict: Reject numeric identifiers with leading zeros when True

        Returns:
            The parsed Version

        Raises:
            ParseError: On the first grammar violation found
            TypeError: If ``text`` is not a string

        Examples:
            >>> str(Version.parse("1.0.0-alpha+001"))
            '1.0.0-alpha+001'
            >>> Version.parse("01.2.3", strict=False).major
            1
        """
        if not isinstance(text, str):
            raise TypeError(f"Version must be a string, got {type(text).__name__}")

        major, minor, patch, remainder = parse_core(text, strict)
        if remainder is None:
            return cls(major, minor, patch)
        pre_release, build = _parse_prerelease_and_build(remainder, strict)
        return cls(major, minor, patch, pre_release, build)

    @classmethod
    def parse_or(cls, text: Optional[str], major: int, minor: int, patch: int) -> Version:
        """Parse leniently, falling back to ``major.minor.patch`` on any failure."""
        try:
            return cls.parse(text, strict=False)
        except (ParseError, TypeError) as e:
            logger.debug("Falling back to %d.%d.%d for %r: %s", major, minor, patch, text, e)
            return cls.new(major, minor, patch)

    @classmethod
    def parse_or_zero(cls, text: Optional[str]) -> Version:
        """Parse leniently, falling back to 0.0.0 on any failure."""
        return cls.parse_or(text, 0, 0, 0)

    def format_canonical(self) -> str:
        """Return ``major.minor.patch[-prerelease][+build]``."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release is not None:
            version += f"-{self.pre_release}"
        if self.build is not None:
            version += f"+{self.build}"
        return version

    def __str__(self) -> str:
        return self.format_canonical()

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.pre_release is not None

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def compare(self, other: Version) -> int:
        """Compare precedence, ignoring build metadata.

        Returns:
            -1 if self < other, 0 if equal in precedence, 1 if self > other
        """
        for attr in ("major", "minor", "patch"):
            val1 = getattr(self, attr)
            val2 = getattr(other, attr)
            if val1 != val2:
                return -1 if val1 < val2 else 1
        return compare_prerelease(self.pre_release, other.pre_release)

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0


def package_version(text: Optional[str]) -> Version:
    """Return the version of a package from a possibly absent version string.

    ``None`` yields 0.0.0; anything else goes through
    :meth:`Version.parse_or_zero`.
    """
    if text is None:
        return Version.zero()
    return Version.parse_or_zero(text)
