# SPDX-License-Identifier: MIT
"""Pre-release identifiers and their precedence.

Precedence rules (SemVer 2.0.0 section 11):

1. Identifiers consisting of only digits are compared numerically.
2. Identifiers with letters or hyphens are compared lexically in ASCII order.
3. Numeric identifiers always have lower precedence than non-numeric ones.
4. A larger set of fields has higher precedence than a smaller set, if all of
   the preceding identifiers are equal.

Example: 1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-alpha.beta < 1.0.0-beta
< 1.0.0-beta.2 < 1.0.0-beta.11 < 1.0.0-rc.1 < 1.0.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidPattern, ParseError, ParsePart
from .identifier import is_numeric_identifier, validate_alphanumeric, validate_numeric


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_identifiers(x: str, y: str) -> int:
    """Compare two pre-release identifiers.

    Returns:
        -1 if x < y, 0 if equal, 1 if x > y
    """
    x_numeric = is_numeric_identifier(x)
    y_numeric = is_numeric_identifier(y)
    if x_numeric and y_numeric:
        return _cmp(int(x), int(y))
    if x_numeric:
        return -1
    if y_numeric:
        return 1
    return _cmp(x, y)


def _parse_identifier(identifier: str, strict: bool) -> str:
    try:
        return validate_alphanumeric(identifier, strict)
    except ParseError:
        pass
    try:
        return validate_numeric(identifier, strict)
    except ParseError as e:
        raise ParseError(ParsePart.PRE_RELEASE, InvalidPattern()) from e


@dataclass(frozen=True, slots=True)
class PreRelease:
    """Dot separated pre-release identifiers (e.g. ``alpha``, ``alpha.beta``, ``beta.2``).

    Attributes:
        identifiers: The identifiers in input order, as parsed
    """

    identifiers: tuple[str, ...]

    @classmethod
    def parse(cls, text: str, strict: bool) -> PreRelease:
        """Parse the part after ``-`` (without the hyphen).

        Raises:
            ParseError: With part ``PreRelease`` if any identifier is empty or invalid
        """
        return cls(tuple(_parse_identifier(part, strict) for part in text.split(".")))

    def compare(self, other: PreRelease) -> int:
        """Compare precedence with another pre-release.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        for x, y in zip(self.identifiers, other.identifiers):
            result = compare_identifiers(x, y)
            if result != 0:
                return result
        return _cmp(len(self.identifiers), len(other.identifiers))

    def __lt__(self, other: PreRelease) -> bool:
        if not isinstance(other, PreRelease):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: PreRelease) -> bool:
        if not isinstance(other, PreRelease):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: PreRelease) -> bool:
        if not isinstance(other, PreRelease):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: PreRelease) -> bool:
        if not isinstance(other, PreRelease):
            return NotImplemented
        return self.compare(other) >= 0

    def __str__(self) -> str:
        return ".".join(self.identifiers)


def compare_prerelease(pre1: Optional[PreRelease], pre2: Optional[PreRelease]) -> int:
    """Compare two optional pre-releases of otherwise equal versions.

    A version without pre-release has higher precedence than one with a
    pre-release (1.0.0 > 1.0.0-alpha).
    """
    if pre1 is None and pre2 is None:
        return 0
    if pre1 is None:
        return 1  # Release > pre-release
    if pre2 is None:
        return -1  # Pre-release < release
    return pre1.compare(pre2)
