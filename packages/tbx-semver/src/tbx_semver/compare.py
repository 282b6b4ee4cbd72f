# SPDX-License-Identifier: MIT
"""Convenience helpers for comparing, sorting and validating version strings.

Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from typing import Union

from .errors import ParseError
from .identifier import is_numeric_identifier
from .version import DEFAULT_STRICT, Version


def _as_version(version: Union[str, Version]) -> Version:
    return Version.parse(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        ParseError: If either version string is invalid (strings are parsed strictly)

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
    """
    return _as_version(version1).compare(_as_version(version2))


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with :func:`compare_versions`.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _as_version(version)

    # Pre-release key: None becomes (1,) to sort after pre-releases
    # Pre-release identifiers become (0, parts...) where numeric parts sort first
    if v.pre_release is None:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.pre_release.identifiers:
            if is_numeric_identifier(part):
                parts.append((0, int(part), ""))
            else:
                parts.append((1, 0, part))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)


def is_valid_semver(version_string: str, strict: bool = DEFAULT_STRICT) -> bool:
    """Check if a string is a valid semantic version.

    Surrounding whitespace is ignored.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("01.0.0", strict=False)
        True
    """
    if not isinstance(version_string, str):
        return False
    try:
        Version.parse(version_string.strip(), strict)
    except ParseError:
        return False
    return True
