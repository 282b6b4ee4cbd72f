# SPDX-License-Identifier: MIT
"""Semantic version parsing and comparison.

This package parses, formats and compares version strings following the
SemVer 2.0.0 specification, with a strict mode that rejects leading zeros in
numeric identifiers and a lenient mode that accepts them.

Example:
    >>> from tbx_semver import Version, compare_versions, is_valid_semver
    >>>
    >>> version = Version.parse("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> str(version.pre_release)
    'alpha.1'
    >>>
    >>> is_valid_semver("1.0.0")
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    ParseError,
    ParsePart,
    ErrorReason,
    InvalidChar,
    InvalidPattern,
    NonAsciiAlphaNumeric,
    LeadingZero,
)
from .identifier import (
    validate_numeric,
    validate_alphanumeric,
)
from .core import (
    MAX_VERSION_NUMBER,
    parse_core,
)
from .prerelease import PreRelease
from .build import Build
from .version import (
    DEFAULT_STRICT,
    Version,
    package_version,
)
from .compare import (
    compare_versions,
    version_key,
    is_valid_semver,
)

__all__ = [
    # Errors
    "ParseError",
    "ParsePart",
    "ErrorReason",
    "InvalidChar",
    "InvalidPattern",
    "NonAsciiAlphaNumeric",
    "LeadingZero",
    # Parsing
    "validate_numeric",
    "validate_alphanumeric",
    "MAX_VERSION_NUMBER",
    "parse_core",
    "PreRelease",
    "Build",
    "DEFAULT_STRICT",
    "Version",
    "package_version",
    # Version comparison
    "compare_versions",
    "version_key",
    "is_valid_semver",
]
