# SPDX-License-Identifier: MIT
"""Codepoint-safe substring helpers.

Offsets are counted in code points, never in encoded bytes, so a slice can
never split a multi-byte character. Both helpers return ``None`` instead of an
empty or truncated string when the requested range is not fully available.
"""

from __future__ import annotations

from typing import Optional


def substring(text: str, start: int, end: int) -> Optional[str]:
    """Return ``text[start:end]``, or ``None`` if the range is empty or out of bounds.

    Examples:
        >>> substring("HelloWorld", 5, 10)
        'World'
        >>> substring("HelloWorld", 10, 10) is None
        True
    """
    if start < 0 or end <= start or len(text) < end:
        return None
    return text[start:end]


def substring_to_end(text: str, start: int) -> Optional[str]:
    """Return ``text[start:]``, or ``None`` if nothing remains from ``start``."""
    if start < 0 or len(text) <= start:
        return None
    return text[start:]
