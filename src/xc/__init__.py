"""xc: remove characters from text by literal or by character class."""

from __future__ import annotations

__version__ = "0.1.0"


def strip(source: bytes, pattern: str, limit: int | None = None) -> bytes:
    """Apply *pattern* to *source* and return the surviving bytes."""
    from xc.pattern import resolve

    return resolve(pattern, source, limit).output
