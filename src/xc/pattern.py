"""Pattern resolution: class tokens first, then quota-limited literals."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from dataclasses import dataclass, field

from xc.ctype import Category, predicate
from xc.errors import ConfigError

UNBOUNDED = sys.maxsize

# Checked in this order. [:space:] means the space character only.
CLASS_TOKENS: tuple[tuple[str, Category], ...] = (
    ("[:alnum:]", Category.ALNUM),
    ("[:alpha:]", Category.ALPHA),
    ("[:blank:]", Category.BLANK),
    ("[:cntrl:]", Category.CNTRL),
    ("[:digit:]", Category.DIGIT),
    ("[:graph:]", Category.GRAPH),
    ("[:lower:]", Category.LOWER),
    ("[:print:]", Category.PRINT),
    ("[:punct:]", Category.PUNCT),
    ("[:space:]", Category.ASPACE),
    ("[:htab:]", Category.HTAB),
    ("[:vtab:]", Category.VTAB),
    ("[:newline:]", Category.NEWLINE),
    ("[:upper:]", Category.UPPER),
    ("[:xdigit:]", Category.XDIGIT),
)

_OPEN = "[:"
_CLOSE = ":]"


@dataclass(frozen=True, slots=True)
class Resolution:
    """Result of resolving one pattern against one buffer."""

    output: bytes
    classes: list[str] = field(default_factory=list)
    class_removed: int = 0
    literals: bytes = b""
    literal_removed: dict[int, int] = field(default_factory=dict)


def check_quota(quota: int | None) -> int:
    """Validate a quota, mapping None to an unbounded count."""
    if quota is None:
        return UNBOUNDED
    if quota < 0:
        raise ConfigError("limit cannot be less than 0")
    return quota


def class_tokens(pattern: str) -> list[str]:
    """Return the recognised class tokens present in *pattern*, in table order."""
    return [token for token, _ in CLASS_TOKENS if token in pattern]


def remove_if(buffer: bytes, pred: Callable[[int], bool]) -> bytes:
    """Return *buffer* without the bytes matching *pred*, order preserved."""
    return bytes(b for b in buffer if not pred(b))


def remove_classes(pattern: str, buffer: bytes) -> bytes:
    """Remove every byte matched by a class token present in *pattern*."""
    for token, category in CLASS_TOKENS:
        if token in pattern:
            buffer = remove_if(buffer, predicate(category))
    return buffer


def strip_classes(pattern: str) -> str:
    """Remove bracket groups from *pattern*, leaving only its literal text.

    Scanning left to right, each ``[:`` pairs with the next ``:]`` after it
    and the whole group is dropped, whatever name it holds. An opener with
    no closer is kept as literal text.
    """
    parts: list[str] = []
    pos = 0
    while True:
        start = pattern.find(_OPEN, pos)
        if start == -1:
            break
        end = pattern.find(_CLOSE, start + len(_OPEN))
        if end == -1:
            break
        parts.append(pattern[pos:start])
        pos = end + len(_CLOSE)
    parts.append(pattern[pos:])
    return "".join(parts)


def distinct(literals: bytes) -> bytes:
    """Return the distinct bytes of *literals* in first-appearance order."""
    return bytes(dict.fromkeys(literals))


def remove_literals(
    buffer: bytes, literals: bytes, quota: int | None = None
) -> tuple[bytes, dict[int, int]]:
    """Delete up to *quota* leftmost occurrences of each distinct literal byte.

    The quota is per byte value, not shared. Returns the new buffer and the
    number of bytes removed for each literal.
    """
    limit = check_quota(quota)
    remaining = {b: limit for b in distinct(literals)}
    removed = {b: 0 for b in remaining}
    out = bytearray()
    for b in buffer:
        if remaining.get(b, 0) > 0:
            remaining[b] -= 1
            removed[b] += 1
        else:
            out.append(b)
    return bytes(out), removed


class Resolver:
    """Apply a pattern to a buffer in two phases: class tokens, then literals."""

    def __init__(self, pattern: str, quota: int | None = None) -> None:
        self._pattern = pattern
        self._quota = check_quota(quota)

    def resolve(self, buffer: bytes) -> Resolution:
        """Run both phases over *buffer* and return the result."""
        classes = class_tokens(self._pattern)
        after_classes = remove_classes(self._pattern, buffer)

        literals = os.fsencode(strip_classes(self._pattern))
        output, removed = remove_literals(after_classes, literals, self._quota)

        return Resolution(
            output=output,
            classes=classes,
            class_removed=len(buffer) - len(after_classes),
            literals=distinct(literals),
            literal_removed=removed,
        )


def resolve(pattern: str, buffer: bytes, quota: int | None = None) -> Resolution:
    """Convenience function: resolve *pattern* against *buffer*."""
    return Resolver(pattern, quota).resolve(buffer)
