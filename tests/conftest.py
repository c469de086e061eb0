"""Shared test fixtures and helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from xc.pattern import Resolution, resolve

ALL_BYTES = range(256)


@pytest.fixture
def run():
    """Return a helper that resolves a pattern against text and returns the output text."""

    def _run(source: str, pattern: str, limit: int | None = None) -> str:
        return resolve(pattern, source.encode("latin-1"), limit).output.decode("latin-1")

    return _run


@pytest.fixture
def resolution():
    """Return a helper that resolves a pattern against text and returns the Resolution."""

    def _resolution(source: str, pattern: str, limit: int | None = None) -> Resolution:
        return resolve(pattern, source.encode("latin-1"), limit)

    return _resolution


@pytest.fixture
def input_file(tmp_path: Path):
    """Return a helper that writes bytes to a file under tmp_path and returns its path."""

    def _input_file(content: bytes, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _input_file


def is_subsequence(small: bytes, big: bytes) -> bool:
    """Return True if *small* appears in *big* in order (not necessarily contiguous)."""
    it = iter(big)
    return all(b in it for b in small)
