"""Corpus file reading."""

from __future__ import annotations

from pathlib import Path


def read_buffer(path: Path | str) -> bytes:
    """Read a whole corpus file as bytes. Raises ``OSError`` on failure."""
    with open(path, "rb") as f:
        return f.read()
