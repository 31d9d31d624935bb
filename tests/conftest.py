"""Shared fixtures for wordbench tests."""

from pathlib import Path

import pytest

SCENARIO_TEXT = b"the cat sat. The CAT sat!"

CORPUS_TEXTS = {
    "bib": b"Alpha beta gamma. alpha BETA alpha; delta\n",
    "paper1": b"It was the best of times, it was the worst of times.\n",
    "empty": b"",
}


@pytest.fixture
def scenario_text() -> bytes:
    """Mixed-case sentence with every word repeated twice."""
    return SCENARIO_TEXT


@pytest.fixture
def corpus_texts() -> dict[str, bytes]:
    """Raw contents of the files written by the corpus fixture."""
    return dict(CORPUS_TEXTS)


@pytest.fixture
def corpus(tmp_path: Path) -> list[Path]:
    """Small on-disk corpus: two text files and an empty one."""
    paths = []
    for name, data in CORPUS_TEXTS.items():
        p = tmp_path / name
        p.write_bytes(data)
        paths.append(p)
    return paths


@pytest.fixture
def missing_file(tmp_path: Path) -> Path:
    return tmp_path / "does-not-exist"
