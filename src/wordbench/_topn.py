"""Deterministic top-N ranking of a frequency map."""

from __future__ import annotations

import heapq
from typing import TYPE_CHECKING

from ._types import TopNEntry

if TYPE_CHECKING:
    from ._types import FrequencyMap

DEFAULT_TOP_N = 10


def _rank_key(item: tuple[str, int]) -> tuple[int, str]:
    # count descending, then word ascending
    return (-item[1], item[0])


def top_n(freqs: FrequencyMap, n: int = DEFAULT_TOP_N) -> list[TopNEntry]:
    """Return the ``n`` most frequent words, ties broken alphabetically."""
    if n <= 0 or not freqs:
        return []
    ranked = heapq.nsmallest(n, freqs.items(), key=_rank_key)
    return [TopNEntry(word, count) for word, count in ranked]
