"""ASCII tokenizer and per-segment word counting."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._types import FrequencyMap, Segment

# Runs of ASCII letters; everything else (digits, punctuation, bytes >= 0x80)
# is a separator.
_WORD_RE = re.compile(rb"[a-z]+")


def count_segment(buffer: bytes, segment: Segment | None = None) -> FrequencyMap:
    """Count lowercase alphabetic tokens inside ``segment`` of ``buffer``.

    With no segment the whole buffer is counted. A token running up to the
    segment end is flushed like any other.
    """
    if segment is not None:
        buffer = buffer[segment.start:segment.end]
    counts: FrequencyMap = {}
    # bytes.lower() only folds A-Z, which keeps classification ASCII-only.
    for m in _WORD_RE.finditer(buffer.lower()):
        token = m.group().decode("ascii")
        counts[token] = counts.get(token, 0) + 1
    return counts


def total_tokens(freqs: FrequencyMap) -> int:
    """Sum of all counts in a frequency map."""
    return sum(freqs.values())
