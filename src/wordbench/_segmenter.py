"""Fixed-size byte partitioning of a text buffer."""

from __future__ import annotations

from ._errors import PartitionError
from ._types import Segment

DEFAULT_WORKERS = 4


def partition(buffer: bytes, workers: int = DEFAULT_WORKERS) -> list[Segment]:
    """Split ``buffer`` into ``workers`` contiguous half-open segments.

    Every segment but the last is ``len(buffer) // workers`` bytes long; the
    last one runs to the end of the buffer and absorbs the remainder. The
    split ignores word boundaries, so a token straddling a boundary is
    counted as two fragments.

    Raises:
        PartitionError: ``workers`` is below 1 or ``buffer`` is empty.
    """
    if workers <= 0:
        raise PartitionError(f"worker count must be >= 1, got {workers}")
    n = len(buffer)
    if n == 0:
        raise PartitionError("cannot partition an empty buffer")

    size = n // workers
    segments: list[Segment] = []
    for i in range(workers):
        start = i * size
        end = n if i == workers - 1 else start + size
        segments.append(Segment(start, end))
    return segments
