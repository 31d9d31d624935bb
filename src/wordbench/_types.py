"""Data structures for wordbench."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

FrequencyMap = dict[str, int]


@dataclass(slots=True, frozen=True)
class Segment:
    start: int  # inclusive byte offset
    end: int    # exclusive byte offset

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(slots=True, frozen=True)
class TopNEntry:
    word: str
    count: int


@dataclass(slots=True, frozen=True)
class ResourceUsage:
    peak_resident_bytes: int
    user_cpu_seconds: float
    kernel_cpu_seconds: float

    def cpu_delta(self, earlier: ResourceUsage) -> tuple[float, float]:
        """(user, kernel) CPU seconds spent since ``earlier``."""
        return (
            self.user_cpu_seconds - earlier.user_cpu_seconds,
            self.kernel_cpu_seconds - earlier.kernel_cpu_seconds,
        )


@dataclass(slots=True, frozen=True)
class FileResult:
    path: str
    distinct_words: int
    total_words: int | None        # None when only the aggregate is known
    top_words: list[TopNEntry] = field(default_factory=list)
    failed: bool = False           # file could not be opened


@dataclass(slots=True, frozen=True)
class StrategyResult:
    strategy: str
    files: list[FileResult]
    elapsed_seconds: float
    usage_before: ResourceUsage
    usage_after: ResourceUsage

    @property
    def total_distinct_words(self) -> int:
        return sum(f.distinct_words for f in self.files)


@dataclass(slots=True, frozen=True)
class BenchmarkReport:
    results: list[StrategyResult]

    @property
    def total_elapsed_seconds(self) -> float:
        return sum(r.elapsed_seconds for r in self.results)

    @property
    def combined_word_count(self) -> int:
        # Every strategy counts the same corpus; report the first one.
        if not self.results:
            return 0
        return self.results[0].total_distinct_words


class Phase(str, Enum):
    """Per-file states of the thread-parallel strategy."""

    IDLE = "idle"
    SEGMENTING = "segmenting"
    WORKERS_RUNNING = "workers_running"
    MERGING = "merging"
    DONE = "done"
