"""Execution strategies: single-threaded, thread-parallel, simulated-process."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar, Literal

from ._channel import Channel
from ._corpus import read_buffer
from ._counter import count_segment, total_tokens
from ._errors import ChannelError, PartitionError
from ._merge import MergeCoordinator
from ._segmenter import DEFAULT_WORKERS, partition
from ._topn import DEFAULT_TOP_N, top_n
from ._types import FileResult, Phase
from ._workers import WorkerGroup

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path

    from ._types import FrequencyMap, Segment

logger = logging.getLogger("wordbench.strategies")

CommitMode = Literal["fold", "locked"]


class Strategy:
    """Base class: per-file load, count and rank; subclasses count."""

    name: ClassVar[str] = ""
    label: ClassVar[str] = ""

    def __init__(
        self,
        *,
        workers: int = DEFAULT_WORKERS,
        top_n: int = DEFAULT_TOP_N,
        reader: Callable[[Path | str], bytes] = read_buffer,
    ) -> None:
        self.workers = workers
        self.top_n = top_n
        self._reader = reader

    def run(self, paths: Iterable[Path | str]) -> list[FileResult]:
        """Process files strictly one after another."""
        return [self.process_file(p) for p in paths]

    def process_file(self, path: Path | str) -> FileResult:
        freqs = self.count_path(path)
        if freqs is None:
            return FileResult(str(path), 0, 0, [], failed=True)
        return FileResult(
            path=str(path),
            distinct_words=len(freqs),
            total_words=total_tokens(freqs),
            top_words=top_n(freqs, self.top_n),
        )

    def count_path(self, path: Path | str) -> FrequencyMap | None:
        """Frequency map for one file, or None if it could not be opened."""
        try:
            buffer = self._reader(path)
        except OSError as exc:
            logger.error("Failed to open file: %s (%s)", path, exc)
            return None
        return self.count_buffer(buffer, path)

    def count_buffer(self, buffer: bytes, path: Path | str = "<buffer>") -> FrequencyMap:
        raise NotImplementedError


class SingleThreadedStrategy(Strategy):
    """Baseline: one pass over the whole buffer, no partitioning or merge."""

    name = "single"
    label = "Single-threaded"

    def count_buffer(self, buffer: bytes, path: Path | str = "<buffer>") -> FrequencyMap:
        return count_segment(buffer)


class ThreadParallelStrategy(Strategy):
    """Segment, count each segment on its own worker, merge after the barrier.

    ``commit_mode="fold"`` has workers return their local maps, which are
    folded by this thread once every worker has finished.
    ``commit_mode="locked"`` has workers commit to the coordinator in
    flight; the global map is still only read after the barrier.
    """

    name = "threaded"
    label = "Multithreading"

    def __init__(
        self,
        *,
        workers: int = DEFAULT_WORKERS,
        top_n: int = DEFAULT_TOP_N,
        reader: Callable[[Path | str], bytes] = read_buffer,
        commit_mode: CommitMode = "fold",
        counter: Callable[[bytes, Segment], FrequencyMap] = count_segment,
        on_phase: Callable[[str, Phase], None] | None = None,
    ) -> None:
        super().__init__(workers=workers, top_n=top_n, reader=reader)
        if commit_mode not in ("fold", "locked"):
            raise ValueError(f"unknown commit mode: {commit_mode!r}")
        self.commit_mode = commit_mode
        self._counter = counter
        self._on_phase = on_phase

    def _enter(self, path: Path | str, phase: Phase) -> None:
        logger.debug("%s: %s", path, phase.value)
        if self._on_phase is not None:
            self._on_phase(str(path), phase)

    def count_buffer(self, buffer: bytes, path: Path | str = "<buffer>") -> FrequencyMap:
        self._enter(path, Phase.IDLE)
        self._enter(path, Phase.SEGMENTING)
        try:
            segments = partition(buffer, self.workers)
        except PartitionError as exc:
            logger.info("%s: nothing to count (%s)", path, exc)
            self._enter(path, Phase.DONE)
            return {}

        coordinator = MergeCoordinator()
        locked = self.commit_mode == "locked"

        self._enter(path, Phase.WORKERS_RUNNING)
        with WorkerGroup(len(segments)) as group:
            for seg in segments:
                if locked:
                    group.spawn(self._count_and_commit, buffer, seg, coordinator)
                else:
                    group.spawn(self._counter, buffer, seg)
        local_maps = group.results()

        self._enter(path, Phase.MERGING)
        if not locked:
            coordinator.fold(local_maps)
        freqs = coordinator.snapshot()
        self._enter(path, Phase.DONE)
        return freqs

    def _count_and_commit(
        self, buffer: bytes, segment: Segment, coordinator: MergeCoordinator,
    ) -> None:
        coordinator.commit(self._counter(buffer, segment))


class SimulatedProcessStrategy(Strategy):
    """Thread-parallel counting behind a simulated process boundary.

    For each file a child task counts the file and sends only the map's key
    count through a ``Channel``. The caller joins the child, then blocks on
    the receive before it moves to the next file.

    A file the child cannot open is logged by the child and arrives as a
    key count of 0. The parent cannot tell it apart from an empty file, so
    these results never have ``failed`` set and the report prints no
    "Failed to open file" line for them.
    """

    name = "process"
    label = "Multiprocessing"

    def __init__(
        self,
        *,
        workers: int = DEFAULT_WORKERS,
        top_n: int = DEFAULT_TOP_N,
        reader: Callable[[Path | str], bytes] = read_buffer,
        commit_mode: CommitMode = "fold",
        channel_factory: Callable[[], Channel] = Channel,
    ) -> None:
        super().__init__(workers=workers, top_n=top_n, reader=reader)
        self._counting = ThreadParallelStrategy(
            workers=workers, top_n=top_n, reader=reader, commit_mode=commit_mode,
        )
        self._channel_factory = channel_factory

    def run(self, paths: Iterable[Path | str]) -> list[FileResult]:
        channel = self._channel_factory()
        results: list[FileResult] = []
        try:
            for seq, path in enumerate(paths):
                with WorkerGroup(1, name="wordbench-child") as child:
                    child.spawn(self._child, seq, path, channel)
                child.results()

                got_seq, key_count = channel.recv()
                if got_seq != seq:
                    raise ChannelError(
                        f"out-of-order message for {path}: expected {seq}, got {got_seq}"
                    )
                logger.debug("%s: received key count %d", path, key_count)
                results.append(FileResult(str(path), key_count, None))
        finally:
            channel.close()
        return results

    def process_file(self, path: Path | str) -> FileResult:
        return self.run([path])[0]

    def _child(self, seq: int, path: Path | str, channel: Channel) -> None:
        # Open failures are logged on this side; the parent only sees 0.
        freqs = self._counting.count_path(path)
        channel.send(seq, 0 if freqs is None else len(freqs))


STRATEGIES: dict[str, type[Strategy]] = {
    cls.name: cls
    for cls in (SingleThreadedStrategy, ThreadParallelStrategy, SimulatedProcessStrategy)
}


def build_strategy(
    name: str,
    *,
    workers: int = DEFAULT_WORKERS,
    top_n: int = DEFAULT_TOP_N,
    commit_mode: CommitMode = "fold",
    reader: Callable[[Path | str], bytes] = read_buffer,
) -> Strategy:
    """Instantiate a strategy by its short name (``single``/``threaded``/``process``)."""
    try:
        cls = STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"unknown strategy {name!r}; expected one of {sorted(STRATEGIES)}"
        ) from None
    if cls is SingleThreadedStrategy:
        return cls(workers=workers, top_n=top_n, reader=reader)
    return cls(workers=workers, top_n=top_n, reader=reader, commit_mode=commit_mode)
