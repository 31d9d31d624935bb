"""Structured worker group: every spawned task is joined on exit."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING, Any

from ._errors import WorkerSpawnError

if TYPE_CHECKING:
    from collections.abc import Callable


class WorkerGroup:
    """Thread-pool task group acting as a barrier.

    Usage::

        with WorkerGroup(4) as group:
            for seg in segments:
                group.spawn(count_segment, buffer, seg)
        local_maps = group.results()

    Leaving the ``with`` block waits for every spawned task, so no caller
    can observe results while a worker is still running.
    """

    __slots__ = ("_max_workers", "_name", "_executor", "_futures", "_joined")

    def __init__(self, max_workers: int, *, name: str = "wordbench-worker") -> None:
        self._max_workers = max_workers
        self._name = name
        self._executor: ThreadPoolExecutor | None = None
        self._futures: list[Future[Any]] = []
        self._joined = False

    def __enter__(self) -> WorkerGroup:
        self._executor = ThreadPoolExecutor(
            max_workers=self._max_workers, thread_name_prefix=self._name,
        )
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._executor is None:
            raise RuntimeError("group was never entered")
        self._executor.shutdown(wait=True)
        self._joined = True

    def spawn(self, fn: Callable[..., Any], *args: Any) -> Future[Any]:
        """Start one task in the group.

        Raises:
            WorkerSpawnError: the pool refused the task or could not start a
                thread for it.
        """
        if self._executor is None or self._joined:
            raise WorkerSpawnError(f"{self._name}: group is not running")
        try:
            future = self._executor.submit(fn, *args)
        except RuntimeError as exc:
            raise WorkerSpawnError(
                f"{self._name}: failed to start worker {len(self._futures)}: {exc}"
            ) from exc
        self._futures.append(future)
        return future

    def results(self) -> list[Any]:
        """Task results in spawn order; re-raises the first task failure."""
        if not self._joined:
            raise RuntimeError("results are only available after the group has joined")
        return [f.result() for f in self._futures]

    def __len__(self) -> int:
        return len(self._futures)
