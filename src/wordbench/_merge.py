"""Merge of local frequency maps into a per-file global map."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._types import FrequencyMap


def merge(global_map: FrequencyMap, local_map: FrequencyMap) -> None:
    """Add every count of ``local_map`` into ``global_map`` in place."""
    for word, count in local_map.items():
        global_map[word] = global_map.get(word, 0) + count


class MergeCoordinator:
    """Owns one file's global map; all mutation goes through one lock.

    ``merge`` is commutative and associative, so the resulting map does not
    depend on the order in which local maps are committed.
    """

    __slots__ = ("_lock", "_global", "_commits")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._global: FrequencyMap = {}
        self._commits = 0

    def commit(self, local_map: FrequencyMap) -> None:
        """Merge one local map inside the critical section."""
        with self._lock:
            merge(self._global, local_map)
            self._commits += 1

    def fold(self, local_maps: Iterable[FrequencyMap]) -> None:
        """Commit local maps one after another from a single caller."""
        for local_map in local_maps:
            self.commit(local_map)

    def snapshot(self) -> FrequencyMap:
        with self._lock:
            return dict(self._global)

    @property
    def commits(self) -> int:
        return self._commits
