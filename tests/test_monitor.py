"""Tests for the resource monitor."""

import os
from types import SimpleNamespace

import psutil

from wordbench import ResourceMonitor, ResourceUsage


def test_query_current_process():
    usage = ResourceMonitor().query()
    assert isinstance(usage, ResourceUsage)
    assert usage.peak_resident_bytes > 0
    assert usage.user_cpu_seconds >= 0.0
    assert usage.kernel_cpu_seconds >= 0.0


def test_peak_not_below_current_rss():
    usage = ResourceMonitor().query()
    rss = psutil.Process(os.getpid()).memory_info().rss
    # ru_maxrss granularity is 1 KB on Linux
    assert usage.peak_resident_bytes >= rss - 1024


def test_cpu_time_is_monotonic():
    monitor = ResourceMonitor()
    before = monitor.query()
    sum(i * i for i in range(200_000))
    after = monitor.query()
    user, kernel = after.cpu_delta(before)
    assert user >= 0.0
    assert kernel >= 0.0


class _FakeProcess:
    pid = -1

    def memory_info(self):
        return SimpleNamespace(rss=4096, peak_wset=8192)

    def cpu_times(self):
        return SimpleNamespace(user=1.5, system=0.25)


def test_query_explicit_process():
    usage = ResourceMonitor().query(_FakeProcess())
    assert usage == ResourceUsage(8192, 1.5, 0.25)


def test_default_process():
    assert ResourceMonitor(_FakeProcess()).query().peak_resident_bytes == 8192


def test_foreign_process_without_peak_uses_rss():
    class NoPeak(_FakeProcess):
        def memory_info(self):
            return SimpleNamespace(rss=4096)

    assert ResourceMonitor().query(NoPeak()).peak_resident_bytes == 4096
