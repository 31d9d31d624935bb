"""Process resource usage: peak RSS and user/kernel CPU time."""

from __future__ import annotations

import os
import sys

import psutil

from ._types import ResourceUsage


def _peak_resident_bytes(proc: psutil.Process) -> int:
    mem = proc.memory_info()
    peak = getattr(mem, "peak_wset", None)  # Windows only
    if peak is not None:
        return int(peak)
    if proc.pid == os.getpid() and sys.platform != "win32":
        import resource

        maxrss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
        # macOS reports bytes, Linux and the BSDs kilobytes.
        return maxrss if sys.platform == "darwin" else maxrss * 1024
    return int(mem.rss)


class ResourceMonitor:
    """Read-only resource queries against a running process."""

    __slots__ = ("_default",)

    def __init__(self, process: psutil.Process | None = None) -> None:
        self._default = process

    def query(self, process: psutil.Process | None = None) -> ResourceUsage:
        proc = process or self._default or psutil.Process(os.getpid())
        cpu = proc.cpu_times()
        return ResourceUsage(
            peak_resident_bytes=_peak_resident_bytes(proc),
            user_cpu_seconds=float(cpu.user),
            kernel_cpu_seconds=float(cpu.system),
        )
