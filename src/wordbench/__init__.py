"""Wordbench: benchmark of single-threaded vs parallel word-frequency counting."""

from __future__ import annotations

from ._bench import run_benchmark, time_strategy
from ._channel import Channel
from ._config import BenchConfig, load_config
from ._corpus import read_buffer
from ._counter import count_segment
from ._errors import (
    ChannelError,
    ConfigError,
    PartitionError,
    WordbenchError,
    WorkerSpawnError,
)
from ._merge import MergeCoordinator, merge
from ._monitor import ResourceMonitor
from ._segmenter import partition
from ._strategies import (
    STRATEGIES,
    SimulatedProcessStrategy,
    SingleThreadedStrategy,
    Strategy,
    ThreadParallelStrategy,
    build_strategy,
)
from ._topn import top_n
from ._types import (
    BenchmarkReport,
    FileResult,
    Phase,
    ResourceUsage,
    Segment,
    StrategyResult,
    TopNEntry,
)
from ._workers import WorkerGroup

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BenchConfig",
    "BenchmarkReport",
    "Channel",
    "ChannelError",
    "ConfigError",
    "FileResult",
    "MergeCoordinator",
    "PartitionError",
    "Phase",
    "ResourceMonitor",
    "ResourceUsage",
    "STRATEGIES",
    "Segment",
    "SimulatedProcessStrategy",
    "SingleThreadedStrategy",
    "Strategy",
    "StrategyResult",
    "ThreadParallelStrategy",
    "TopNEntry",
    "WordbenchError",
    "WorkerGroup",
    "WorkerSpawnError",
    "build_strategy",
    "count_segment",
    "load_config",
    "merge",
    "partition",
    "read_buffer",
    "run_benchmark",
    "time_strategy",
    "top_n",
]
