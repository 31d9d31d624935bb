"""Wordbench error types."""


class WordbenchError(Exception):
    """Base error for all wordbench failures."""


class PartitionError(WordbenchError):
    """Buffer cannot be partitioned (empty buffer or worker count < 1)."""


class WorkerSpawnError(WordbenchError):
    """A counting worker could not be started."""


class ChannelError(WordbenchError):
    """Simulated-process channel send/receive failed."""


class ConfigError(WordbenchError):
    """Benchmark configuration is missing or invalid."""
