"""Console rendering of benchmark results."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._strategies import STRATEGIES

if TYPE_CHECKING:
    from ._types import BenchmarkReport, FileResult, ResourceUsage, StrategyResult

_WORD_WIDTH = 15


def strategy_label(name: str) -> str:
    cls = STRATEGIES.get(name)
    return cls.label if cls is not None else name


def format_file(result: FileResult) -> list[str]:
    lines: list[str] = []
    if result.failed:
        lines.append(f"Failed to open file: {result.path}")
    if result.top_words:
        lines.append(f"Top frequent words in {result.path}:")
        for entry in result.top_words:
            lines.append(f"  {entry.word:<{_WORD_WIDTH}}: {entry.count}")
    lines.append(f"Word count for {result.path}: {result.distinct_words}")
    return lines


def format_usage(label: str, after: ResourceUsage, before: ResourceUsage | None = None) -> list[str]:
    lines = [
        f"[{label} Resource Usage]",
        f"Peak working set size: {after.peak_resident_bytes // 1024} KB",
        f"User CPU time: {after.user_cpu_seconds:.6f} seconds",
        f"Kernel CPU time: {after.kernel_cpu_seconds:.6f} seconds",
    ]
    if before is not None:
        user, kernel = after.cpu_delta(before)
        lines.append(f"CPU time during run: {user:.6f} user / {kernel:.6f} kernel seconds")
    return lines


def format_strategy(result: StrategyResult) -> list[str]:
    label = strategy_label(result.strategy)
    lines = [f"[{label}]"]
    for f in result.files:
        lines.extend(format_file(f))
    lines.append("")
    lines.append(f"Elapsed time for {label.lower()}: {result.elapsed_seconds:.6f} seconds")
    lines.extend(format_usage(label, result.usage_after, result.usage_before))
    return lines


def format_report(report: BenchmarkReport) -> str:
    lines: list[str] = []
    for result in report.results:
        lines.extend(format_strategy(result))
        lines.append("")
    labels = " + ".join(strategy_label(r.strategy).lower() for r in report.results)
    lines.append(
        f"Total elapsed time ({labels}): {report.total_elapsed_seconds:.6f} seconds"
    )
    lines.append(f"Total word count for all files combined: {report.combined_word_count}")
    return "\n".join(lines)
