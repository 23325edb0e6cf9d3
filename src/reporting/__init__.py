"""Plain-text reports for block simulations and benchmark runs."""

from src.reporting.text import BenchmarkRow, render_benchmark_table, render_block_report

__all__ = [
    "BenchmarkRow",
    "render_benchmark_table",
    "render_block_report",
]
