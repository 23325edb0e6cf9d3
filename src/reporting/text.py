"""Plain-text rendering of block results and benchmark tables."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, StrictUndefined

if TYPE_CHECKING:
    from src.blocking.types import BlockResult, SearchStats

log = logging.getLogger(__name__)

# Template directory relative to this file
_TEMPLATE_DIR = Path(__file__).parent / "templates"


@dataclass(frozen=True, slots=True)
class BenchmarkRow:
    """One line of the benchmark table."""

    n_users: int
    n_edges: int
    n_components: int
    elapsed_ms: float
    nodes_explored: int
    pruning_effectiveness: float
    optimal_edges: int
    greedy_edges: int


def _create_text_env() -> Environment:
    """Jinja2 environment for plain text: no autoescaping, tidy whitespace."""
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATE_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def render_block_report(
    result: "BlockResult", stats: "SearchStats | None" = None
) -> str:
    """Render the multi-line summary of one block simulation."""
    template = _create_text_env().get_template("block_report.txt")
    return template.render(
        blocker=str(result.blocker),
        blocked=str(result.blocked),
        still_connected=result.still_connected,
        edges_needed=result.edges_needed,
        suggested_edges=[str(pair) for pair in result.suggested_edges],
        message=result.message,
        stats=stats,
    )


def render_benchmark_table(rows: list[BenchmarkRow]) -> str:
    """Render a Markdown-style table of benchmark measurements."""
    template = _create_text_env().get_template("benchmark_table.txt")
    table = template.render(rows=rows)
    log.debug("Rendered benchmark table with %d rows", len(rows))
    return table
