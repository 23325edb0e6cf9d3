"""Result schema validation, writing, and run ID generation."""

from src.results.schema import (
    block_result_to_dict,
    load_result,
    validate_result,
    write_result,
)
from src.results.run_id import generate_run_id

__all__ = [
    "block_result_to_dict",
    "validate_result",
    "write_result",
    "load_result",
    "generate_run_id",
]
