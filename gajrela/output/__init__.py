"""Output formatting for nutrition estimates."""

from gajrela.output.formatters import (
    format_estimate_json,
    format_estimate_json_string,
    format_estimate_markdown,
    format_batch_inputs,
    format_nutrition_breakdown
)

__all__ = [
    "format_estimate_json",
    "format_estimate_json_string",
    "format_estimate_markdown",
    "format_batch_inputs",
    "format_nutrition_breakdown"
]
