#!/usr/bin/env python3
"""Command-line interface for the Gajrela nutrition estimator."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from gajrela.app_logging import configure_logging
from gajrela.data_layer.exceptions import EstimatorError
from gajrela.data_layer.models import MilkCategory
from gajrela.data_layer.reference_table import DEFAULT_REFERENCE_TABLE, ReferenceTableLoader
from gajrela.ingestion.recipe_loader import RecipeConfig, RecipeConfigLoader, DEFAULT_RECIPE
from gajrela.nutrition.estimator import NutritionEstimator
from gajrela.output.formatters import format_estimate_markdown, format_estimate_json_string

_logger = logging.getLogger("gajrela.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Estimate approximate nutrition for a batch of Gajar Ka Halwa"
    )
    parser.add_argument(
        "--recipe",
        type=str,
        help="Path to recipe YAML file (default: built-in 500g carrot / 500g milk recipe)"
    )
    parser.add_argument(
        "--reference",
        type=str,
        help="Path to reference table JSON file (default: built-in table)"
    )
    parser.add_argument(
        "--milk-type",
        type=str,
        help="Override milk type: full-fat, whole, reduced-fat or toned"
    )
    parser.add_argument(
        "--yield-g",
        type=float,
        help="Override assumed finished weight in grams"
    )
    parser.add_argument(
        "--output",
        type=str,
        choices=["markdown", "json", "both"],
        default="markdown",
        help="Output format: markdown (default), json, or both"
    )
    parser.add_argument(
        "--output-file",
        type=str,
        help="Optional file path to save output (default: print to stdout)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def _write_output(text: str, output_file: Optional[str], suffix: Optional[str]) -> None:
    if output_file:
        output_path = Path(output_file)
        if suffix:
            output_path = output_path.with_suffix(suffix)
        output_path.write_text(text)
        _logger.info("Output saved to %s", output_path)
    else:
        print(text)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Process exit code (0 success, 1 missing file or unexpected error,
        3 estimator error)
    """
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.recipe and not Path(args.recipe).exists():
        print(f"Error: Recipe file not found: {args.recipe}", file=sys.stderr)
        return 1
    if args.reference and not Path(args.reference).exists():
        print(f"Error: Reference table file not found: {args.reference}", file=sys.stderr)
        return 1

    try:
        if args.recipe:
            _logger.info("Loading recipe from %s", args.recipe)
            config = RecipeConfigLoader(args.recipe).load()
        else:
            config = RecipeConfig(recipe=DEFAULT_RECIPE)

        reference_table = DEFAULT_REFERENCE_TABLE
        if args.reference:
            _logger.info("Loading reference table from %s", args.reference)
            reference_table = ReferenceTableLoader(args.reference).load()

        recipe = config.recipe
        if args.milk_type:
            recipe = recipe.with_milk(MilkCategory.from_label(args.milk_type))

        assumed_yield_g = args.yield_g if args.yield_g is not None else config.assumed_yield_g
        estimator = NutritionEstimator(reference_table, assumed_yield_g=assumed_yield_g)
        estimate = estimator.estimate(recipe)

        both = args.output == "both"
        if args.output in ["markdown", "both"]:
            _write_output(format_estimate_markdown(estimate), args.output_file, ".md" if both else None)
        if args.output in ["json", "both"]:
            if both and not args.output_file:
                print("\n" + "=" * 80 + "\n")
            _write_output(
                format_estimate_json_string(estimate, indent=2), args.output_file, ".json" if both else None
            )
    except EstimatorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 3
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        _logger.debug("Unexpected failure", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
