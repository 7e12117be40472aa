"""
Normalize recipe export files from the command line.

Reads one or more JSON files holding arrays of raw recipe records (the
breakfast/lunch/dinner/snacks exports used by the recipe import job), runs
them through the normalizer and writes the canonical recipes as JSON.

Run with: mealprep-normalize recipes/breakfast.json recipes/dinner.json -o out.json
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from mealprep.config import get_settings
from mealprep.enums import MeasurementSystem
from mealprep.logging_config import configure_logging, get_logger
from mealprep.normalize.recipes import NormalizationResult, normalize_batch
from mealprep.plan.grocery_list import build_grocery_list

logger = get_logger(__name__)


def load_payloads(paths: list[Path]) -> list[Any]:
    """Load and concatenate recipe arrays from JSON files.

    Raises:
        OSError: If a file cannot be read.
        ValueError: If a file is not UTF-8 JSON holding an array or an object.
    """
    payloads: list[Any] = []
    for path in paths:
        data = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(data, dict):
            data = [data]
        elif not isinstance(data, list):
            kind = type(data).__name__
            raise ValueError(f"{path.name}: expected a JSON array or object, got {kind}")
        logger.info(f"Loaded {len(data)} recipes from {path.name}")
        payloads.extend(data)
    return payloads


def _print_grocery_list(result: NormalizationResult, system: MeasurementSystem) -> None:
    grocery_list = build_grocery_list(result.normalized)
    for category, items in grocery_list.items_by_category().items():
        print(f"\n{category.value}")
        for item in items:
            print(f"  {item.display_quantity(system)} {item.name}")


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Normalize raw recipe export files")
    parser.add_argument("files", nargs="+", type=Path, help="JSON files with recipe arrays")
    parser.add_argument("--output", "-o", type=Path, help="Write normalized recipes here")
    parser.add_argument(
        "--grocery-list",
        "-g",
        action="store_true",
        help="Print the aggregated grocery list",
    )
    parser.add_argument(
        "--system",
        "-s",
        choices=[s.value for s in MeasurementSystem],
        default=settings.default_measurement_system.value,
        help="Measurement system for the grocery list",
    )
    args = parser.parse_args(argv)

    configure_logging(log_level=settings.log_level)

    try:
        payloads = load_payloads(args.files)
    except (OSError, ValueError) as e:
        logger.error(f"Could not read input: {e}")
        return 2

    result = normalize_batch(payloads)
    output = json.dumps(result.to_dict(), indent=2)

    if args.output:
        args.output.write_text(output, encoding="utf-8")
        logger.info(f"Wrote {len(result.normalized)} recipes to {args.output}")
    elif not args.grocery_list:
        print(output)

    if args.grocery_list:
        _print_grocery_list(result, MeasurementSystem(args.system))

    return 1 if result.errors else 0


if __name__ == "__main__":
    sys.exit(main())
