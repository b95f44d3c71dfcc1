from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ..data.loader import load_questions
from ..data.schemas import CATEGORIES
from ..utils.validation import DataIntegrityError


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="python -m scripturequiz.cli.validate_dataset",
        description=(
            "Validate a question file (JSON, JSONL or YAML) before using it as a source.\n"
            "On failure, lists every malformed record."
        ),
    )
    ap.add_argument(
        "dataset",
        help="Path to question file",
    )
    ap.add_argument(
        "--strict-categories",
        action="store_true",
        help=f"Only accept the built-in categories: {', '.join(CATEGORIES)}",
    )
    args = ap.parse_args(argv)

    dataset_path = Path(args.dataset)
    categories = CATEGORIES if args.strict_categories else None
    try:
        questions = load_questions(dataset_path, categories)
        print(f"[validate_dataset] OK: {dataset_path} ({len(questions)} questions)")
        return 0
    except FileNotFoundError:
        print(f"[validate_dataset] Error: dataset not found: {dataset_path}")
        return 1
    except DataIntegrityError as e:
        # Dedicated exit code for schema failures to distinguish from other errors
        print("[validate_dataset] Schema validation failed.")
        print(f"[validate_dataset] {e}")
        return 4


if __name__ == "__main__":
    sys.exit(main())
