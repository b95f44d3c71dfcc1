"""Data loading utilities for scripturequiz."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import yaml

from .schemas import Question
from ..utils.io import read_json, read_jsonl, read_yaml
from ..utils.validation import (
    DataIntegrityError,
    find_duplicates,
    validate_question_records,
)

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = {".json", ".jsonl", ".yaml", ".yml"}


def build_questions(
    records: Sequence[Dict[str, Any]],
    categories: Optional[Sequence[str]] = None,
) -> List[Question]:
    """Validate raw records and convert them to Question objects.

    Args:
        records: Raw records in the ``category/q/options/answer/ref`` layout
        categories: Allowed category labels, or None to accept any label

    Returns:
        List of Question objects, in record order

    Raises:
        DataIntegrityError: If any record is malformed or duplicated
    """
    validate_question_records(records, categories)

    questions = [
        Question(
            category=row["category"].strip(),
            text=row["q"].strip(),
            options=tuple(option.strip() for option in row["options"]),
            answer_index=row["answer"],
            reference=(row.get("ref") or "").strip(),
        )
        for row in records
    ]

    duplicates = find_duplicates([(i, q.id) for i, q in enumerate(questions)])
    if duplicates:
        logger.error("Question set contains %d duplicate records", len(duplicates))
        raise DataIntegrityError(
            f"Question set contains {len(duplicates)} duplicate records",
            errors=duplicates,
        )

    return questions


def _read_records(filepath: Path) -> Any:
    if filepath.suffix == ".jsonl":
        return list(read_jsonl(filepath))
    if filepath.suffix == ".json":
        return read_json(filepath)
    return read_yaml(filepath)


def load_questions(
    path: Union[str, Path],
    categories: Optional[Sequence[str]] = None,
) -> List[Question]:
    """Load questions from a JSON, JSONL or YAML file.

    Args:
        path: Path to the question file
        categories: Allowed category labels, or None to accept any label

    Returns:
        List of Question objects

    Raises:
        FileNotFoundError: If file doesn't exist
        DataIntegrityError: If the file is unreadable or the records are malformed
    """
    filepath = Path(path).resolve()
    if not filepath.exists():
        raise FileNotFoundError(f"Question file not found: {filepath}")
    if not filepath.is_file():
        raise DataIntegrityError(f"Path is not a file: {filepath}")
    if filepath.suffix not in SUPPORTED_SUFFIXES:
        raise DataIntegrityError(
            f"Expected one of {sorted(SUPPORTED_SUFFIXES)}, got: {filepath.suffix or '(none)'}"
        )

    try:
        records = _read_records(filepath)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise DataIntegrityError(f"Error reading questions from {filepath}: {e}") from e

    if not isinstance(records, list):
        raise DataIntegrityError(
            f"Expected a list of question records in {filepath}, got {type(records).__name__}"
        )

    questions = build_questions(records, categories)
    logger.info("Loaded %d questions from %s", len(questions), filepath, extra={"source": str(filepath)})
    return questions
