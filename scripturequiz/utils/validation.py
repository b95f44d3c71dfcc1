"""Schema validation utilities for question records."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

NUM_OPTIONS = 4


class ValidationError(Exception):
    """Base exception for validation errors."""
    pass


class DataIntegrityError(ValidationError):
    """Raised when the question set is malformed. Fatal at load time."""
    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []

    def __str__(self) -> str:
        base = super().__str__()
        if not self.errors:
            return base
        return base + "\n" + "\n".join(f"  - {e}" for e in self.errors)


class InsufficientDataError(ValidationError):
    """Raised when a sample asks for more questions than the pool holds."""
    def __init__(self, requested: int, available: int, category: Optional[str] = None):
        scope = f" in category '{category}'" if category is not None else ""
        super().__init__(
            f"Requested {requested} questions but only {available} available{scope}"
        )
        self.requested = requested
        self.available = available
        self.category = category


@dataclass
class FieldSpec:
    """Specification for a record field."""
    name: str
    type: Any
    required: bool = True
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    choices: Optional[Sequence[Any]] = None
    validator: Optional[Callable[[Any], Optional[str]]] = None


@dataclass
class DatasetSchema:
    """Schema definition for a list of raw records."""
    name: str
    fields: List[FieldSpec]
    min_records: Optional[int] = None


def _is_strict_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_options(options: Any) -> Optional[str]:
    bad = [i for i, o in enumerate(options) if not isinstance(o, str) or not o.strip()]
    if bad:
        return f"options[{bad[0]}] must be a non-empty string"
    normalized = [o.strip().lower() for o in options]
    if len(set(normalized)) != len(normalized):
        return "options must be distinct"
    return None


def _check_answer(answer: Any) -> Optional[str]:
    if not _is_strict_int(answer):
        return f"answer must be an integer, got {type(answer).__name__}"
    if not 0 <= answer < NUM_OPTIONS:
        return f"answer is out of range: {answer} (expected 0-{NUM_OPTIONS - 1})"
    return None


def question_schema(categories: Optional[Sequence[str]] = None) -> DatasetSchema:
    """Build the raw question record schema.

    Args:
        categories: Allowed category labels, or None to accept any non-empty label

    Returns:
        DatasetSchema for ``{"category", "q", "options", "answer", "ref"}`` records
    """
    return DatasetSchema(
        name="questions",
        fields=[
            FieldSpec(
                name="category", type=str, min_length=1,
                choices=tuple(categories) if categories is not None else None,
            ),
            FieldSpec(name="q", type=str, min_length=1),
            FieldSpec(
                name="options", type=(list, tuple),
                min_length=NUM_OPTIONS, max_length=NUM_OPTIONS,
                validator=_check_options,
            ),
            FieldSpec(name="answer", type=int, validator=_check_answer),
            FieldSpec(name="ref", type=str, required=False),
        ],
        min_records=1,
    )


class SchemaValidator:
    """Validator for raw question records."""

    def __init__(self, schema: DatasetSchema):
        self.schema = schema

    def validate_record(self, record: Any) -> List[str]:
        """Validate a single record against the schema.

        Args:
            record: Record to validate

        Returns:
            List of validation errors (empty if valid)
        """
        if not isinstance(record, dict):
            return [f"expected a mapping, got {type(record).__name__}"]

        errors = []
        for spec in self.schema.fields:
            if spec.name not in record or record[spec.name] is None:
                if spec.required:
                    errors.append(f"Missing required field: {spec.name}")
                continue

            value = record[spec.name]
            expected = spec.type if isinstance(spec.type, tuple) else (spec.type,)
            if not isinstance(value, expected):
                errors.append(
                    f"Field {spec.name} has wrong type: got {type(value).__name__}"
                )
                continue

            if isinstance(value, str):
                if spec.min_length and len(value.strip()) < spec.min_length:
                    errors.append(f"Field {spec.name} must not be empty")
            elif isinstance(value, (list, tuple)):
                if spec.min_length is not None and len(value) < spec.min_length:
                    errors.append(
                        f"Field {spec.name} has too few items: expected {spec.min_length}, got {len(value)}"
                    )
                    continue
                if spec.max_length is not None and len(value) > spec.max_length:
                    errors.append(
                        f"Field {spec.name} has too many items: expected {spec.max_length}, got {len(value)}"
                    )
                    continue

            if spec.choices is not None and value not in spec.choices:
                errors.append(
                    f"Field {spec.name} has invalid value {value!r}: must be one of {list(spec.choices)}"
                )

            if spec.validator:
                problem = spec.validator(value)
                if problem:
                    errors.append(problem)

        return errors

    def validate_records(self, records: Sequence[Any]) -> None:
        """Validate a list of records, collecting every problem before raising.

        Raises:
            DataIntegrityError: If any record is malformed
        """
        all_errors = []
        if self.schema.min_records and len(records) < self.schema.min_records:
            all_errors.append(
                f"Dataset has too few records: minimum {self.schema.min_records}"
            )

        for i, record in enumerate(records):
            all_errors.extend(f"Record {i}: {e}" for e in self.validate_record(record))

        if all_errors:
            logger.error(
                "%s validation failed with %d errors", self.schema.name, len(all_errors)
            )
            raise DataIntegrityError(
                f"Question set validation failed with {len(all_errors)} errors",
                errors=all_errors,
            )


def validate_question_records(
    records: Sequence[Dict[str, Any]],
    categories: Optional[Sequence[str]] = None,
) -> None:
    """Validate raw question records.

    Raises:
        DataIntegrityError: If validation fails
    """
    SchemaValidator(question_schema(categories)).validate_records(records)


def find_duplicates(keys: Sequence[Tuple[int, str]]) -> List[str]:
    """Return an error line for each (index, key) whose key was already seen."""
    seen: Dict[str, int] = {}
    errors = []
    for index, key in keys:
        if key in seen:
            errors.append(f"Record {index}: duplicate of record {seen[key]}")
        else:
            seen[key] = index
    return errors
