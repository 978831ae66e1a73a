"""
Schema Validation Utilities

Validates JSON payloads (questions, submissions, band tables, subjective
evaluations) against the JSON Schemas shipped next to this module before
any model is built from them.

Payloads from the surrounding platform use camelCase keys; they are
converted to snake_case by ``normalize_keys`` first, so every schema is
written once, in snake_case.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import jsonschema

from ..errors import ScoringError


SCHEMA_NAMES = ("question", "submission", "band_table", "evaluation")

# camelCase keys used by the exam platform -> model field names
KEY_ALIASES: dict[str, str] = {
    "_id": "id",
    "questionType": "question_type",
    "correctAnswers": "accepted_answers",
    "acceptedAnswers": "accepted_answers",
    "orderIndex": "order_index",
    "questionId": "question_id",
    "submittedAt": "submitted_at",
    "minScore": "min_score",
    "maxScore": "max_score",
}


class ValidationError(ScoringError):
    """Raised when a payload fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


@lru_cache(maxsize=None)
def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    schema_path = Path(__file__).parent / f"{name}.schema.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")
    with open(schema_path, "r", encoding="utf-8") as f:
        return json.load(f)


@lru_cache(maxsize=None)
def _validator(name: str) -> jsonschema.protocols.Validator:
    schema = _load_schema(name)
    validator_cls = jsonschema.validators.validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema)


def normalize_keys(data: Any) -> Any:
    """Rename known camelCase keys; nested band ranges are renamed too.

    Non-mapping values are returned unchanged for the schema to reject.
    """
    if not isinstance(data, Mapping):
        return data
    normalized = {KEY_ALIASES.get(key, key): value for key, value in data.items()}
    ranges = normalized.get("ranges")
    if isinstance(ranges, list):
        normalized["ranges"] = [
            normalize_keys(row) if isinstance(row, Mapping) else row for row in ranges
        ]
    return normalized


def validate_payload(data: Any, schema_name: str) -> None:
    """
    Validate a payload against one of the bundled schemas.

    All violations are collected; the first (by path) becomes the
    message and all of them are listed in ``errors``.

    Args:
        data: Decoded JSON value, keys already normalized
        schema_name: One of SCHEMA_NAMES

    Raises:
        ValidationError: If data does not conform
        ValueError: If schema_name is unknown
    """
    if schema_name not in SCHEMA_NAMES:
        raise ValueError(f"Unknown schema: {schema_name!r}")

    violations = sorted(
        _validator(schema_name).iter_errors(data),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    if violations:
        first = violations[0]
        raise ValidationError(
            f"{schema_name} schema validation failed: {first.message}",
            path=".".join(str(p) for p in first.absolute_path),
            errors=[e.message for e in violations],
        )
