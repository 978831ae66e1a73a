"""
Serialization Utilities

Builds models from decoded JSON payloads and back. Every ``deserialize_*``
function normalizes keys, validates against the bundled schema and only
then constructs the model, so model constructors only ever see
well-formed input.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable

from ..models import (
    BandMappingTable,
    BandRange,
    Question,
    QuestionType,
    Section,
    SubjectiveEvaluation,
    Submission,
)
from ..schemas.validator import ValidationError, normalize_keys, validate_payload

logger = logging.getLogger(__name__)


def _parse_timestamp(value: Any, path: str) -> datetime | None:
    if value is None:
        return None
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise ValidationError(f"Invalid ISO timestamp: {value!r}", path=path) from None


def _model_error(exc: ValueError, kind: str) -> ValidationError:
    return ValidationError(f"Invalid {kind}: {exc}", errors=[str(exc)])


# ─────────────────────────────────────────────────────────────────────────────
# Questions and submissions
# ─────────────────────────────────────────────────────────────────────────────

def deserialize_question(data: dict[str, Any]) -> Question:
    """
    Build a Question from a payload.

    Raises:
        ValidationError: If the payload is malformed
    """
    data = normalize_keys(data)
    validate_payload(data, "question")
    section = data.get("section")
    try:
        return Question(
            id=data["id"],
            question_type=QuestionType(data["question_type"]),
            accepted_answers=tuple(data.get("accepted_answers") or ()),
            order_index=data.get("order_index", 0),
            section=Section(section) if section else None,
        )
    except ValueError as exc:
        raise _model_error(exc, "question") from exc


def deserialize_submission(data: dict[str, Any]) -> Submission:
    """
    Build a Submission from a payload.

    ``answer`` is taken as-is whatever its JSON type.

    Raises:
        ValidationError: If the payload is malformed
    """
    data = normalize_keys(data)
    validate_payload(data, "submission")
    return Submission(
        question_id=data["question_id"],
        answer=data.get("answer"),
        submitted_at=_parse_timestamp(data.get("submitted_at"), "submitted_at"),
    )


def deserialize_questions(items: Iterable[dict[str, Any]]) -> list[Question]:
    return [deserialize_question(item) for item in items]


def deserialize_submissions(items: Iterable[dict[str, Any]]) -> list[Submission]:
    """
    Build Submissions from stored answers, skipping malformed rows.

    A row that fails validation is logged and dropped so that one bad
    stored answer does not stop the rest of the session being scored.
    """
    submissions = []
    for index, item in enumerate(items):
        try:
            submissions.append(deserialize_submission(item))
        except ValidationError as exc:
            logger.warning("Skipping submission %d: %s", index, exc)
    return submissions


def serialize_question(question: Question) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": question.id,
        "question_type": question.question_type.value,
        "accepted_answers": list(question.accepted_answers),
        "order_index": question.order_index,
    }
    if question.section is not None:
        data["section"] = question.section.value
    return data


def serialize_submission(submission: Submission) -> dict[str, Any]:
    return {
        "question_id": submission.question_id,
        "answer": submission.answer,
        "submitted_at": submission.submitted_at.isoformat() if submission.submitted_at else None,
    }


# ─────────────────────────────────────────────────────────────────────────────
# Band tables and evaluations
# ─────────────────────────────────────────────────────────────────────────────

def deserialize_band_table(data: dict[str, Any]) -> BandMappingTable:
    """
    Build a BandMappingTable from a payload.

    Coverage and monotonicity are checked by the model; violations are
    reported as ValidationError like schema failures.
    """
    data = normalize_keys(data)
    validate_payload(data, "band_table")
    try:
        return BandMappingTable(
            section=Section(data["section"]),
            ranges=tuple(
                BandRange(row["min_score"], row["max_score"], float(row["band"]))
                for row in data["ranges"]
            ),
        )
    except ValueError as exc:
        raise _model_error(exc, "band table") from exc


def deserialize_evaluation(data: dict[str, Any]) -> SubjectiveEvaluation:
    """
    Build a SubjectiveEvaluation from a payload.

    Criterion names are kept as given; the reducer accepts both naming
    styles and reports missing criteria itself.
    """
    validate_payload(data, "evaluation")
    return SubjectiveEvaluation(
        section=Section(data["section"]),
        criteria=dict(data["criteria"]),
        feedback=data.get("feedback", ""),
    )


def load_json(path: Path) -> Any:
    """Read and decode a JSON document."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
