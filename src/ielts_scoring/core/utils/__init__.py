"""Serialization helpers for core models."""

from .serialization import (
    deserialize_question,
    deserialize_questions,
    deserialize_submission,
    deserialize_submissions,
    deserialize_band_table,
    deserialize_evaluation,
    serialize_question,
    serialize_submission,
    load_json,
)

__all__ = [
    "deserialize_question",
    "deserialize_questions",
    "deserialize_submission",
    "deserialize_submissions",
    "deserialize_band_table",
    "deserialize_evaluation",
    "serialize_question",
    "serialize_submission",
    "load_json",
]
