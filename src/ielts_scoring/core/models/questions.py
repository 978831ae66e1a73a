"""
Module: questions

Purpose:
    Question and Submission models - the two inputs of objective scoring.
    Both come from repositories outside the engine and are treated as
    read-only records.

Key Classes:
    - Question: An item with its accepted answers
    - Submission: One answer received for a question

Dependencies:
    - dataclasses (std)
    - .sections

Used By:
    - scoring.objective.ObjectiveScorer
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from .sections import QuestionType, Section


@dataclass(frozen=True)
class Question:
    """
    A question and the answers accepted for it (immutable).

    Attributes:
        id: Question identifier, unique within a section
        question_type: One of the QuestionType values
        accepted_answers: Accepted answer strings, in authoring order
        order_index: Ordinal position within the section
        section: Owning section, if known

    Invariants:
        - id is a non-empty string
        - order_index >= 0

    A question with no accepted answers is allowed but cannot be scored;
    see ``is_gradable``.

    Example:
        >>> q = Question("q1", QuestionType.FILL_BLANK, ("Paris",), 0)
        >>> q.is_gradable
        True
    """

    id: str
    question_type: QuestionType
    accepted_answers: tuple[str, ...] = ()
    order_index: int = 0
    section: Optional[Section] = None

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not isinstance(self.id, str) or not self.id:
            raise ValueError(f"Question id must be a non-empty string: {self.id!r}")
        if self.order_index < 0:
            raise ValueError(f"order_index must be non-negative: {self.order_index}")
        object.__setattr__(self, "question_type", QuestionType(self.question_type))
        if self.section is not None:
            object.__setattr__(self, "section", Section.parse(self.section))
        # Lists from JSON payloads become tuples so the model stays hashable
        if not isinstance(self.accepted_answers, tuple):
            object.__setattr__(self, "accepted_answers", tuple(self.accepted_answers))

    @property
    def is_gradable(self) -> bool:
        """True when at least one accepted answer exists."""
        return len(self.accepted_answers) > 0


@dataclass(frozen=True)
class Submission:
    """
    One answer received for a question during a session.

    ``answer`` is kept exactly as received. Free text and single letters
    are the normal shapes, but anything the surrounding system stored
    (None, numbers, dicts) is accepted and simply scores as incorrect
    when it is not a string.

    Attributes:
        question_id: Identifier of the answered question
        answer: Raw answer value
        submitted_at: Time the answer was received, if recorded
    """

    question_id: str
    answer: Any = None
    submitted_at: Optional[datetime] = None

    def __hash__(self) -> int:
        # Raw answers may be unhashable (dicts from JSON payloads)
        return hash((self.question_id, self.submitted_at))
