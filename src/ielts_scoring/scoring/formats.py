"""Answer shape checks per question type.

These checks gate what a test UI accepts before saving an answer. They
never influence scoring: an answer that fails them is still scored and
simply does not match.
"""

from __future__ import annotations

import re
from typing import Any

from ..core.models import QuestionType


MIN_ESSAY_WORDS = 150

_CHOICE_LETTER = re.compile(r"^[A-D]$", re.IGNORECASE)


def validate_answer_format(answer: Any, question_type: QuestionType | str) -> bool:
    """
    Check that an answer has the shape its question type expects.

    - multiple choice: a single letter A-D, either case
    - fill in the blank / short answer: non-blank text
    - essay: at least MIN_ESSAY_WORDS words
    - speaking task and anything unrecognised: always accepted

    Example:
        >>> validate_answer_format("b", QuestionType.MULTIPLE_CHOICE)
        True
    """
    try:
        question_type = QuestionType(question_type)
    except ValueError:
        return True

    if question_type is QuestionType.MULTIPLE_CHOICE:
        return isinstance(answer, str) and bool(_CHOICE_LETTER.match(answer))
    if question_type in (QuestionType.FILL_BLANK, QuestionType.SHORT_ANSWER):
        return isinstance(answer, str) and bool(answer.strip())
    if question_type is QuestionType.ESSAY:
        return isinstance(answer, str) and len(answer.split()) >= MIN_ESSAY_WORDS
    return True
