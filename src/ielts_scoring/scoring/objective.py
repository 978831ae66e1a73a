"""
Module: scoring.objective

Purpose:
    Scores a section of objectively marked questions (Listening,
    Reading): keeps one submission per question, matches it against the
    accepted answers and counts the correct ones.

Key Classes:
    - ObjectiveScorer: Scoring bound to a ScoringConfig

Key Functions:
    - score_objective(submissions, questions, config=None)

Dependencies:
    - logging (std)

Used By:
    - api.score_objective_answers
    - cli
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional

from ..core.models import Question, ScoringResult, Submission
from .config import DedupPolicy, ScoringConfig
from .matcher import Matcher
from .normalizer import normalize

logger = logging.getLogger(__name__)


def _as_submission(item: Any) -> Optional[Submission]:
    """
    Read a submission out of whatever the caller stored.

    Accepts Submission instances and mappings using either snake_case or
    camelCase keys. Anything without a usable question id gives None.
    """
    if isinstance(item, Submission):
        submission = item
    elif isinstance(item, Mapping):
        submitted_at = item.get("submitted_at", item.get("submittedAt"))
        submission = Submission(
            question_id=item.get("question_id", item.get("questionId")),
            answer=item.get("answer"),
            submitted_at=submitted_at if isinstance(submitted_at, datetime) else None,
        )
    else:
        return None

    if not isinstance(submission.question_id, str) or not submission.question_id:
        return None
    return submission


def _is_newer(candidate: Submission, kept: Submission) -> bool:
    """Later input replaces kept unless both are timestamped and it is older."""
    if candidate.submitted_at is None or kept.submitted_at is None:
        return True
    try:
        return candidate.submitted_at >= kept.submitted_at
    except TypeError:
        # naive vs aware timestamps cannot be ordered
        return True


class ObjectiveScorer:
    """
    Counts correct answers for one objective section.

    Scoring is total: odd submission shapes, unknown question ids and
    empty answers are logged and scored as incorrect, never raised.

    Example:
        >>> scorer = ObjectiveScorer()
        >>> questions = [Question("q1", QuestionType.FILL_BLANK, ("Paris",))]
        >>> scorer.score([Submission("q1", "paris")], questions).correct_answers
        1
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig()
        self.matcher = Matcher(self.config.matcher)

    def score(self, submissions: Iterable[Any], questions: Iterable[Question]) -> ScoringResult:
        """
        Score submissions against the section's questions.

        Questions without accepted answers cannot be scored and are left
        out of the total; every other question counts, so unanswered
        questions lower the accuracy.

        Args:
            submissions: Submitted answers for the section
            questions: The section's questions

        Returns:
            ScoringResult with band left unset
        """
        gradable = self._index_questions(questions)
        retained = self.deduplicate(submissions)

        logger.debug(
            "Scoring %d unique submissions against %d gradable questions",
            len(retained), len(gradable),
        )

        correct = 0
        empty = 0
        for question_id, submission in retained.items():
            question = gradable.get(question_id)
            if question is None:
                logger.debug("No gradable question for submission %s, skipping", question_id)
                continue

            candidate = normalize(submission.answer)
            if not candidate:
                empty += 1
                logger.debug("Empty answer for question %s, counting as incorrect", question_id)
                continue

            if self._is_correct(candidate, question):
                correct += 1
                logger.debug("Question %s correct: %r", question_id, candidate)
            else:
                logger.debug("Question %s incorrect: %r", question_id, candidate)

        total = len(gradable)
        accuracy = (correct / total) * 100 if total > 0 else 0.0

        logger.info(
            "Scored %d/%d correct (%.1f%%), %d empty answers",
            correct, total, accuracy, empty,
        )
        return ScoringResult(
            total_questions=total,
            correct_answers=correct,
            accuracy=accuracy,
        )

    def deduplicate(self, submissions: Iterable[Any]) -> dict[str, Submission]:
        """
        Keep one submission per question according to the dedup policy.

        Returns:
            Question id -> retained submission, in first-seen order
        """
        retained: dict[str, Submission] = {}
        latest = self.config.dedup is DedupPolicy.LATEST

        for item in submissions:
            submission = _as_submission(item)
            if submission is None:
                logger.debug("Skipping submission without question id: %r", item)
                continue

            kept = retained.get(submission.question_id)
            if kept is None:
                retained[submission.question_id] = submission
            elif latest and _is_newer(submission, kept):
                logger.debug("Replacing earlier answer for question %s", submission.question_id)
                retained[submission.question_id] = submission
            else:
                logger.debug("Duplicate answer for question %s dropped", submission.question_id)

        return retained

    def _index_questions(self, questions: Iterable[Question]) -> dict[str, Question]:
        index: dict[str, Question] = {}
        for question in questions:
            if not question.is_gradable:
                logger.debug("Question %s has no accepted answers, not scored", question.id)
                continue
            if question.id in index:
                logger.warning("Duplicate question id %s, keeping the first", question.id)
                continue
            index[question.id] = question
        return index

    def _is_correct(self, candidate: str, question: Question) -> bool:
        accepted = [normalize(answer) for answer in question.accepted_answers]
        for answer in accepted:
            rule = self.matcher.match_rule(candidate, answer)
            if rule is not None:
                logger.debug("Question %s matched %r by %s", question.id, answer, rule.value)
                return True
        return False


def score_objective(
    submissions: Iterable[Any],
    questions: Iterable[Question],
    config: Optional[ScoringConfig] = None,
) -> ScoringResult:
    """Score a section with a one-off ObjectiveScorer."""
    return ObjectiveScorer(config).score(submissions, questions)
