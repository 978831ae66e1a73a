"""
Module: core.models.sections

Purpose:
    Closed vocabularies shared by every model: the four exam sections and
    the question types a section can contain.

Key Classes:
    - Section: Listening, Reading, Writing, Speaking
    - QuestionType: multiple-choice, fill-in-blank, short-answer, essay,
      speaking-task

Used By:
    - core.models.questions, core.models.bands, core.models.criteria
    - bands.mapper, bands.subjective
"""

from __future__ import annotations

from enum import Enum


class Section(str, Enum):
    """
    One of the four exam sections.

    Values are the lower-case names used in stored sessions and JSON
    payloads, so ``Section("reading")`` parses a payload value directly.

    Example:
        >>> Section("listening").is_objective
        True
    """

    LISTENING = "listening"
    READING = "reading"
    WRITING = "writing"
    SPEAKING = "speaking"

    @property
    def is_objective(self) -> bool:
        """True for sections scored by counting correct answers."""
        return self in (Section.LISTENING, Section.READING)

    @property
    def is_subjective(self) -> bool:
        """True for sections scored from examiner criteria."""
        return not self.is_objective

    @classmethod
    def parse(cls, value: "Section | str") -> Section:
        """
        Accept a Section or its name in any case.

        Raises:
            ValueError: If value names no section
        """
        if isinstance(value, Section):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown section: {value!r}") from None


class QuestionType(str, Enum):
    """Question types a test can contain."""

    MULTIPLE_CHOICE = "multiple_choice"
    FILL_BLANK = "fill_blank"
    SHORT_ANSWER = "short_answer"
    ESSAY = "essay"
    SPEAKING_TASK = "speaking_task"

    @property
    def is_graded(self) -> bool:
        """True when answers are scored against accepted answers."""
        return self in (
            QuestionType.MULTIPLE_CHOICE,
            QuestionType.FILL_BLANK,
            QuestionType.SHORT_ANSWER,
        )


SECTION_ORDER: tuple[Section, ...] = (
    Section.LISTENING,
    Section.READING,
    Section.WRITING,
    Section.SPEAKING,
)
