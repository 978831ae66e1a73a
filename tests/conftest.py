import pytest
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Add src to sys.path so we can import ielts_scoring
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from ielts_scoring.common.lexicon import Lexicon
from ielts_scoring.core.models import Question, QuestionType, Section, Submission


# Common test fixtures
@pytest.fixture
def base_time():
    """Fixed, timezone-aware reference time for submissions."""
    return datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def listening_questions():
    """Four gradable listening questions plus one ungraded essay."""
    return [
        Question("q1", QuestionType.FILL_BLANK, ("Paris",), 0, Section.LISTENING),
        Question("q2", QuestionType.MULTIPLE_CHOICE, ("B",), 1, Section.LISTENING),
        Question("q3", QuestionType.SHORT_ANSWER, ("7",), 2, Section.LISTENING),
        Question("q4", QuestionType.FILL_BLANK, ("big", "large"), 3, Section.LISTENING),
        Question("essay", QuestionType.ESSAY, (), 4, Section.LISTENING),
    ]


@pytest.fixture
def make_submission(base_time):
    """Factory for submissions offset in minutes from base_time."""
    def _make(question_id, answer, minutes=0):
        return Submission(question_id, answer, base_time + timedelta(minutes=minutes))
    return _make


@pytest.fixture
def tiny_lexicon():
    """Minimal lexicon fixture: one synonym group, one stop word."""
    return Lexicon(synonyms={"car": ("automobile",)}, stop_words=frozenset({"the"}))
