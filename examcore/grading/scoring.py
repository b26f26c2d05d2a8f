"""Scoring of a submission against parsed question records."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..data.schemas import QuestionRecord
from ..parsing.patterns import MULTI_SELECT_RE
from .normalize import answers_match, normalize_answer

logger = logging.getLogger(__name__)

DEFAULT_SEGMENT_SIZE = 50

KeyFunc = Callable[[QuestionRecord], str]


def question_key(record: QuestionRecord) -> str:
    """Default question identity in a submission map: the question number."""
    return str(record.number)


def submitted_answer(
    answers: Mapping, record: QuestionRecord, key: KeyFunc = question_key
) -> Optional[str]:
    value = answers.get(key(record))
    if value is None and key is question_key:
        value = answers.get(record.number)
    return value


@dataclass
class QuestionOutcome:
    key: str
    number: int
    submitted: str
    correct: str
    is_correct: bool

    @property
    def answered(self) -> bool:
        return bool(self.submitted)


@dataclass
class ScoreResult:
    score: int = 0
    total: int = 0
    outcomes: List[QuestionOutcome] = field(default_factory=list)

    @property
    def percentage(self) -> int:
        if self.total <= 0:
            return 0
        return int(math.floor(self.score * 100 / self.total + 0.5))

    def passed(self, threshold: int = 70) -> bool:
        return self.percentage >= threshold

    def wrong(self) -> List[QuestionOutcome]:
        return [o for o in self.outcomes if not o.is_correct]

    def as_tuple(self) -> Tuple[int, int]:
        return self.score, self.total


def score_submission(
    questions: Sequence[QuestionRecord],
    answers: Optional[Mapping] = None,
    key: KeyFunc = question_key,
) -> ScoreResult:
    """Grade a submission.

    A missing or malformed answer simply counts as wrong; this never raises on
    submission content.

    Args:
        questions: Records being graded (a whole exam or one segment)
        answers: Question identity -> raw answer string
        key: Maps a record to its identity in ``answers``

    Returns:
        ScoreResult with ``total == len(questions)``
    """
    answers = answers or {}
    result = ScoreResult(total=len(questions))
    for record in questions:
        raw = submitted_answer(answers, record, key)
        ok = answers_match(raw, record.correct_answer)
        if ok:
            result.score += 1
        result.outcomes.append(
            QuestionOutcome(
                key=key(record),
                number=record.number,
                submitted=normalize_answer(raw),
                correct=normalize_answer(record.correct_answer),
                is_correct=ok,
            )
        )
    logger.debug("Scored %d/%d", result.score, result.total)
    return result


def is_multi_select(record: QuestionRecord) -> bool:
    """Whether an answer surface should allow several choices.

    Advisory only: grading ignores it.
    """
    if MULTI_SELECT_RE.search(record.body or ""):
        return True
    raw = (record.correct_answer or "").strip()
    return len(raw) > 1 and "," not in raw


# ---------- segments ----------

def segment_count(n_questions: int, size: int = DEFAULT_SEGMENT_SIZE) -> int:
    if size <= 0:
        raise ValueError(f"Segment size must be positive, got {size}")
    return math.ceil(n_questions / size)


def segment_bounds(
    index: int, n_questions: int, size: int = DEFAULT_SEGMENT_SIZE
) -> Tuple[int, int]:
    """Half-open ``(start, end)`` slice of segment ``index``."""
    if not 0 <= index < segment_count(n_questions, size):
        raise IndexError(f"Segment {index} out of range for {n_questions} questions")
    start = index * size
    return start, min(start + size, n_questions)


def iter_segments(
    questions: Sequence[QuestionRecord], size: int = DEFAULT_SEGMENT_SIZE
) -> Iterator[Tuple[int, Sequence[QuestionRecord]]]:
    for index in range(segment_count(len(questions), size)):
        start, end = segment_bounds(index, len(questions), size)
        yield index, questions[start:end]


def score_segment(
    questions: Sequence[QuestionRecord],
    answers: Optional[Mapping],
    index: int,
    size: int = DEFAULT_SEGMENT_SIZE,
    key: KeyFunc = question_key,
) -> ScoreResult:
    start, end = segment_bounds(index, len(questions), size)
    return score_submission(questions[start:end], answers, key=key)
