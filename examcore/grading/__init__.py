"""Answer normalization and scoring."""

from .normalize import AnswerKey, answers_match, normalize_answer
from .scoring import (
    DEFAULT_SEGMENT_SIZE,
    QuestionOutcome,
    ScoreResult,
    is_multi_select,
    iter_segments,
    question_key,
    score_segment,
    score_submission,
    segment_bounds,
    segment_count,
)

__all__ = [
    "AnswerKey",
    "answers_match",
    "normalize_answer",
    "DEFAULT_SEGMENT_SIZE",
    "QuestionOutcome",
    "ScoreResult",
    "is_multi_select",
    "iter_segments",
    "question_key",
    "score_segment",
    "score_submission",
    "segment_bounds",
    "segment_count",
]
