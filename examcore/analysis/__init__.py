"""Review and reporting over graded submissions."""

from .review import (
    ReviewItem,
    ReviewOption,
    WrongAnswer,
    build_review,
    review_frame,
    segment_summary_frame,
    wrong_answers,
)

__all__ = [
    "ReviewItem",
    "ReviewOption",
    "WrongAnswer",
    "build_review",
    "review_frame",
    "segment_summary_frame",
    "wrong_answers",
]
