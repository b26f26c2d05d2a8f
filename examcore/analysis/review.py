"""Review views of a graded submission.

Builds the per-question rows shown after a segment or at the end of an exam,
and tabular summaries for reporting.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import List, Mapping, Optional, Sequence

import pandas as pd

from ..data.schemas import QuestionRecord
from ..grading.normalize import AnswerKey
from ..grading.scoring import (
    DEFAULT_SEGMENT_SIZE,
    KeyFunc,
    is_multi_select,
    iter_segments,
    question_key,
    score_submission,
)
from ..options.codec import clean_option_text, option_text, statement_pairs

UNKNOWN_OPTION = "Unknown Option"


@dataclass
class ReviewOption:
    letter: str
    text: str
    is_correct: bool
    is_selected: bool


@dataclass
class ReviewItem:
    number: int
    body: str
    submitted: str
    correct: str
    is_correct: bool
    multi_select: bool
    options: List[ReviewOption] = field(default_factory=list)
    statements: List[ReviewOption] = field(default_factory=list)


@dataclass
class WrongAnswer:
    number: int
    body: str
    selected: str
    selected_text: Optional[str]
    correct: str
    correct_text: str


def _letters_text(record: QuestionRecord, key: AnswerKey) -> str:
    texts = [option_text(record.options, letter) or UNKNOWN_OPTION for letter in key.letters]
    return "; ".join(texts) if texts else UNKNOWN_OPTION


def build_review(
    questions: Sequence[QuestionRecord],
    answers: Optional[Mapping] = None,
    key: KeyFunc = question_key,
) -> List[ReviewItem]:
    """Mark every option of every question as correct and/or selected."""
    result = score_submission(questions, answers, key=key)
    items: List[ReviewItem] = []
    for record, outcome in zip(questions, result.outcomes):
        selected = AnswerKey.parse(outcome.submitted)
        correct = AnswerKey.parse(outcome.correct)
        items.append(
            ReviewItem(
                number=record.number,
                body=record.body,
                submitted=outcome.submitted,
                correct=outcome.correct,
                is_correct=outcome.is_correct,
                multi_select=is_multi_select(record),
                options=[
                    ReviewOption(
                        letter=letter,
                        text=clean_option_text(text),
                        is_correct=letter in correct,
                        is_selected=letter in selected,
                    )
                    for letter, text in record.options.choice_pairs()
                ],
                statements=[
                    ReviewOption(letter=letter, text=text, is_correct=False, is_selected=False)
                    for letter, text in statement_pairs(record.options)
                ],
            )
        )
    return items


def wrong_answers(
    questions: Sequence[QuestionRecord],
    answers: Optional[Mapping] = None,
    key: KeyFunc = question_key,
) -> List[WrongAnswer]:
    """Questions left unanswered or answered wrongly, for the segment review."""
    result = score_submission(questions, answers, key=key)
    wrong = []
    for record, outcome in zip(questions, result.outcomes):
        if outcome.is_correct:
            continue
        selected = AnswerKey.parse(outcome.submitted)
        wrong.append(
            WrongAnswer(
                number=record.number,
                body=record.body,
                selected=outcome.submitted,
                selected_text=_letters_text(record, selected) if selected else None,
                correct=outcome.correct,
                correct_text=_letters_text(record, AnswerKey.parse(outcome.correct)),
            )
        )
    return wrong


def review_frame(items: Sequence[ReviewItem]) -> pd.DataFrame:
    """One row per question, without option text."""
    columns = ["number", "submitted", "correct", "is_correct", "multi_select"]
    rows = [{k: v for k, v in asdict(it).items() if k in columns} for it in items]
    return pd.DataFrame(rows, columns=columns)


def segment_summary_frame(
    questions: Sequence[QuestionRecord],
    answers: Optional[Mapping] = None,
    size: int = DEFAULT_SEGMENT_SIZE,
    pass_percentage: int = 70,
    key: KeyFunc = question_key,
) -> pd.DataFrame:
    """Score, total and percentage per segment, plus a pass flag."""
    rows = []
    for index, segment in iter_segments(questions, size):
        result = score_submission(segment, answers, key=key)
        rows.append(
            {
                "segment": index,
                "first_question": segment[0].number,
                "last_question": segment[-1].number,
                "score": result.score,
                "total": result.total,
                "percentage": result.percentage,
                "passed": result.passed(pass_percentage),
            }
        )
    columns = ["segment", "first_question", "last_question", "score", "total", "percentage", "passed"]
    return pd.DataFrame(rows, columns=columns)
