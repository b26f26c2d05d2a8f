import pandas as pd

from examcore.analysis.review import (
    UNKNOWN_OPTION,
    build_review,
    review_frame,
    segment_summary_frame,
    wrong_answers,
)
from examcore.data.loader import row_to_record


def test_build_review_marks_options(seed_rows):
    records = [row_to_record(r) for r in seed_rows]
    items = build_review(records, {"1": "B", "2": "c,a"})

    first = items[0]
    assert not first.is_correct
    marks = {o.letter: (o.is_correct, o.is_selected) for o in first.options}
    assert marks["A"] == (True, False)
    assert marks["B"] == (False, True)
    assert marks["C"] == (False, False)

    second = items[1]
    assert second.is_correct
    assert second.multi_select
    assert [o.letter for o in second.options if o.is_selected] == ["A", "C"]

    third = items[2]
    assert third.submitted == ""
    assert [s.letter for s in third.statements] == ["1", "2"]
    assert not any(s.is_selected for s in third.statements)


def test_wrong_answers_text(seed_rows):
    records = [row_to_record(r) for r in seed_rows]
    wrong = wrong_answers(records, {"1": "B", "2": "AC", "3": "Z"})
    assert [w.number for w in wrong] == [1, 3]
    assert wrong[0].selected_text == "sys_group"
    assert wrong[0].correct_text == "sys_user"
    assert wrong[1].selected_text == UNKNOWN_OPTION
    assert wrong[1].correct_text == "Both"


def test_unanswered_has_no_selected_text(seed_rows):
    records = [row_to_record(r) for r in seed_rows]
    wrong = wrong_answers(records[:1], {})
    assert wrong[0].selected == ""
    assert wrong[0].selected_text is None


def test_review_frame(seed_rows):
    records = [row_to_record(r) for r in seed_rows]
    frame = review_frame(build_review(records, {"1": "A"}))
    assert isinstance(frame, pd.DataFrame)
    assert list(frame["number"]) == [1, 2, 3]
    assert list(frame["is_correct"]) == [True, False, False]


def test_segment_summary_frame(seed_rows):
    records = [row_to_record(r) for r in seed_rows]
    frame = segment_summary_frame(records, {"1": "A", "2": "CA", "3": "B"}, size=2, pass_percentage=70)
    assert list(frame["segment"]) == [0, 1]
    assert list(frame["score"]) == [2, 0]
    assert list(frame["total"]) == [2, 1]
    assert list(frame["percentage"]) == [100, 0]
    assert list(frame["passed"]) == [True, False]
    assert list(frame["first_question"]) == [1, 3]
