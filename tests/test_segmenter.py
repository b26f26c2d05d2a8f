import pytest

from examcore.parsing.errors import EMPTY_DOCUMENT, EmptyDocumentError
from examcore.parsing.segmenter import segment_document


def test_splits_at_each_marker(two_question_text):
    blocks = segment_document(two_question_text)
    assert len(blocks) == 2
    assert blocks[0].startswith("Question #1")
    assert blocks[1].startswith("Question #2")
    assert "Question #2" not in blocks[0]


def test_preamble_is_discarded():
    text = "ACME Certification Dump\nPage 1\nQuestion #7\nBody\nA) x\nB) y\nCorrect Answer: A"
    blocks = segment_document(text)
    assert len(blocks) == 1
    assert blocks[0].startswith("Question #7")


def test_marker_variants_are_case_insensitive():
    text = "QUESTION#1 a\nquestion # 2 b\nQuestion  #  3 c"
    blocks = segment_document(text)
    assert blocks == ["QUESTION#1 a", "question # 2 b", "Question  #  3 c"]


def test_blocks_are_trimmed():
    blocks = segment_document("\n\n  Question #1 body  \n\n\nQuestion #2 other\n\n")
    assert blocks == ["Question #1 body", "Question #2 other"]


@pytest.mark.parametrize("text", ["", "   \n", "No questions here at all.", "Question 1 without hash"])
def test_no_marker_is_empty_document(text):
    with pytest.raises(EmptyDocumentError) as exc:
        segment_document(text)
    assert exc.value.kind == EMPTY_DOCUMENT
    assert exc.value.number is None
