"""Turn one question block into a validated QuestionRecord."""

from __future__ import annotations

import logging
from typing import List, Tuple

from ..data.schemas import MAX_OPTIONS, MIN_OPTIONS, ListOptions, QuestionRecord
from .errors import (
    AnswerNotInOptionsError,
    InsufficientOptionsError,
    InvalidQuestionNumberError,
    MissingAnswerMarkerError,
    ParseError,
)
from .patterns import ANSWER_MARKER_RE, OPTION_RE, QUESTION_MARKER_RE

logger = logging.getLogger(__name__)


def _extract_options(block: str) -> Tuple[List[Tuple[str, str]], int]:
    """Return (letter, text) pairs in order of first appearance and the start
    offset of the first option (``len(block)`` when there is none)."""
    pairs: List[Tuple[str, str]] = []
    seen = set()
    first_start = len(block)
    for i, m in enumerate(OPTION_RE.finditer(block)):
        if i == 0:
            first_start = m.start()
        letter = m.group(1).upper()
        if letter in seen:
            logger.debug("Ignoring repeated option letter %s", letter)
            continue
        seen.add(letter)
        pairs.append((letter, m.group(2).strip()))
    return pairs, first_start


def extract_question(block: str) -> QuestionRecord:
    """Parse a single block that starts with a "Question #N" marker.

    Args:
        block: One block as produced by ``segment_document``

    Returns:
        QuestionRecord with ``ListOptions`` in source order

    Raises:
        ParseError: If the marker number is below 1, the block lacks an answer
            marker, has too few or too many options, or its answer letter is
            not one of its options
    """
    head = QUESTION_MARKER_RE.match(block)
    if head is None:
        # segment_document always yields blocks starting at a marker
        raise ParseError(f"Block does not start with a question marker: {block[:40]!r}")
    number = int(head.group(1))
    if number < 1:
        raise InvalidQuestionNumberError(number)

    answer = ANSWER_MARKER_RE.search(block)
    if answer is None:
        raise MissingAnswerMarkerError(number)
    correct = answer.group(1).upper()

    pairs, first_start = _extract_options(block)
    if not MIN_OPTIONS <= len(pairs) <= MAX_OPTIONS:
        raise InsufficientOptionsError(number, len(pairs))

    body = block[head.end():first_start].strip()

    letters = [letter for letter, _ in pairs]
    if correct not in letters:
        raise AnswerNotInOptionsError(number, correct)

    logger.debug("Question #%d: %d options, answer %s", number, len(pairs), correct)
    return QuestionRecord(
        number=number,
        body=body,
        options=ListOptions(pairs=tuple(pairs)),
        correct_answer=correct,
    )
