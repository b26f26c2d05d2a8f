"""Strict, all-or-nothing parsing of an exam document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..data.schemas import QuestionRecord
from ..utils.logging_config import log_performance
from .errors import ParseError
from .extractor import extract_question
from .segmenter import segment_document

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Outcome of a document parse for callers that prefer a value to an exception."""

    questions: List[QuestionRecord] = field(default_factory=list)
    error: Optional[ParseError] = None

    @property
    def success(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "count": len(self.questions),
            "error": self.error.to_dict() if self.error else None,
        }


@log_performance()
def parse_document(text: str) -> List[QuestionRecord]:
    """Parse extracted exam text into question records.

    The first malformed block aborts the parse, so a caller never receives the
    valid prefix of a partially corrupt document.

    Args:
        text: UTF-8 text extracted from the source document

    Returns:
        QuestionRecords in document order, one per block

    Raises:
        ParseError: The first error encountered
    """
    blocks = segment_document(text)
    logger.debug("Segmented document into %d blocks", len(blocks))

    questions: List[QuestionRecord] = []
    for block in blocks:
        try:
            questions.append(extract_question(block))
        except ParseError as e:
            logger.warning(
                "Rejecting document: %s",
                e.message,
                extra={"error_type": e.kind, "question_number": e.number},
            )
            raise

    logger.info("Parsed %d questions", len(questions))
    return questions


def parse_document_result(text: str) -> ParseResult:
    try:
        return ParseResult(questions=parse_document(text))
    except ParseError as e:
        return ParseResult(questions=[], error=e)
