"""Parsing of extracted exam text into question records."""

from .document import ParseResult, parse_document, parse_document_result
from .errors import (
    AnswerNotInOptionsError,
    EmptyDocumentError,
    InsufficientOptionsError,
    InvalidQuestionNumberError,
    MissingAnswerMarkerError,
    ParseError,
)
from .extractor import extract_question
from .segmenter import segment_document

__all__ = [
    "ParseResult",
    "parse_document",
    "parse_document_result",
    "extract_question",
    "segment_document",
    "ParseError",
    "EmptyDocumentError",
    "MissingAnswerMarkerError",
    "InsufficientOptionsError",
    "AnswerNotInOptionsError",
    "InvalidQuestionNumberError",
]
