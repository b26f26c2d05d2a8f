"""Exceptions raised while parsing an exam document."""

from __future__ import annotations

from typing import Optional

EMPTY_DOCUMENT = "EmptyDocument"
MISSING_ANSWER_MARKER = "MissingAnswerMarker"
INSUFFICIENT_OPTIONS = "InsufficientOptions"
ANSWER_NOT_IN_OPTIONS = "AnswerNotInOptions"
INVALID_QUESTION_NUMBER = "InvalidQuestionNumber"


class ParseError(ValueError):
    """Base exception for a rejected document.

    Any ParseError aborts the whole document; no questions are returned with it.
    """

    kind: str = ""

    def __init__(self, message: str, number: Optional[int] = None, letter: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.number = number
        self.letter = letter

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "number": self.number,
            "letter": self.letter,
            "message": self.message,
        }


class EmptyDocumentError(ParseError):
    """Raised when the text contains no question markers."""

    kind = EMPTY_DOCUMENT

    def __init__(self) -> None:
        super().__init__("Strict Parsing Error: No questions detected in the file.")


class MissingAnswerMarkerError(ParseError):
    """Raised when a block has no Correct/Suggested Answer marker."""

    kind = MISSING_ANSWER_MARKER

    def __init__(self, number: int) -> None:
        super().__init__(
            f"Strict Parsing Error: Question #{number} found but no 'Correct Answer' detected.",
            number=number,
        )


class InsufficientOptionsError(ParseError):
    kind = INSUFFICIENT_OPTIONS

    def __init__(self, number: int, found: int) -> None:
        bound = "fewer than 2" if found < 2 else "more than 8"
        super().__init__(
            f"Strict Parsing Error: Question #{number} has {bound} parsed options.",
            number=number,
        )
        self.found = found


class AnswerNotInOptionsError(ParseError):
    kind = ANSWER_NOT_IN_OPTIONS

    def __init__(self, number: int, letter: str) -> None:
        super().__init__(
            f"Strict Parsing Error: Question #{number} correct answer '{letter}' not found in options.",
            number=number,
            letter=letter,
        )


class InvalidQuestionNumberError(ParseError):
    """Raised when a marker carries a question number below 1."""

    kind = INVALID_QUESTION_NUMBER

    def __init__(self, number: int) -> None:
        super().__init__(
            f"Strict Parsing Error: Question #{number} has an invalid question number.",
            number=number,
        )
