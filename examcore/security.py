"""Stable identifiers for question records."""

import hashlib

from .data.schemas import QuestionRecord


def make_question_id(record: QuestionRecord, salt: str | None = None) -> str:
    """Generate a stable question ID using BLAKE2b hashing.

    Args:
        record: The question record
        salt: Optional salt, e.g. the exam id, to separate identical questions
            imported into different exams

    Returns:
        Hexadecimal hash string (32 characters)
    """
    normalized_text = _normalize_text_for_hash(record)

    if salt:
        normalized_text = f"{salt}:{normalized_text}"

    return hashlib.blake2b(
        normalized_text.encode('utf-8'),
        digest_size=16  # 16 bytes = 32 hex characters
    ).hexdigest()


def _normalize_text_for_hash(record: QuestionRecord) -> str:
    """Normalize text for consistent hashing."""
    body = " ".join(record.body.lower().split())
    choices = [f"{letter}:{' '.join(text.lower().split())}" for letter, text in record.options.choice_pairs()]
    choices.sort()
    return f"{record.number}|{body}|{'|'.join(choices)}"
