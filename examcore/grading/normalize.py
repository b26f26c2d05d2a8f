"""Canonical form of an answer key.

Every comparison between a submitted answer and a correct answer goes through
``normalize_answer``: grading, segment review and final review alike.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

_NON_LETTER_RE = re.compile(r"[^A-Za-z]+")


def normalize_answer(raw: Optional[str]) -> str:
    """Canonicalize a raw answer string.

    Everything but letters is removed, letters are uppercased, duplicates
    dropped and the rest sorted: ``"d, a"``, ``"A.D"``, ``"A)"`` and
    ``"A,A,D"`` give ``"AD"`` or ``"A"``. ``None`` and empty input give ``""``.
    """
    if not raw:
        return ""
    chars = _NON_LETTER_RE.sub("", str(raw)).upper()
    return "".join(sorted(set(chars)))


def answers_match(submitted: Optional[str], correct: Optional[str]) -> bool:
    """True when a non-empty submission equals the correct answer."""
    given = normalize_answer(submitted)
    return bool(given) and given == normalize_answer(correct)


@dataclass(frozen=True)
class AnswerKey:
    """Set of selected or correct letters, compared by content.

    Letters are stored ascending and without duplicates however the key is
    built.
    """

    letters: Tuple[str, ...]

    def __post_init__(self) -> None:
        canonical = tuple(normalize_answer("".join(self.letters)))
        object.__setattr__(self, "letters", canonical)

    @classmethod
    def parse(cls, raw: Optional[str]) -> "AnswerKey":
        return cls(letters=tuple(normalize_answer(raw)))

    def __contains__(self, letter: object) -> bool:
        return isinstance(letter, str) and letter.strip().upper() in self.letters

    def __bool__(self) -> bool:
        return bool(self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    def __str__(self) -> str:
        return "".join(self.letters)
