"""Regexes used to segment and extract exam questions."""

import re

# ---------- building blocks ----------

LETTER_STR = r"[A-H]"
QUESTION_MARKER_STR = r"Question\s*\#\s*(\d+)"         # group(1): question number
ANSWER_LEAD_STR = r"(?:Correct|Suggested)\s*Answer"
OPTION_SEPARATOR_STR = r"[).]"

# ---------- compiled regexes ----------

QUESTION_MARKER_RE = re.compile(QUESTION_MARKER_STR, re.IGNORECASE)

# "Correct Answer: B", "Suggested Answer. C", "correct answer B"
ANSWER_MARKER_RE = re.compile(
    rf"""
        {ANSWER_LEAD_STR}
        \s*[:.\-]?\s*
        ({LETTER_STR})            # group(1): answer letter
    """,
    re.IGNORECASE | re.VERBOSE,
)

# " A) text" / " B. text", running until the next option, the answer marker or
# the end of the block
OPTION_RE = re.compile(
    rf"""
        \s
        ({LETTER_STR})            # group(1): option letter
        {OPTION_SEPARATOR_STR}
        \s+
        (.+?)                     # group(2): option text
        (?=
            \s{LETTER_STR}{OPTION_SEPARATOR_STR}
          | \s(?i:{ANSWER_LEAD_STR})
          | \Z
        )
    """,
    re.DOTALL | re.VERBOSE,
)

# Bullet joining two lettered options packed into one stored string:
# "A. foo • B. bar"
COMPOUND_SPLIT_RE = re.compile(rf"\s+•\s+(?={LETTER_STR}{OPTION_SEPARATOR_STR}\s)")
LEADING_DOT_LETTER_RE = re.compile(rf"^({LETTER_STR})\.\s")
STORED_OPTION_RE = re.compile(rf"^\s*({LETTER_STR})\)\s?(.*)$", re.DOTALL)

MOST_VOTED_RE = re.compile(r"Most Voted", re.IGNORECASE)
TRAILING_BULLET_RE = re.compile(r"[•.]\s*$")

MULTI_SELECT_RE = re.compile(
    r"""
        \b(?:choose|select|pick)\s+
        (?:[2-8]|two|three|four|five|six|seven)\b
      | \bselect\s+all\b
      | \bchoose\s+all\b
    """,
    re.IGNORECASE | re.VERBOSE,
)

__all__ = [
    # building blocks
    "LETTER_STR",
    "QUESTION_MARKER_STR",
    "ANSWER_LEAD_STR",
    "OPTION_SEPARATOR_STR",

    # compiled regexes
    "QUESTION_MARKER_RE",
    "ANSWER_MARKER_RE",
    "OPTION_RE",
    "COMPOUND_SPLIT_RE",
    "LEADING_DOT_LETTER_RE",
    "STORED_OPTION_RE",
    "MOST_VOTED_RE",
    "TRAILING_BULLET_RE",
    "MULTI_SELECT_RE",
]
