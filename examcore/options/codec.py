"""Conversion between in-memory option sets and their stored shapes.

Three stored shapes exist:

- list shape: ``["A) Paris", "B) Berlin"]``. Older imports may pack several
  options into one entry (``"A. Paris • B. Berlin"``); decoding splits those.
- map shape: ``{"A": "Paris", "B": "Berlin"}``
- statement shape: ``{"statement_options": {...}, "selection_options": {...}}``

``decode`` never rewrites option text. Display-only cleanup lives in
``clean_option_text``.
"""

from __future__ import annotations

import json
from typing import Any, List, Optional, Tuple, Union

from ..data.schemas import (
    OPTION_LETTERS,
    ListOptions,
    MapOptions,
    OptionSet,
    StatementSelection,
)
from ..parsing.patterns import (
    COMPOUND_SPLIT_RE,
    LEADING_DOT_LETTER_RE,
    MOST_VOTED_RE,
    STORED_OPTION_RE,
    TRAILING_BULLET_RE,
)

Payload = Union[str, list, dict]

STATEMENT_KEYS = ("statement_options", "statements")
SELECTION_KEYS = ("selection_options", "choices")


def encode(options: OptionSet) -> Union[List[str], dict]:
    """Serialize an option set into its stored shape."""
    if isinstance(options, ListOptions):
        return [f"{letter}) {text}" for letter, text in options.pairs]
    if isinstance(options, MapOptions):
        return options.as_dict()
    if isinstance(options, StatementSelection):
        return {
            "statement_options": dict(options.statements),
            "selection_options": dict(options.choices),
        }
    raise TypeError(f"Unsupported option set: {type(options).__name__}")


def encode_json(options: OptionSet) -> str:
    """Serialize to the JSON string stored in the ``options`` column."""
    return json.dumps(encode(options), ensure_ascii=False)


def split_compound(entry: str) -> List[str]:
    """Split a stored entry that packs several options and normalize each
    fragment's leading ``"X. "`` to ``"X) "``."""
    parts = COMPOUND_SPLIT_RE.split(entry)
    return [LEADING_DOT_LETTER_RE.sub(r"\1) ", part) for part in parts]


def _decode_list(entries: list) -> ListOptions:
    fragments: List[Tuple[Optional[str], str]] = []
    for entry in entries:
        for fragment in split_compound(str(entry)):
            m = STORED_OPTION_RE.match(fragment)
            if m:
                fragments.append((m.group(1).upper(), m.group(2).strip()))
            else:
                fragments.append((None, fragment.strip()))

    # unlettered entries get the first letters no lettered entry uses
    explicit = {letter for letter, _ in fragments if letter}
    free = iter(c for c in OPTION_LETTERS if c not in explicit)

    pairs: List[Tuple[str, str]] = []
    seen = set()
    for letter, text in fragments:
        if letter is None:
            letter = next(free, None)
            if letter is None:
                raise ValueError(f"Too many options in stored list: {entries!r}")
        if letter in seen:
            continue
        seen.add(letter)
        pairs.append((letter, text))
    return ListOptions(pairs=tuple(pairs))


def _letter_map(mapping: dict) -> dict:
    return {str(k).strip().upper(): str(v) for k, v in mapping.items()}


def _first_key(payload: dict, keys: Tuple[str, ...]) -> Optional[str]:
    for key in keys:
        if key in payload:
            return key
    return None


def decode(payload: Payload) -> OptionSet:
    """Rebuild an option set from any of the three stored shapes.

    Args:
        payload: Parsed value or the JSON string holding it

    Returns:
        ListOptions, MapOptions or StatementSelection

    Raises:
        ValueError: If the payload matches none of the shapes
    """
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ValueError(f"Options are not valid JSON: {e}") from e

    if isinstance(payload, list):
        return _decode_list(payload)

    if isinstance(payload, dict):
        statement_key = _first_key(payload, STATEMENT_KEYS)
        selection_key = _first_key(payload, SELECTION_KEYS)
        if statement_key or selection_key:
            if selection_key is None:
                raise ValueError("Statement options without selection options")
            statements = payload.get(statement_key) if statement_key else None
            return StatementSelection.from_mappings(
                _letter_map(statements or {}),
                _letter_map(payload[selection_key] or {}),
            )
        return MapOptions.from_mapping(_letter_map(payload))

    raise ValueError(f"Unsupported options payload: {type(payload).__name__}")


def option_pairs(options: Union[OptionSet, Payload]) -> List[Tuple[str, str]]:
    """Selectable ``(letter, text)`` pairs in display order."""
    if not isinstance(options, (ListOptions, MapOptions, StatementSelection)):
        options = decode(options)
    return list(options.choice_pairs())


def statement_pairs(options: OptionSet) -> List[Tuple[str, str]]:
    """Context statements of a statement/selection question; empty otherwise."""
    if isinstance(options, StatementSelection):
        return list(options.statements)
    return []


def clean_option_text(text: str) -> str:
    """Strip the "Most Voted" tag and a trailing bullet or period."""
    text = MOST_VOTED_RE.sub("", text).strip()
    return TRAILING_BULLET_RE.sub("", text).strip()


def option_text(options: OptionSet, letter: str) -> Optional[str]:
    """Display text of the option labelled ``letter``, or None."""
    letter = letter.strip().upper()
    for key, text in options.choice_pairs():
        if key == letter:
            return clean_option_text(text)
    return None


def render_lines(options: OptionSet) -> List[str]:
    return [f"{letter}) {clean_option_text(text)}" for letter, text in options.choice_pairs()]
