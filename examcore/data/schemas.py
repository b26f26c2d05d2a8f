"""Data schemas for parsed exam questions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple, Union

OPTION_LETTERS = "ABCDEFGH"
MIN_OPTIONS = 2
MAX_OPTIONS = 8


def _check_letters(letters, where: str) -> None:
    letters = list(letters)
    for letter in letters:
        if letter not in OPTION_LETTERS or len(letter) != 1:
            raise ValueError(f"{where}: invalid option letter {letter!r}")
    if len(set(letters)) != len(letters):
        raise ValueError(f"{where}: duplicate option letters {letters}")
    if not MIN_OPTIONS <= len(letters) <= MAX_OPTIONS:
        raise ValueError(
            f"{where}: expected {MIN_OPTIONS}-{MAX_OPTIONS} options, got {len(letters)}"
        )


def _sorted_items(mapping: Mapping[str, str]) -> Tuple[Tuple[str, str], ...]:
    return tuple(sorted((str(k), str(v)) for k, v in mapping.items()))


@dataclass(frozen=True)
class ListOptions:
    """Options in order of first appearance in the source text."""

    pairs: Tuple[Tuple[str, str], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "pairs", tuple((str(k), str(v)) for k, v in self.pairs))
        _check_letters((k for k, _ in self.pairs), "ListOptions")

    def choice_pairs(self) -> Tuple[Tuple[str, str], ...]:
        return self.pairs

    @property
    def letters(self) -> Tuple[str, ...]:
        return tuple(k for k, _ in self.pairs)


@dataclass(frozen=True)
class MapOptions:
    """Letter-keyed options; display order is ascending letter."""

    items: Tuple[Tuple[str, str], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", _sorted_items(dict(self.items)))
        _check_letters((k for k, _ in self.items), "MapOptions")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "MapOptions":
        return cls(items=tuple(mapping.items()))

    def as_dict(self) -> dict[str, str]:
        return dict(self.items)

    def choice_pairs(self) -> Tuple[Tuple[str, str], ...]:
        return self.items

    @property
    def letters(self) -> Tuple[str, ...]:
        return tuple(k for k, _ in self.items)


@dataclass(frozen=True)
class StatementSelection:
    """Context statements plus the selectable choices.

    Only ``choices`` take part in selection and scoring; ``statements`` are
    rendered as context above them.
    """

    statements: Tuple[Tuple[str, str], ...]
    choices: Tuple[Tuple[str, str], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "statements", _sorted_items(dict(self.statements)))
        object.__setattr__(self, "choices", _sorted_items(dict(self.choices)))
        _check_letters((k for k, _ in self.choices), "StatementSelection")

    @classmethod
    def from_mappings(
        cls, statements: Mapping[str, str], choices: Mapping[str, str]
    ) -> "StatementSelection":
        return cls(statements=tuple(statements.items()), choices=tuple(choices.items()))

    def choice_pairs(self) -> Tuple[Tuple[str, str], ...]:
        return self.choices

    @property
    def letters(self) -> Tuple[str, ...]:
        return tuple(k for k, _ in self.choices)


OptionSet = Union[ListOptions, MapOptions, StatementSelection]


@dataclass(frozen=True)
class QuestionRecord:
    """One gradable question.

    ``correct_answer`` is kept as the raw answer-key string (``"B"``, ``"AC"``,
    ``"A,C"``); comparisons go through ``examcore.grading.normalize``.
    """

    number: int
    body: str
    options: OptionSet
    correct_answer: str

    def __post_init__(self) -> None:
        if self.number < 1:
            raise ValueError(f"Question number must be positive, got {self.number}")
        object.__setattr__(self, "body", self.body.strip())
