"""Data schemas for examcore.

Loading and exporting live in ``examcore.data.loader``.
"""

from .schemas import ListOptions, MapOptions, OptionSet, QuestionRecord, StatementSelection

__all__ = [
    "QuestionRecord",
    "OptionSet",
    "ListOptions",
    "MapOptions",
    "StatementSelection",
]
