"""examcore.

Strict import of multiple-choice exams from extracted document text, and the
single answer-comparison rule used to grade and review submissions.
"""

from .config import AppConfig, default_app_config
from .data import ListOptions, MapOptions, OptionSet, QuestionRecord, StatementSelection
from .data.loader import export_questions, load_questions
from .grading import AnswerKey, normalize_answer, score_submission
from .options import decode, encode
from .parsing import ParseError, ParseResult, parse_document, parse_document_result
from .security import make_question_id
from .utils import configure_logging

__all__ = [
    "__version__",
    "AppConfig",
    "default_app_config",
    "QuestionRecord",
    "OptionSet",
    "ListOptions",
    "MapOptions",
    "StatementSelection",
    "load_questions",
    "export_questions",
    "AnswerKey",
    "normalize_answer",
    "score_submission",
    "encode",
    "decode",
    "ParseError",
    "ParseResult",
    "parse_document",
    "parse_document_result",
    "make_question_id",
    "configure_logging",
]

__version__ = "0.1.0"
