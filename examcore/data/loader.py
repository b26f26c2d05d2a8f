"""Loading and exporting stored question records."""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from .schemas import QuestionRecord
from ..options.codec import decode, encode
from ..utils.io import read_json, read_jsonl, write_jsonl


def exam_title(path: Union[str, Path]) -> str:
    """Exam title derived from the uploaded file name, e.g. ``"CAD set 2"``."""
    return Path(path).stem


def _row_options(row: Dict[str, Any]):
    if row.get("options") is not None:
        return row["options"]
    if row.get("selection_options") is not None:
        return {
            "statement_options": row.get("statement_options") or {},
            "selection_options": row["selection_options"],
        }
    raise ValueError("missing options")


def row_to_record(row: Dict[str, Any]) -> QuestionRecord:
    """Build a QuestionRecord from one stored or seed row.

    Accepts ``question_number``/``questionNumber``, ``question``/``text``,
    ``answer``/``correct_answer``/``correctAnswer`` and either ``options`` or
    ``statement_options`` + ``selection_options``.
    """
    if not isinstance(row, dict):
        raise ValueError(f"Invalid row format: expected dict, got {type(row).__name__}")

    number = row.get("question_number", row.get("questionNumber"))
    if number is None:
        raise ValueError("Row missing question_number")

    answer = row.get("answer", row.get("correct_answer", row.get("correctAnswer")))
    if answer is None:
        raise ValueError(f"Row missing answer: question {number}")

    try:
        options = decode(_row_options(row))
    except ValueError as e:
        raise ValueError(f"Invalid options in row for question {number}: {e}") from e

    return QuestionRecord(
        number=int(number),
        body=str(row.get("question", row.get("text", "")) or ""),
        options=options,
        correct_answer=str(answer).strip(),
    )


def record_to_row(record: QuestionRecord) -> Dict[str, Any]:
    return {
        "question_number": record.number,
        "question": record.body,
        "options": encode(record.options),
        "answer": record.correct_answer,
    }


def load_questions(path: Union[str, Path]) -> List[QuestionRecord]:
    """Load question records from a JSON array or JSONL file.

    Args:
        path: Path to a ``.json`` or ``.jsonl`` file

    Returns:
        List of QuestionRecord objects, in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is invalid or a row is malformed
    """
    filepath = Path(path).resolve()
    if not filepath.exists():
        raise FileNotFoundError(f"Question file not found: {filepath}")
    if not filepath.is_file():
        raise ValueError(f"Path is not a file: {filepath}")
    if filepath.suffix not in {".jsonl", ".json"}:
        raise ValueError(f"Expected .jsonl or .json file, got: {filepath.suffix}")

    if filepath.suffix == ".json":
        rows = read_json(filepath)
        if not isinstance(rows, list):
            raise ValueError(f"Expected a JSON array of questions in {filepath}")
    else:
        rows = list(read_jsonl(filepath))

    records = []
    for index, row in enumerate(rows, start=1):
        try:
            records.append(row_to_record(row))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Row {index} in {filepath}: {e}") from e

    if not records:
        raise ValueError(f"No questions found in {filepath}")
    return records


def export_questions(path: Union[str, Path], records: Iterable[QuestionRecord]) -> None:
    write_jsonl(path, (record_to_row(r) for r in records))
