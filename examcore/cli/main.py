from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, replace
from pathlib import Path

import yaml

from examcore.analysis.review import segment_summary_frame, wrong_answers
from examcore.config import AppConfig, default_app_config
from examcore.data.loader import exam_title, export_questions, load_questions
from examcore.data.schemas import ListOptions, MapOptions, QuestionRecord
from examcore.grading.scoring import score_segment, score_submission, segment_bounds
from examcore.parsing import ParseError, parse_document
from examcore.utils.io import read_json, read_text, write_json
from examcore.utils.logging_config import LogContext, configure_logging

logger = logging.getLogger("examcore.cli")


def _as_map(record: QuestionRecord) -> QuestionRecord:
    if isinstance(record.options, ListOptions):
        return replace(record, options=MapOptions(items=record.options.pairs))
    return record


def _load_config(path: str | None) -> AppConfig:
    if path is None:
        return default_app_config()
    return AppConfig.load(path)


def _cmd_parse(args, cfg: AppConfig) -> int:
    doc_path = Path(args.document)
    with LogContext(document=str(doc_path)):
        try:
            questions = parse_document(read_text(doc_path))
        except ParseError as e:
            print(f"Error: {e.message}")
            return 4

    if args.shape == "map":
        questions = [_as_map(q) for q in questions]

    summary = {"title": exam_title(doc_path), "count": len(questions)}
    if args.output:
        export_questions(args.output, questions)
        summary["output"] = str(args.output)
    print(json.dumps(summary))
    return 0


def _cmd_grade(args, cfg: AppConfig) -> int:
    questions = load_questions(args.records)
    answers = read_json(args.answers)
    if not isinstance(answers, dict):
        print(f"Error: answers file '{args.answers}' must hold a JSON object")
        return 1

    size = args.segment_size or cfg.review.segment_size
    if args.segment is not None:
        start, end = segment_bounds(args.segment, len(questions), size)
        result = score_segment(questions, answers, args.segment, size)
        graded = questions[start:end]
    else:
        result = score_submission(questions, answers)
        graded = questions

    passed = result.passed(cfg.review.pass_percentage)
    print(f"{result.score}/{result.total} ({result.percentage}%)")
    logger.info("Graded %s: %d/%d", args.records, result.score, result.total)

    if args.summary:
        frame = segment_summary_frame(
            questions, answers, size=size, pass_percentage=cfg.review.pass_percentage
        )
        print(frame.to_string(index=False))

    if args.output:
        write_json(args.output, {
            "score": result.score,
            "total": result.total,
            "percentage": result.percentage,
            "passed": passed,
            "answers": answers,
            "wrong": [asdict(w) for w in wrong_answers(graded, answers)],
        })
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="examcore CLI - strict exam import and grading",
        epilog="""Examples:
  # Parse extracted text and store the questions
  python -m examcore.cli.main parse exam.txt --output questions.jsonl

  # Grade a submission against stored questions
  python -m examcore.cli.main grade questions.jsonl --answers answers.json

  # Grade only the second segment of 50 questions and write a report
  python -m examcore.cli.main grade questions.jsonl --answers answers.json --segment 1 --output report.json
""",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--config", "-c", default=None, help="JSON or YAML config file (optional)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", action="store_true", help="Also log to the file named in the config")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parse_parser = subparsers.add_parser("parse", help="Parse extracted exam text")
    parse_parser.add_argument("document", help="UTF-8 text file")
    parse_parser.add_argument("--output", "-o", help="JSONL file for the parsed questions")
    parse_parser.add_argument("--shape", choices=["list", "map"], default="list", help="Stored options shape (default: list)")

    grade_parser = subparsers.add_parser("grade", help="Grade a submission")
    grade_parser.add_argument("records", help="Stored questions (.json or .jsonl)")
    grade_parser.add_argument("--answers", "-a", required=True, help="JSON object of question number -> answer")
    grade_parser.add_argument("--segment", type=int, default=None, help="Grade only this 0-based segment")
    grade_parser.add_argument("--segment-size", type=int, default=None, help="Override segment size from config")
    grade_parser.add_argument("--summary", action="store_true", help="Print per-segment summary table")
    grade_parser.add_argument("--output", "-o", help="Write a JSON report here")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        cfg = _load_config(args.config)
    except FileNotFoundError:
        print(f"Error: Config file '{args.config}' not found")
        return 1
    except (ValueError, TypeError, yaml.YAMLError) as e:
        print(f"Error: Invalid config in '{args.config}': {e}")
        return 1

    configure_logging(
        level="DEBUG" if args.verbose else cfg.logging.level,
        log_file=str(cfg.logging.file_path()) if args.log_file else None,
        structured=cfg.logging.structured,
    )

    try:
        if args.command == "parse":
            return _cmd_parse(args, cfg)
        elif args.command == "grade":
            return _cmd_grade(args, cfg)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        logger.error("FileNotFoundError: %s", e)
        return 1
    except (IndexError, ValueError) as e:
        print(f"Error: {e}")
        logger.error("%s: %s", type(e).__name__, e)
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
