from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Any

import pytest
import yaml

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def make_block(number: int, body: str, options: List[str], answer: str, sep: str = ")") -> str:
    lines = [f"Question #{number}", body]
    lines += [f"{chr(ord('A') + i)}{sep} {text}" for i, text in enumerate(options)]
    lines.append(f"Correct Answer: {answer}")
    return "\n".join(lines)


# ====================
# Document Fixtures
# ====================

@pytest.fixture
def two_question_text() -> str:
    """The worked example used throughout the docs."""
    return (
        "Question #1\nWhat is 2+2?\nA) 3\nB) 4\nCorrect Answer: B\n"
        "Question #2\nWhich is a prime?\nA) 4\nB) 6\nC) 7\nCorrect Answer: C\n"
    )


@pytest.fixture
def document_factory():
    """Build a synthetic document with K well-formed blocks."""
    def _build(k: int, preamble: str = "Practice Exam\nVersion 3\n") -> str:
        blocks = []
        for n in range(1, k + 1):
            n_opts = 2 + (n % 7)  # 2..8 options
            opts = [f"choice {n}-{i}" for i in range(n_opts)]
            answer = chr(ord("A") + (n % n_opts))
            blocks.append(make_block(n, f"Body of question {n}?", opts, answer))
        return preamble + "\n".join(blocks)
    return _build


# ====================
# Stored Data Fixtures
# ====================

@pytest.fixture
def seed_rows() -> List[Dict[str, Any]]:
    """Rows in the three stored option shapes."""
    return [
        {
            "question_number": 1,
            "question": "Which table stores users?",
            "options": ["A) sys_user", "B) sys_group • C. sys_role", "D. task"],
            "answer": "A",
        },
        {
            "question_number": 2,
            "question": "Which roles can run scripts? (Choose two.)",
            "options": {"C": "admin", "A": "itil", "B": "script_runner"},
            "answer": "AC",
        },
        {
            "question_number": 3,
            "question": "Given the statements, which holds?",
            "statement_options": {"1": "Tables extend", "2": "Roles nest"},
            "selection_options": {"B": "Only 2", "A": "Only 1", "C": "Both"},
            "answer": "C",
        },
    ]


@pytest.fixture
def seed_json_file(tmp_path: Path, seed_rows) -> Path:
    path = tmp_path / "questions_chunk_1.json"
    path.write_text(json.dumps(seed_rows), encoding="utf-8")
    return path


@pytest.fixture
def yaml_config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.safe_dump({"logging": {"level": "DEBUG"}, "review": {"segment_size": 2, "pass_percentage": 60}}),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def _restore_logging():
    """CLI entry points reconfigure the root logger; undo that after each test."""
    root = logging.getLogger()
    pkg = logging.getLogger("examcore")
    saved = (root.handlers[:], root.level, pkg.level)
    yield
    root.handlers = saved[0]
    root.setLevel(saved[1])
    pkg.setLevel(saved[2])
