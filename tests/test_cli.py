import json
import logging
import subprocess
import sys
from pathlib import Path

from examcore.cli.main import main
from examcore.cli.validate_document import main as validate_main

ROOT = Path(__file__).resolve().parents[1]


def _write(tmp_path: Path, name: str, text: str) -> Path:
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


class TestValidateDocument:
    def test_ok(self, tmp_path, two_question_text, capsys):
        doc = _write(tmp_path, "exam.txt", two_question_text)
        assert validate_main([str(doc)]) == 0
        assert "OK: 2 questions" in capsys.readouterr().out

    def test_rejected(self, tmp_path, capsys):
        doc = _write(tmp_path, "bad.txt", "Question #1\nQ?\nA) a\nB) b\n")
        assert validate_main([str(doc)]) == 4
        out = capsys.readouterr().out
        assert "Document rejected" in out
        assert "Question #1 found but no 'Correct Answer' detected" in out

    def test_missing(self, tmp_path):
        assert validate_main([str(tmp_path / "none.txt")]) == 1

    def test_question_number_zero_rejected(self, tmp_path, capsys):
        doc = _write(tmp_path, "zero.txt", "Question #0\nQ?\nA) a\nB) b\nCorrect Answer: A\n")
        assert validate_main([str(doc)]) == 4
        assert "Question #0 has an invalid question number" in capsys.readouterr().out


def test_validate_document_module_exit_code(tmp_path):
    doc = _write(tmp_path, "empty.txt", "no questions")
    proc = subprocess.run(
        [sys.executable, "-m", "examcore.cli.validate_document", str(doc)],
        capture_output=True,
        text=True,
        cwd=str(ROOT),
    )
    assert proc.returncode == 4, proc.stdout + proc.stderr
    assert "No questions detected" in proc.stdout


class TestMainCli:
    def test_parse_then_grade(self, tmp_path, two_question_text, capsys):
        doc = _write(tmp_path, "CAD set 2.txt", two_question_text)
        out = tmp_path / "questions.jsonl"
        assert main(["parse", str(doc), "--output", str(out)]) == 0
        summary = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert summary["title"] == "CAD set 2"
        assert summary["count"] == 2

        answers = _write(tmp_path, "answers.json", json.dumps({"1": "B", "2": "A"}))
        report = tmp_path / "report.json"
        assert main(["grade", str(out), "--answers", str(answers), "--output", str(report)]) == 0
        assert "1/2 (50%)" in capsys.readouterr().out

        payload = json.loads(report.read_text(encoding="utf-8"))
        assert payload["score"] == 1
        assert payload["passed"] is False
        assert [w["number"] for w in payload["wrong"]] == [2]

    def test_parse_map_shape(self, tmp_path, two_question_text):
        doc = _write(tmp_path, "exam.txt", two_question_text)
        out = tmp_path / "q.jsonl"
        assert main(["parse", str(doc), "--output", str(out), "--shape", "map"]) == 0
        first = json.loads(out.read_text(encoding="utf-8").splitlines()[0])
        assert first["options"] == {"A": "3", "B": "4"}

    def test_parse_rejected(self, tmp_path, capsys):
        doc = _write(tmp_path, "bad.txt", "Question #3\nQ?\nA) a\nB) b\nCorrect Answer: E")
        assert main(["parse", str(doc)]) == 4
        assert "correct answer 'E' not found" in capsys.readouterr().out

    def test_grade_segment_with_yaml_config(self, tmp_path, seed_json_file, yaml_config_file, capsys):
        answers = _write(tmp_path, "answers.json", json.dumps({"3": "C"}))
        code = main([
            "--config", str(yaml_config_file),
            "grade", str(seed_json_file), "--answers", str(answers), "--segment", "1", "--summary",
        ])
        assert code == 0
        out = capsys.readouterr().out
        assert "1/1 (100%)" in out
        assert "first_question" in out

    def test_grade_segment_out_of_range(self, tmp_path, seed_json_file):
        answers = _write(tmp_path, "answers.json", "{}")
        assert main(["grade", str(seed_json_file), "--answers", str(answers), "--segment", "5"]) == 1

    def test_missing_config(self, tmp_path, two_question_text):
        doc = _write(tmp_path, "exam.txt", two_question_text)
        assert main(["--config", str(tmp_path / "none.yaml"), "parse", str(doc)]) == 1

    def test_no_command(self):
        assert main([]) == 1

    def test_log_file_goes_to_configured_path(self, tmp_path, two_question_text):
        doc = _write(tmp_path, "exam.txt", two_question_text)
        log_dir = tmp_path / "logs"
        cfg = _write(tmp_path, "cfg.json", json.dumps({"logging": {"log_dir": str(log_dir), "filename": "run.log"}}))
        assert main(["--config", str(cfg), "--log-file", "parse", str(doc)]) == 0
        root = logging.getLogger()
        for h in root.handlers:
            h.flush()
            h.close()
        assert "Parsed 2 questions" in (log_dir / "run.log").read_text(encoding="utf-8")
