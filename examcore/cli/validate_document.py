from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ..parsing import ParseError, parse_document
from ..utils.io import read_text


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="python -m examcore.cli.validate_document",
        description=(
            "Check that extracted exam text parses into a complete question set.\n"
            "The whole document is rejected on the first malformed question."
        ),
    )
    ap.add_argument(
        "document",
        help="Path to a UTF-8 text file produced by the document extractor",
    )
    args = ap.parse_args(argv)

    doc_path = Path(args.document)
    try:
        questions = parse_document(read_text(doc_path))
        print(f"[validate_document] OK: {len(questions)} questions in {doc_path}")
        return 0
    except FileNotFoundError:
        print(f"[validate_document] Error: document not found: {doc_path}")
        return 1
    except ParseError as e:
        # Dedicated exit code for rejected documents
        print("[validate_document] Document rejected.")
        print(f"[validate_document] {e.message}")
        return 4
    except Exception as e:
        print(f"[validate_document] Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
