from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_checker.services.resume_service import (  # noqa: E402
    ResumeIntakeError,
    analyze_resume_upload,
)


def _print_report(response) -> None:
    scores = response.scores
    print(f"Overall score: {scores.overall}")
    print(f"  Readability: {scores.readability}")
    print(f"  ATS:         {scores.ats}")
    print(f"  Impact:      {scores.impact}")
    print(f"  Formatting:  {scores.formatting}")
    print()
    for item in response.display_items:
        print(f"[{item.category}] {item.text}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Score a resume file and print feedback.")
    parser.add_argument("--file", required=True, help="Resume file (.txt, .md, .pdf, .docx)")
    parser.add_argument("--json", action="store_true", help="Print the full analysis as JSON.")
    args = parser.parse_args()

    path = Path(args.file)
    try:
        content = path.read_bytes()
    except OSError as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return 1

    try:
        response = analyze_resume_upload(path.name, content)
    except ResumeIntakeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(response.model_dump(mode="json"), ensure_ascii=False, indent=2))
    else:
        _print_report(response)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
