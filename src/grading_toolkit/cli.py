"""
Command-line interface for the grading toolkit.

Subcommands:
    grade    Grade a student's answers against a model answer key
    score    Extract an obtained/out-of score from recognized text
    segment  Split an answer sheet into per-question spans

Inputs are UTF-8 text files (already recognized); "-" reads stdin.
Results are printed to stdout as JSON, logs go to stderr.

Exit codes:
    0  success
    1  an input file could not be read
    2  invalid arguments or empty input
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from grading_toolkit.common.logging_utils import configure_logging
from grading_toolkit.core.utils.serialization import evaluation_to_json, score_to_json, spans_to_json
from grading_toolkit.grading.config import DEFAULT_MARKS_PER_QUESTION, GradingConfig
from grading_toolkit.grading.heuristic import grade_texts
from grading_toolkit.grading.segmenter import extract_qa_pairs
from grading_toolkit.scoring.config import ScoreRequest
from grading_toolkit.scoring.extractor import extract_score

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


class InputError(Exception):
    """Raised when an input cannot be read or is unusable."""

    def __init__(self, message: str, exit_code: int):
        super().__init__(message)
        self.exit_code = exit_code


def read_text(path: str) -> str:
    """Read a UTF-8 text input; "-" reads stdin."""
    if path == STDIN_PATH:
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read {path}: {e}", exit_code=1) from e


def _require_text(text: str, what: str) -> str:
    if not text.strip():
        raise InputError(
            f"{what} text is empty. Paste text or run OCR on the upload first.",
            exit_code=2,
        )
    return text


# ─────────────────────────────────────────────────────────────────────────────
# Subcommands
# ─────────────────────────────────────────────────────────────────────────────

def _cmd_grade(args: argparse.Namespace) -> str:
    if args.model == STDIN_PATH and args.student == STDIN_PATH:
        raise InputError("Only one of --model/--student can read stdin", exit_code=2)
    config = GradingConfig(max_marks_per_question=args.max_marks)
    model_text = _require_text(read_text(args.model), "Model answer")
    student_text = _require_text(read_text(args.student), "Student answer")
    evaluation = grade_texts(model_text, student_text, config)
    return evaluation_to_json(evaluation, indent=args.indent)


def _cmd_score(args: argparse.Namespace) -> str:
    request = ScoreRequest(expected_out_of=args.expected_out_of, label_hint=args.label_hint)
    text = _require_text(read_text(args.text), "Recognized")
    return score_to_json(extract_score(text, request), indent=args.indent)


def _cmd_segment(args: argparse.Namespace) -> str:
    spans = extract_qa_pairs(read_text(args.text))
    logger.info(f"Segmented {len(spans)} questions")
    return spans_to_json(spans, indent=args.indent)


def _add_global_options(parser: argparse.ArgumentParser, default_verbose, default_indent) -> None:
    parser.add_argument(
        "--verbose", "-v", action="store_true", default=default_verbose,
        help="Enable debug logging",
    )
    parser.add_argument("--indent", type=int, default=default_indent, help="JSON indent (default 2)")


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser.

    --verbose and --indent are accepted before or after the subcommand.
    The subcommand copies suppress their defaults so a value given before
    the subcommand is not reset.
    """
    parser = argparse.ArgumentParser(
        prog="grading-toolkit",
        description="Heuristic exam grading and score extraction from recognized text",
    )
    _add_global_options(parser, False, 2)

    common = argparse.ArgumentParser(add_help=False)
    _add_global_options(common, argparse.SUPPRESS, argparse.SUPPRESS)

    sub = parser.add_subparsers(dest="command", required=True)

    grade = sub.add_parser(
        "grade", parents=[common], help="Grade a submission against a model answer key"
    )
    grade.add_argument("--model", "-m", required=True, help="Model answer text file ('-' for stdin)")
    grade.add_argument("--student", "-s", required=True, help="Student answer text file ('-' for stdin)")
    grade.add_argument(
        "--max-marks", type=int, default=DEFAULT_MARKS_PER_QUESTION,
        help=f"Marks per question, 1-50 (default {DEFAULT_MARKS_PER_QUESTION})",
    )
    grade.set_defaults(handler=_cmd_grade)

    score = sub.add_parser(
        "score", parents=[common], help="Extract a score such as 23/30 from recognized text"
    )
    score.add_argument("--text", "-t", required=True, help="Recognized text file ('-' for stdin)")
    score.add_argument("--expected-out-of", type=int, default=None, help="Known total, 1-1000")
    score.add_argument("--label-hint", default=None, help="Label next to the score (default 'marks')")
    score.set_defaults(handler=_cmd_score)

    segment = sub.add_parser(
        "segment", parents=[common], help="Split an answer sheet into question spans"
    )
    segment.add_argument("--text", "-t", required=True, help="Answer sheet text file ('-' for stdin)")
    segment.set_defaults(handler=_cmd_segment)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        output = args.handler(args)
    except InputError as e:
        print(f"error: {e}", file=sys.stderr)
        return e.exit_code
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
