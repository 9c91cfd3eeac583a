from __future__ import annotations

import argparse
import json
import sys
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Literal, Optional, Tuple

from app_logging.run_logger import ValidationRunLogger
from content_validation.branding import validate_branding
from content_validation.engine import CONTENT_TYPES, ContentValidator
from content_validation.limits import ValidationLimits
from content_validation.suggestions import generate_suggestions
from lib.env import LIMITS_PATH_ENV, RUN_LOG_PATH_ENV, env_path, load_env
from lib.limits_config_loader import load_validation_limits
from schemas.report import ValidationReport


@dataclass
class ValidationIssue:
    severity: Literal["error", "warning"]
    file: Path
    message: str


def _load_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e
    except (OSError, RecursionError) as e:
        raise ValueError(f"Could not read {path}: {e}") from e


def _issues_for(path: Path, report: ValidationReport) -> List[ValidationIssue]:
    issues = [ValidationIssue(severity="error", file=path, message=m) for m in report.errors]
    issues.extend(ValidationIssue(severity="warning", file=path, message=m) for m in report.warnings)
    return issues


def _print_issues(issues: List[ValidationIssue]) -> None:
    for it in issues:
        rel = it.file.as_posix()
        print(f"[{it.severity}] {rel} :: {it.message}")


def _resolve_limits(arg: Optional[str]) -> Optional[ValidationLimits]:
    path = Path(arg) if arg else env_path(LIMITS_PATH_ENV)
    if path is None:
        return None
    return load_validation_limits(path)


def main(argv: List[str]) -> int:
    parser = argparse.ArgumentParser(description="Validate course content submissions before publishing")
    parser.add_argument("files", nargs="+", help="JSON submission file(s)")
    parser.add_argument(
        "--type",
        dest="content_type",
        choices=CONTENT_TYPES,
        default="document",
        help="What the files contain (default: document)",
    )
    parser.add_argument("--branding", type=str, default=None, help="Municipal branding JSON file to validate too")
    parser.add_argument(
        "--limits",
        type=str,
        default=None,
        help=f"Validation limits YAML (defaults to ${LIMITS_PATH_ENV}, then built-in limits)",
    )
    parser.add_argument(
        "--log-path",
        type=str,
        default=None,
        help=f"Append a JSONL run log here (defaults to ${RUN_LOG_PATH_ENV})",
    )
    parser.add_argument("--json", action="store_true", help="Print reports as JSON instead of text")
    args = parser.parse_args(argv)

    load_env()

    try:
        limits = _resolve_limits(args.limits)
    except (FileNotFoundError, ValueError) as e:
        print(f"[error] {e}")
        return 2

    log_path = Path(args.log_path) if args.log_path else env_path(RUN_LOG_PATH_ENV)
    run_logger = ValidationRunLogger(run_id=uuid.uuid4().hex, log_path=log_path) if log_path else None
    validator = ContentValidator(limits=limits, run_logger=run_logger)

    # One entry per input, in argument order; the same file may appear twice.
    reports: List[Tuple[Path, str, ValidationReport]] = []
    try:
        for name in args.files:
            path = Path(name)
            reports.append((path, args.content_type, validator.validate_submission(_load_json(path), args.content_type)))
        if args.branding:
            path = Path(args.branding)
            reports.append((path, "branding", validate_branding(_load_json(path))))
    except (FileNotFoundError, ValueError) as e:
        print(f"[error] {e}")
        return 2

    has_errors = any(not r.is_valid for _, _, r in reports)

    if args.json:
        payload = [
            {"file": path.as_posix(), "kind": kind, **r.to_dict(), "suggestions": generate_suggestions(r.errors)}
            for path, kind, r in reports
        ]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 1 if has_errors else 0

    all_issues: List[ValidationIssue] = []
    for path, _, report in reports:
        all_issues.extend(_issues_for(path, report))

    if all_issues:
        _print_issues(all_issues)

        suggestions = generate_suggestions(i.message for i in all_issues if i.severity == "error")
        if suggestions:
            print("\nSuggestions:")
            for s in suggestions:
                print(f"- {s}")

        errors = [i for i in all_issues if i.severity == "error"]
        warnings = [i for i in all_issues if i.severity == "warning"]
        print(f"\nValidation summary: {len(errors)} error(s), {len(warnings)} warning(s)")
        return 1 if errors else 0

    print("Content validation: OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
