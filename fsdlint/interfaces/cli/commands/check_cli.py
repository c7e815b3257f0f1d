"""
Check command: lint source trees for layer and slice boundary violations.

Architecture:
- Uses CLI bootstrap service to get a LintService instance
- Does NOT access workflows or components directly
- Exit codes: 0 clean, 1 violations found, 2 configuration error
"""

from __future__ import annotations

import argparse
import json
import sys

from fsdlint.helpers.dto.lint_dto import LintReport
from fsdlint.helpers.exceptions import ConfigError
from fsdlint.interfaces.cli.cli_ui import print_error, print_success, show_report
from fsdlint.services.cli_bootstrap_svc import get_lint_service

EXIT_CLEAN = 0
EXIT_VIOLATIONS = 1
EXIT_CONFIG_ERROR = 2


def report_to_dict(report: LintReport) -> dict[str, object]:
    """Machine-readable form of a lint report (--format json)."""
    return {
        "files_checked": report.files_checked,
        "imports_checked": report.statements_checked,
        "violations": [v.to_dict() for v in report.violations],
        "diagnostics": [
            {"file": d.file_path, "line": d.line, "rule": d.rule, "message": d.message} for d in report.diagnostics
        ],
        "counts_by_kind": report.counts_by_kind,
    }


def cmd_check(args: argparse.Namespace) -> int:
    """
    Lint the given paths (default: src) and report violations.
    """
    try:
        service = get_lint_service(config_path=args.config, alias=args.alias)
    except ConfigError as e:
        print_error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    paths = args.paths or ["src"]
    report = service.check_paths(paths)

    if args.format == "json":
        sys.stdout.write(json.dumps(report_to_dict(report), indent=2) + "\n")
    else:
        show_report(report)
        if report.is_clean:
            print_success(f"No boundary violations in {report.files_checked} file(s)")

    return EXIT_CLEAN if report.is_clean else EXIT_VIOLATIONS
