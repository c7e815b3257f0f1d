"""
Explain command: evaluate one import statement and show every rule's outcome.

Useful for finding out why an import is (or is not) reported, including
imports that a rule skips as not applicable or ignored.
"""

from __future__ import annotations

import argparse

from fsdlint.helpers.exceptions import ConfigError
from fsdlint.interfaces.cli.cli_ui import print_error, show_import_result
from fsdlint.interfaces.cli.commands.check_cli import EXIT_CLEAN, EXIT_CONFIG_ERROR, EXIT_VIOLATIONS
from fsdlint.services.cli_bootstrap_svc import get_lint_service


def cmd_explain(args: argparse.Namespace) -> int:
    """
    Check `import ... from SPECIFIER` as if it appeared in FILE.
    FILE does not need to exist; only its path is used.
    """
    try:
        service = get_lint_service(config_path=args.config, alias=args.alias)
    except ConfigError as e:
        print_error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    result = service.check_statement(args.file, args.specifier)
    show_import_result(result)

    return EXIT_VIOLATIONS if result.violations else EXIT_CLEAN
