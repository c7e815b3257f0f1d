"""
Rules command: print the effective layer table for the active configuration.
"""

from __future__ import annotations

import argparse

from fsdlint.helpers.exceptions import ConfigError
from fsdlint.interfaces.cli.cli_ui import print_error, show_rules_table
from fsdlint.interfaces.cli.commands.check_cli import EXIT_CLEAN, EXIT_CONFIG_ERROR
from fsdlint.services.cli_bootstrap_svc import get_lint_service


def cmd_rules(args: argparse.Namespace) -> int:
    """Show which layer may import from which, using the configured folder names."""
    try:
        service = get_lint_service(config_path=args.config)
    except ConfigError as e:
        print_error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    show_rules_table(service.describe_rules(), service.config.source)
    return EXIT_CLEAN
