#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse

from fsdlint.__version__ import __version__
from fsdlint.helpers.logging_helper import configure_logging
from fsdlint.interfaces.cli.commands.check_cli import cmd_check
from fsdlint.interfaces.cli.commands.explain_cli import cmd_explain
from fsdlint.interfaces.cli.commands.rules_cli import cmd_rules


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="fsdlint",
        description="fsdlint - Feature-Sliced Design import boundary checker",
        epilog="Examples:\n"
        "  fsdlint check                              # Lint ./src\n"
        "  fsdlint check src/features --alias @       # Lint one layer, '@/' alias\n"
        "  fsdlint check --format json                # Machine-readable report\n"
        "  fsdlint rules                              # Show the layer table\n"
        "  fsdlint explain src/pages/home/ui/Page.tsx @/entities/user/model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'fsdlint <command> --help' for command-specific help)",
    )

    # check: Lint source trees
    s = sub.add_parser("check", help="Check imports against layer, public API and relative-path rules")
    s.add_argument("paths", nargs="*", help="files or directories to check (default: src)")
    s.add_argument("--config", help="config file (default: fsdlint.yaml in the current directory)")
    s.add_argument("--alias", help="import alias, e.g. '@' for '@/entities/user'")
    s.add_argument("--format", choices=("text", "json"), default="text", help="output format")
    s.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="enable debug logging")
    s.set_defaults(func=cmd_check)

    # rules: Effective layer table
    s = sub.add_parser("rules", help="Show the effective layer hierarchy")
    s.add_argument("--config", help="config file (default: fsdlint.yaml in the current directory)")
    s.set_defaults(func=cmd_rules)

    # explain: Single import statement
    s = sub.add_parser("explain", help="Show every rule's outcome for one import")
    s.add_argument("file", help="path of the importing file (need not exist)")
    s.add_argument("specifier", help="import specifier, e.g. '@/entities/user'")
    s.add_argument("--config", help="config file (default: fsdlint.yaml in the current directory)")
    s.add_argument("--alias", help="import alias, e.g. '@' for '@/entities/user'")
    s.set_defaults(func=cmd_explain)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=getattr(args, "verbose", False))

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    raise SystemExit(main())
