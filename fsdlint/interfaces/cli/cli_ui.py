#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent output across all commands.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from fsdlint.helpers.dto.config_dto import LayerRuleInfo
from fsdlint.helpers.dto.lint_dto import ImportCheckResult, LintReport, PolicyOutcome

console = Console()

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"
COLOR_MUTED = "dim"

# Outcome status -> display style
STATUS_STYLES: dict[str, str] = {
    "ok": COLOR_SUCCESS,
    "violation": COLOR_ERROR,
    "ignored": COLOR_MUTED,
    "not_applicable": COLOR_MUTED,
    "error": COLOR_WARNING,
}


class InfoPanel:
    """
    Simple panel for displaying status/info.
    """

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO):
        """Show a single info panel."""
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


def print_success(message: str):
    """Print a success message."""
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {message}")


def print_error(message: str):
    """Print an error message."""
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {message}")


def print_warning(message: str):
    """Print a warning message."""
    console.print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {message}")


def print_info(message: str):
    """Print an info message."""
    console.print(f"[{COLOR_INFO}]ℹ[/{COLOR_INFO}] {message}")


def show_report(report: LintReport):
    """Print violations grouped by file, then diagnostics and a summary panel."""
    for file_result in report.files:
        if not file_result.violations:
            continue
        console.print(f"\n[bold underline]{escape(file_result.file_path)}[/bold underline]")
        for violation in file_result.violations:
            statement = violation.statement
            console.print(
                f"  [{COLOR_MUTED}]{statement.line}:{statement.column}[/{COLOR_MUTED}]  "
                f"[{COLOR_ERROR}]{violation.kind}[/{COLOR_ERROR}]  {escape(violation.message)}  "
                f"[{COLOR_MUTED}]({violation.rule})[/{COLOR_MUTED}]",
                highlight=False,
            )

    for diagnostic in report.diagnostics:
        print_warning(escape(f"{diagnostic.location}: {diagnostic.message}"))

    summary = (
        f"[bold]Files checked:[/bold] {report.files_checked}\n"
        f"[bold]Imports checked:[/bold] {report.statements_checked}\n"
        f"[bold]Violations:[/bold] {len(report.violations)}"
    )
    if report.counts_by_kind:
        details = "\n".join(f"  {kind}: {count}" for kind, count in sorted(report.counts_by_kind.items()))
        summary = f"{summary}\n{details}"

    console.print()
    InfoPanel.show("fsdlint", summary, COLOR_SUCCESS if report.is_clean else COLOR_ERROR)


def show_rules_table(rows: list[LayerRuleInfo], source: str | None = None):
    """Print the effective layer table."""
    table = Table(title="Layer hierarchy", box=box.ROUNDED, title_justify="left")
    table.add_column("Layer", style="bold", no_wrap=True)
    table.add_column("Folder", no_wrap=True)
    table.add_column("May import from")
    table.add_column("Slices")

    for row in rows:
        table.add_row(row.role, row.name, ", ".join(row.allowed), "no" if row.flat else "yes")

    console.print(table)
    print_info(escape(f"Configuration: {source or 'built-in defaults'}"))


def _outcome_detail(outcome: PolicyOutcome) -> str:
    if outcome.violations:
        return escape("\n".join(f"{v.kind}: {v.message}" for v in outcome.violations))
    return escape(outcome.reason or "")


def show_import_result(result: ImportCheckResult):
    """Print each policy outcome for one import statement."""
    statement = result.statement
    table = Table(
        title=escape(f"import '{statement.specifier}' in {statement.file_path}"),
        box=box.ROUNDED,
        title_justify="left",
    )
    table.add_column("Rule", style="bold", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Detail")

    for outcome in result.outcomes:
        style = STATUS_STYLES.get(outcome.status, COLOR_INFO)
        table.add_row(outcome.rule, f"[{style}]{outcome.status}[/{style}]", _outcome_detail(outcome))

    console.print(table)
