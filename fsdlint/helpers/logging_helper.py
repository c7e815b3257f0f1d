"""
Logging helpers.

FsdLintLogFilter derives an identity tag and a role tag from the logger name
(the module path) so log lines read like:

    WARNING [Check Import] [Workflow] relative-imports failed for src/app/index.ts:3

configure_logging() wires the filter into the root handler once per process.
"""

from __future__ import annotations

import logging

# Module suffix -> role tag
_ROLE_SUFFIXES: dict[str, str] = {
    "_comp": "[Component]",
    "_wf": "[Workflow]",
    "_svc": "[Service]",
    "_helper": "[Helper]",
    "_cli": "[CLI]",
}

LOG_FORMAT = "%(levelname)s %(fsdlint_identity_tag)s %(fsdlint_role_tag)s %(message)s"


class FsdLintLogFilter(logging.Filter):
    """Attach fsdlint_identity_tag and fsdlint_role_tag to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        identity, role = _tags_for(record.name)
        record.fsdlint_identity_tag = identity
        record.fsdlint_role_tag = role
        return True


def _tags_for(logger_name: str) -> tuple[str, str]:
    module = logger_name.rsplit(".", 1)[-1]
    for suffix, role in _ROLE_SUFFIXES.items():
        if module.endswith(suffix):
            stem = module[: -len(suffix)]
            return f"[{stem.replace('_', ' ').title()}]", role
    return f"[{module.replace('_', ' ').title()}]", ""


def configure_logging(verbose: bool = False) -> None:
    """
    Configure logging once for the whole process.

    WARNING by default so lint output stays readable; DEBUG when verbose.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return

    logging.basicConfig(level=level, format=LOG_FORMAT)
    for handler in root.handlers:
        handler.addFilter(FsdLintLogFilter())
