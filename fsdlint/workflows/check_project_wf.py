"""
Check-project workflow: discover source files and check all of them.

This workflow:
1. Discovers source files under each path (directories walked, files taken as-is)
2. Checks every import of every file
3. Aggregates a LintReport
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from fsdlint.components.layers.layer_registry_comp import build_layer_registry
from fsdlint.components.sources.source_discovery_comp import discover_source_files
from fsdlint.helpers.dto.config_dto import LintConfig
from fsdlint.helpers.dto.lint_dto import LintReport
from fsdlint.workflows.check_file_wf import check_file

logger = logging.getLogger(__name__)


def check_project(paths: Iterable[str | Path], config: LintConfig) -> LintReport:
    """
    Lint every source file under the given paths.

    Args:
        paths: Directories and/or files
        config: Configuration snapshot for the run

    Returns:
        LintReport with one FileCheckResult per file (files deduplicated)
    """
    registry = build_layer_registry(config.settings.layers)
    report = LintReport()
    seen: set[Path] = set()

    for root in paths:
        for file_path in discover_source_files(root, config.extensions, config.exclude):
            resolved = file_path.resolve()
            if resolved in seen:
                continue
            seen.add(resolved)
            report.files.append(check_file(file_path, config, registry))

    logger.info(
        f"Checked {report.files_checked} file(s), {report.statements_checked} import(s): "
        f"{len(report.violations)} violation(s)"
    )
    return report
