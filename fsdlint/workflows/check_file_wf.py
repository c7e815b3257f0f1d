"""Check-file workflow: extract a file's imports and check each of them."""

from __future__ import annotations

import logging
from pathlib import Path

from fsdlint.components.layers.layer_registry_comp import LayerRegistry, build_layer_registry
from fsdlint.components.sources.import_extraction_comp import extract_import_statements
from fsdlint.helpers.dto.config_dto import LintConfig
from fsdlint.helpers.dto.lint_dto import Diagnostic, FileCheckResult
from fsdlint.workflows.check_import_wf import check_import_statement

logger = logging.getLogger(__name__)


def check_source(
    source: str,
    file_path: str,
    config: LintConfig,
    registry: LayerRegistry | None = None,
) -> FileCheckResult:
    """
    Check source text as if it were the contents of file_path.

    file_path is only used for layer/slice resolution; nothing is read.
    """
    registry = registry or build_layer_registry(config.settings.layers)
    result = FileCheckResult(file_path=file_path)

    for statement in extract_import_statements(source, file_path):
        result.statements.append(check_import_statement(statement, config, registry))

    return result


def check_file(
    path: str | Path,
    config: LintConfig,
    registry: LayerRegistry | None = None,
) -> FileCheckResult:
    """
    Read a source file and check its imports.

    Unreadable files are reported as a diagnostic on the result.
    """
    file_path = str(path)
    try:
        source = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning(f"Cannot read {file_path}: {e}")
        return FileCheckResult(
            file_path=file_path,
            diagnostics=[Diagnostic(message=f"Cannot read file: {e}", file_path=file_path)],
        )

    return check_source(source, file_path, config, registry)
