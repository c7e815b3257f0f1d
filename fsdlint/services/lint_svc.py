"""
LintService - Entry point for running the boundary checks.

Holds one configuration snapshot and the layer registry built from it, and
exposes the lint use cases to the CLI.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from fsdlint.components.layers.layer_registry_comp import FLAT_ROLES, LayerRegistry, build_layer_registry
from fsdlint.helpers.dto.config_dto import LayerRuleInfo, LintConfig
from fsdlint.helpers.dto.import_dto import ImportStatement
from fsdlint.helpers.dto.lint_dto import FileCheckResult, ImportCheckResult, LintReport
from fsdlint.workflows.check_file_wf import check_source
from fsdlint.workflows.check_import_wf import check_import_statement
from fsdlint.workflows.check_project_wf import check_project

logger = logging.getLogger(__name__)


class LintService:
    """
    Service for linting files, sources and single import statements.

    The configuration is read-only for the lifetime of the service; build a
    new service to lint with different settings.
    """

    def __init__(self, config: LintConfig):
        """
        Initialize lint service.

        Args:
            config: Configuration snapshot (from ConfigService.get_config())
        """
        self.config = config
        self.registry: LayerRegistry = build_layer_registry(config.settings.layers)

    def check_paths(self, paths: Iterable[str | Path]) -> LintReport:
        """Lint every source file under the given directories and files."""
        path_list = list(paths)
        logger.debug("[LintService] Checking %d path(s)", len(path_list))
        return check_project(path_list, self.config)

    def check_source(self, source: str, file_path: str) -> FileCheckResult:
        """Lint source text as if it lived at file_path (nothing is read)."""
        return check_source(source, file_path, self.config, self.registry)

    def check_statement(self, file_path: str, specifier: str) -> ImportCheckResult:
        """Evaluate every enabled rule for one `import ... from specifier` in file_path."""
        statement = ImportStatement(file_path=file_path, specifier=specifier)
        return check_import_statement(statement, self.config, self.registry)

    def describe_rules(self) -> list[LayerRuleInfo]:
        """
        Effective layer table, top layer first.

        Allowed layers are listed in hierarchy order using the active names.
        """
        order = list(self.registry.roles.values())
        rows = []
        for role, name in self.registry.roles.items():
            allowed = self.registry.rules.get(name, frozenset())
            rows.append(
                LayerRuleInfo(
                    role=role,
                    name=name,
                    allowed=tuple(layer for layer in order if layer in allowed),
                    flat=role in FLAT_ROLES,
                )
            )
        return rows
