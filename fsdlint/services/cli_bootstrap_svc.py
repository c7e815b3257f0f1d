"""CLI Bootstrap Service - Service construction for CLI commands.

CLI commands get their service instances from here instead of wiring
ConfigService and LintService themselves.

Architecture:
- This is a SERVICE layer module (interfaces → services)
- CLI commands should NOT import workflows or components directly
- Configuration errors propagate as ConfigError; the CLI maps them to exit code 2
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from fsdlint.services.config_svc import ConfigService
from fsdlint.services.lint_svc import LintService

logger = logging.getLogger(__name__)


def get_config_service(
    config_path: str | Path | None = None,
    alias: str | None = None,
    project_root: str | Path | None = None,
) -> ConfigService:
    """Get ConfigService for CLI operations.

    Args:
        config_path: Value of --config (None = search the project root)
        alias: Value of --alias (None = keep the configured alias)
        project_root: Directory searched for fsdlint.yaml (default: cwd)

    Returns:
        ConfigService instance with CLI flags applied as overrides

    """
    overrides: dict[str, Any] = {}
    if alias is not None:
        overrides["alias"] = alias
    return ConfigService(project_root=project_root, config_path=config_path, overrides=overrides)


def get_lint_service(
    config_path: str | Path | None = None,
    alias: str | None = None,
    project_root: str | Path | None = None,
) -> LintService:
    """Get LintService for CLI operations.

    Raises:
        ConfigError: The configuration could not be loaded or is invalid

    """
    config = get_config_service(config_path, alias, project_root).get_config()
    logger.debug("[CLI Bootstrap] Lint service built from %s", config.source or "defaults")
    return LintService(config)
