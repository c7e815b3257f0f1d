"""
Services package.
"""

from .cli_bootstrap_svc import get_config_service, get_lint_service
from .config_svc import CONFIG_FILENAMES, ENV_CONFIG_PATH, ConfigService
from .lint_svc import LintService

__all__ = [
    "CONFIG_FILENAMES",
    "ENV_CONFIG_PATH",
    "ConfigService",
    "LintService",
    "get_config_service",
    "get_lint_service",
]
