"""
Helpers package.
"""

from .exceptions import ConfigError, FsdLintError, LayerConfigError
from .glob_helper import expand_braces, matches, matches_any
from .logging_helper import FsdLintLogFilter, configure_logging

__all__ = [
    "ConfigError",
    "FsdLintError",
    "FsdLintLogFilter",
    "LayerConfigError",
    "configure_logging",
    "expand_braces",
    "matches",
    "matches_any",
]
