"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.

Policy violations are NOT exceptions. They are reported as Violation DTOs.
"""

from __future__ import annotations


class FsdLintError(Exception):
    """Base class for fsdlint errors."""


class ConfigError(FsdLintError):
    """Raised when the lint configuration cannot be loaded or is invalid."""


class LayerConfigError(ConfigError):
    """Raised when a layer rename mapping is inconsistent (unknown role, duplicate name)."""
