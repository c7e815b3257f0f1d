"""
Config domain DTOs.

Immutable configuration snapshots handed from the config service to the
workflows and policy components. One snapshot is built per lint run and is
never mutated while the run is in progress.

Rules:
- Import only stdlib and typing (no fsdlint.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class LintSettings:
    """
    Run-level settings shared by every rule.

    Attributes:
        alias: Import alias stripped from specifiers ("@" strips "@/")
        layers: Canonical role -> custom layer name (roles omitted keep their name)
        ignore_imports: Glob patterns matched against import paths
        ignore_files: Glob patterns matched against src-relative file paths
    """

    alias: str = ""
    layers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    ignore_imports: tuple[str, ...] = ()
    ignore_files: tuple[str, ...] = ()


@dataclass(frozen=True)
class RuleOptions:
    """Call-level options of a single rule."""

    enabled: bool = True
    ignore_imports_pattern: tuple[str, ...] = ()
    ignore_files_pattern: tuple[str, ...] = ()
    test_file_patterns: tuple[str, ...] = ()


@dataclass(frozen=True)
class LintConfig:
    """Complete configuration snapshot for one lint run."""

    settings: LintSettings
    rules: Mapping[str, RuleOptions]
    extensions: tuple[str, ...] = (".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs")
    exclude: tuple[str, ...] = ()
    source: str | None = None  # Config file that was loaded, if any

    def options_for(self, rule: str) -> RuleOptions:
        """Options for a rule name, defaults when the rule is not configured."""
        return self.rules.get(rule, RuleOptions())


@dataclass(frozen=True)
class LayerRuleInfo:
    """One row of the effective layer table (for display)."""

    role: str
    name: str
    allowed: tuple[str, ...]
    flat: bool
