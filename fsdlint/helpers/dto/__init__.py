"""
DTOs (Data Transfer Objects) used across multiple layers.

Domain DTOs live in helpers/dto/<domain>_dto.py and form cross-layer
contracts (interfaces → services → workflows → components).

Rules for DTO modules:
- Import only stdlib, typing and other DTO modules
- Contain ONLY dataclass/type definitions and simple type aliases
- No I/O, no business logic
"""

from __future__ import annotations

from fsdlint.helpers.dto.config_dto import LintConfig, LintSettings, RuleOptions
from fsdlint.helpers.dto.identity_dto import EMPTY_IDENTITY, ModuleIdentity
from fsdlint.helpers.dto.import_dto import ImportStatement
from fsdlint.helpers.dto.lint_dto import (
    Diagnostic,
    FileCheckResult,
    ImportCheckResult,
    LintReport,
    OutcomeStatus,
    PolicyOutcome,
)
from fsdlint.helpers.dto.violation_dto import (
    MESSAGE_TEMPLATES,
    VIOLATION_KINDS,
    Violation,
    ViolationKind,
)

__all__ = [
    "EMPTY_IDENTITY",
    "MESSAGE_TEMPLATES",
    "VIOLATION_KINDS",
    "Diagnostic",
    "FileCheckResult",
    "ImportCheckResult",
    "ImportStatement",
    "LintConfig",
    "LintReport",
    "LintSettings",
    "ModuleIdentity",
    "OutcomeStatus",
    "PolicyOutcome",
    "RuleOptions",
    "Violation",
    "ViolationKind",
]
