"""
Lint run DTOs.

Outcomes of the policy checks and the aggregated results of checking a
statement, a file, or a whole project.

Rules:
- Import only stdlib, typing and sibling DTO modules
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Literal

from fsdlint.helpers.dto.import_dto import ImportStatement
from fsdlint.helpers.dto.violation_dto import Violation

OutcomeStatus = Literal["ok", "violation", "ignored", "not_applicable", "error"]


@dataclass(frozen=True)
class PolicyOutcome:
    """
    Result of one policy evaluated against one import statement.

    Status meanings:
    - "ok": Both sides identified, import allowed
    - "violation": One or more violations in `violations`
    - "ignored": Exempted by an ignore pattern
    - "not_applicable": Policy does not govern this import, or an identity
      (layer/slice) could not be determined; `reason` says which
    - "error": Unexpected failure while evaluating; `reason` holds the error
    """

    rule: str
    status: OutcomeStatus
    violations: tuple[Violation, ...] = ()
    reason: str | None = None

    @classmethod
    def ok(cls, rule: str) -> PolicyOutcome:
        return cls(rule=rule, status="ok")

    @classmethod
    def ignored(cls, rule: str) -> PolicyOutcome:
        return cls(rule=rule, status="ignored", reason="matched an ignore pattern")

    @classmethod
    def not_applicable(cls, rule: str, reason: str) -> PolicyOutcome:
        return cls(rule=rule, status="not_applicable", reason=reason)

    @classmethod
    def from_violations(cls, rule: str, violations: list[Violation]) -> PolicyOutcome:
        """Violation outcome, or ok when the list is empty."""
        if not violations:
            return cls.ok(rule)
        return cls(rule=rule, status="violation", violations=tuple(violations))


@dataclass(frozen=True)
class Diagnostic:
    """Something that prevented a check from running (not a rule violation)."""

    message: str
    file_path: str | None = None
    line: int | None = None
    rule: str | None = None

    @property
    def location(self) -> str:
        if self.line is None:
            return self.file_path or "<unknown>"
        return f"{self.file_path or '<unknown>'}:{self.line}"


@dataclass
class ImportCheckResult:
    """All policy outcomes for one import statement."""

    statement: ImportStatement
    outcomes: list[PolicyOutcome] = field(default_factory=list)

    @property
    def violations(self) -> list[Violation]:
        return [v for outcome in self.outcomes for v in outcome.violations]

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return [
            Diagnostic(
                message=outcome.reason or "unknown error",
                file_path=self.statement.file_path,
                line=self.statement.line,
                rule=outcome.rule,
            )
            for outcome in self.outcomes
            if outcome.status == "error"
        ]


@dataclass
class FileCheckResult:
    """Results for every import statement of one file."""

    file_path: str
    statements: list[ImportCheckResult] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def violations(self) -> list[Violation]:
        return [v for result in self.statements for v in result.violations]

    @property
    def all_diagnostics(self) -> list[Diagnostic]:
        return self.diagnostics + [d for result in self.statements for d in result.diagnostics]


@dataclass
class LintReport:
    """Aggregated results of a lint run."""

    files: list[FileCheckResult] = field(default_factory=list)

    @property
    def files_checked(self) -> int:
        return len(self.files)

    @property
    def statements_checked(self) -> int:
        return sum(len(f.statements) for f in self.files)

    @property
    def violations(self) -> list[Violation]:
        return [v for f in self.files for v in f.violations]

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return [d for f in self.files for d in f.all_diagnostics]

    @property
    def counts_by_kind(self) -> dict[str, int]:
        return dict(Counter(v.kind for v in self.violations))

    @property
    def is_clean(self) -> bool:
        return not self.violations
