"""
Violation domain DTOs.

Every detectable problem is a policy violation of one of six kinds. A
violation carries the data used to render its message and a reference to
the import statement it was raised for.

Rules:
- Import only stdlib, typing and sibling DTO modules
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal

from fsdlint.helpers.dto.import_dto import ImportStatement

ViolationKind = Literal[
    "incorrectLayerImport",
    "incorrectEntityImports",
    "notPublicApiImport",
    "notTestingPublicApiImport",
    "shouldBeRelativePath",
    "crossSliceRelativeImport",
]

VIOLATION_KINDS: tuple[ViolationKind, ...] = (
    "incorrectLayerImport",
    "incorrectEntityImports",
    "notPublicApiImport",
    "notTestingPublicApiImport",
    "shouldBeRelativePath",
    "crossSliceRelativeImport",
)

MESSAGE_TEMPLATES: dict[ViolationKind, str] = {
    "incorrectLayerImport": "Import from {importLayer} is not allowed in {fileLayer}",
    "incorrectEntityImports": (
        "Imports between entities should be via @x folder. "
        "Valid: '{entitiesLayer}/{fromEntity}/@x/{toEntity}'"
    ),
    "notPublicApiImport": "Import should be from public api",
    "notTestingPublicApiImport": "Import should be from public api for testing (public-api/testing.{{js,ts}})",
    "shouldBeRelativePath": "Path should be relative!",
    "crossSliceRelativeImport": (
        "Relative import should not cross layer or slice boundaries. Use absolute import instead."
    ),
}


@dataclass(frozen=True)
class Violation:
    """A single architectural rule breach."""

    kind: ViolationKind
    rule: str
    statement: ImportStatement
    data: Mapping[str, str] = field(default_factory=dict)

    @property
    def message(self) -> str:
        """Human-readable message with data interpolated."""
        return MESSAGE_TEMPLATES[self.kind].format(**self.data)

    def to_dict(self) -> dict[str, object]:
        """Plain dict for JSON output."""
        return {
            "kind": self.kind,
            "rule": self.rule,
            "message": self.message,
            "file": self.statement.file_path,
            "line": self.statement.line,
            "column": self.statement.column,
            "specifier": self.statement.specifier,
            "data": dict(self.data),
        }
