"""Import statement DTOs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ImportStatement:
    """
    A single import declaration found in a source file.

    file_path is the path of the importing file as the host saw it
    (platform separators, absolute or relative). It may be None when the
    host could not tell which file is being analyzed.
    line and column are 1-based and point at the `import` keyword.
    """

    file_path: str | None
    specifier: str
    line: int = 1
    column: int = 1

    @property
    def location(self) -> str:
        """file:line:column reference for reports."""
        return f"{self.file_path or '<unknown>'}:{self.line}:{self.column}"
