"""Unit tests for the check-file workflow."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from fsdlint.helpers.dto.config_dto import LintConfig
from fsdlint.workflows.check_file_wf import check_file, check_source


class TestCheckSource:
    """Tests for check_source()."""

    @pytest.mark.unit
    def test_reports_each_statement(self, make_config: Callable[..., LintConfig]) -> None:
        source = (
            "import { useState } from 'react';\n"
            "import { User } from '@/entities/user';\n"
            "import { Card } from '@/features/card';\n"
        )
        result = check_source(source, "/repo/src/shared/ui/Button.tsx", make_config(alias="@"))

        assert len(result.statements) == 3
        assert [(v.statement.line, v.kind) for v in result.violations] == [
            (2, "incorrectLayerImport"),
            (3, "incorrectLayerImport"),
        ]

    @pytest.mark.unit
    def test_file_without_imports(self, make_config: Callable[..., LintConfig]) -> None:
        result = check_source("export const x = 1;\n", "/repo/src/shared/lib/x.ts", make_config())
        assert result.statements == []
        assert result.violations == []


class TestCheckFile:
    """Tests for check_file()."""

    @pytest.mark.unit
    def test_reads_file(self, tmp_path: Path, make_config: Callable[..., LintConfig]) -> None:
        path = tmp_path / "src" / "entities" / "user" / "ui" / "UserForm.tsx"
        path.parent.mkdir(parents=True)
        path.write_text("import { Post } from 'entities/post';\n", encoding="utf-8")

        result = check_file(path, make_config())

        assert result.file_path == str(path)
        assert [v.kind for v in result.violations] == ["incorrectEntityImports"]

    @pytest.mark.unit
    def test_undecodable_bytes_are_replaced(self, tmp_path: Path, make_config: Callable[..., LintConfig]) -> None:
        path = tmp_path / "src" / "app" / "index.ts"
        path.parent.mkdir(parents=True)
        path.write_bytes(b"// \xff\xfe\nimport x from 'pages/home';\n")

        result = check_file(path, make_config())

        assert len(result.statements) == 1
        assert result.diagnostics == []

    @pytest.mark.unit
    def test_unreadable_file_is_a_diagnostic(self, tmp_path: Path, make_config: Callable[..., LintConfig]) -> None:
        result = check_file(tmp_path / "src" / "missing.ts", make_config())

        assert result.statements == []
        (diagnostic,) = result.all_diagnostics
        assert diagnostic.message.startswith("Cannot read file")
