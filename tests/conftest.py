"""
Pytest fixtures and configuration for the test suite.

Fixture strategy:
- Configurations are built directly as DTOs (no YAML) except in config service tests
- Projects on disk are created under tmp_path
- FSDLINT_* environment variables are cleared for every test
"""

import sys
from collections.abc import Callable
from pathlib import Path
from types import MappingProxyType

import pytest

# Add project root to path so tests can import fsdlint package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from fsdlint.components.layers.layer_registry_comp import LayerRegistry, build_layer_registry  # noqa: E402
from fsdlint.helpers.dto.config_dto import LintConfig, LintSettings, RuleOptions  # noqa: E402
from fsdlint.helpers.dto.import_dto import ImportStatement  # noqa: E402

# Windows-style prefix used by the rule test cases; paths are normalized anyway
WIN_ROOT = "C:\\project\\src\\"


@pytest.fixture(autouse=True)
def _clean_fsdlint_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's FSDLINT_* variables out of the tests."""
    for name in ("FSDLINT_CONFIG", "FSDLINT_ALIAS", "FSDLINT_IGNORE_IMPORTS", "FSDLINT_IGNORE_FILES"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> LintSettings:
    """Default settings: canonical layer names, no alias."""
    return LintSettings()


@pytest.fixture
def options() -> RuleOptions:
    """Default rule options: enabled, no ignore patterns."""
    return RuleOptions()


@pytest.fixture
def registry() -> LayerRegistry:
    """Registry with canonical layer names."""
    return build_layer_registry()


@pytest.fixture
def make_statement() -> Callable[..., ImportStatement]:
    """Factory: make_statement("entities\\user\\ui\\Form.tsx", "shared/ui")."""

    def _make(file_path: str | None, specifier: str, line: int = 1) -> ImportStatement:
        if file_path is not None and not file_path.startswith(("/", "C:")):
            file_path = WIN_ROOT + file_path.replace("/", "\\")
        return ImportStatement(file_path=file_path, specifier=specifier, line=line)

    return _make


@pytest.fixture
def make_config() -> Callable[..., LintConfig]:
    """Factory for LintConfig snapshots with keyword overrides."""

    def _make(
        alias: str = "",
        layers: dict[str, str] | None = None,
        ignore_imports: tuple[str, ...] = (),
        ignore_files: tuple[str, ...] = (),
        rules: dict[str, RuleOptions] | None = None,
        exclude: tuple[str, ...] = (),
    ) -> LintConfig:
        return LintConfig(
            settings=LintSettings(
                alias=alias,
                layers=MappingProxyType(layers or {}),
                ignore_imports=ignore_imports,
                ignore_files=ignore_files,
            ),
            rules=MappingProxyType(rules or {}),
            exclude=exclude,
        )

    return _make


@pytest.fixture
def fsd_project(tmp_path: Path) -> Path:
    """
    Small FSD project on disk.

    Contains one clean file per layer plus two known violations:
    - shared/ui/Button.tsx imports from entities (layer-imports)
    - features/auth/ui/Login.tsx imports entities/user/model/types (public-api-imports)
    """
    src = tmp_path / "src"
    files = {
        "app/index.tsx": "import { HomePage } from 'pages/home';\nimport 'shared/styles/global.css';\n",
        "pages/home/index.ts": "export { HomePage } from './ui/HomePage';\n",
        "pages/home/ui/HomePage.tsx": "import { Header } from 'widgets/header';\nimport { Login } from 'features/auth';\n",
        "widgets/header/index.ts": "export { Header } from './ui/Header';\n",
        "widgets/header/ui/Header.tsx": "import { Button } from 'shared/ui';\nimport { User } from 'entities/user';\n",
        "features/auth/index.ts": "export { Login } from './ui/Login';\n",
        "features/auth/ui/Login.tsx": (
            "import { Button } from 'shared/ui';\n"
            "import type { User } from 'entities/user/model/types';\n"
            "import { useSession } from '../model/session';\n"
        ),
        "entities/user/index.ts": "export type { User } from './model/types';\n",
        "entities/user/model/types.ts": "import { Id } from 'shared/api';\n",
        "shared/ui/index.ts": "export { Button } from './Button';\n",
        "shared/ui/Button.tsx": "import { User } from 'entities/user';\nimport { theme } from '../config/theme';\n",
    }
    for rel, content in files.items():
        path = src / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    # Never discovered
    (tmp_path / "node_modules" / "lib").mkdir(parents=True)
    (tmp_path / "node_modules" / "lib" / "index.js").write_text("import x from 'entities/user/model';\n")
    return tmp_path
