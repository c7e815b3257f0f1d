"""Architecture and code quality tests.

These tests enforce the package's own layering through static analysis.
They should be fast, deterministic, and safe to run on every commit.

Architecture rules enforced:
1. Helpers must not import upward layers
2. Components must not import workflows, services or interfaces
3. Workflows must not import services or interfaces
4. Services must not import interfaces
5. Policy components must not import each other (only the shared exemption check)
6. Rich is only imported by the CLI, PyYAML and pydantic only by the services
"""

import re
from collections.abc import Generator
from pathlib import Path

import pytest

# Get project root
PROJECT_ROOT = Path(__file__).parent.parent
FSDLINT_DIR = PROJECT_ROOT / "fsdlint"


def find_python_files(directory: Path, exclude_dirs: set[str] | None = None) -> Generator[Path, None, None]:
    """Find all Python files in a directory, excluding specified subdirectories.

    Args:
        directory: Directory to search
        exclude_dirs: Set of directory names to exclude (e.g., {"__pycache__"})

    Yields:
        Path objects for Python files

    """
    exclude_dirs = exclude_dirs or {"__pycache__", ".pytest_cache"}

    for path in directory.rglob("*.py"):
        # Skip if any parent directory is in exclude list
        if any(part in exclude_dirs for part in path.parts):
            continue
        yield path


def find_import_violations(file_path: Path, forbidden_imports: list[str]) -> list[tuple[int, str]]:
    """Find lines that import forbidden modules.

    Args:
        file_path: Path to Python file
        forbidden_imports: Module prefixes to forbid (e.g., ["fsdlint.services", "rich"])

    Returns:
        List of (line_number, line_content) tuples for violations

    """
    violations = []

    with open(file_path, encoding="utf-8") as f:
        for line_num, line in enumerate(f, start=1):
            stripped = line.strip()

            # Skip comments and empty lines
            if not stripped or stripped.startswith("#"):
                continue

            for forbidden in forbidden_imports:
                # Match "import fsdlint.services" or "from fsdlint.services"
                if re.match(rf"^(import|from)\s+{re.escape(forbidden)}\b", stripped):
                    violations.append((line_num, line.rstrip()))
                # Also catch "from fsdlint import services"
                elif stripped.startswith("from fsdlint import") and forbidden.startswith("fsdlint."):
                    imported = [part.strip().split()[0] for part in stripped.split("import", 1)[1].split(",")]
                    if forbidden == f"fsdlint.{imported[0]}" or any(forbidden == f"fsdlint.{i}" for i in imported):
                        violations.append((line_num, line.rstrip()))

    return violations


def _collect(directory: Path, forbidden_imports: list[str], skip: set[Path] | None = None) -> list[str]:
    violations = []
    for py_file in find_python_files(directory):
        if skip and py_file in skip:
            continue
        for line_num, line in find_import_violations(py_file, forbidden_imports):
            rel_path = py_file.relative_to(PROJECT_ROOT)
            violations.append(f"  {rel_path}:{line_num}: {line}")
    return violations


@pytest.mark.code_smell
def test_helpers_do_not_import_upwards():
    """Test 1: Helpers are pure utilities and DTOs.

    They may only depend on the standard library and other helpers.
    """
    violations = _collect(
        FSDLINT_DIR / "helpers",
        ["fsdlint.components", "fsdlint.workflows", "fsdlint.services", "fsdlint.interfaces"],
    )
    if violations:
        pytest.fail("Found helpers importing upward layers.\n\nViolations:\n" + "\n".join(violations))


@pytest.mark.code_smell
def test_components_do_not_import_orchestration():
    """Test 2: Components receive settings as parameters.

    They must not know about workflows, services or the CLI.
    """
    violations = _collect(
        FSDLINT_DIR / "components",
        ["fsdlint.workflows", "fsdlint.services", "fsdlint.interfaces"],
    )
    if violations:
        pytest.fail(
            "Found components importing workflows/services/interfaces.\n"
            "Pass configuration in as DTOs instead.\n\n"
            "Violations:\n" + "\n".join(violations)
        )


@pytest.mark.code_smell
def test_workflows_do_not_import_services_or_interfaces():
    """Test 3: Workflows take the configuration snapshot as a parameter.

    This keeps them usable from tests and from any host without a config file.
    """
    violations = _collect(FSDLINT_DIR / "workflows", ["fsdlint.services", "fsdlint.interfaces"])
    if violations:
        pytest.fail(
            "Found workflows importing services or interfaces.\n"
            "Use dependency injection instead (pass LintConfig as a parameter).\n\n"
            "Violations:\n" + "\n".join(violations)
        )


@pytest.mark.code_smell
def test_services_do_not_import_interfaces():
    """Test 4: Services are called BY interfaces, not the other way round."""
    violations = _collect(FSDLINT_DIR / "services", ["fsdlint.interfaces"])
    if violations:
        pytest.fail("Found services importing interfaces.\n\nViolations:\n" + "\n".join(violations))


@pytest.mark.code_smell
def test_policies_are_independent():
    """Test 5: Each boundary policy stands alone.

    Policies may share the exemption check, but must not call each other.
    """
    policies_dir = FSDLINT_DIR / "components" / "policies"
    policy_modules = [
        f"fsdlint.components.policies.{p.stem}"
        for p in policies_dir.glob("*_comp.py")
        if p.stem != "exemption_comp"
    ]

    violations = []
    for py_file in policies_dir.glob("*_comp.py"):
        own_module = f"fsdlint.components.policies.{py_file.stem}"
        forbidden = [m for m in policy_modules if m != own_module]
        for line_num, line in find_import_violations(py_file, forbidden):
            violations.append(f"  {py_file.relative_to(PROJECT_ROOT)}:{line_num}: {line}")

    if violations:
        pytest.fail("Found policies importing other policies.\n\nViolations:\n" + "\n".join(violations))


@pytest.mark.code_smell
def test_third_party_libraries_stay_in_their_layer():
    """Test 6: Rich is presentation, PyYAML and pydantic are configuration loading."""
    cli_dir = FSDLINT_DIR / "interfaces" / "cli"
    services_dir = FSDLINT_DIR / "services"

    violations = []
    for py_file in find_python_files(FSDLINT_DIR):
        forbidden = []
        if cli_dir not in py_file.parents:
            forbidden.append("rich")
        if services_dir not in py_file.parents:
            forbidden.extend(["yaml", "pydantic"])
        for line_num, line in find_import_violations(py_file, forbidden):
            violations.append(f"  {py_file.relative_to(PROJECT_ROOT)}:{line_num}: {line}")

    if violations:
        pytest.fail(
            "Found third-party imports outside their layer.\n"
            "  - rich: fsdlint/interfaces/cli only\n"
            "  - yaml, pydantic: fsdlint/services only\n\n"
            "Violations:\n" + "\n".join(violations)
        )


def test_module_suffixes_match_layers():
    """Sanity check: modules carry their layer suffix (used for log role tags)."""
    expected = {
        "components": "_comp",
        "workflows": "_wf",
        "interfaces/cli/commands": "_cli",
    }
    for rel_dir, suffix in expected.items():
        for py_file in (FSDLINT_DIR / rel_dir).rglob("*.py"):
            if py_file.name == "__init__.py":
                continue
            assert py_file.stem.endswith(suffix), f"{py_file.relative_to(PROJECT_ROOT)} should end with {suffix}"
