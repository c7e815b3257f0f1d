"""
Ignore-pattern exemptions shared by every policy.

Run-level patterns (settings) and call-level patterns (rule options) are
concatenated; a single match on either the import path or the importing
file exempts the statement from the rule.
"""

from __future__ import annotations

from fsdlint.helpers.dto.config_dto import LintSettings, RuleOptions
from fsdlint.helpers.glob_helper import matches_any


def is_exempt(
    file_path: str | None,
    import_path: str,
    settings: LintSettings,
    options: RuleOptions,
) -> bool:
    """
    Check whether a statement is exempted by an ignore pattern.

    Args:
        file_path: src-relative path of the importing file (None if unknown)
        import_path: Import specifier with the alias already stripped
        settings: Run-level settings (ignore_imports, ignore_files)
        options: Rule options (ignore_imports_pattern, ignore_files_pattern)
    """
    import_patterns = [*settings.ignore_imports, *options.ignore_imports_pattern]
    file_patterns = [*settings.ignore_files, *options.ignore_files_pattern]

    return matches_any(import_path, import_patterns) or matches_any(file_path, file_patterns)
