"""Config file schema - Pydantic models for fsdlint.yaml.

The YAML document is validated here and then converted to the immutable
DTOs in helpers/dto/config_dto.py. Workflows and components only ever see
the DTOs.

Both snake_case keys and the camelCase option names used by the ESLint
flavour of these rules (ignoreImportsPattern, testFilePatterns, ...) are
accepted.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fsdlint.workflows.check_import_wf import RULE_NAMES

DEFAULT_EXTENSIONS = [".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs"]


class RuleOptionsModel(BaseModel):
    """Options of a single rule under `rules:`."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    enabled: bool = Field(True, description="Run this rule")
    ignore_imports_pattern: list[str] = Field(default_factory=list, alias="ignoreImportsPattern")
    ignore_files_pattern: list[str] = Field(default_factory=list, alias="ignoreFilesPattern")
    test_file_patterns: list[str] = Field(default_factory=list, alias="testFilePatterns")


class LintConfigModel(BaseModel):
    """Top-level config document."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    alias: str = Field("", description="Import alias, '@' strips '@/' from specifiers")
    layers: dict[str, str] = Field(default_factory=dict, description="Canonical layer -> custom folder name")
    ignore_imports: list[str] = Field(default_factory=list, alias="ignoreImports")
    ignore_files: list[str] = Field(default_factory=list, alias="ignoreFiles")
    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude: list[str] = Field(default_factory=list, description="Glob patterns of files not to lint")
    rules: dict[str, RuleOptionsModel] = Field(default_factory=dict)

    @field_validator("alias")
    @classmethod
    def _strip_alias_slash(cls, value: str) -> str:
        # "@/" and "@" mean the same alias
        return value.strip().rstrip("/")

    @field_validator("extensions")
    @classmethod
    def _dotted_extensions(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("extensions must not be empty")
        return [ext if ext.startswith(".") else f".{ext}" for ext in value]

    @field_validator("rules", mode="before")
    @classmethod
    def _rules_shorthand(cls, value: Any) -> Any:
        # `layer-imports: false` is shorthand for `layer-imports: {enabled: false}`
        if not isinstance(value, dict):
            return value
        return {name: {"enabled": opts} if isinstance(opts, bool) else opts for name, opts in value.items()}

    @field_validator("rules")
    @classmethod
    def _known_rules(cls, value: dict[str, RuleOptionsModel]) -> dict[str, RuleOptionsModel]:
        unknown = sorted(set(value) - set(RULE_NAMES))
        if unknown:
            raise ValueError(f"unknown rule(s): {', '.join(unknown)} (known: {', '.join(RULE_NAMES)})")
        return value


_TOP_LEVEL_ALIASES = {"ignoreImports": "ignore_imports", "ignoreFiles": "ignore_files"}
_RULE_ALIASES = {
    "ignoreImportsPattern": "ignore_imports_pattern",
    "ignoreFilesPattern": "ignore_files_pattern",
    "testFilePatterns": "test_file_patterns",
}


def normalize_keys(data: dict[str, Any]) -> dict[str, Any]:
    """
    Rewrite camelCase keys to their snake_case field names.

    Config sources are deep-merged before validation, so one spelling per
    key is required for a later source to override an earlier one.
    """
    result = {_TOP_LEVEL_ALIASES.get(key, key): value for key, value in data.items()}
    rules = result.get("rules")
    if isinstance(rules, dict):
        result["rules"] = {
            name: {_RULE_ALIASES.get(key, key): value for key, value in opts.items()} if isinstance(opts, dict) else opts
            for name, opts in rules.items()
        }
    return result
