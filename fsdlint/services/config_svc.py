#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from defaults, YAML files, env vars and CLI overrides
#  - Validates the merged document and builds immutable DTOs
#  - Caches the composed config; reload() re-reads all sources
# ======================================================================

from __future__ import annotations

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from pydantic import ValidationError

from fsdlint.components.layers.layer_registry_comp import validate_layer_config
from fsdlint.helpers.dto.config_dto import LintConfig, LintSettings, RuleOptions
from fsdlint.helpers.exceptions import ConfigError
from fsdlint.services.config_types import DEFAULT_EXTENSIONS, LintConfigModel, normalize_keys

# Looked up in the project root, first match wins
CONFIG_FILENAMES = ("fsdlint.yaml", ".fsdlint.yaml", ".fsdlint.yml")

# Path to an extra YAML file merged over the project file
ENV_CONFIG_PATH = "FSDLINT_CONFIG"

# Environment overrides: variable -> (config key, is comma-separated list)
ENV_OVERRIDES: dict[str, tuple[str, bool]] = {
    "FSDLINT_ALIAS": ("alias", False),
    "FSDLINT_IGNORE_IMPORTS": ("ignore_imports", True),
    "FSDLINT_IGNORE_FILES": ("ignore_files", True),
}


class ConfigService:
    """
    Service for loading and caching the lint configuration.

    Loads config from multiple sources (defaults → YAML → env → overrides),
    validates it, and caches the resulting LintConfig snapshot.
    """

    def __init__(
        self,
        project_root: str | Path | None = None,
        config_path: str | Path | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> None:
        """
        Args:
            project_root: Directory searched for fsdlint.yaml (default: cwd)
            config_path: Explicit config file; must exist when given
            overrides: Highest-priority values (e.g. from CLI flags)
        """
        self._project_root = Path(project_root) if project_root else Path.cwd()
        self._config_path = Path(config_path) if config_path else None
        self._overrides = overrides or {}
        self._config: LintConfig | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> LintConfig:
        """
        Get the composed configuration.

        Raises:
            ConfigError: A config file is unreadable or the result is invalid
        """
        if self._config is None or force_reload:
            self._config = self._build(self._compose())
        return self._config

    def reload(self) -> LintConfig:
        """Force reload configuration from all sources."""
        self._logger.info("[ConfigService] Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def find_config_file(self) -> Path | None:
        """The config file in use: explicit path, else the first CONFIG_FILENAMES hit."""
        if self._config_path is not None:
            return self._config_path
        for name in CONFIG_FILENAMES:
            candidate = self._project_root / name
            if candidate.is_file():
                return candidate
        return None

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) Project config file (or explicit --config path)
          3) $FSDLINT_CONFIG (if set)
          4) Overrides passed in (CLI flags)
          5) Environment variables (FSDLINT_*)
        """
        cfg = self._default_config()

        config_file = self.find_config_file()
        if self._config_path is not None and not self._config_path.is_file():
            raise ConfigError(f"Config file not found: {self._config_path}")
        if config_file is not None:
            self._deep_merge(cfg, self._load_yaml(config_file))

        env_path = os.getenv(ENV_CONFIG_PATH)
        if env_path:
            self._deep_merge(cfg, self._load_yaml(Path(env_path)))

        if self._overrides:
            self._deep_merge(cfg, normalize_keys(self._overrides))

        self._apply_env_overrides(cfg)

        self._logger.debug("[ConfigService] compose() loaded config; keys: %s", list(cfg.keys()))
        return cfg

    def _default_config(self) -> dict[str, Any]:
        """Base defaults: canonical layer names, no alias, no ignores."""
        return {
            "alias": "",
            "layers": {},
            "ignore_imports": [],
            "ignore_files": [],
            "extensions": list(DEFAULT_EXTENSIONS),
            "exclude": [],
            "rules": {},
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """
        Load a YAML mapping; returns {} for a missing or empty file.

        Raises:
            ConfigError: File is unreadable, not YAML, or not a mapping
        """
        if not path.is_file():
            self._logger.warning("[ConfigService] Config file not found: %s", path)
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot load {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping at the top level")

        self._logger.info("[ConfigService] Loaded %s", path)
        return normalize_keys(data)

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides for the run-level settings.

        Supported formats:
          FSDLINT_ALIAS=@
          FSDLINT_IGNORE_IMPORTS=app/**,**/*.stories.tsx
          FSDLINT_IGNORE_FILES=**/legacy/**
        """
        for env_key, (cfg_key, is_list) in ENV_OVERRIDES.items():
            value = os.getenv(env_key)
            if value is None:
                continue
            if is_list:
                cfg[cfg_key] = [item.strip() for item in value.split(",") if item.strip()]
            else:
                cfg[cfg_key] = value.strip()
            self._logger.debug("[ConfigService] %s overridden by %s", cfg_key, env_key)

    def _build(self, cfg: dict[str, Any]) -> LintConfig:
        """Validate the merged document and convert it to DTOs."""
        try:
            model = LintConfigModel.model_validate(cfg)
        except ValidationError as e:
            raise ConfigError(f"Invalid fsdlint configuration:\n{e}") from e

        validate_layer_config(model.layers)

        settings = LintSettings(
            alias=model.alias,
            layers=MappingProxyType(dict(model.layers)),
            ignore_imports=tuple(model.ignore_imports),
            ignore_files=tuple(model.ignore_files),
        )
        rules = {
            name: RuleOptions(
                enabled=opts.enabled,
                ignore_imports_pattern=tuple(opts.ignore_imports_pattern),
                ignore_files_pattern=tuple(opts.ignore_files_pattern),
                test_file_patterns=tuple(opts.test_file_patterns),
            )
            for name, opts in model.rules.items()
        }
        config_file = self.find_config_file()
        return LintConfig(
            settings=settings,
            rules=MappingProxyType(rules),
            extensions=tuple(model.extensions),
            exclude=tuple(model.exclude),
            source=str(config_file) if config_file else None,
        )
