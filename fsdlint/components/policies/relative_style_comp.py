"""
Relative import style policy (rule: relative-imports).

- Inside one slice, imports must be relative: an absolute import of the
  importer's own layer/slice is reported as shouldBeRelativePath.
- Relative imports must stay inside the slice (or, for the flat layers
  shared and app, inside the layer): anything else is reported as
  crossSliceRelativeImport.
"""

from __future__ import annotations

from fsdlint.components.layers.layer_registry_comp import LayerRegistry, build_layer_registry
from fsdlint.components.policies.exemption_comp import is_exempt
from fsdlint.components.resolution.path_resolver_comp import (
    extract_identity,
    is_relative,
    normalize_file_path,
    strip_alias,
)
from fsdlint.components.resolution.relative_path_comp import resolve_relative_import
from fsdlint.helpers.dto.config_dto import LintSettings, RuleOptions
from fsdlint.helpers.dto.import_dto import ImportStatement
from fsdlint.helpers.dto.lint_dto import PolicyOutcome
from fsdlint.helpers.dto.violation_dto import Violation

RULE_NAME = "relative-imports"


def _check_relative(
    statement: ImportStatement,
    file_path: str,
    import_path: str,
    registry: LayerRegistry,
) -> PolicyOutcome:
    segments = file_path.split("/")
    origin = extract_identity(file_path)
    if not registry.is_layer(origin.layer):
        return PolicyOutcome.not_applicable(RULE_NAME, "file is not in an architectural layer")

    destination = resolve_relative_import(file_path, import_path, registry)
    if not registry.is_layer(destination.layer):
        return PolicyOutcome.not_applicable(RULE_NAME, "import resolves outside the architectural layers")

    if destination.layer != origin.layer:
        crosses = True
    elif registry.is_flat(origin.layer):
        crosses = False
    else:
        # A file directly inside the layer folder (entities/index.ts) belongs to no slice
        origin_slice = origin.slice if len(segments) > 2 else None
        crosses = origin_slice is not None and destination.slice != origin_slice

    if crosses:
        return PolicyOutcome.from_violations(
            RULE_NAME,
            [Violation(kind="crossSliceRelativeImport", rule=RULE_NAME, statement=statement)],
        )
    return PolicyOutcome.ok(RULE_NAME)


def _check_absolute(
    statement: ImportStatement,
    file_path: str,
    import_path: str,
    registry: LayerRegistry,
) -> PolicyOutcome:
    target = extract_identity(import_path)
    origin = extract_identity(file_path)

    has_identity = (
        target.slice is not None
        and origin.slice is not None
        and registry.is_layer(target.layer)
        and registry.is_layer(origin.layer)
    )
    if not has_identity:
        return PolicyOutcome.not_applicable(RULE_NAME, "layer or slice could not be determined")

    if target.layer == origin.layer and target.slice == origin.slice:
        return PolicyOutcome.from_violations(
            RULE_NAME,
            [Violation(kind="shouldBeRelativePath", rule=RULE_NAME, statement=statement)],
        )
    return PolicyOutcome.ok(RULE_NAME)


def check_relative_imports(
    statement: ImportStatement,
    settings: LintSettings,
    options: RuleOptions,
    registry: LayerRegistry | None = None,
) -> PolicyOutcome:
    """Evaluate relative/absolute import style for one import statement."""
    registry = registry or build_layer_registry(settings.layers)
    import_path = strip_alias(statement.specifier, settings.alias)

    file_path = normalize_file_path(statement.file_path)
    if not import_path or file_path is None:
        return PolicyOutcome.not_applicable(RULE_NAME, "file is outside the source root")

    if is_exempt(file_path, import_path, settings, options):
        return PolicyOutcome.ignored(RULE_NAME)

    if is_relative(import_path):
        return _check_relative(statement, file_path, import_path, registry)
    return _check_absolute(statement, file_path, import_path, registry)
