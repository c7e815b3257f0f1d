"""
Layer hierarchy policy (rule: layer-imports).

A file may only import from the layers its own layer is allowed to depend
on. Imports between two entities are further restricted to the explicit
cross-entity folder: entities/<target>/@x/<own slice>.
"""

from __future__ import annotations

from fsdlint.components.layers.layer_registry_comp import (
    CROSS_ENTITIES_FOLDER,
    LayerRegistry,
    build_layer_registry,
)
from fsdlint.components.policies.exemption_comp import is_exempt
from fsdlint.components.resolution.path_resolver_comp import (
    extract_identity,
    is_relative,
    normalize_file_path,
    strip_alias,
)
from fsdlint.helpers.dto.config_dto import LintSettings, RuleOptions
from fsdlint.helpers.dto.identity_dto import ModuleIdentity
from fsdlint.helpers.dto.import_dto import ImportStatement
from fsdlint.helpers.dto.lint_dto import PolicyOutcome
from fsdlint.helpers.dto.violation_dto import Violation

RULE_NAME = "layer-imports"


def is_valid_cross_entity_import(target: ModuleIdentity, own_slice: str | None) -> bool:
    """
    True for entities/<target>/@x/<own_slice>[/...] import paths.

    Deeper paths below the consumer folder are accepted here; the public API
    policy decides whether they are too deep.
    """
    return (
        target.depth >= 4
        and target.segment(2) == CROSS_ENTITIES_FOLDER
        and own_slice is not None
        and target.segment(3) == own_slice
    )


def check_layer_imports(
    statement: ImportStatement,
    settings: LintSettings,
    options: RuleOptions,
    registry: LayerRegistry | None = None,
) -> PolicyOutcome:
    """
    Evaluate the layer hierarchy for one import statement.

    Returns:
        PolicyOutcome with incorrectEntityImports and/or incorrectLayerImport
        violations. Both can fire for the same statement.
    """
    registry = registry or build_layer_registry(settings.layers)
    import_path = strip_alias(statement.specifier, settings.alias)

    if is_relative(import_path):
        return PolicyOutcome.not_applicable(RULE_NAME, "relative import")

    file_path = normalize_file_path(statement.file_path)
    if file_path is None:
        return PolicyOutcome.not_applicable(RULE_NAME, "file is outside the source root")

    if is_exempt(file_path, import_path, settings, options):
        return PolicyOutcome.ignored(RULE_NAME)

    target = extract_identity(import_path)
    origin = extract_identity(file_path)

    if not registry.is_layer(target.layer) or not registry.is_layer(origin.layer):
        return PolicyOutcome.not_applicable(RULE_NAME, "import or file is not in an architectural layer")

    # is_layer() guarantees both layers are set
    import_layer = target.layer or ""
    file_layer = origin.layer or ""

    violations: list[Violation] = []
    entities = registry.display("entities")

    if import_layer == entities and file_layer == entities:
        if not is_valid_cross_entity_import(target, origin.slice):
            violations.append(
                Violation(
                    kind="incorrectEntityImports",
                    rule=RULE_NAME,
                    statement=statement,
                    data={
                        "entitiesLayer": entities,
                        "fromEntity": target.slice or "<slice>",
                        "toEntity": origin.slice or "<slice>",
                    },
                )
            )

    if not registry.allows(file_layer, import_layer):
        violations.append(
            Violation(
                kind="incorrectLayerImport",
                rule=RULE_NAME,
                statement=statement,
                data={"importLayer": import_layer, "fileLayer": file_layer},
            )
        )

    return PolicyOutcome.from_violations(RULE_NAME, violations)
