"""
Public API policy (rule: public-api-imports).

Absolute imports into a slice of pages, widgets, features or entities must
stop at the slice's public API (`<layer>/<slice>`). app and shared have no
public API boundary.

Exceptions:
- entities/<target>/@x/<consumer> between two entities
- <layer>/<slice>/testing, only from files matching test_file_patterns
"""

from __future__ import annotations

from fsdlint.components.layers.layer_registry_comp import (
    CROSS_ENTITIES_FOLDER,
    TESTING_PUBLIC_API,
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
from fsdlint.helpers.dto.import_dto import ImportStatement
from fsdlint.helpers.dto.lint_dto import PolicyOutcome
from fsdlint.helpers.dto.violation_dto import Violation
from fsdlint.helpers.glob_helper import matches_any

RULE_NAME = "public-api-imports"

# layer/slice
PUBLIC_API_MAX_DEPTH = 2


def check_public_api_imports(
    statement: ImportStatement,
    settings: LintSettings,
    options: RuleOptions,
    registry: LayerRegistry | None = None,
) -> PolicyOutcome:
    """Evaluate the public API boundary for one import statement."""
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

    if not registry.is_structured(target.layer):
        return PolicyOutcome.not_applicable(RULE_NAME, "import does not target a sliced layer")
    if not registry.is_layer(origin.layer):
        return PolicyOutcome.not_applicable(RULE_NAME, "file is not in an architectural layer")

    entities = registry.display("entities")
    is_cross_entities_import = (
        target.layer == entities
        and origin.layer == entities
        and target.segment(2) == CROSS_ENTITIES_FOLDER
        and target.depth == 4
    )
    is_public_import = target.depth <= PUBLIC_API_MAX_DEPTH
    is_testing_public_api = target.segment(2) == TESTING_PUBLIC_API and target.depth < 4

    violations: list[Violation] = []

    if not (is_public_import or is_testing_public_api or is_cross_entities_import):
        violations.append(Violation(kind="notPublicApiImport", rule=RULE_NAME, statement=statement))

    if is_testing_public_api:
        full_path = normalize_file_path(statement.file_path, include_full=True)
        if not matches_any(full_path, options.test_file_patterns):
            violations.append(Violation(kind="notTestingPublicApiImport", rule=RULE_NAME, statement=statement))

    return PolicyOutcome.from_violations(RULE_NAME, violations)
