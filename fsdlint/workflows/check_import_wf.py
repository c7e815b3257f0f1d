"""
Check-import workflow: run every enabled policy against one import statement.

Policies are independent; one policy failing unexpectedly is recorded as an
"error" outcome (a diagnostic) and the remaining policies still run.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from fsdlint.components.layers.layer_registry_comp import LayerRegistry, build_layer_registry
from fsdlint.components.policies import layer_hierarchy_comp, public_api_comp, relative_style_comp
from fsdlint.helpers.dto.config_dto import LintConfig, LintSettings, RuleOptions
from fsdlint.helpers.dto.import_dto import ImportStatement
from fsdlint.helpers.dto.lint_dto import ImportCheckResult, PolicyOutcome

logger = logging.getLogger(__name__)

PolicyCheck = Callable[[ImportStatement, LintSettings, RuleOptions, LayerRegistry], PolicyOutcome]

RULE_CHECKS: dict[str, PolicyCheck] = {
    layer_hierarchy_comp.RULE_NAME: layer_hierarchy_comp.check_layer_imports,
    public_api_comp.RULE_NAME: public_api_comp.check_public_api_imports,
    relative_style_comp.RULE_NAME: relative_style_comp.check_relative_imports,
}

RULE_NAMES: tuple[str, ...] = tuple(RULE_CHECKS)


def check_import_statement(
    statement: ImportStatement,
    config: LintConfig,
    registry: LayerRegistry | None = None,
) -> ImportCheckResult:
    """
    Evaluate all enabled rules for a single import statement.

    Args:
        statement: The import to check
        config: Configuration snapshot for the run
        registry: Prebuilt layer registry (built from config when omitted)

    Returns:
        ImportCheckResult with one outcome per enabled rule
    """
    registry = registry or build_layer_registry(config.settings.layers)
    result = ImportCheckResult(statement=statement)

    for rule, check in RULE_CHECKS.items():
        options = config.options_for(rule)
        if not options.enabled:
            continue

        try:
            outcome = check(statement, config.settings, options, registry)
        except Exception as e:
            logger.exception(f"{rule} failed for {statement.location} ({statement.specifier!r})")
            outcome = PolicyOutcome(rule=rule, status="error", reason=f"{rule} failed: {type(e).__name__}: {e}")

        result.outcomes.append(outcome)

    return result
