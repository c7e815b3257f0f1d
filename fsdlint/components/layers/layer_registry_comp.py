"""
Layer registry: architectural layer names and the import hierarchy.

The canonical layers and rule table are immutable module constants. Custom
layer names are applied by pure substitution, producing new mappings and
never touching the defaults.

Layer hierarchy (top → bottom):
    app → pages → widgets → features → entities → shared
A layer may import from the layers listed for it in DEFAULT_RULES.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from fsdlint.helpers.exceptions import LayerConfigError

logger = logging.getLogger(__name__)

LAYER_ROLES: tuple[str, ...] = ("app", "pages", "widgets", "features", "entities", "shared")

# Layers without meaningful slices
FLAT_ROLES: frozenset[str] = frozenset({"app", "shared"})

# Layers whose slices expose a public API
STRUCTURED_ROLES: frozenset[str] = frozenset({"pages", "widgets", "features", "entities"})

# Marker folder for explicit cross-entity imports: entities/<target>/@x/<consumer>
CROSS_ENTITIES_FOLDER = "@x"

# Public API folder for test helpers: <layer>/<slice>/testing
TESTING_PUBLIC_API = "testing"

DEFAULT_LAYERS: Mapping[str, str] = MappingProxyType({role: role for role in LAYER_ROLES})

DEFAULT_RULES: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "app": frozenset({"app", "pages", "widgets", "features", "entities", "shared"}),
        "pages": frozenset({"widgets", "features", "entities", "shared"}),
        "widgets": frozenset({"features", "entities", "shared"}),
        "features": frozenset({"entities", "shared"}),
        "entities": frozenset({"entities", "shared"}),
        "shared": frozenset({"shared"}),
    }
)


def get_layers(config: Mapping[str, str] | None = None, value_only: bool = False) -> dict[str, str]:
    """
    Layer names under a rename mapping.

    Args:
        config: Canonical role -> custom name (roles omitted keep their name)
        value_only: If True, keys stay canonical roles (role -> display name).
            If False, keys are display names too (display -> display), usable
            as a "is this a known layer" membership set.

    Returns:
        New dict; the defaults are never returned for mutation.

    Example:
        >>> get_layers({"entities": "domain"})["domain"]
        'domain'
        >>> get_layers({"entities": "domain"}, value_only=True)["entities"]
        'domain'
    """
    config = config or {}
    layers: dict[str, str] = {}
    for role in LAYER_ROLES:
        name = config.get(role) or role
        key = role if value_only else name
        layers[key] = name
    return layers


def get_rules(config: Mapping[str, str] | None = None) -> dict[str, frozenset[str]]:
    """
    Import rule table with keys and allowed layers renamed.

    Example:
        >>> get_rules({"shared": "lib"})["lib"]
        frozenset({'lib'})
    """
    config = config or {}
    return {
        (config.get(role) or role): frozenset((config.get(allowed) or allowed) for allowed in allowed_layers)
        for role, allowed_layers in DEFAULT_RULES.items()
    }


def validate_layer_config(config: Mapping[str, str]) -> None:
    """
    Reject rename mappings that cannot describe a layered project.

    Raises:
        LayerConfigError: Unknown role, empty name, or two roles sharing a name
    """
    unknown = sorted(set(config) - set(LAYER_ROLES))
    if unknown:
        raise LayerConfigError(f"Unknown layer(s) in layers config: {', '.join(unknown)}")

    for role, name in config.items():
        if not isinstance(name, str) or not name.strip():
            raise LayerConfigError(f"Layer '{role}' must be renamed to a non-empty string")
        if "/" in name or "\\" in name:
            raise LayerConfigError(f"Layer name '{name}' must be a single folder name")

    names = get_layers(config, value_only=True)
    seen: dict[str, str] = {}
    for role, name in names.items():
        if name in seen:
            raise LayerConfigError(f"Layers '{seen[name]}' and '{role}' share the name '{name}'")
        seen[name] = role


@dataclass(frozen=True)
class LayerRegistry:
    """
    Resolved layer naming for one configuration.

    Built once per lint run by build_layer_registry() and shared read-only.
    """

    roles: Mapping[str, str]  # canonical role -> display name
    rules: Mapping[str, frozenset[str]]  # display name -> allowed display names

    def display(self, role: str) -> str:
        """Display name of a canonical role."""
        return self.roles[role]

    def role_of(self, name: str | None) -> str | None:
        """Canonical role of a display name, None for unknown folders."""
        if name is None:
            return None
        for role, display in self.roles.items():
            if display == name:
                return role
        return None

    def is_layer(self, name: str | None) -> bool:
        return self.role_of(name) is not None

    def is_flat(self, name: str | None) -> bool:
        """True for the layers without slices (shared, app)."""
        return self.role_of(name) in FLAT_ROLES

    def is_structured(self, name: str | None) -> bool:
        return self.role_of(name) in STRUCTURED_ROLES

    def allows(self, file_layer: str, import_layer: str) -> bool:
        """True if file_layer may import from import_layer."""
        return import_layer in self.rules.get(file_layer, frozenset())


def build_layer_registry(config: Mapping[str, str] | None = None) -> LayerRegistry:
    """Build the registry for a rename mapping (empty mapping = canonical names)."""
    roles = get_layers(config, value_only=True)
    if config:
        logger.debug("[LayerRegistry] Custom layer names: %s", dict(config))
    return LayerRegistry(roles=MappingProxyType(roles), rules=MappingProxyType(get_rules(config)))
