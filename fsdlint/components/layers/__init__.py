"""Layer naming and hierarchy components."""

from fsdlint.components.layers.layer_registry_comp import (
    CROSS_ENTITIES_FOLDER,
    DEFAULT_LAYERS,
    DEFAULT_RULES,
    LAYER_ROLES,
    TESTING_PUBLIC_API,
    LayerRegistry,
    build_layer_registry,
    get_layers,
    get_rules,
    validate_layer_config,
)

__all__ = [
    "CROSS_ENTITIES_FOLDER",
    "DEFAULT_LAYERS",
    "DEFAULT_RULES",
    "LAYER_ROLES",
    "TESTING_PUBLIC_API",
    "LayerRegistry",
    "build_layer_registry",
    "get_layers",
    "get_rules",
    "validate_layer_config",
]
