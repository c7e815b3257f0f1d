"""Unit tests for the layer registry component."""

from __future__ import annotations

import pytest

from fsdlint.components.layers.layer_registry_comp import (
    DEFAULT_LAYERS,
    DEFAULT_RULES,
    LAYER_ROLES,
    build_layer_registry,
    get_layers,
    get_rules,
    validate_layer_config,
)
from fsdlint.helpers.exceptions import LayerConfigError


class TestGetLayers:
    """Tests for get_layers()."""

    @pytest.mark.unit
    def test_defaults_without_config(self) -> None:
        assert get_layers() == dict(DEFAULT_LAYERS)
        assert get_layers({}, value_only=True) == {role: role for role in LAYER_ROLES}

    @pytest.mark.unit
    def test_renamed_layer_display_keys(self) -> None:
        layers = get_layers({"entities": "domain"})
        assert "domain" in layers
        assert "entities" not in layers
        assert layers["shared"] == "shared"

    @pytest.mark.unit
    def test_renamed_layer_value_only(self) -> None:
        layers = get_layers({"entities": "domain"}, value_only=True)
        assert layers["entities"] == "domain"
        assert set(layers) == set(LAYER_ROLES)

    @pytest.mark.unit
    def test_returns_new_mapping(self) -> None:
        layers = get_layers()
        layers["app"] = "mutated"
        assert get_layers()["app"] == "app"


class TestGetRules:
    """Tests for get_rules()."""

    @pytest.mark.unit
    def test_empty_config_equals_defaults(self) -> None:
        assert get_rules({}) == dict(DEFAULT_RULES)

    @pytest.mark.unit
    def test_keys_and_members_renamed(self) -> None:
        rules = get_rules({"entities": "domain", "shared": "lib"})
        assert rules["domain"] == frozenset({"domain", "lib"})
        assert rules["lib"] == frozenset({"lib"})
        assert "domain" in rules["features"]
        assert "entities" not in rules

    @pytest.mark.unit
    def test_renaming_is_idempotent(self) -> None:
        """The same config always derives the same table."""
        config = {"features": "modules", "entities": "domain", "shared": "lib"}
        first = get_rules(config)
        second = get_rules(config)
        assert first == second
        assert first is not second
        assert get_layers(config) == get_layers(config)

    @pytest.mark.unit
    def test_renaming_never_touches_defaults(self) -> None:
        get_rules({"entities": "domain"})
        get_layers({"entities": "domain"})
        assert DEFAULT_RULES["features"] == frozenset({"entities", "shared"})
        assert DEFAULT_LAYERS["entities"] == "entities"

    @pytest.mark.unit
    def test_hierarchy_only_points_downward(self) -> None:
        """Each layer imports only itself-or-below (app and entities/shared may import themselves)."""
        for index, role in enumerate(LAYER_ROLES):
            below = set(LAYER_ROLES[index:])
            assert DEFAULT_RULES[role] <= below


class TestValidateLayerConfig:
    """Tests for validate_layer_config()."""

    @pytest.mark.unit
    def test_valid_rename(self) -> None:
        validate_layer_config({"entities": "domain", "features": "modules"})

    @pytest.mark.unit
    def test_unknown_role(self) -> None:
        with pytest.raises(LayerConfigError, match="services"):
            validate_layer_config({"services": "svc"})

    @pytest.mark.unit
    def test_empty_name(self) -> None:
        with pytest.raises(LayerConfigError):
            validate_layer_config({"entities": "  "})

    @pytest.mark.unit
    def test_nested_name(self) -> None:
        with pytest.raises(LayerConfigError, match="single folder"):
            validate_layer_config({"entities": "core/domain"})

    @pytest.mark.unit
    def test_duplicate_names(self) -> None:
        """Renaming features to 'entities' collides with the untouched entities layer."""
        with pytest.raises(LayerConfigError, match="share the name"):
            validate_layer_config({"features": "entities"})


class TestLayerRegistry:
    """Tests for LayerRegistry lookups."""

    @pytest.mark.unit
    def test_role_of_display_name(self) -> None:
        registry = build_layer_registry({"shared": "shared-layer"})
        assert registry.role_of("shared-layer") == "shared"
        assert registry.role_of("shared") is None
        assert registry.role_of(None) is None

    @pytest.mark.unit
    def test_flat_and_structured(self) -> None:
        registry = build_layer_registry({"app": "application", "entities": "domain"})
        assert registry.is_flat("application")
        assert registry.is_flat("shared")
        assert registry.is_structured("domain")
        assert not registry.is_structured("shared")
        assert not registry.is_flat("i18n")

    @pytest.mark.unit
    def test_allows(self) -> None:
        registry = build_layer_registry()
        assert registry.allows("features", "entities")
        assert not registry.allows("shared", "entities")
        assert not registry.allows("unknown", "shared")

    @pytest.mark.unit
    def test_display(self) -> None:
        assert build_layer_registry({"entities": "domain"}).display("entities") == "domain"
