"""
Relative path simulator.

Computes where a relative import lands, as a layer/slice identity, by
replaying the specifier's segments over the importing file's directory.
Nothing is looked up on disk.
"""

from __future__ import annotations

import logging

from fsdlint.components.layers.layer_registry_comp import LayerRegistry
from fsdlint.components.resolution.path_resolver_comp import extract_identity, split_segments
from fsdlint.helpers.dto.identity_dto import ModuleIdentity

logger = logging.getLogger(__name__)


def replay_segments(base: list[str] | tuple[str, ...], specifier: str) -> list[str]:
    """
    Apply a relative specifier to a directory stack.

    `..` pops one segment (no-op on an empty stack), `.` and empty segments
    are skipped, anything else is pushed.

    Example:
        >>> replay_segments(["entities", "user", "ui"], "../model/Type")
        ['entities', 'user', 'model', 'Type']
    """
    stack = list(base)
    for segment in specifier.split("/"):
        if segment == "..":
            if stack:
                stack.pop()
        elif segment and segment != ".":
            stack.append(segment)
    return stack


def resolve_relative_import(file_path: str, specifier: str, registry: LayerRegistry) -> ModuleIdentity:
    """
    Resolve the layer/slice a relative import points at.

    Args:
        file_path: src-relative path of the importing file ("shared/ui/Button")
        specifier: Relative import specifier ("../config/theme")
        registry: Layer naming for the current configuration

    Returns:
        Identity of the destination.

    Flat layers (shared, app) often climb out of their own folder without
    naming the layer again. Inside those layers:
    - a stack emptied by `..` is re-seeded with the origin layer
    - a stack not starting with a known layer gets the origin layer prepended
    """
    file_segments = split_segments(file_path)
    origin_layer = file_segments[0] if file_segments else None

    stack = replay_segments(file_segments[:-1], specifier)

    if origin_layer is not None and registry.is_flat(origin_layer):
        if not stack:
            stack = [origin_layer]
        elif not registry.is_layer(stack[0]):
            stack.insert(0, origin_layer)

    destination = extract_identity("/".join(stack))
    logger.debug("[RelativePath] %s + %s -> %s", file_path, specifier, destination)
    return destination
