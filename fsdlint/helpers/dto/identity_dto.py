"""
Module identity DTOs.

A module identity is the (layer, slice, ...rest) address of a path inside
the source root, e.g. ``entities/user/model/types`` → layer ``entities``,
slice ``user``.

Rules:
- Import only stdlib and typing (no fsdlint.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ModuleIdentity:
    """
    Layer/slice address of a module path.

    Attributes:
        layer: First path segment, None when the path is empty
        slice: Second path segment, None when the path has fewer than two segments
        segments: Every non-empty path segment, in order
    """

    layer: str | None
    slice: str | None
    segments: tuple[str, ...] = ()

    @property
    def depth(self) -> int:
        """Number of path segments."""
        return len(self.segments)

    def segment(self, index: int) -> str | None:
        """Segment at index, or None when the path is shorter."""
        if index < len(self.segments):
            return self.segments[index]
        return None

    def __str__(self) -> str:
        return "/".join(self.segments)


EMPTY_IDENTITY = ModuleIdentity(layer=None, slice=None, segments=())
