"""
Path resolver: turns file paths and import specifiers into layer/slice identities.

All layer/slice extraction is anchored at the project's source root, the
first path segment literally named `src`. Paths without one cannot be
placed in the architecture and resolve to None / an empty identity.
"""

from __future__ import annotations

from fsdlint.helpers.dto.identity_dto import EMPTY_IDENTITY, ModuleIdentity

SOURCE_ROOT = "src"


def normalize_file_path(raw: str | None, include_full: bool = False) -> str | None:
    """
    Normalize a platform path to forward slashes and anchor it at `src`.

    Args:
        raw: File path as given by the host (may use backslashes)
        include_full: Return the whole normalized path instead of the src suffix

    Returns:
        The path after the first `src` segment ("entities/user/ui/Form"),
        the full normalized path when include_full is set, or None when the
        input is empty or has no `src` segment.

    Example:
        >>> normalize_file_path("/home/dev/project/src/entities/user/ui/Form.tsx")
        'entities/user/ui/Form.tsx'
    """
    if not raw:
        return None

    normalized = raw.replace("\\", "/")
    if include_full:
        return normalized

    parts = normalized.split("/")
    if SOURCE_ROOT not in parts:
        return None
    return "/".join(parts[parts.index(SOURCE_ROOT) + 1 :])


def strip_alias(specifier: str, alias: str | None) -> str:
    """
    Remove the configured alias prefix from an import specifier.

    An alias "@" strips "@/"; specifiers not starting with it are returned unchanged.
    """
    if not alias:
        return specifier
    prefix = f"{alias}/"
    if specifier.startswith(prefix):
        return specifier[len(prefix) :]
    return specifier


def is_relative(specifier: str) -> bool:
    """True for ".", "./x" and "../x" specifiers."""
    return specifier == "." or specifier.startswith("./") or specifier.startswith("../")


def split_segments(path: str | None) -> tuple[str, ...]:
    """Non-empty "/" segments of a path; () for None."""
    if not path:
        return ()
    return tuple(segment for segment in path.split("/") if segment)


def extract_identity(path: str | None) -> ModuleIdentity:
    """
    Extract (layer, slice, ...segments) from a src-relative path or import path.

    Never raises: None, empty paths and paths too short for a slice simply
    leave the missing parts as None.
    """
    segments = split_segments(path)
    if not segments:
        return EMPTY_IDENTITY
    return ModuleIdentity(
        layer=segments[0],
        slice=segments[1] if len(segments) > 1 else None,
        segments=segments,
    )
