"""Path resolution components."""

from fsdlint.components.resolution.path_resolver_comp import (
    extract_identity,
    is_relative,
    normalize_file_path,
    split_segments,
    strip_alias,
)
from fsdlint.components.resolution.relative_path_comp import replay_segments, resolve_relative_import

__all__ = [
    "extract_identity",
    "is_relative",
    "normalize_file_path",
    "replay_segments",
    "resolve_relative_import",
    "split_segments",
    "strip_alias",
]
