"""Source scanning components (file discovery and import extraction)."""

from fsdlint.components.sources.import_extraction_comp import extract_import_statements
from fsdlint.components.sources.source_discovery_comp import discover_source_files, is_source_file

__all__ = [
    "discover_source_files",
    "extract_import_statements",
    "is_source_file",
]
