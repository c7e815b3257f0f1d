"""Version information for fsdlint."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to rule semantics or configuration keys
# MINOR: New rules or options, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.1.0 - Initial release
