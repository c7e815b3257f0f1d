"""
fsdlint - import boundary checker for Feature-Sliced Design codebases.
"""

from fsdlint.__version__ import __version__

__all__ = ["__version__"]
