"""
Boundary policy components.

Each policy is independent: it receives one import statement plus the run
settings and its own rule options, and returns a PolicyOutcome.
"""

from fsdlint.components.policies.exemption_comp import is_exempt
from fsdlint.components.policies.layer_hierarchy_comp import check_layer_imports
from fsdlint.components.policies.public_api_comp import check_public_api_imports
from fsdlint.components.policies.relative_style_comp import check_relative_imports

__all__ = [
    "check_layer_imports",
    "check_public_api_imports",
    "check_relative_imports",
    "is_exempt",
]
