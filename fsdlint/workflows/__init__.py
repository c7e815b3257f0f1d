"""
Workflows package.

Use cases built from components: check one import statement, one file, or
a whole project. Workflows take their configuration as parameters and
never import services or interfaces.
"""

from fsdlint.workflows.check_file_wf import check_file, check_source
from fsdlint.workflows.check_import_wf import RULE_NAMES, check_import_statement
from fsdlint.workflows.check_project_wf import check_project

__all__ = [
    "RULE_NAMES",
    "check_file",
    "check_import_statement",
    "check_project",
    "check_source",
]
