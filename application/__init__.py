"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the Mesa XML -> LMT conversion workflow.
"""

from application.conversion import convert_file, convert_tree, summarize_lmt
from application.serialize import lmt_to_dict, serialize_lmt

__all__ = [
    # Main workflows
    "convert_file",
    "convert_tree",
    # Output
    "serialize_lmt",
    "lmt_to_dict",
    "summarize_lmt",
]
