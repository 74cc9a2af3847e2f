"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for the Language Mapping Table (LMT)
- errors: Conversion errors (all fatal)
- lmt: Node classification, group resolution and LMT assembly
"""

from domain.errors import LmtConversionError
from domain.schemas import Group, GroupMember, Lmt, LmtMapping, Term

__all__ = [
    "Lmt",
    "LmtMapping",
    "Term",
    "Group",
    "GroupMember",
    "LmtConversionError",
]
