"""
Mesa XML -> LMT conversion core.

All functions in this module are pure (no file I/O, no logging).
The input is the already-parsed object tree; see infrastructure.io.xml_tree.
"""

from domain.lmt.assembler import collect_groups, collect_terms, find_term_nodes, to_lmt
from domain.lmt.classifier import Classification, NodeKind, classify_node
from domain.lmt.labels import CONVERTER_NAME, NoteLabel
from domain.lmt.layout import DEFAULT_LAYOUT, SourceLayout
from domain.lmt.mapping import MappingBuilder
from domain.lmt.members import resolve_group

__all__ = [
    "CONVERTER_NAME",
    "to_lmt",
    "collect_terms",
    "collect_groups",
    "find_term_nodes",
    "classify_node",
    "resolve_group",
    "Classification",
    "NodeKind",
    "NoteLabel",
    "MappingBuilder",
    "SourceLayout",
    "DEFAULT_LAYOUT",
]
