"""
Assemble the LMT from the parsed source tree.

Two passes over the top-level nodes:
  1. term pass: every usable term, including the relations of group nodes
  2. group pass: every node carrying group notes, with its members

Each pass returns an immutable partial result; the group pass continues the
mapping of the term pass so tags stay unique across both.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from domain.errors import MissingRootElement, NestedGroupNotSupported
from domain.lmt.classifier import classify_node
from domain.lmt.layout import DEFAULT_LAYOUT, SourceLayout
from domain.lmt.mapping import MappingBuilder
from domain.lmt.members import resolve_group
from domain.lmt.nodes import as_list
from domain.schemas import Group, Lmt, LmtMapping, Term


@dataclass(frozen=True)
class TermPass:
    terms: tuple[Term, ...]
    mapping: Mapping[str, str]


@dataclass(frozen=True)
class GroupPass:
    groups: tuple[Group, ...]
    mapping: Mapping[str, str]


def find_term_nodes(document: Any, layout: SourceLayout = DEFAULT_LAYOUT) -> list[Any]:
    """
    Return the top-level term nodes of the document.

    Raises:
        MissingRootElement: If the root element or its term collection is absent
    """
    root = document.get(layout.root_element) if isinstance(document, Mapping) else None
    if root is None:
        raise MissingRootElement(layout.root_element)

    nodes = root.get(layout.term_element) if isinstance(root, Mapping) else None
    if nodes is None:
        raise MissingRootElement(f"{layout.root_element}/{layout.term_element}")
    return as_list(nodes)


def collect_terms(nodes: Sequence[Any], seed: Mapping[str, str] | None = None) -> TermPass:
    """
    Term pass: classify every node; group nodes contribute their relations as terms.

    Raises:
        NestedGroupNotSupported: If a relation of a group is itself a group
        plus every error of classify_node and DuplicateTagMapping
    """
    terms: list[Term] = []
    mapping = MappingBuilder(seed)

    for node in nodes:
        classification = classify_node(node)
        if classification.is_term:
            mapping.register_all(classification.mapping_entries())
            terms.append(classification.term)  # ty: ignore
            continue

        for relation in as_list(node.get("relation")):
            nested = classify_node(relation)
            if nested.is_group:
                raise NestedGroupNotSupported(nested.node_id, classification.node_id)
            mapping.register_all(nested.mapping_entries())
            terms.append(nested.term)  # ty: ignore

    return TermPass(terms=tuple(terms), mapping=mapping.freeze())


def collect_groups(nodes: Sequence[Any], seed: Mapping[str, str] | None = None) -> GroupPass:
    """
    Group pass: resolve every node carrying group notes and register its GroupTag.

    Raises:
        DuplicateTagMapping: If a GroupTag collides with any earlier tag
        plus every error of resolve_group
    """
    groups: list[Group] = []
    mapping = MappingBuilder(seed)

    for node in nodes:
        resolved = resolve_group(node)
        if resolved is None:
            continue
        node_id, group = resolved
        mapping.register(group.group_tag, node_id)
        groups.append(group)

    return GroupPass(groups=tuple(groups), mapping=mapping.freeze())


def to_lmt(document: Any, layout: SourceLayout = DEFAULT_LAYOUT) -> Lmt:
    """
    Convert a parsed Mesa XML document into a Language Mapping Table.

    Args:
        document: Nested object tree ({root_element: {term_element: [node, ...]}})
        layout: Names of the root and term elements

    Returns:
        Fully populated Lmt

    Raises:
        LmtConversionError: On the first invalid node, unknown label or duplicate tag.
            Nothing is returned in that case.
    """
    nodes = find_term_nodes(document, layout)
    term_pass = collect_terms(nodes)
    group_pass = collect_groups(nodes, seed=term_pass.mapping)

    return Lmt(
        terms=list(term_pass.terms),
        groups=list(group_pass.groups),
        mapping=LmtMapping(term=dict(group_pass.mapping)),
    )
