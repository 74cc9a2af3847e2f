"""Resolve language groups and their members."""

from typing import Any

from domain.errors import AmbiguousOrInvalidNode, NestedGroupNotSupported
from domain.lmt.classifier import classify_node, classify_source_node
from domain.lmt.labels import GROUP_FIELD_BY_LABEL, GROUP_REQUIRED_PROPS
from domain.lmt.nodes import SourceNode, read_node, read_relation_attributes
from domain.schemas import Group, GroupMember


def collect_group_slots(node: SourceNode) -> tuple[dict[str, str | None], bool]:
    """
    Fill the Group slots from the node's notes; the last note wins.

    Name starts as termName and is replaced by a "Language Group Name" note.
    Term labels are ignored here.

    Returns:
        Tuple of (slots keyed by Group field name, whether a group label was seen)
    """
    slots: dict[str, str | None] = {"name": node.name}
    is_group = False
    for note in node.notes:
        field = GROUP_FIELD_BY_LABEL.get(note.label)
        if field is None:
            continue
        slots[field] = note.value
        is_group = True
    return slots, is_group


def resolve_member(raw_relation: Any, parent_id: str) -> GroupMember:
    """
    Classify a relation of a group and turn it into a member record.

    Raises:
        NestedGroupNotSupported: If the relation itself is a group
        MissingRequiredElement: If relationType or relationWeight is absent
    """
    classification = classify_node(raw_relation)
    if classification.is_group:
        raise NestedGroupNotSupported(classification.node_id, parent_id)

    relation_type, relation_weight = read_relation_attributes(raw_relation, classification.node_id)
    return GroupMember(
        relation_type=relation_type,
        relation_weight=relation_weight,
        audio_language_tag=classification.term.audio_language_tag,  # ty: ignore
    )


def resolve_group(raw: Any) -> tuple[str, Group] | None:
    """
    Build a Group from a node carrying "Language Group ..." notes.

    Args:
        raw: Top-level node of the parsed tree

    Returns:
        Tuple of (termID, Group), or None when the node carries no group notes,
        or is a usable term whose group notes are incomplete

    Raises:
        AmbiguousOrInvalidNode: If Name, Code or GroupTag ends up unset on a node
            that is not a usable term either
        plus every error of classify_node for the relations
    """
    node = read_node(raw)
    slots, is_group = collect_group_slots(node)
    if not is_group:
        return None

    missing = [prop for prop, field in GROUP_REQUIRED_PROPS if slots.get(field) is None]
    if missing:
        # Already collected as a term in the term pass
        if classify_source_node(node).is_term:
            return None
        raise AmbiguousOrInvalidNode(
            node.node_id,
            prop=missing[0],
            message=f"MESA XML did not set group property {missing[0]} in termID {node.node_id}. Giving up",
        )

    members = [resolve_member(relation, node.node_id) for relation in node.relations]
    group = Group(
        name=slots["name"],
        code=slots["code"],
        group_tag=slots["group_tag"],
        members=members,
    )
    return node.node_id, group
