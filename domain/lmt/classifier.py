"""Decide whether a source node is a usable term, a group, or invalid."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from domain.errors import AmbiguousOrInvalidNode
from domain.lmt.labels import GROUP_LABELS, TERM_FIELD_BY_LABEL, TERM_REQUIRED_PROPS
from domain.lmt.nodes import SourceNode, read_node
from domain.schemas import Term

AUDIO_TAG_FIELD = "audio_language_tag"
VISUAL_TAG_FIELD = "visual_language_tag_1"


class NodeKind(str, Enum):
    TERM = "term"
    GROUP = "group"


@dataclass(frozen=True)
class Classification:
    """
    Outcome of classifying one node.

    A GROUP classification is a signal, not an error: the caller reprocesses the
    node as a group. Only TERM classifications carry a term and its tags.
    """

    kind: NodeKind
    node_id: str
    term: Term | None = None
    tags: tuple[str, ...] = ()

    @property
    def is_term(self) -> bool:
        return self.kind is NodeKind.TERM

    @property
    def is_group(self) -> bool:
        return self.kind is NodeKind.GROUP

    def mapping_entries(self) -> list[tuple[str, str]]:
        return [(tag, self.node_id) for tag in self.tags]


def collect_term_slots(node: SourceNode) -> tuple[dict[str, str | None], bool]:
    """
    Fill the Term slots from the node's notes.

    Each slot is single-assignment per note: when several notes target the same
    field, the last note in document order wins.

    Returns:
        Tuple of (slots keyed by Term field name, whether a group label was seen)
    """
    slots: dict[str, str | None] = {"name": node.name}
    group_marked = False
    for note in node.notes:
        if note.label in GROUP_LABELS:
            group_marked = True
            continue
        slots[TERM_FIELD_BY_LABEL[note.label]] = note.value
    return slots, group_marked


def classify_source_node(node: SourceNode) -> Classification:
    """
    Classify an already-read node.

    Rules:
      - usable term: Name, Code and LongDescription1 present, plus an audio tag
        or visual tag 1; the audio tag is the mapping key when both exist
      - otherwise a group if any "Language Group ..." note was seen
      - otherwise an error naming the first missing required property

    Raises:
        AmbiguousOrInvalidNode: If the node is neither a term nor a group
    """
    slots, group_marked = collect_term_slots(node)
    present = {field: value for field, value in slots.items() if value is not None}

    has_required = all(field in present for _, field in TERM_REQUIRED_PROPS)
    has_tag = AUDIO_TAG_FIELD in present or VISUAL_TAG_FIELD in present

    if has_required and has_tag:
        term = Term(**present)
        return Classification(kind=NodeKind.TERM, node_id=node.node_id, term=term, tags=(term.tag,))

    if group_marked:
        return Classification(kind=NodeKind.GROUP, node_id=node.node_id)

    for prop, field in TERM_REQUIRED_PROPS:
        if field not in present:
            raise AmbiguousOrInvalidNode(node.node_id, prop=prop)
    raise AmbiguousOrInvalidNode(node.node_id)


def classify_node(raw: Any) -> Classification:
    """
    Classify one raw node of the parsed tree.

    Args:
        raw: Top-level term node or relation node

    Returns:
        Classification of kind TERM (with term and tags) or GROUP

    Raises:
        MissingRequiredElement: If termID, termName or termNote is absent
        UnknownNoteLabel: If a note label is not recognized
        AmbiguousOrInvalidNode: If the node is neither a term nor a group
    """
    return classify_source_node(read_node(raw))
