"""
Read raw source nodes into typed views.

The input is the nested object tree of an XML-to-object parser (xml2js shape):
repeated elements are lists, an element with attributes is a dict holding the
attributes under "$" and its text under "_".

Unknown note labels are rejected here, before any classification happens.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from domain.errors import MissingRequiredElement, UnknownNoteLabel
from domain.lmt.labels import NoteLabel

ATTRS_KEY = "$"
TEXT_KEY = "_"
LABEL_ATTR = "label"


@dataclass(frozen=True)
class SourceNote:
    label: NoteLabel
    value: str | None


@dataclass(frozen=True)
class SourceNode:
    """A term node (top-level or relation) with its notes already validated."""

    node_id: str
    name: str
    notes: tuple[SourceNote, ...]
    relations: tuple[Any, ...] = ()


def scalar(value: Any) -> str | None:
    """
    Unwrap a one-element sequence (or a text-bearing element) into a string.

    Examples:
        >>> scalar(["T1"])
        'T1'
        >>> scalar([{"$": {"lang": "en"}, "_": "English"}])
        'English'
        >>> scalar([]) is None
        True
    """
    if isinstance(value, Sequence) and not isinstance(value, str):
        if not value:
            return None
        value = value[0]
    if isinstance(value, Mapping):
        value = value.get(TEXT_KEY)
    if value is None:
        return None
    return str(value)


def as_list(value: Any) -> list[Any]:
    """Repeated elements are lists; tolerate a single bare element."""
    if value is None:
        return []
    if isinstance(value, Sequence) and not isinstance(value, str):
        return list(value)
    return [value]


def _read_note(raw: Any, node_id: str) -> SourceNote:
    if isinstance(raw, Mapping):
        attrs = raw.get(ATTRS_KEY) or {}
        raw_label = attrs.get(LABEL_ATTR) if isinstance(attrs, Mapping) else None
        value = raw.get(TEXT_KEY)
    else:
        # A note without attributes collapses to its bare text
        raw_label, value = None, None

    label = NoteLabel.parse(raw_label)
    if label is None:
        raise UnknownNoteLabel(raw_label, node_id)
    return SourceNote(label=label, value=None if value is None else str(value))


def read_node(raw: Any) -> SourceNode:
    """
    Validate the required elements of a node and read its notes.

    Args:
        raw: One node of the parsed tree (top-level term or relation)

    Returns:
        SourceNode with typed notes, in document order

    Raises:
        MissingRequiredElement: If termID, termName or termNote is absent
        UnknownNoteLabel: If a note carries a label outside NoteLabel
    """
    fields = raw if isinstance(raw, Mapping) else {}

    node_id = scalar(fields.get("termID"))
    if node_id is None:
        raise MissingRequiredElement("termID")

    name = scalar(fields.get("termName"))
    if name is None:
        raise MissingRequiredElement("termName", node_id)

    raw_notes = fields.get("termNote")
    if raw_notes is None:
        raise MissingRequiredElement("termNote", node_id)

    notes = tuple(_read_note(note, node_id) for note in as_list(raw_notes))
    relations = tuple(as_list(fields.get("relation")))
    return SourceNode(node_id=node_id, name=name, notes=notes, relations=relations)


def read_relation_attributes(raw: Any, node_id: str) -> tuple[str, str]:
    """
    Read relationType and relationWeight of a relation node.

    Raises:
        MissingRequiredElement: If either element is absent
    """
    fields = raw if isinstance(raw, Mapping) else {}

    relation_type = scalar(fields.get("relationType"))
    if relation_type is None:
        raise MissingRequiredElement("relationType", node_id)

    relation_weight = scalar(fields.get("relationWeight"))
    if relation_weight is None:
        raise MissingRequiredElement("relationWeight", node_id)

    return relation_type, relation_weight
