"""Builders for parsed Mesa XML nodes (xml2js shape)."""


def note(label: str, value: str | None) -> dict:
    n: dict = {"$": {"label": label}}
    if value is not None:
        n["_"] = value
    return n


def term_node(
    term_id: str,
    name: str = "English",
    *,
    code: str | None = "en",
    long_description: str | None = "English language",
    audio_tag: str | None = None,
    visual_tag: str | None = None,
    extra_notes: list[dict] | None = None,
) -> dict:
    """Top-level term node in the parsed (xml2js) shape."""
    notes = []
    if audio_tag is not None:
        notes.append(note("Audio Language Tag", audio_tag))
    if visual_tag is not None:
        notes.append(note("Visual Language Tag 1", visual_tag))
    if code is not None:
        notes.append(note("Code", code))
    if long_description is not None:
        notes.append(note("Long Description 1", long_description))
    notes.extend(extra_notes or [])
    return {"termID": [term_id], "termName": [name], "termNote": notes}


def relation(node: dict, relation_type: str | None = "NT", weight: str | None = "1") -> dict:
    """Turn a term node into a relation sub-node."""
    rel = dict(node)
    if relation_type is not None:
        rel["relationType"] = [relation_type]
    if weight is not None:
        rel["relationWeight"] = [weight]
    return rel


def group_node(
    term_id: str,
    name: str = "Chinese",
    *,
    group_code: str | None = "zh",
    group_tag: str | None = "zh-group",
    group_name: str | None = None,
    relations: list[dict] | None = None,
) -> dict:
    notes = []
    if group_code is not None:
        notes.append(note("Language Group Code", group_code))
    if group_tag is not None:
        notes.append(note("Language Group Tag", group_tag))
    if group_name is not None:
        notes.append(note("Language Group Name", group_name))
    node: dict = {"termID": [term_id], "termName": [name], "termNote": notes}
    if relations is not None:
        node["relation"] = relations
    return node


def document(*nodes: dict, root: str = "Synaptica-ZThes", term: str = "term") -> dict:
    return {root: {term: list(nodes)}}
