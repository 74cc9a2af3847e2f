"""
Read Mesa XML into the nested object tree consumed by domain.lmt.

Shape (same conventions as the xml2js defaults the exports were designed for):
- the document is {root_tag: root_value}
- child elements are grouped by tag into lists, in document order
- attributes go under "$", text under "_"
- an element with neither attributes nor children collapses to its text
- whitespace-only text between child elements is dropped
"""

import logging
from pathlib import Path
from typing import Any

from lxml import etree

logger = logging.getLogger(__name__)

ATTRS_KEY = "$"
TEXT_KEY = "_"


def _make_parser() -> etree.XMLParser:
    # Exports are local files; never fetch DTDs or expand external entities
    return etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=True)


def element_to_tree(elem: etree._Element) -> Any:
    """
    Convert one element (recursively) to its object-tree value.

    Examples:
        >>> element_to_tree(etree.fromstring("<termID>T1</termID>"))
        'T1'
        >>> element_to_tree(etree.fromstring('<termNote label="Code">en</termNote>'))
        {'$': {'label': 'Code'}, '_': 'en'}
    """
    children = [child for child in elem if isinstance(child.tag, str)]  # skip comments / PIs
    text = elem.text or ""
    if not text.strip():
        text = ""

    if not elem.attrib and not children:
        return text

    value: dict[str, Any] = {}
    if elem.attrib:
        value[ATTRS_KEY] = {etree.QName(k).localname: v for k, v in elem.attrib.items()}
    if text:
        value[TEXT_KEY] = text
    for child in children:
        value.setdefault(etree.QName(child).localname, []).append(element_to_tree(child))
    return value


def parse_xml_bytes(data: bytes) -> dict[str, Any]:
    """Parse an in-memory XML document into the object tree."""
    root = etree.fromstring(data, parser=_make_parser())
    return {etree.QName(root).localname: element_to_tree(root)}


def read_xml_tree(path: Path) -> dict[str, Any]:
    """
    Parse an XML file into the object tree.

    Args:
        path: Path to the Mesa XML export

    Returns:
        {root_tag: root_value}

    Raises:
        FileNotFoundError: If the file does not exist
        lxml.etree.XMLSyntaxError: If the file is not well-formed XML
    """
    if not path.exists():
        raise FileNotFoundError(f"XML file not found: {path}")

    tree = etree.parse(str(path), parser=_make_parser())
    root = tree.getroot()
    logger.debug("Parsed %s (root=%s, %d child elements)", path, root.tag, len(root))
    return {etree.QName(root).localname: element_to_tree(root)}
