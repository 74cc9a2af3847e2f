"""I/O utilities: filesystem operations and XML loading."""

from infrastructure.io.fs import ensure_exists, write_json_text
from infrastructure.io.xml_tree import parse_xml_bytes, read_xml_tree

__all__ = [
    "ensure_exists",
    "write_json_text",
    "read_xml_tree",
    "parse_xml_bytes",
]
