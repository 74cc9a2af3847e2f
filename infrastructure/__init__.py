"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML)
- XML reading (lxml) and output files
- Observability (logging)

This is the only layer that reads or writes files.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import ConverterConfig, load_converter_config
from infrastructure.io import read_xml_tree

__all__ = [
    "load_converter_config",
    "ConverterConfig",
    "read_xml_tree",
]
