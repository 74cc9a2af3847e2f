"""
Configuration management: models, loading, and validation.

Handles:
- ConverterConfig: Source layout, output and tracing settings
- YAML loading of configs/converter.yaml

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_converter_config, parse_converter_config
from infrastructure.config.models import ConverterConfig, OutputConfig

__all__ = [
    # Main config (most commonly used)
    "ConverterConfig",
    "load_converter_config",
    "parse_converter_config",
    "OutputConfig",
]
