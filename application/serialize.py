"""LMT serialization utilities."""

import json
import logging
from pathlib import Path

from domain.schemas import Lmt
from infrastructure.config.models import OutputConfig
from infrastructure.io import write_json_text

logger = logging.getLogger(__name__)


def lmt_to_dict(lmt: Lmt, *, exclude_absent: bool = True) -> dict:
    """
    Dump the LMT with the output key spelling (Name, Code, LongDescription1, ...).

    Args:
        lmt: Converted LMT
        exclude_absent: Drop optional fields that were never set in the source
    """
    return lmt.model_dump(mode="json", by_alias=True, exclude_none=exclude_absent)


def serialize_lmt(lmt: Lmt, lmt_path: Path, output: OutputConfig | None = None) -> Path:
    """
    Write the LMT as a JSON document.

    Returns:
        The written path
    """
    output = output or OutputConfig()
    payload = lmt_to_dict(lmt, exclude_absent=output.exclude_absent)
    write_json_text(lmt_path, json.dumps(payload, ensure_ascii=False, indent=output.indent))

    logger.info("Saved LMT JSON: %s", lmt_path)
    return lmt_path
