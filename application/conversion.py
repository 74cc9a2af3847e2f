"""Conversion workflow: parsed Mesa XML tree -> LMT."""

import logging
from pathlib import Path
from typing import Any

from opik import track

from application.constants import (
    AUDIO_TAGGED_KEY,
    GROUPS_KEY,
    MAPPINGS_KEY,
    MEMBERS_KEY,
    TERMS_KEY,
    VISUAL_TAGGED_KEY,
)
from domain.lmt import CONVERTER_NAME, to_lmt
from domain.schemas import Lmt
from infrastructure.config.models import ConverterConfig
from infrastructure.io import read_xml_tree

logger = logging.getLogger(__name__)


@track(
    name="Lmt.conversion",
    type="general",
    metadata={"task": "mesa_to_lmt", "converter": CONVERTER_NAME},
    capture_input=False,
    capture_output=False,
)
def convert_tree(tree: dict[str, Any], cfg: ConverterConfig) -> Lmt:
    """
    Convert an already-parsed document into an LMT.

    Args:
        tree: Nested object tree (see infrastructure.io.xml_tree)
        cfg: ConverterConfig instance (source layout)

    Returns:
        Fully populated Lmt

    Raises:
        LmtConversionError: Propagated unchanged from the domain layer
    """
    logger.info(
        "Converting with '%s' (root=%s, term=%s)",
        CONVERTER_NAME,
        cfg.source.root_element,
        cfg.source.term_element,
    )
    lmt = to_lmt(tree, layout=cfg.source)
    summary = summarize_lmt(lmt)
    logger.info(
        "Converted: %d terms, %d groups (%d members), %d mappings",
        summary[TERMS_KEY],
        summary[GROUPS_KEY],
        summary[MEMBERS_KEY],
        summary[MAPPINGS_KEY],
    )
    return lmt


def convert_file(xml_path: Path, cfg: ConverterConfig) -> Lmt:
    """Read a Mesa XML export from disk and convert it."""
    logger.info("Loading Mesa XML from %s...", xml_path)
    tree = read_xml_tree(xml_path)
    return convert_tree(tree, cfg)


def summarize_lmt(lmt: Lmt) -> dict[str, int]:
    """Counts used in logs and in summary.json."""
    return {
        TERMS_KEY: len(lmt.terms),
        GROUPS_KEY: len(lmt.groups),
        MEMBERS_KEY: sum(len(g.members) for g in lmt.groups),
        MAPPINGS_KEY: len(lmt.mapping.term),
        AUDIO_TAGGED_KEY: sum(1 for t in lmt.terms if t.audio_language_tag is not None),
        VISUAL_TAGGED_KEY: sum(
            1 for t in lmt.terms if t.audio_language_tag is None and t.visual_language_tag_1 is not None
        ),
    }
