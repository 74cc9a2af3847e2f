"""
CLI entrypoint for the Mesa XML -> LMT converter.

This script performs the following steps:
- loads .env (if present) and configs/converter.yaml
- creates a per-run output folder under outputs/
- reads the Mesa XML export and converts it to a Language Mapping Table
- writes the LMT, a summary and a config snapshot as JSON
- logs a human-readable summary of the conversion
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

import opik
from dotenv import load_dotenv

from application import convert_file, serialize_lmt, summarize_lmt
from application.constants import (
    AUDIO_TAGGED_KEY,
    CONFIG_SNAPSHOT_FILENAME,
    GROUPS_KEY,
    LMT_FILENAME,
    LOG_FILENAME,
    MAPPINGS_KEY,
    MEMBERS_KEY,
    SUMMARY_FILENAME,
    TERMS_KEY,
    VISUAL_TAGGED_KEY,
)
from domain.errors import LmtConversionError
from infrastructure.config import load_converter_config
from infrastructure.constants import CONVERTER_FILE
from infrastructure.io import ensure_exists, write_json_text
from infrastructure.observability import configure_logging, get_log_context, make_run_tag, set_log_context

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Convert a Synaptica Mesa XML export to an LMT JSON file")
    p.add_argument(
        "input",
        type=str,
        help="Path to the Mesa XML export",
    )
    p.add_argument(
        "--config",
        type=str,
        default=str(CONVERTER_FILE),
        help="Path to converter.yaml (default: configs/converter.yaml)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file, loaded if it exists (default: .env)",
    )
    p.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the LMT JSON here instead of <run folder>/lmt.json",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="File log level",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    config_path = Path(args.config)
    ensure_exists(config_path, "converter.yaml")
    cfg = load_converter_config(config_path)

    input_path = Path(args.input)

    # @track is always applied; switch it off unless the config opts in
    opik.set_tracing_active(cfg.tracing)
    if cfg.tracing:
        opik.configure()

    # ---- Per-run output folder ----
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_id = f"{ts}_{input_path.stem}"
    run_dir = cfg.output.root / run_id
    run_dir.mkdir(parents=True, exist_ok=True)

    log_path = run_dir / LOG_FILENAME
    configure_logging(
        log_file=log_path,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )
    set_log_context(run_id=run_id, document=input_path.name)

    logger.info("Starting run: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))
    logger.info("Run output directory: %s", run_dir)

    write_json_text(
        run_dir / CONFIG_SNAPSHOT_FILENAME,
        json.dumps(cfg.model_dump(mode="json"), ensure_ascii=False, indent=2, default=str),
    )

    try:
        lmt = convert_file(input_path, cfg)
    except LmtConversionError as e:
        # The whole document is rejected; nothing is written
        logger.error("Conversion failed: %s", e)
        return 1

    lmt_path = Path(args.output) if args.output else run_dir / LMT_FILENAME
    serialize_lmt(lmt, lmt_path, cfg.output)

    summary = {
        **summarize_lmt(lmt),
        **get_log_context(),
        "run_id": run_id,
        "input": str(input_path),
        "lmt": str(lmt_path),
    }
    summary_path = write_json_text(
        run_dir / SUMMARY_FILENAME,
        json.dumps(summary, ensure_ascii=False, indent=2),
    )

    logger.info(
        "Summary: %d terms (%d audio-tagged, %d visual-tagged), %d groups, %d members, %d mappings",
        summary[TERMS_KEY],
        summary[AUDIO_TAGGED_KEY],
        summary[VISUAL_TAGGED_KEY],
        summary[GROUPS_KEY],
        summary[MEMBERS_KEY],
        summary[MAPPINGS_KEY],
    )
    logger.info("Saved summary to %s", summary_path)
    logger.info("Detailed log: %s", log_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
