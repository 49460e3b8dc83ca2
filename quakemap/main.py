"""Command-line Entry Point.

This module provides the entry point for rendering the earthquake map.
It's a thin wrapper that loads configuration and invokes the loader.
"""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from quakemap.core.config import Config, validate_config
from quakemap.loader import build_map
from quakemap.shell.config_loader import load_config
from quakemap.shell.static_map_client import StaticMapClient


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging from the LOG_LEVEL env var."""
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="quakemap",
        description="Render the weekly earthquake feed and tectonic plates on an interactive map.",
    )
    parser.add_argument(
        "--config",
        help="Path to YAML config file (default: CONFIG_PATH or config/config.yaml)",
    )
    parser.add_argument(
        "--output",
        help="Where to write the HTML map (overrides config output_path)",
    )
    parser.add_argument(
        "--snapshot",
        help="Also write a static PNG snapshot to this path",
    )
    return parser.parse_args(argv)


def _check_config(config: Config) -> bool:
    """Log validation findings; return False if any are critical."""
    validation = validate_config(config)

    for warning in validation.warnings:
        logger.warning("Config %s: %s", warning.field, warning.message)

    for error in validation.critical_errors:
        logger.error("Config %s: %s", error.field, error.message)

    return validation.valid


def main(argv: list[str] | None = None) -> int:
    """Render the map and write it to disk.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    args = parse_args(argv)

    config = load_config(args.config)
    if args.output:
        config.output_path = args.output

    if not _check_config(config):
        return 1

    logger.info("Building earthquake map")

    session, result = asyncio.run(build_map(config))
    session.save(config.output_path)

    if result.errors:
        for error in result.errors:
            logger.error("Error: %s", error)

    if args.snapshot:
        snapshot = StaticMapClient().generate_map(
            session.markers,
            session.plate_lines,
            width=config.snapshot_width,
            height=config.snapshot_height,
        )
        if snapshot.success and snapshot.image_bytes:
            Path(args.snapshot).write_bytes(snapshot.image_bytes)
            logger.info("Saved snapshot to %s", args.snapshot)
        else:
            logger.warning("Failed to generate snapshot: %s", snapshot.error)

    logger.info("Completed: %s", result.summary)

    return 0


def run() -> None:
    """Console script entry point."""
    configure_logging()
    sys.exit(main())
