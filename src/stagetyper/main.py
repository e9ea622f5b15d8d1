#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from stagetyper.app import analyze_stage_types
from stagetyper.common import configure_logging
from stagetyper.config import (
    ConfigurationError,
    get_classification_config,
    get_storage_config,
)
from stagetyper.domain.errors import MissingInputError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Infer stage types from the latest drop-rate snapshot and report new ones"
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        help="Directory holding latest.json and the run outputs (default: ./data)",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        metavar="PREFIX",
        help="Stage id prefix to skip; repeat to replace the configured exclusion list",
    )
    parser.add_argument(
        "--no-publish",
        action="store_true",
        help="Do not send new stage types to the registry webhook",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        storage = get_storage_config(data_dir=parsed_args.data_dir)
        classification = get_classification_config(
            prefixes=tuple(parsed_args.exclude) if parsed_args.exclude else None
        )
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)

    try:
        run = analyze_stage_types(
            storage=storage,
            classification=classification,
            publish=not parsed_args.no_publish,
        )
    except MissingInputError:
        log.exception("No stage data to analyse; run the snapshot fetch first")
        sys.exit(1)
    except Exception:
        log.exception("Fatal error during stage type analysis")
        sys.exit(1)

    log.info(
        "Stage types analysis completed: total=%s, new=%s",
        run.total_count,
        run.new_count,
    )


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
