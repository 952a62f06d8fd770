"""Local entry point: run a single poll and print the feature collection."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, List, Optional

import structlog
from dateutil.parser import isoparse

from .config import Settings
from .task import SantaTask


def configure_logging(level: int = logging.INFO) -> None:
    """Configure structlog + stdlib logging."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


LOGGER = structlog.get_logger(__name__)


async def print_submitter(collection: dict[str, Any]) -> None:
    """Stand-in for the host submit capability."""
    print(json.dumps(collection, indent=2))


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """CLI argument parsing."""
    parser = argparse.ArgumentParser(description="Poll the Santa tracker and print Santa's position as GeoJSON.")
    parser.add_argument("--debug", action="store_true", help="Print results in logs.")
    parser.add_argument(
        "--now",
        type=str,
        help="ISO 8601 instant to use instead of the tracker's server clock (UTC if no offset).",
    )
    return parser.parse_args(argv)


def parse_now(value: Optional[str]) -> Optional[datetime]:
    """Parse the ``--now`` override."""
    if not value:
        return None
    try:
        moment = isoparse(value)
    except ValueError as exc:
        raise SystemExit(f"Invalid --now: {value}") from exc
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def cli(argv: Optional[List[str]] = None) -> None:
    """Console script entrypoint."""
    args = parse_args(argv)
    now = parse_now(args.now)

    try:
        settings = Settings()
    except Exception as exc:  # pragma: no cover - startup validation
        configure_logging()
        LOGGER.exception("settings.error", error=str(exc))
        raise SystemExit(2) from exc

    if args.debug:
        settings = settings.model_copy(update={"debug": True})
    configure_logging(logging.DEBUG if settings.debug else logging.INFO)

    task = SantaTask(settings, print_submitter, now=now)
    try:
        asyncio.run(task.control())
    except Exception as exc:  # pragma: no cover - top level
        LOGGER.exception("task.failed", error=str(exc))
        raise SystemExit(1) from exc


if __name__ == "__main__":  # pragma: no cover
    cli()
