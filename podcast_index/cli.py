#!/usr/bin/env python3
"""
Podcast Index schema check - validates API responses against bundled schemas
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .client import PodcastIndexClient
from .config import ClientConfig, load_config
from .observer import LoggingObserver
from .validation import (
    DEFAULT_PROBES,
    Probe,
    RecordedResponses,
    SchemaStore,
    SchemaValidator,
    ValidationReport,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Podcast Index schema check - validates API responses against bundled schemas"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Path to configuration file (defaults to PODCAST_INDEX_* environment variables)"
    )
    parser.add_argument(
        "--schema-version",
        default=None,
        help="API schema version to validate against"
    )
    parser.add_argument(
        "--recorded",
        type=Path,
        help="Directory of recorded <endpoint>.json responses to validate instead of the live API"
    )
    parser.add_argument(
        "--endpoint", "-e",
        action="append",
        dest="endpoints",
        help="Only run probes for this endpoint (repeatable)"
    )
    parser.add_argument(
        "--concurrent",
        action="store_true",
        help="Run probes concurrently"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def select_probes(config: ClientConfig, endpoints: Optional[List[str]]) -> List[Probe]:
    """Probes from the config file, or the defaults, filtered by endpoint name."""
    if config.probes:
        probes = [Probe(p["endpoint"], dict(p.get("query") or {})) for p in config.probes]
    else:
        probes = list(DEFAULT_PROBES)
    if endpoints:
        wanted = set(endpoints)
        probes = [p for p in probes if p.endpoint in wanted]
    return probes


def print_report(report: ValidationReport) -> None:
    for result in report.results:
        mark = "PASS" if result.passed else f"FAIL ({result.kind})"
        print(f"{mark:<24} {result.endpoint}")
        for error in result.errors:
            print(f"    {error.path}: {error.message}")
    failed = len(report.failures)
    print(f"{len(report.results) - failed} passed, {failed} failed (API {report.version})")


async def run(args: argparse.Namespace) -> int:
    config = load_config(args.config) if args.config else ClientConfig.from_env()
    store = SchemaStore(args.schema_version or config.api_version)
    probes = select_probes(config, args.endpoints)

    if args.recorded:
        validator = SchemaValidator(RecordedResponses(args.recorded), store)
        report = await validator.validate(probes, concurrent=args.concurrent)
    else:
        if not config.has_credentials:
            logger.error("Podcast Index credentials not configured")
            return 2
        observer = LoggingObserver(level=logging.DEBUG)
        async with PodcastIndexClient.from_config(config, observer=observer) as client:
            validator = SchemaValidator(client, store)
            report = await validator.validate(probes, concurrent=args.concurrent)

    print_report(report)
    return 0 if report.passed else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(asctime)s] %(levelname)s: %(filename)s:%(funcName)s(%(lineno)s): %(message)s"
    )

    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 130
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    sys.exit(main())
