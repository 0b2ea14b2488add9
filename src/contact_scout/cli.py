"""CLI entrypoint for contact-scout."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence

from .config import (
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_SEARCH_URL_TEMPLATE,
    DEFAULT_USER_AGENT,
    ScoutConfig,
)
from .errors import ConfigError, SearchError
from .logging_utils import configure_logging, get_logger
from .pipeline import get_possible_customers
from .serialization import records_to_json, write_records


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(
        description="Contact Scout - find businesses on a map search and collect their contact emails."
    )
    parser.add_argument("query", help='Free-text map search, e.g. "dentists in Valencia".')
    parser.add_argument("--output", help="Write the JSON result here instead of stdout.")
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_REQUEST_TIMEOUT,
        help="Per-request timeout in seconds.",
    )
    parser.add_argument(
        "--user-agent", help="User-Agent header (or set CONTACT_SCOUT_USER_AGENT env var)."
    )
    parser.add_argument(
        "--search-url-template",
        help="Search URL with a {query} placeholder (or set CONTACT_SCOUT_SEARCH_URL env var).",
    )
    parser.add_argument("--no-progress", action="store_true", help="Disable tqdm progress bars.")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    verbosity.add_argument("--quiet", action="store_true", help="Only log warnings and errors.")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse and pre-validate CLI input."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.query.strip():
        parser.error("query cannot be blank.")
    return args


def namespace_to_config(args: argparse.Namespace) -> ScoutConfig:
    """Convert CLI args to validated ScoutConfig."""
    user_agent = args.user_agent or os.getenv("CONTACT_SCOUT_USER_AGENT") or DEFAULT_USER_AGENT
    search_url_template = (
        args.search_url_template
        or os.getenv("CONTACT_SCOUT_SEARCH_URL")
        or DEFAULT_SEARCH_URL_TEMPLATE
    )
    return ScoutConfig(
        user_agent=user_agent,
        request_timeout=args.timeout,
        search_url_template=search_url_template,
        show_progress=not (args.no_progress or args.quiet),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint."""
    args = parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet)
    logger = get_logger()
    try:
        config = namespace_to_config(args)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    try:
        records = get_possible_customers(args.query, config, logger=logger)
    except SearchError as exc:
        logger.error("%s", exc)
        return 1

    if args.output:
        write_records(args.output, records)
        logger.info("Wrote %d records to %s", len(records), args.output)
    else:
        sys.stdout.write(records_to_json(records) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
