"""
Command-line interface for the Steam store client.

Provides commands for fetching appdetails and inspecting request URLs.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

import structlog
from pydantic import ValidationError

from steamstore import __version__
from steamstore.api.interface import StoreError
from steamstore.api.query import StoreQuery
from steamstore.config import StoreConfig, set_config
from steamstore.core.fetcher import StoreFetcher


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    """Configure structured logging."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if json_format
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # stdout carries the JSON result, logs go to stderr
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="steamstore",
        description="Fetch Steam storefront metadata for apps",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Fetch command
    fetch_parser = subparsers.add_parser("fetch", help="Fetch appdetails for appids")
    fetch_parser.add_argument(
        "app_ids",
        nargs="+",
        type=int,
        metavar="APPID",
        help="Steam appids to fetch",
    )
    fetch_parser.add_argument(
        "--locale",
        help="Language of the returned texts (default: from config, english)",
    )
    fetch_parser.add_argument(
        "--currency",
        help="Country/currency code (default: from config, us)",
    )
    fetch_parser.add_argument(
        "--batch-size",
        type=int,
        help="Appids per request (default: 50)",
    )
    fetch_parser.add_argument(
        "--timeout",
        type=float,
        help="Timeout per request in seconds (default: 30)",
    )
    fetch_parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from config, INFO)",
    )
    fetch_parser.add_argument(
        "--log-json",
        action="store_true",
        default=None,
        help="Output logs in JSON format",
    )

    # URL command
    url_parser = subparsers.add_parser("url", help="Print the request URL for appids")
    url_parser.add_argument(
        "app_ids",
        nargs="*",
        type=int,
        metavar="APPID",
    )
    url_parser.add_argument("--locale")
    url_parser.add_argument("--currency")

    return parser


def build_config(args: argparse.Namespace) -> StoreConfig:
    """Create a configuration from the environment and command line overrides."""
    overrides = {
        "locale": args.locale,
        "currency": args.currency,
        "batch_size": getattr(args, "batch_size", None),
        "timeout_seconds": getattr(args, "timeout", None),
        "log_level": getattr(args, "log_level", None),
        "log_json": getattr(args, "log_json", None),
    }
    return StoreConfig(**{k: v for k, v in overrides.items() if v is not None})


async def fetch_apps(args: argparse.Namespace, config: StoreConfig) -> int:
    """Fetch appdetails and print them as JSON."""
    fetcher = StoreFetcher(config)

    try:
        response = await fetcher.fetch_all(args.app_ids, config.locale, config.currency)
    except (StoreError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = {
        app_id: entry.model_dump(mode="json", exclude_unset=True)
        for app_id, entry in response.items()
    }
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


def print_url(args: argparse.Namespace, config: StoreConfig) -> int:
    """Print the request URL for the given appids."""
    query = StoreQuery(
        locale=config.locale,
        currency=config.currency,
        version=config.api_version,
        base_url=config.base_url,
    )
    print(query.to_url(args.app_ids))
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = build_config(args)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    set_config(config)

    # Run appropriate command
    if args.command == "fetch":
        setup_logging(config.log_level, config.log_json)
        sys.exit(asyncio.run(fetch_apps(args, config)))
    elif args.command == "url":
        sys.exit(print_url(args, config))


if __name__ == "__main__":
    main()
