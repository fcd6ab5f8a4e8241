#!/usr/bin/env python
"""
Run the toolhub API gateway.

This module provides a command-line interface for starting the service.
"""

import argparse
import logging
import sys

from toolhub.api_gateway import run_gateway
from toolhub.config import settings, print_settings


logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Run the toolhub API gateway")

    parser.add_argument(
        "--host",
        type=str,
        default=settings.host,
        help=f"Host to bind to (default: {settings.host})"
    )

    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to bind to (default: {settings.port})"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level.upper(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Log level (default: {settings.log_level})"
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Log file path (default: None, logs to console)"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (default: False)"
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    app_settings = settings.model_copy(update={
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
        "debug": args.debug or settings.debug,
    })

    app_settings.configure_logging(args.log_level, args.log_file)
    logger.debug(print_settings(app_settings))
    logger.info(f"Starting toolhub API gateway on {app_settings.host}:{app_settings.port}")

    try:
        run_gateway(app_settings)
    except Exception as e:
        logger.error(f"Error running API gateway: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
