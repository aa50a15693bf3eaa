"""
Command-line interface for product-config.

    product-config demo      - Validate and price the sample configuration
    product-config config    - Show the effective validation configuration

Examples:
    product-config demo
    product-config demo --min-price 100
    product-config demo --min-price 0 --inclusive
    product-config --quiet demo
    product-config config --paths
"""

import argparse
import logging
from typing import List, Optional

from product_config import __version__
from product_config.config import Config
from product_config.exceptions import ProductConfigError

from .utils import print_error

__all__ = ["main", "resolve_log_level"]

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the product-config CLI."""
    parser = argparse.ArgumentParser(
        prog="product-config",
        description="Product configuration validation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"product-config {__version__}")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="Only log errors"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    demo_parser = subparsers.add_parser("demo", help="Validate the sample configuration")
    demo_parser.add_argument(
        "--min-price",
        help="Reject components priced at or below this value (default: from config)",
    )
    demo_parser.add_argument(
        "--inclusive",
        action="store_true",
        help="Also accept components priced exactly at --min-price",
    )

    config_parser = subparsers.add_parser("config", help="Show configuration")
    config_group = config_parser.add_mutually_exclusive_group()
    config_group.add_argument(
        "--show", action="store_true", help="Show effective configuration with sources"
    )
    config_group.add_argument("--paths", action="store_true", help="Show config file paths")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        config = Config.load()
        _configure_logging(resolve_log_level(args, config))

        if args.command == "demo":
            from .demo_cmd import run

            return run(args, config)
        elif args.command == "config":
            from .config_cmd import run

            return run(args, config)
    except ProductConfigError as e:
        print_error(e, verbose=args.verbose)
        return 1

    return 0


def resolve_log_level(args, config: Config) -> int:
    """
    Pick the log level: command line flags first, then ``[defaults]``.

    ``verbose`` gives DEBUG, ``quiet`` gives ERROR, otherwise WARNING.
    """
    if args.verbose:
        return logging.DEBUG
    if args.quiet:
        return logging.ERROR
    if config.defaults.verbose:
        return logging.DEBUG
    if config.defaults.quiet:
        return logging.ERROR
    return logging.WARNING


def _configure_logging(level: int) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("product_config").setLevel(level)


if __name__ == "__main__":
    raise SystemExit(main())
