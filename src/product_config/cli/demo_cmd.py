"""
Demo command: validate and price the sample configuration.

Prints ``Configuration is valid.`` and the total price, or
``Configuration is invalid:`` followed by one line per error.
Exits with 1 when the configuration is invalid.
"""

import logging

from product_config.config import Config
from product_config.exceptions import ConfigurationError
from product_config.pricing import as_price
from product_config.report import format_report
from product_config.sample import build_sample_configuration
from product_config.validation import ValidationPolicy

logger = logging.getLogger(__name__)


def run(args, config: Config) -> int:
    """Run the demo command from parsed arguments."""
    policy = _build_policy(args, config)

    product = build_sample_configuration()
    result = product.validate(policy)

    total = product.calculate_price() if result.is_valid else None
    for line in format_report(result, total):
        print(line)

    return 0 if result.is_valid else 1


def _build_policy(args, config: Config) -> ValidationPolicy:
    """Command line threshold wins over the config file."""
    if args.min_price is None:
        if args.inclusive:
            config.validation.inclusive = True
        return ValidationPolicy.from_config(config)

    try:
        minimum = as_price(args.min_price)
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid --min-price value: {args.min_price}",
            suggestions=["Pass a number, e.g. --min-price 100"],
        ) from e

    logger.debug(f"Using minimum price {minimum} (inclusive={args.inclusive})")
    return ValidationPolicy.with_minimum_price(minimum, inclusive=args.inclusive)
