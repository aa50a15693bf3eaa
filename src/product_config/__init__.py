"""
product-config: composable product configurations with pluggable validation.

A product is a tree of ``Part`` leaves and ``Assembly`` composites. Prices
roll up from the leaves, and ``validate()`` checks every component against a
``ValidationPolicy``, collecting all errors in one pass.

Quick Start::

    from product_config import Assembly, Part, ValidationPolicy

    cpu = Part("Intel i9 CPU", 500)
    computer = Assembly("Gaming Computer")
    computer.add_child(cpu)
    computer.add_mandatory(cpu)

    result = computer.validate()
    if result:
        print(computer.calculate_price())
    else:
        for error in result.errors:
            print(error)

    # Accept free components
    result = computer.validate(ValidationPolicy.with_minimum_price(0, inclusive=True))
"""

__version__ = "0.1.0"

from product_config.components import Assembly, Part, ProductComponent
from product_config.config import Config
from product_config.exceptions import (
    ConfigurationError,
    CyclicStructureError,
    ProductConfigError,
    UnsupportedOperationError,
    ValidationError,
)
from product_config.pricing import as_price
from product_config.report import format_report
from product_config.sample import build_sample_configuration
from product_config.validation import (
    ValidationPolicy,
    ValidationResult,
    contains_component,
    mandatory_components_present,
    price_is_positive,
)

__all__ = [
    # Version
    "__version__",
    # Components
    "ProductComponent",
    "Part",
    "Assembly",
    "as_price",
    # Validation
    "ValidationPolicy",
    "ValidationResult",
    "contains_component",
    "price_is_positive",
    "mandatory_components_present",
    # Config
    "Config",
    # Reporting
    "format_report",
    "build_sample_configuration",
    # Exceptions
    "ProductConfigError",
    "UnsupportedOperationError",
    "CyclicStructureError",
    "ValidationError",
    "ConfigurationError",
]
