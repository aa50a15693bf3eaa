"""
Custom exception hierarchy for product-config.

All exceptions carry a message plus optional context and suggestions,
formatted consistently::

    from product_config.exceptions import UnsupportedOperationError

    raise UnsupportedOperationError(
        "Cannot add a component to a simple component.",
        context={"component": "Intel i9 CPU"},
        suggestions=["Wrap the part in an Assembly to give it children"],
    )

Validation failures are not exceptions: ``validate()`` returns a
``ValidationResult``. ``ValidationError`` exists for callers that want to
turn an invalid result into an exception.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class ProductConfigError(Exception):
    """
    Base exception for all product-config errors.

    Attributes:
        context: Dictionary of contextual information (component, file, etc.)
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class UnsupportedOperationError(ProductConfigError):
    """
    Composition was attempted on a leaf component.

    A ``Part`` has no children, so ``add_child`` and ``remove_child`` on it
    are usage errors rather than data problems.
    """

    pass


class CyclicStructureError(ProductConfigError):
    """
    Adding a child would make a component its own descendant.

    Example::

        raise CyclicStructureError(
            "Cannot add 'Computer' under 'Motherboard'",
            context={"parent": "Motherboard", "child": "Computer"},
        )
    """

    pass


class ValidationError(ProductConfigError):
    """
    Product configuration failed validation with one or more errors.

    Attributes:
        errors: List of individual validation error messages
    """

    def __init__(
        self,
        errors: List[str],
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.errors = errors
        message = f"Validation failed with {len(errors)} error(s):\n"
        message += "\n".join(f"  {i + 1}. {e}" for i, e in enumerate(errors))
        super().__init__(message, context, suggestions)


class ConfigurationError(ProductConfigError):
    """
    Configuration file or setting is invalid.

    Example::

        raise ConfigurationError(
            "Invalid value for validation.min_price",
            context={"file": ".product-config.toml", "value": "cheap"},
            suggestions=["Use a number, e.g. min_price = 0"],
        )
    """

    pass


__all__ = [
    "ProductConfigError",
    "UnsupportedOperationError",
    "CyclicStructureError",
    "ValidationError",
    "ConfigurationError",
]
