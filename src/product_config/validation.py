"""
Validation policy and results for product component trees.

A ``ValidationPolicy`` holds two replaceable predicates:

- ``is_price_acceptable(component)``: is this component's price allowed
- ``has_required_children(component, candidates)``: are all of an assembly's
  mandatory components present among ``candidates`` or their descendants

The defaults require a strictly positive price and look mandatory components
up by name, depth-first. Callers can substitute either function::

    policy = ValidationPolicy(is_price_acceptable=lambda c: c.calculate_price() >= 0)
    result = product.validate(policy)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Iterable, List, Sequence

from .exceptions import ValidationError
from .pricing import PriceLike, as_price

if TYPE_CHECKING:
    from .components import ProductComponent
    from .config import Config

logger = logging.getLogger(__name__)

PriceCheck = Callable[["ProductComponent"], bool]
MandatoryCheck = Callable[["ProductComponent", Sequence["ProductComponent"]], bool]


@dataclass
class ValidationResult:
    """Outcome of validating a component tree."""

    is_valid: bool = True
    errors: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.is_valid

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def add_error(self, message: str) -> None:
        """Record an error and mark the result invalid."""
        self.errors.append(message)
        self.is_valid = False

    def merge(self, other: ValidationResult) -> None:
        """Append another result's errors after this one's."""
        self.errors.extend(other.errors)
        self.is_valid = self.is_valid and other.is_valid

    def raise_if_invalid(self) -> None:
        """Raise ``ValidationError`` carrying all errors if the result is invalid."""
        if not self.is_valid:
            raise ValidationError(list(self.errors))


def contains_component(candidates: Iterable[ProductComponent], name: str) -> bool:
    """
    Search for a component by name, depth-first, pre-order.

    Each candidate is compared by name; assemblies that do not match are
    searched recursively. Stops at the first match.
    """
    for candidate in candidates:
        if candidate.name == name:
            return True
        if candidate.is_composite and contains_component(candidate.children, name):
            return True
    return False


def price_is_positive(component: ProductComponent) -> bool:
    """Default price check: the price must be greater than zero."""
    return component.calculate_price() > 0


def mandatory_components_present(
    component: ProductComponent, candidates: Sequence[ProductComponent]
) -> bool:
    """
    Default mandatory check.

    Always true for parts and for assemblies without mandatory components.
    """
    if not component.is_composite:
        return True

    for mandatory in component.mandatory:
        if not contains_component(candidates, mandatory.name):
            logger.debug(f"'{component.name}' is missing mandatory '{mandatory.name}'")
            return False
    return True


@dataclass(frozen=True)
class ValidationPolicy:
    """Pair of predicates used by ``validate()``."""

    is_price_acceptable: PriceCheck = price_is_positive
    has_required_children: MandatoryCheck = mandatory_components_present

    @classmethod
    def with_minimum_price(
        cls, minimum: PriceLike, inclusive: bool = False
    ) -> ValidationPolicy:
        """
        Policy whose price check is ``price > minimum``.

        Args:
            minimum: Price threshold
            inclusive: Accept prices equal to ``minimum`` as well
        """
        threshold = as_price(minimum)

        if inclusive:

            def check(component: ProductComponent) -> bool:
                return component.calculate_price() >= threshold

        else:

            def check(component: ProductComponent) -> bool:
                return component.calculate_price() > threshold

        return cls(is_price_acceptable=check)

    @classmethod
    def from_config(cls, config: Config) -> ValidationPolicy:
        """Build the policy described by the ``[validation]`` config section."""
        validation = config.validation
        if validation.min_price == 0 and not validation.inclusive:
            return cls()
        return cls.with_minimum_price(validation.min_price, inclusive=validation.inclusive)
