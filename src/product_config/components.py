"""
Product component tree.

A product is modelled as a tree of components:

- ``Part``: a leaf with a fixed price and no children
- ``Assembly``: an ordered collection of parts and assemblies whose price is
  the sum of its children, plus a list of mandatory components that must be
  present somewhere below it

Example::

    from product_config import Assembly, Part

    cpu = Part("Intel i9 CPU", 500)
    board = Assembly("Motherboard")
    board.add_child(cpu)
    board.add_mandatory(cpu)

    board.calculate_price()  # Decimal('500')
    board.validate().is_valid  # True
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator, List, Optional, Tuple

from .exceptions import CyclicStructureError, UnsupportedOperationError
from .pricing import as_price
from .validation import ValidationPolicy, ValidationResult

logger = logging.getLogger(__name__)


class ProductComponent(ABC):
    """Common interface of parts and assemblies."""

    name: str

    #: True for components that can hold children
    is_composite: bool = False

    @abstractmethod
    def calculate_price(self) -> Decimal:
        """Total price of this component."""

    @abstractmethod
    def validate(self, policy: Optional[ValidationPolicy] = None) -> ValidationResult:
        """Validate this component (and anything below it) against a policy."""

    @abstractmethod
    def add_child(self, component: ProductComponent) -> None:
        """Add a child component."""

    @abstractmethod
    def remove_child(self, component: ProductComponent) -> None:
        """Remove a child component."""


@dataclass(frozen=True, eq=False)
class Part(ProductComponent):
    """
    A simple component with a fixed price.

    Parts are immutable and compare by identity, so two parts with the same
    name and price are still distinct children of an assembly.
    """

    name: str
    price: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "price", as_price(self.price))

    def calculate_price(self) -> Decimal:
        return self.price

    def add_child(self, component: ProductComponent) -> None:
        raise UnsupportedOperationError(
            "Cannot add a component to a simple component.",
            context={"component": self.name, "child": component.name},
            suggestions=["Use an Assembly to group components"],
        )

    def remove_child(self, component: ProductComponent) -> None:
        raise UnsupportedOperationError(
            "Cannot remove a component from a simple component.",
            context={"component": self.name, "child": component.name},
        )

    def validate(self, policy: Optional[ValidationPolicy] = None) -> ValidationResult:
        if policy is None:
            policy = ValidationPolicy()

        result = ValidationResult()
        if not policy.is_price_acceptable(self):
            result.add_error(f"Component '{self.name}' is invalid due to price constraints.")
        return result


class Assembly(ProductComponent):
    """
    A composite component built from other components.

    Children keep their insertion order and the same component may be added
    more than once, or to several assemblies. The price is recomputed from the
    children on every access.

    Mandatory components are matched by name: any component with the same
    name anywhere below the assembly satisfies the requirement. The name is
    fixed at construction.
    """

    is_composite = True

    def __init__(self, name: str):
        self._name = name
        self._children: List[ProductComponent] = []
        self._mandatory: List[ProductComponent] = []

    def __repr__(self) -> str:
        return (
            f"Assembly(name={self.name!r}, children={len(self._children)}, "
            f"mandatory={[m.name for m in self._mandatory]!r})"
        )

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def name(self) -> str:
        return self._name

    @property
    def children(self) -> Tuple[ProductComponent, ...]:
        """Direct children in insertion order."""
        return tuple(self._children)

    @property
    def mandatory(self) -> Tuple[ProductComponent, ...]:
        """Mandatory components in the order they were declared."""
        return tuple(self._mandatory)

    @property
    def price(self) -> Decimal:
        return self.calculate_price()

    # =========================================================================
    # TREE NAVIGATION
    # =========================================================================

    def iter_descendants(self) -> Iterator[ProductComponent]:
        """Yield every component below this one, depth-first, pre-order."""
        for child in self._children:
            yield child
            if isinstance(child, Assembly):
                yield from child.iter_descendants()

    def contains(self, component: ProductComponent) -> bool:
        """Check whether ``component`` itself (by identity) is below this assembly."""
        return any(node is component for node in self.iter_descendants())

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def add_child(self, component: ProductComponent) -> None:
        """
        Append a child component.

        Raises:
            CyclicStructureError: If the assembly would become its own descendant
        """
        if component is self or (
            isinstance(component, Assembly) and component.contains(self)
        ):
            logger.warning(f"Rejected cyclic edge '{self.name}' -> '{component.name}'")
            raise CyclicStructureError(
                f"Cannot add '{component.name}' under '{self.name}': "
                "an assembly cannot contain itself",
                context={"parent": self.name, "child": component.name},
            )

        self._children.append(component)
        logger.debug(f"Added '{component.name}' to '{self.name}'")

    def remove_child(self, component: ProductComponent) -> None:
        """Remove the first occurrence of ``component``; does nothing if absent."""
        for index, child in enumerate(self._children):
            if child is component:
                del self._children[index]
                logger.debug(f"Removed '{component.name}' from '{self.name}'")
                return

    def add_mandatory(self, component: ProductComponent) -> None:
        """Declare a component that must be present below this assembly."""
        if any(m.name == component.name for m in self._mandatory):
            return
        self._mandatory.append(component)

    def remove_mandatory(self, component: ProductComponent) -> None:
        """Drop the mandatory entry with ``component``'s name, if any."""
        self._mandatory = [m for m in self._mandatory if m.name != component.name]

    # =========================================================================
    # CALCULATIONS
    # =========================================================================

    def calculate_price(self) -> Decimal:
        total = Decimal(0)
        for child in self._children:
            total += child.calculate_price()
        return total

    def validate(self, policy: Optional[ValidationPolicy] = None) -> ValidationResult:
        """
        Validate the assembly and everything below it.

        Errors are collected rather than raised, in a fixed order: the
        assembly's own price error, then its mandatory component errors,
        then each child's errors in child order.

        When the mandatory check fails, every mandatory component is
        reported, including ones that are actually present.
        """
        if policy is None:
            policy = ValidationPolicy()

        result = ValidationResult()

        if not policy.is_price_acceptable(self):
            result.add_error(f"Composite '{self.name}' is invalid due to price constraints.")

        if not policy.has_required_children(self, self.children):
            for mandatory in self._mandatory:
                result.add_error(
                    f"Composite '{self.name}' is missing mandatory component '{mandatory.name}'."
                )
            result.is_valid = False

        for child in self._children:
            child_result = child.validate(policy)
            if not child_result:
                result.merge(child_result)

        logger.debug(
            f"Validated '{self.name}': "
            f"{'valid' if result.is_valid else f'{result.error_count} error(s)'}"
        )
        return result
