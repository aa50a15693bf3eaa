"""
Plain-text rendering of validation results.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from .validation import ValidationResult


def format_report(result: ValidationResult, total_price: Optional[Decimal] = None) -> List[str]:
    """
    Render a validation result as report lines.

    A valid result gives ``Configuration is valid.`` followed by the total
    price when one is given. An invalid result gives
    ``Configuration is invalid:`` followed by one ``- <error>`` line per error.
    """
    if result.is_valid:
        lines = ["Configuration is valid."]
        if total_price is not None:
            lines.append(f"Total Price: ${total_price}")
        return lines

    return ["Configuration is invalid:"] + [f"- {error}" for error in result.errors]
