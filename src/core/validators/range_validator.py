"""
RangeValidator - validates numeric values against inclusive bounds.
"""

from typing import Any

from .base_validator import BaseValidator, format_value
from .predicates import in_range_max, in_range_min


class RangeValidator(BaseValidator):
    """
    Validates that a numeric field is within a specified range.

    Values are coerced to numbers first, so "70" is compared as 70.
    A value that cannot be coerced fails whichever bound is configured.

    Parameters:
    - min: Minimum value (inclusive)
    - max: Maximum value (inclusive)
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        self.min_value = self.parameters.get("min")
        self.max_value = self.parameters.get("max")

        if self.min_value is None and self.max_value is None:
            raise ValueError("RangeValidator requires at least one of: min, max")

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate that the value is within the specified range.

        Args:
            value: The field value to validate
            record: The record level the field belongs to

        Raises:
            ValidationError: If value is outside the range
        """
        if self.min_value is not None and not in_range_min(value, self.min_value):
            raise self.fail(f"should be at least {format_value(self.min_value)}.")

        if self.max_value is not None and not in_range_max(value, self.max_value):
            raise self.fail(f"should be at most {format_value(self.max_value)}.")

    @property
    def rule_type(self) -> str:
        return "range"
