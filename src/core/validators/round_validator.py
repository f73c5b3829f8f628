"""
RoundValidator - validates that a number has no decimal part.
"""

from typing import Any

from .base_validator import BaseValidator
from .predicates import is_whole_number, to_number


class RoundValidator(BaseValidator):
    """
    Validates that a numeric value is a whole number.

    Values that do not coerce to a number are left to the type check.
    """

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        if to_number(value) is None:
            return

        if not is_whole_number(value):
            raise self.fail("should be a rounded number without decimal points.")

    @property
    def rule_type(self) -> str:
        return "round"
