"""
LengthValidator - validates the character count of a field value.
"""

from typing import Any

from .base_validator import BaseValidator
from .predicates import length_at_least, length_at_most, length_exactly


class LengthValidator(BaseValidator):
    """
    Validates the length of a string field.

    Parameters (exactly one is used, checked in this order):
    - min_length: Minimum number of characters
    - max_length: Maximum number of characters
    - length: Exact number of characters

    Values without a length (numbers, None) fail the configured bound.
    """

    BOUNDS = ("min_length", "max_length", "length")

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        configured = [name for name in self.BOUNDS if self.parameters.get(name) is not None]
        if len(configured) != 1:
            raise ValueError("LengthValidator requires exactly one of: min_length, max_length, length")

        self.bound = configured[0]
        self.limit = self.parameters[self.bound]

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate the value's length against the configured bound.

        Raises:
            ValidationError: If the length is out of bounds
        """
        if self.bound == "min_length" and not length_at_least(value, self.limit):
            raise self.fail(f"should have at least {self.limit} characters.")

        if self.bound == "max_length" and not length_at_most(value, self.limit):
            raise self.fail(f"should have at most {self.limit} characters.")

        if self.bound == "length" and not length_exactly(value, self.limit):
            raise self.fail(f"should be only {self.limit} characters.")

    @property
    def rule_type(self) -> str:
        return "length"
