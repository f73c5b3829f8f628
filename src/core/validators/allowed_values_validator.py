"""
AllowedValuesValidator - validates membership in an enumerated set.
"""

from typing import Any

from .base_validator import BaseValidator, format_value
from .predicates import is_one_of


class AllowedValuesValidator(BaseValidator):
    """
    Validates that a field value is one of a fixed list of literals.

    Parameters:
    - valid_values: List of allowed values (exact match, no case folding,
      booleans never match numbers)
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        valid_values = self.parameters.get("valid_values")
        if valid_values is None:
            raise ValueError("AllowedValuesValidator requires 'valid_values' parameter")

        self.valid_values = list(valid_values)

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        if not is_one_of(value, self.valid_values):
            listed = ", ".join(format_value(v) for v in self.valid_values)
            raise self.fail(f"should be one of the valid values: {listed}.")

    @property
    def rule_type(self) -> str:
        return "valid_values"
