"""
TypeValidator - validates the runtime type of a field value.
"""

from collections.abc import Mapping
from typing import Any

from .base_validator import BaseValidator
from .predicates import is_integer, is_string


def _is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


class TypeValidator(BaseValidator):
    """
    Validates that a field matches the expected type.

    Integer checks are lenient: integer literal strings such as "10" pass.

    Supported types:
    - "integer" (alias "int")
    - "string" (alias "str")
    - "object"
    """

    TYPE_CHECKS = {
        "integer": (is_integer, "should be an integer."),
        "int": (is_integer, "should be an integer."),
        "string": (is_string, "should be a string."),
        "str": (is_string, "should be a string."),
        "object": (_is_object, "should be an object."),
    }

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        expected_type = self.parameters.get("expected_type")
        if not expected_type:
            raise ValueError("TypeValidator requires 'expected_type' parameter")

        check = self.TYPE_CHECKS.get(str(expected_type).lower())
        if not check:
            raise ValueError(f"Unsupported type: {expected_type}")

        self.expected_type = str(expected_type).lower()
        self._check, self._message = check

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate that the value matches the expected type.

        Args:
            value: The field value to validate
            record: The record level the field belongs to

        Raises:
            ValidationError: If type validation fails
        """
        if not self._check(value):
            raise self.fail(self._message)

    @property
    def rule_type(self) -> str:
        return "type_check"
