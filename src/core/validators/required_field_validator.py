"""
RequiredFieldValidator - ensures a field is present and not null.
"""

from typing import Any, Dict

from .base_validator import BaseValidator
from .predicates import is_present


class RequiredFieldValidator(BaseValidator):
    """
    Validates that a required field is present.

    Fails if the field is missing from the record or its value is None.
    Empty strings count as present.
    """

    def validate(self, value: Any, record: Dict[str, Any]) -> None:
        """
        Validate that the field is present and not null.

        Args:
            value: The field value to validate
            record: The record level the field belongs to

        Raises:
            ValidationError: If field is missing or None
        """
        if self.field_name not in record or not is_present(value):
            raise self.fail("is required.")

    @property
    def rule_type(self) -> str:
        return "required_field"
