"""
PatternValidator - validates the text shape of phone numbers, emails and dates.
"""

from typing import Any

from .base_validator import BaseValidator
from .predicates import (
    DATE_PATTERNS,
    is_email_shape,
    is_phone_shape,
    is_valid_date,
    resolve_date_format,
)


class PatternValidator(BaseValidator):
    """
    Validates that a field value's text form matches a known shape.

    Parameters:
    - pattern: "phone", "email" or "date"
    - date_format: Date format name (only for "date"; defaults to dd/mm/yyyy)

    Non-string values are rendered as text before matching, so the number
    1234567890 is a valid phone number.
    """

    PATTERNS = ("phone", "email", "date")

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        pattern = self.parameters.get("pattern")
        if pattern not in self.PATTERNS:
            raise ValueError(f"PatternValidator requires 'pattern' to be one of {', '.join(self.PATTERNS)}")

        self.pattern = pattern
        self.requested_format = self.parameters.get("date_format")
        self.date_format = resolve_date_format(self.requested_format)

    @property
    def uses_fallback_format(self) -> bool:
        """True when a date format was requested but is not supported."""
        return (
            self.pattern == "date"
            and self.requested_format is not None
            and self.requested_format not in DATE_PATTERNS
        )

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate that the value matches the configured shape.

        Raises:
            ValidationError: If the value does not match
        """
        if self.pattern == "phone" and not is_phone_shape(value):
            raise self.fail("should be a valid 10-digit phone number.")

        if self.pattern == "email" and not is_email_shape(value):
            raise self.fail("should be a valid email address.")

        if self.pattern == "date" and not is_valid_date(value, self.date_format):
            raise self.fail(f"should be a valid date in the format {self.date_format}.")

    @property
    def rule_type(self) -> str:
        if self.pattern == "date":
            return "date_format"
        return self.pattern
