"""
ValidationResult model representing the outcome of validating a record.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator


class FieldError(BaseModel):
    """
    One validation failure.

    Attributes:
        field: Field the error belongs to (None for "at least one of" errors)
        path: Dotted location of the field, e.g. "addr.zip"
        rule: Rule that failed ("required_field", "range", "any_of", ...)
        message: Consumer-facing message text
    """

    field: str | None = None
    path: str | None = None
    rule: str
    message: str


class ValidationResult(BaseModel):
    """
    Outcome of validating a record against a schema.

    Attributes:
        passed: Overall validation status
        errors: Ordered error messages, or None when there are none
        validated_record: Fields that produced no errors
        details: Structured form of ``errors``, in the same order
        stripped_record: Input without undeclared keys (strip-unknown mode only)
    """

    passed: bool
    errors: List[str] | None = None
    validated_record: Dict[str, Any] = Field(default_factory=dict)
    details: List[FieldError] = Field(default_factory=list)
    stripped_record: Dict[str, Any] | None = None

    @field_validator('errors')
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies there are no errors."""
        if info.data.get('passed') and v:
            raise ValueError("passed=True but errors is not empty")
        return v or None

    @classmethod
    def from_details(
        cls,
        details: List[FieldError],
        validated_record: Dict[str, Any],
        stripped_record: Dict[str, Any] | None = None,
    ) -> "ValidationResult":
        return cls(
            passed=not details,
            errors=[detail.message for detail in details] or None,
            validated_record=validated_record,
            details=details,
            stripped_record=stripped_record,
        )

    def errors_for(self, path: str) -> List[str]:
        """Messages for a single field, addressed by its dotted path."""
        return [detail.message for detail in self.details if detail.path == path]

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape: {"errors": [...] | None, "validatedRecord": {...}}."""
        payload: Dict[str, Any] = {
            "errors": self.errors,
            "validatedRecord": self.validated_record,
        }
        if self.stripped_record is not None:
            payload["strippedRecord"] = self.stripped_record
        return payload

    class Config:
        json_schema_extra = {
            "example": {
                "passed": False,
                "errors": ["Field zip should be only 5 characters."],
                "validated_record": {"name": "John"},
                "details": [
                    {
                        "field": "zip",
                        "path": "addr.zip",
                        "rule": "length",
                        "message": "Field zip should be only 5 characters.",
                    }
                ],
            }
        }
