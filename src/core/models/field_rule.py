"""
FieldRule model describing how one field of a record is validated.
"""

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, Field


class FieldType(str, Enum):
    """Field types the engine knows how to validate."""

    NUMBER = "number"
    STRING = "string"
    DATE = "date"
    OBJECT = "object"


class FieldRule(BaseModel):
    """
    Type tag plus optional constraint parameters for a single field.

    Schemas are authored with camelCase keys (``minLength``, ``validValues``);
    the snake_case attribute names are accepted as well.

    Attributes:
        type: "number", "string", "date" or "object". Other values, and a
            missing type, parse but are reported as unsupported during validation.
        required: Missing or null values are an error
        min: Inclusive lower bound (number)
        max: Inclusive upper bound (number)
        round: Value must have no decimal part (number)
        phone: Value must be a 10-digit phone number (number, string)
        min_length: Minimum character count (string)
        max_length: Maximum character count (string)
        length: Exact character count (string)
        valid_values: Allowed literal values (string)
        email: Value must look like an email address (string)
        date_format: One of the supported date format names (date)
        properties: Nested schema (object)
    """

    type: Any = None
    required: bool = False
    min: int | float | None = None
    max: int | float | None = None
    round: bool = False
    phone: bool = False
    min_length: int | None = Field(None, alias="minLength", ge=0)
    max_length: int | None = Field(None, alias="maxLength", ge=0)
    length: int | None = Field(None, ge=0)
    valid_values: List[Any] | None = Field(None, alias="validValues")
    email: bool = False
    date_format: str | None = Field(None, alias="dateFormat")
    properties: Dict[str, Any] | None = None

    @property
    def field_type(self) -> FieldType | None:
        """The matching FieldType, or None for an unsupported type name."""
        try:
            return FieldType(self.type)
        except (ValueError, TypeError):
            return None

    class Config:
        populate_by_name = True
        extra = "ignore"
        json_schema_extra = {
            "example": {
                "type": "string",
                "required": True,
                "minLength": 5,
                "validValues": ["POL12345", "POL67890"],
            }
        }
