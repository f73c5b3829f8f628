"""
Core data models for the schema-driven record validator.

Rule and result models use Pydantic for runtime validation and type safety.
"""

from .field_rule import FieldRule, FieldType
from .validation_result import FieldError, ValidationResult
from .validation_schema import ANY_OF_KEY, SchemaError, ValidationSchema

__all__ = [
    "ANY_OF_KEY",
    "FieldError",
    "FieldRule",
    "FieldType",
    "SchemaError",
    "ValidationResult",
    "ValidationSchema",
]
