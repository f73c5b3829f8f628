"""
Field rule implementations.

Provides validators for required fields, type checking, numeric ranges,
rounding, string length, enumerated values and text patterns
(phone, email, date).
"""

from .allowed_values_validator import AllowedValuesValidator
from .base_validator import BaseValidator, ValidationError
from .length_validator import LengthValidator
from .pattern_validator import PatternValidator
from .range_validator import RangeValidator
from .required_field_validator import RequiredFieldValidator
from .round_validator import RoundValidator
from .type_validator import TypeValidator

__all__ = [
    "BaseValidator",
    "ValidationError",
    "RequiredFieldValidator",
    "TypeValidator",
    "RangeValidator",
    "RoundValidator",
    "LengthValidator",
    "PatternValidator",
    "AllowedValuesValidator",
]
