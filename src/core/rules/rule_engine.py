"""
Schema engine for validating records against a declarative schema.

The engine walks a schema's fields in declaration order, runs the field
rules that apply to each field's type, recurses into nested objects and
collects every failure instead of stopping at the first one.
"""

from collections.abc import Mapping
from typing import Any, Callable

from src.core.models import (
    FieldError,
    FieldRule,
    FieldType,
    SchemaError,
    ValidationResult,
    ValidationSchema,
)
from src.core.validators import (
    AllowedValuesValidator,
    BaseValidator,
    LengthValidator,
    PatternValidator,
    RangeValidator,
    RequiredFieldValidator,
    RoundValidator,
    TypeValidator,
    ValidationError,
)
from src.core.validators.predicates import is_present
from src.observability.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_DEPTH = 32

SchemaLike = ValidationSchema | Mapping[str, Any]


def number_validators(field_name: str, rule: FieldRule) -> list[BaseValidator]:
    """Integer, min, max, round, phone. A phone rule replaces the integer check."""
    validators: list[BaseValidator] = []
    if not rule.phone:
        validators.append(TypeValidator(field_name, {"expected_type": "integer"}))
    if rule.min is not None:
        validators.append(RangeValidator(field_name, {"min": rule.min}))
    if rule.max is not None:
        validators.append(RangeValidator(field_name, {"max": rule.max}))
    if rule.round:
        validators.append(RoundValidator(field_name))
    if rule.phone:
        validators.append(PatternValidator(field_name, {"pattern": "phone"}))
    return validators


def string_validators(field_name: str, rule: FieldRule) -> list[BaseValidator]:
    """String type, minLength, maxLength, length, phone, validValues, email."""
    validators: list[BaseValidator] = [TypeValidator(field_name, {"expected_type": "string"})]
    for bound in LengthValidator.BOUNDS:
        limit = getattr(rule, bound)
        if limit is not None:
            validators.append(LengthValidator(field_name, {bound: limit}))
    if rule.phone:
        validators.append(PatternValidator(field_name, {"pattern": "phone"}))
    if rule.valid_values is not None:
        validators.append(AllowedValuesValidator(field_name, {"valid_values": rule.valid_values}))
    if rule.email:
        validators.append(PatternValidator(field_name, {"pattern": "email"}))
    return validators


def date_validators(field_name: str, rule: FieldRule) -> list[BaseValidator]:
    validator = PatternValidator(field_name, {"pattern": "date", "date_format": rule.date_format})
    if validator.uses_fallback_format:
        logger.warning(
            f"Unsupported date format '{rule.date_format}' for field {field_name}, using {validator.date_format}",
            extra={"field_name": field_name, "date_format": rule.date_format},
        )
    return [validator]


class SchemaValidator:
    """
    Validates records against a schema.

    Stateless apart from its configuration, so a single instance can be
    shared freely. Each call returns a new ValidationResult:

    - ``errors``: every failure, ordered by field declaration then check order
    - ``validated_record``: only the fields that produced no errors, with
      nested objects replaced by their validated copies
    - ``stripped_record``: (strip-unknown mode) the input minus keys the
      schema does not declare; the input itself is never modified
    """

    VALIDATOR_REGISTRY: dict[FieldType, Callable[[str, FieldRule], list[BaseValidator]]] = {
        FieldType.NUMBER: number_validators,
        FieldType.STRING: string_validators,
        FieldType.DATE: date_validators,
    }

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize the validator.

        Args:
            max_depth: Deepest object nesting level that will be recursed into
        """
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.max_depth = max_depth

    def validate(
        self,
        record: Mapping[str, Any],
        schema: SchemaLike,
        strip_unknown: bool = False,
    ) -> ValidationResult:
        """
        Validate a record against a schema.

        Args:
            record: The record to validate
            schema: Raw schema mapping or a parsed ValidationSchema
            strip_unknown: Also return a copy of the record without undeclared keys

        Returns:
            ValidationResult with errors and the validated record

        Raises:
            SchemaError: If the schema is not a mapping, its "at least one of"
                group is malformed or nesting exceeds max_depth
            TypeError: If the record is not a mapping
        """
        if not isinstance(record, Mapping):
            raise TypeError(f"Record must be a mapping, got {type(record).__name__}")

        parsed = ValidationSchema.coerce(schema)
        details: list[FieldError] = []
        validated, stripped = self._validate_level(record, parsed, details, path="", depth=1)

        logger.debug(
            "Validated record",
            extra={
                "field_count": len(parsed),
                "error_count": len(details),
                "strip_unknown": strip_unknown,
            },
        )

        return ValidationResult.from_details(
            details,
            validated,
            stripped if strip_unknown else None,
        )

    def validate_batch(
        self,
        records: list[Mapping[str, Any]],
        schema: SchemaLike,
        strip_unknown: bool = False,
    ) -> list[ValidationResult]:
        """
        Validate a batch of records against one schema.

        Returns:
            List of ValidationResult objects, one per record
        """
        parsed = ValidationSchema.coerce(schema)
        return [self.validate(record, parsed, strip_unknown) for record in records]

    def _validate_level(
        self,
        record: Mapping[str, Any],
        schema: ValidationSchema,
        details: list[FieldError],
        path: str,
        depth: int,
    ) -> tuple[dict[str, Any], dict[str, Any]]:
        """
        Validate one nesting level.

        Appends failures to ``details`` and returns the level's validated
        record together with its strip-unknown copy.
        """
        if depth > self.max_depth:
            raise SchemaError(f"Maximum nesting depth of {self.max_depth} exceeded at '{path}'")

        validated: dict[str, Any] = {}
        stripped = {key: value for key, value in record.items() if key in schema}

        if schema.any_of and not any(is_present(record.get(name)) for name in schema.any_of):
            details.append(FieldError(
                field=None,
                path=path or None,
                rule="any_of",
                message=f"At least one of the following fields is required: {', '.join(schema.any_of)}.",
            ))

        for field_name, rule in schema.fields.items():
            value = record.get(field_name)
            field_path = f"{path}.{field_name}" if path else field_name
            field_errors: list[FieldError] = []

            if not is_present(value):
                if rule.required:
                    self._run(RequiredFieldValidator(field_name), value, record, field_path, field_errors)
                details.extend(field_errors)
                continue

            field_type = rule.field_type
            if field_name in schema.invalid_rules:
                logger.warning(
                    schema.invalid_rules[field_name],
                    extra={"field_name": field_name},
                )
                field_errors.append(FieldError(
                    field=field_name,
                    path=field_path,
                    rule="invalid_rule",
                    message=f"Invalid rule for field {field_name}.",
                ))
            elif field_type is FieldType.OBJECT:
                value, nested_stripped = self._validate_object(
                    field_name, value, schema, field_path, field_errors, depth
                )
                if nested_stripped is not None:
                    stripped[field_name] = nested_stripped
            elif field_type in self.VALIDATOR_REGISTRY:
                for validator in self.VALIDATOR_REGISTRY[field_type](field_name, rule):
                    self._run(validator, value, record, field_path, field_errors)
            else:
                logger.warning(
                    f"Unsupported type {rule.type} for field {field_name}",
                    extra={"field_name": field_name, "field_type": rule.type},
                )
                field_errors.append(FieldError(
                    field=field_name,
                    path=field_path,
                    rule="unsupported_type",
                    message=f"Unsupported type {rule.type} for field {field_name}.",
                ))

            details.extend(field_errors)
            if not field_errors:
                validated[field_name] = value

        return validated, stripped

    def _validate_object(
        self,
        field_name: str,
        value: Any,
        schema: ValidationSchema,
        path: str,
        field_errors: list[FieldError],
        depth: int,
    ) -> tuple[Any, dict[str, Any] | None]:
        """Check that value is a mapping, then recurse into its nested schema."""
        type_check = TypeValidator(field_name, {"expected_type": "object"})
        self._run(type_check, value, {field_name: value}, path, field_errors)
        if field_errors:
            return value, None

        nested_errors: list[FieldError] = []
        nested_validated, nested_stripped = self._validate_level(
            value, schema.nested(field_name), nested_errors, path, depth + 1
        )
        field_errors.extend(nested_errors)
        return nested_validated, nested_stripped

    @staticmethod
    def _run(
        validator: BaseValidator,
        value: Any,
        record: Mapping[str, Any],
        path: str,
        sink: list[FieldError],
    ) -> None:
        try:
            validator.validate(value, record)
        except ValidationError as e:
            sink.append(FieldError(
                field=e.field_name,
                path=path,
                rule=e.rule_name,
                message=e.message,
            ))


def validate(
    record: Mapping[str, Any],
    schema: SchemaLike,
    strip_unknown: bool = False,
) -> ValidationResult:
    """Validate a record with a default-configured SchemaValidator."""
    return SchemaValidator().validate(record, schema, strip_unknown)


def summarize_schema(schema: SchemaLike) -> dict[str, Any]:
    """
    Describe a schema: field counts by type, required fields, nested objects
    and "at least one of" groups. Nested fields are listed by dotted path.
    """
    summary: dict[str, Any] = {
        "total_fields": 0,
        "fields_by_type": {},
        "required_fields": [],
        "nested_objects": [],
        "any_of": [],
    }
    _summarize_level(ValidationSchema.coerce(schema), "", summary)
    return summary


def _summarize_level(schema: ValidationSchema, path: str, summary: dict[str, Any]) -> None:
    if schema.any_of:
        summary["any_of"].append([f"{path}{name}" for name in schema.any_of])

    for field_name, rule in schema.fields.items():
        summary["total_fields"] += 1
        counts = summary["fields_by_type"]
        type_name = str(rule.type)
        counts[type_name] = counts.get(type_name, 0) + 1
        if rule.required:
            summary["required_fields"].append(f"{path}{field_name}")

    for field_name, nested in schema.iter_nested():
        summary["nested_objects"].append(f"{path}{field_name}")
        _summarize_level(nested, f"{path}{field_name}.", summary)
