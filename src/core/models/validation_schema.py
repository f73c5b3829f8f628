"""
ValidationSchema: the parsed form of a schema mapping.
"""

from collections.abc import Mapping
from typing import Any, Iterator

from pydantic import ValidationError as PydanticValidationError

from .field_rule import FieldRule, FieldType

ANY_OF_KEY = "_anyOf"


class SchemaError(ValueError):
    """Raised when a schema document is malformed."""
    pass


class ValidationSchema:
    """
    Ordered field rules for one level of a record, plus the optional
    ``_anyOf`` group (at least one of the named fields must be present).

    Nested ``properties`` stay as raw mappings and are parsed on demand
    with ``nested()``.

    Rules that cannot be parsed do not abort parsing: the field keeps a
    placeholder rule and the reason is kept in ``invalid_rules`` so the
    engine can report it. ``check()`` turns them into a SchemaError for
    callers that want a strict schema.
    """

    def __init__(
        self,
        fields: dict[str, FieldRule],
        any_of: list[str] | None = None,
        invalid_rules: dict[str, str] | None = None,
    ):
        self.fields = fields
        self.any_of = any_of or []
        self.invalid_rules = invalid_rules or {}

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ValidationSchema":
        """
        Parse a raw schema mapping.

        Raises:
            SchemaError: If the schema itself or its ``_anyOf`` group is not
                the expected container type
        """
        if not isinstance(raw, Mapping):
            raise SchemaError(f"Schema must be a mapping, got {type(raw).__name__}")

        any_of = raw.get(ANY_OF_KEY)
        if any_of is not None:
            if isinstance(any_of, str | bytes) or not isinstance(any_of, list | tuple | set | frozenset):
                raise SchemaError(f"'{ANY_OF_KEY}' must be a list of field names")
            any_of = [str(name) for name in any_of]

        fields: dict[str, FieldRule] = {}
        invalid_rules: dict[str, str] = {}
        for field_name, rule_def in raw.items():
            if field_name == ANY_OF_KEY:
                continue
            if isinstance(rule_def, FieldRule):
                fields[field_name] = rule_def
                continue
            if not isinstance(rule_def, Mapping):
                invalid_rules[field_name] = f"Rule for field '{field_name}' must be a mapping"
                fields[field_name] = FieldRule()
                continue
            try:
                fields[field_name] = FieldRule.model_validate(dict(rule_def))
            except PydanticValidationError as e:
                invalid_rules[field_name] = f"Invalid rule for field '{field_name}': {e}"
                fields[field_name] = FieldRule(
                    type=rule_def.get("type"),
                    required=rule_def.get("required") is True,
                )

        return cls(fields, any_of, invalid_rules)

    def check(self) -> None:
        """
        Raise for the first unparseable rule at this level or below.

        Raises:
            SchemaError: If any field rule is malformed
        """
        for message in self.invalid_rules.values():
            raise SchemaError(message)
        for _, nested in self.iter_nested():
            nested.check()

    @classmethod
    def coerce(cls, schema: "ValidationSchema | Mapping[str, Any]") -> "ValidationSchema":
        if isinstance(schema, ValidationSchema):
            return schema
        return cls.from_dict(schema)

    def nested(self, field_name: str) -> "ValidationSchema":
        """Parse the nested schema of an object field (empty if it declares none)."""
        return ValidationSchema.from_dict(self.fields[field_name].properties or {})

    def iter_nested(self) -> Iterator[tuple[str, "ValidationSchema"]]:
        """Yield (field_name, nested schema) for every object field."""
        for field_name, rule in self.fields.items():
            if rule.field_type is FieldType.OBJECT:
                yield field_name, self.nested(field_name)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self.fields

    def __len__(self) -> int:
        return len(self.fields)

    def __repr__(self) -> str:
        return f"ValidationSchema(fields={list(self.fields)}, any_of={self.any_of})"
