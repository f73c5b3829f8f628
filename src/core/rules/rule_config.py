"""
Schema configuration management.

Loads validation schemas from YAML files and provides utilities
for building schemas programmatically.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from src.core.models import ANY_OF_KEY, SchemaError, ValidationSchema

from .rule_engine import DEFAULT_MAX_DEPTH, SchemaValidator


class SchemaLoader:
    """
    Loads a validation schema from a YAML configuration file.

    Expected YAML format:
    ```yaml
    options:
      strip_unknown: true
      max_depth: 8

    schema:
      _anyOf: [phone_number, policy_number]

      phone_number:
        type: number
        phone: true

      policy_number:
        type: string
        minLength: 5

      address:
        type: object
        properties:
          zip:
            type: string
            length: 5
    ```
    """

    OPTION_DEFAULTS = {
        "strip_unknown": False,
        "max_depth": DEFAULT_MAX_DEPTH,
    }

    def __init__(self, config_path: str | Path):
        """
        Initialize the schema loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Schema file not found: {config_path}")
        self._config: dict[str, Any] | None = None

    def _read(self) -> dict[str, Any]:
        if self._config is None:
            try:
                with open(self.config_path, encoding="utf-8") as f:
                    config = yaml.safe_load(f)
            except (yaml.YAMLError, UnicodeDecodeError) as e:
                raise SchemaError(f"Invalid YAML in {self.config_path}: {e}") from e

            if not isinstance(config, dict) or "schema" not in config:
                raise SchemaError("Configuration file must contain a 'schema' section")
            self._config = config
        return self._config

    def load_schema(self) -> dict[str, Any]:
        """
        Load the raw schema mapping, checking every nesting level.

        Returns:
            Schema mapping suitable for SchemaValidator.validate

        Raises:
            SchemaError: If the schema or one of its rules is malformed
        """
        raw = self._read()["schema"]
        ValidationSchema.from_dict(raw).check()
        return raw

    def load_options(self) -> dict[str, Any]:
        """
        Load engine options, filling in defaults.

        Raises:
            SchemaError: If options are not a mapping or contain unknown keys
        """
        options = self._read().get("options") or {}
        if not isinstance(options, dict):
            raise SchemaError("'options' section must be a mapping")

        unknown = set(options) - set(self.OPTION_DEFAULTS)
        if unknown:
            raise SchemaError(f"Unknown options: {', '.join(sorted(unknown))}")

        merged = {**self.OPTION_DEFAULTS, **options}
        if not isinstance(merged["max_depth"], int) or merged["max_depth"] < 1:
            raise SchemaError("'max_depth' must be a positive integer")
        merged["strip_unknown"] = bool(merged["strip_unknown"])
        return merged

    def create_validator(self) -> SchemaValidator:
        """Build a SchemaValidator configured from the options section."""
        return SchemaValidator(max_depth=self.load_options()["max_depth"])


class SchemaBuilder:
    """
    Programmatically build schemas (for testing or dynamic schemas).

    Keyword constraints use snake_case and are emitted with the camelCase
    keys schemas are authored with.
    """

    CAMEL_CASE_KEYS = {
        "min_length": "minLength",
        "max_length": "maxLength",
        "valid_values": "validValues",
        "date_format": "dateFormat",
    }

    def __init__(self):
        """Initialize empty schema."""
        self.schema: dict[str, Any] = {}

    def _add(self, field_name: str, field_type: str, required: bool, constraints: dict[str, Any]) -> "SchemaBuilder":
        rule: dict[str, Any] = {"type": field_type}
        if required:
            rule["required"] = True
        for key, value in constraints.items():
            if value is not None:
                rule[self.CAMEL_CASE_KEYS.get(key, key)] = value
        self.schema[field_name] = rule
        return self

    def add_number(self, field_name: str, required: bool = False, **constraints: Any) -> "SchemaBuilder":
        """Add a number field (constraints: min, max, round, phone)."""
        return self._add(field_name, "number", required, constraints)

    def add_string(self, field_name: str, required: bool = False, **constraints: Any) -> "SchemaBuilder":
        """Add a string field (constraints: min_length, max_length, length, phone, valid_values, email)."""
        return self._add(field_name, "string", required, constraints)

    def add_date(self, field_name: str, required: bool = False, date_format: str | None = None) -> "SchemaBuilder":
        """Add a date field."""
        return self._add(field_name, "date", required, {"date_format": date_format})

    def add_object(
        self,
        field_name: str,
        properties: "Mapping[str, Any] | SchemaBuilder",
        required: bool = False,
    ) -> "SchemaBuilder":
        """Add a nested object field."""
        if isinstance(properties, SchemaBuilder):
            properties = properties.build()
        return self._add(field_name, "object", required, {"properties": dict(properties)})

    def any_of(self, *field_names: str) -> "SchemaBuilder":
        """Require at least one of the named fields to be present."""
        self.schema[ANY_OF_KEY] = list(field_names)
        return self

    def build(self) -> dict[str, Any]:
        """Build and return the schema mapping."""
        return dict(self.schema)
