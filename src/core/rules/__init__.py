"""
Schema validation engine and schema configuration management.
"""

from .rule_config import SchemaBuilder, SchemaLoader
from .rule_engine import SchemaValidator, summarize_schema, validate

__all__ = [
    "SchemaValidator",
    "SchemaLoader",
    "SchemaBuilder",
    "summarize_schema",
    "validate",
]
