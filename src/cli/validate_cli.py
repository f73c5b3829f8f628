"""
Command-line interface for validating JSON records against a YAML schema.

Usage:
    python -m src.cli.validate_cli validate --schema <schema.yaml> --input <records.json> [options]
    python -m src.cli.validate_cli describe --schema <schema.yaml>
"""

import argparse
import json
import sys
from pathlib import Path

from src.core.models import SchemaError
from src.core.rules import SchemaLoader, summarize_schema
from src.observability.logger import get_logger, log_operation, setup_logger

logger = get_logger(__name__)

EXIT_INVALID = 1
EXIT_USAGE = 2


def _load_schema(schema_path: str) -> SchemaLoader:
    """Load and check both the schema and the options section, exiting on errors."""
    try:
        loader = SchemaLoader(schema_path)
        loader.load_schema()
        loader.load_options()
        return loader
    except (FileNotFoundError, SchemaError) as e:
        logger.error(f"Cannot load schema: {e}")
        print(f"error: {e}", file=sys.stderr)
        sys.exit(EXIT_USAGE)


def _load_records(input_path: str) -> tuple[list, bool]:
    """Return (records, single) where single means the file held one object."""
    path = Path(input_path)
    if not path.exists():
        logger.error(f"Input file not found: {input_path}")
        print(f"error: input file not found: {input_path}", file=sys.stderr)
        sys.exit(EXIT_USAGE)

    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Invalid JSON in {input_path}: {e}")
        print(f"error: invalid JSON in {input_path}: {e}", file=sys.stderr)
        sys.exit(EXIT_USAGE)

    if isinstance(payload, dict):
        return [payload], True
    if isinstance(payload, list) and all(isinstance(item, dict) for item in payload):
        return payload, False

    print("error: input must be a JSON object or a list of objects", file=sys.stderr)
    sys.exit(EXIT_USAGE)


def validate_command(args):
    """
    Validate records and print the results as JSON.

    Args:
        args: Command-line arguments
    """
    loader = _load_schema(args.schema)
    schema = loader.load_schema()
    options = loader.load_options()
    strip_unknown = args.strip_unknown or options["strip_unknown"]
    records, single = _load_records(args.input)

    validator = loader.create_validator()
    with log_operation("Validating records", logger=logger, record_count=len(records)):
        try:
            results = validator.validate_batch(records, schema, strip_unknown=strip_unknown)
        except SchemaError as e:
            print(f"error: {e}", file=sys.stderr)
            sys.exit(EXIT_USAGE)

    payload = [result.to_dict() for result in results]
    indent = 2 if args.pretty else None
    print(json.dumps(payload[0] if single else payload, indent=indent, default=str))

    failed = sum(1 for result in results if not result.passed)
    logger.info(
        f"Validated {len(results)} record(s), {failed} failed",
        extra={"record_count": len(results), "failed_count": failed},
    )
    if failed:
        sys.exit(EXIT_INVALID)


def describe_command(args):
    """Print a summary of the schema as JSON."""
    loader = _load_schema(args.schema)
    print(json.dumps(summarize_schema(loader.load_schema()), indent=2))


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Validate JSON records against a declarative schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a single record
  python -m src.cli.validate_cli validate --schema schemas/policy.yaml --input request.json

  # Validate a list of records and report undeclared keys removed
  python -m src.cli.validate_cli validate --schema schemas/policy.yaml --input batch.json \\
      --strip-unknown --pretty

  # Show what a schema declares
  python -m src.cli.validate_cli describe --schema schemas/policy.yaml
        """
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: LOG_LEVEL or WARNING)"
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "text"],
        help="Log format (default: LOG_FORMAT or json)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    validate_parser = subparsers.add_parser("validate", help="Validate records against a schema")
    validate_parser.add_argument(
        "--schema",
        required=True,
        help="Path to schema YAML file"
    )
    validate_parser.add_argument(
        "--input",
        required=True,
        help="Path to JSON file with one record or a list of records"
    )
    validate_parser.add_argument(
        "--strip-unknown",
        action="store_true",
        help="Include a copy of each record without undeclared keys"
    )
    validate_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent JSON output"
    )

    describe_parser = subparsers.add_parser("describe", help="Summarize a schema")
    describe_parser.add_argument(
        "--schema",
        required=True,
        help="Path to schema YAML file"
    )

    args = parser.parse_args(argv)

    if args.log_level or args.log_format:
        for name in (__name__, "src.core.rules.rule_engine"):
            setup_logger(name, level=args.log_level, format_type=args.log_format)

    if not args.command:
        parser.print_help()
        sys.exit(EXIT_USAGE)

    if args.command == "validate":
        validate_command(args)
    elif args.command == "describe":
        describe_command(args)


if __name__ == "__main__":
    main()
