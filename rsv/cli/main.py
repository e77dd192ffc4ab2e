"""
RSV CLI — Command-line interface for document validation.

    rsv validate schemas.yaml lead.json --root demo.lead
    rsv records schemas.yaml

Exit codes for validate: 0 valid, 1 invalid, 2 unusable input.
"""

import argparse
import json
import sys
from pathlib import Path

from rsv import __version__
from rsv.catalog.loader import load_catalog
from rsv.core.errors import CatalogError
from rsv.engine.source import DocumentSource
from rsv.validator import SchemaValidator, ValidationReport


EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rsv",
        description="Record Schema Validator",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"rsv {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a JSON document")
    validate_parser.add_argument(
        "schema",
        type=str,
        help="Schema definition file (.json, .yaml, .yml)",
    )
    validate_parser.add_argument(
        "document",
        type=str,
        help="JSON document to validate (use - for stdin)",
    )
    validate_parser.add_argument(
        "-r",
        "--root",
        type=str,
        required=True,
        help="Full name of the root record, e.g. schema.omp.lead",
    )
    validate_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report format (default: text)",
    )

    # Logging configuration
    validate_parser.add_argument(
        "--log-level",
        type=str,
        choices=["silent", "info", "verbose", "debug"],
        default=None,
        help="Log verbosity level (default: info, or RSV_LOG_LEVEL env var)",
    )
    validate_parser.add_argument(
        "--log-format",
        type=str,
        choices=["console", "json"],
        default=None,
        help="Log output format (default: console, or RSV_LOG_FORMAT env var)",
    )
    validate_parser.add_argument(
        "--log-channel",
        type=str,
        default=None,
        help="Comma-separated log channels to show (catalog,traversal,check,system). Default: all",
    )

    # Records command
    records_parser = subparsers.add_parser("records", help="List the records of a schema file")
    records_parser.add_argument(
        "schema",
        type=str,
        help="Schema definition file (.json, .yaml, .yml)",
    )

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "validate":
        return run_validate(args)
    if args.command == "records":
        return run_records(args)

    return 0


def run_validate(args: argparse.Namespace) -> int:
    """Run validate command."""
    from rsv.core.logging import configure_logging

    channels = None
    if args.log_channel:
        channels = [ch.strip() for ch in args.log_channel.split(",")]

    configure_logging(
        level=args.log_level,
        format=args.log_format,
        channels=channels,
        force=True,
    )

    try:
        validator = SchemaValidator.from_path(args.schema)
    except CatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    if args.document == "-":
        try:
            document = DocumentSource.from_value(json.load(sys.stdin))
        except ValueError as e:
            print(f"Error: stdin is not valid JSON: {e}", file=sys.stderr)
            return EXIT_USAGE
    elif not Path(args.document).is_file():
        print(f"Error: document not found: {args.document}", file=sys.stderr)
        return EXIT_USAGE
    else:
        document = Path(args.document)

    report = validator.validate(document, args.root)

    if args.format == "json":
        print(report.model_dump_json(indent=2))
    else:
        print(format_report(report))

    return EXIT_VALID if report.valid else EXIT_INVALID


def format_report(report: ValidationReport) -> str:
    """Render a report as plain text."""
    status = "VALID" if report.valid else "INVALID"
    lines = [
        f"{status}: {report.source} against {report.root} "
        f"({report.examined} fields examined)"
    ]
    for diagnostic in report.diagnostics:
        lines.append(f"  {diagnostic}")
    return "\n".join(lines)


def run_records(args: argparse.Namespace) -> int:
    """List the full names and shapes of every record."""
    try:
        catalog = load_catalog(args.schema)
    except CatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    for record in catalog:
        print(f"{record.full_name}\t{record.type}\t{len(record.fields)} fields")
    return 0


if __name__ == "__main__":
    sys.exit(main())
