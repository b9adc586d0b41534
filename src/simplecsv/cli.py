"""
Command-line interface for trying out field converters.

Decodes or encodes a single field value with the same binding a row
framework would use, either from command-line options or from a field
definition file.
"""

import argparse
import logging
import sys
from typing import NoReturn

from simplecsv.core.field_binding import FieldBinding
from simplecsv.core.registry import get_global_registry
from simplecsv.exceptions import (
    ConfigurationError,
    FieldDefinitionLoadError,
    UnknownConverterError,
)
from simplecsv.io.field_loader import FieldDefinitionLoader
from simplecsv.models import ParseError

EXIT_OK = 0
EXIT_CONFIGURATION_ERROR = 1
EXIT_PARSE_ERROR = 2
EXIT_FIELD_FILE_ERROR = 3
EXIT_UNKNOWN_TYPE = 4

NULL_TEXT = "<null>"

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure application logging.

    Args:
        debug: Enable debug-level logging if True.
        verbose: Enable info-level logging from the library if True.
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        level = logging.WARNING
        format_str = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stderr,
        force=True,  # Override existing configuration
    )


def _flags_argument(value: str) -> int:
    """Accept decimal, hex (0x..) or binary (0b..) flag bitsets."""
    try:
        flags = int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid flags value: '{value}'") from None
    if flags < 0:
        raise argparse.ArgumentTypeError("flags must not be negative")
    return flags


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="simplecsv-convert",
        description="Encode or decode a single field value with a converter.",
        epilog="""
Examples:
  %(prog)s decode --type bool --format "Y,N" Y
  %(prog)s decode --type bool --flags 2 maybe
  %(prog)s encode --type int --format ",d" 1234567
  %(prog)s decode --fields-file schema.yaml --field active Y
  %(prog)s types
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging output"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    field_options = argparse.ArgumentParser(add_help=False)
    selection = field_options.add_mutually_exclusive_group(required=True)
    selection.add_argument("--type", dest="type_name", help="Registered type name")
    selection.add_argument(
        "--fields-file", help="YAML/JSON file with field definitions"
    )
    field_options.add_argument("--field", help="Field name inside --fields-file")
    field_options.add_argument(
        "--format", dest="format_spec", default=None, help="Converter format"
    )
    field_options.add_argument(
        "--flags", type=_flags_argument, default=None, help="Converter flags bitset"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    decode_parser = subparsers.add_parser(
        "decode", parents=[field_options], help="Parse field text into a value"
    )
    decode_parser.add_argument("text", help="Field text (use '' for blank)")

    encode_parser = subparsers.add_parser(
        "encode",
        parents=[field_options],
        help="Write a value, given in the type's default form, as field text",
    )
    encode_parser.add_argument("value", help="Value in the type's default form")

    subparsers.add_parser("types", help="List registered type names")

    args = parser.parse_args(argv)

    if getattr(args, "fields_file", None):
        if not args.field:
            parser.error("--field is required with --fields-file")
        if args.format_spec is not None or args.flags is not None:
            parser.error("--format and --flags cannot be used with --fields-file")
    elif getattr(args, "field", None):
        parser.error("--field can only be used with --fields-file")

    return args


def _binding_from_arguments(args: argparse.Namespace) -> FieldBinding:
    registry = get_global_registry()
    if args.fields_file:
        definitions = FieldDefinitionLoader.load(args.fields_file)
        for definition in definitions:
            if definition.name == args.field:
                return FieldBinding.bind(definition, registry)
        raise FieldDefinitionLoadError(
            f"Field '{args.field}' not found in {args.fields_file}"
        )

    return FieldBinding.for_type(
        args.type_name,
        registry.resolve_type_name(args.type_name),
        args.format_spec,
        args.flags or 0,
        registry=registry,
    )


def _report_parse_error(parse_error: ParseError) -> int:
    logger.error(
        f"Cannot decode {parse_error.raw_value!r}: "
        f"{parse_error.error_type.value} ({parse_error.message})"
    )
    return EXIT_PARSE_ERROR


def run_conversion(args: argparse.Namespace) -> int:
    """Run the selected command and return the process exit code."""
    if args.command == "types":
        for type_name in get_global_registry().get_available_types():
            print(type_name)
        return EXIT_OK

    try:
        binding = _binding_from_arguments(args)

        if args.command == "decode":
            result = binding.parse(args.text)
            if not result.ok:
                return _report_parse_error(result.error)
            print(NULL_TEXT if result.value is None else result.value)
            return EXIT_OK

        # encode: read the value strictly with the type's default vocabulary
        converter = binding.converter
        default_config = converter.configure(None, converter.strict_flags)
        parse_error = ParseError()
        value = converter.decode(default_config, args.value, parse_error)
        if parse_error.is_error():
            return _report_parse_error(parse_error)
        print(binding.to_text(value))
        return EXIT_OK

    except UnknownConverterError as e:
        logger.error(f"Unknown type: {e}")
        return EXIT_UNKNOWN_TYPE
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIGURATION_ERROR
    except FieldDefinitionLoadError as e:
        logger.error(f"Field definition error: {e}")
        return EXIT_FIELD_FILE_ERROR


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for the CLI."""
    args = parse_arguments(argv)
    configure_logging(debug=args.debug, verbose=args.verbose)
    sys.exit(run_conversion(args))
