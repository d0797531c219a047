"""Command line interface for inspecting and validating Engine API payloads."""

import argparse
import json
import sys

from .core.codec import MODELS, decode, encode_json, json_schema, load_payload, resolve_model
from .core.exceptions import (
    ConfigurationError,
    PayloadDecodeError,
    PayloadValidationError,
    UnknownModelError,
)
from .core.logging_config import get_logger, setup_logging
from .core.settings import load_settings

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="docker-api-schema", description="Docker Engine API payload models"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (defaults to LOG_LEVEL or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("models", help="List available models")

    schema_parser = subparsers.add_parser("schema", help="Print a model's JSON Schema")
    schema_parser.add_argument("model", help="Model name, e.g. ContainerCreate")
    schema_parser.add_argument("--indent", type=int, default=2, help="JSON indentation")

    validate_parser = subparsers.add_parser(
        "validate", help="Validate a JSON or YAML payload and print it normalized"
    )
    validate_parser.add_argument("model", help="Model name, e.g. ListContainer")
    validate_parser.add_argument("file", help="Payload file (.json, .yml or .yaml)")
    validate_parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Disable type coercion (defaults to DOCKER_SCHEMA_STRICT)",
    )
    validate_parser.add_argument("--indent", type=int, default=2, help="JSON indentation")

    return parser


def _print_models() -> int:
    for name in sorted(MODELS):
        print(name)
    return EXIT_OK


def _print_schema(args: argparse.Namespace) -> int:
    model_cls = resolve_model(args.model)
    print(json.dumps(json_schema(model_cls), indent=args.indent))
    return EXIT_OK


def _validate(args: argparse.Namespace, strict: bool) -> int:
    model_cls = resolve_model(args.model)
    logger = get_logger()
    try:
        model = decode(model_cls, load_payload(args.file), strict=strict)
    except PayloadDecodeError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID
    except PayloadValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        for error in e.errors:
            location = ".".join(str(part) for part in error["loc"]) or "<root>"
            print(f"  {location}: {error['msg']}", file=sys.stderr)
        return EXIT_INVALID

    logger.info("Payload valid", model=model_cls.__name__, file=args.file)
    print(encode_json(model, indent=args.indent))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    setup_logging(
        log_dir=settings.log_dir,
        log_level=args.log_level or settings.log_level,
        max_file_size_mb=settings.log_max_file_size_mb,
    )

    try:
        if args.command == "models":
            return _print_models()
        if args.command == "schema":
            return _print_schema(args)
        strict = settings.strict_validation if args.strict is None else args.strict
        return _validate(args, strict)
    except UnknownModelError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
