"""
CLI tool for checking and converting config requests.

Usage:
    aware-config validate                   # Validate the request from AWARE_* env vars
    aware-config validate --file F.yaml     # Validate a request from a YAML file
    aware-config show --env-file .env       # Show a request (merged with a .env file)
    aware-config encode --file F.yaml       # Print the 16-byte record as hex
    aware-config decode HEX [--strict]      # Decode a hex record
"""

import argparse
import json
import sys
from pathlib import Path

import yaml

from aware_logging import configure_logging, get_logger

from . import codec, loader
from .base import ConfigStatus, ValidationResult
from .errors import InvalidConfigError
from .request import ConfigRequest


logger = get_logger("aware-config", component="cli")


def _load_request(args: argparse.Namespace) -> ConfigRequest:
    """Load the request named by --file / --env-file, or from the environment."""
    if getattr(args, "file", None):
        return loader.from_yaml(Path(args.file))
    env_file = getattr(args, "env_file", None)
    return loader.from_env(env_file=Path(env_file) if env_file else None)


def _source_name(args: argparse.Namespace) -> str:
    if getattr(args, "file", None):
        return args.file
    if getattr(args, "env_file", None):
        return f"environment + {args.env_file}"
    return "environment"


def _print_validation_result(name: str, result: ValidationResult, *, verbose: bool = False) -> None:
    """Print a single validation result."""
    status_icons = {
        ConfigStatus.VALID: "[OK]",
        ConfigStatus.INVALID: "[FAIL]",
    }
    icon = status_icons.get(result.status, "[?]")
    print(f"{icon} {name}: {result.status.value}")

    for error in result.errors:
        print(f"      ERROR: {error}")

    if verbose:
        for warning in result.warnings:
            print(f"      WARNING: {warning}")


def _request_details(request: ConfigRequest) -> dict:
    details = request.to_dict()
    details["non_default"] = request.is_non_default()
    details["fingerprint"] = request.fingerprint()
    return details


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a request and return exit code."""
    name = _source_name(args)
    try:
        request = _load_request(args)
    except InvalidConfigError as e:
        result = ValidationResult.invalid([str(e)])
    else:
        result = request.check()

    _print_validation_result(name, result, verbose=args.verbose)
    return 0 if result.is_valid else 1


def cmd_show(args: argparse.Namespace) -> int:
    """Show a request."""
    request = _load_request(args)

    if args.json:
        print(json.dumps(_request_details(request), indent=2))
    else:
        print(request)
        print(f"non-default: {'yes' if request.is_non_default() else 'no'}")
    return 0


def cmd_encode(args: argparse.Namespace) -> int:
    """Print the binary record of a request as hex."""
    request = _load_request(args)
    record = codec.encode(request)
    logger.debug("Encoded config request", size=len(record))
    print(record.hex())
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    """Decode a hex record and print it."""
    data = bytes.fromhex(args.hex)
    logger.debug("Decoding config request", size=len(data), strict=args.strict)

    if args.strict:
        try:
            request = codec.decode(data, strict=True)
        except InvalidConfigError as e:
            _print_validation_result("record", ValidationResult.invalid([str(e)]))
            return 1
    else:
        request = codec.decode(data)

    if args.json:
        details = _request_details(request)
        details["validation"] = request.check().to_dict()
        print(json.dumps(details, indent=2))
        return 0

    print(request)
    result = request.check()
    if not result.is_valid:
        for error in result.errors:
            print(f"WARNING: record violates invariants: {error}")
    return 0


def _add_source_options(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--file", "-f", help="Read the request from a YAML file")
    source.add_argument(
        "--env-file", "-e", help="Merge a .env file under the AWARE_* environment variables"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="aware-config",
        description="Validate, show and convert Wi-Fi Aware cluster config requests.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for diagnostics on stderr",
    )
    parser.add_argument("--log-json", action="store_true", help="Log JSON lines to stderr")
    parser.add_argument("--log-file", help="Also write JSON log lines to this file")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a config request")
    _add_source_options(validate_parser)
    validate_parser.add_argument("--verbose", "-v", action="store_true", help="Show warnings")

    # show command
    show_parser = subparsers.add_parser("show", help="Show a config request")
    _add_source_options(show_parser)
    show_parser.add_argument("--json", "-j", action="store_true", help="Output JSON")

    # encode command
    encode_parser = subparsers.add_parser("encode", help="Encode a config request as hex")
    _add_source_options(encode_parser)

    # decode command
    decode_parser = subparsers.add_parser("decode", help="Decode a hex config request record")
    decode_parser.add_argument("hex", help="Hex encoded 16-byte record")
    decode_parser.add_argument(
        "--strict", action="store_true", help="Reject records that violate invariants"
    )
    decode_parser.add_argument("--json", "-j", action="store_true", help="Output JSON")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(
        level=args.log_level,
        json_format=True if args.log_json else None,
        log_file=args.log_file,
    )

    commands = {
        "validate": cmd_validate,
        "show": cmd_show,
        "encode": cmd_encode,
        "decode": cmd_decode,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except (ValueError, OSError, yaml.YAMLError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
