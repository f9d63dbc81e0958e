"""
SOGUARD CLI — Command-line access to the structured output pipeline.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from soguard import __version__
from soguard.config import StructuredOutputConfig, load_config
from soguard.gateway import get_gateway


def read_input(value: str) -> str:
    """Resolve an INPUT argument: literal text, a file path, or - for stdin."""
    if value == "-":
        return sys.stdin.read()
    # Only check as path if it's short enough to be a valid path
    if len(value) < 256 and Path(value).is_file():
        return Path(value).read_text()
    return value


def resolve_config(args: argparse.Namespace) -> Optional[StructuredOutputConfig]:
    """Build a config from --config and/or --schema (--schema wins)."""
    config = load_config(args.config) if getattr(args, "config", None) else None

    schema_path = getattr(args, "schema", None)
    if schema_path:
        schema = Path(schema_path).read_text()
        include = config.include_schema_in_prompt if config else True
        config = StructuredOutputConfig(json_schema=schema, include_schema_in_prompt=include)

    if config is not None and getattr(args, "no_schema", False):
        config = config.model_copy(update={"include_schema_in_prompt": False})

    return config


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--schema",
        type=str,
        default=None,
        help="Path to a JSON Schema file",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML config (json_schema / json_schema_file, include_schema_in_prompt)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["silent", "info", "verbose", "debug"],
        default=None,
        help="Log verbosity level (default: info, or SOGUARD_LOG_LEVEL env var)",
    )
    parser.add_argument(
        "--log-channel",
        type=str,
        default=None,
        help="Comma-separated log channels to show (gateway,engine,system). Default: all",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="soguard",
        description="Structured output prompts, JSON extraction and validation",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"soguard {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    system_parser = subparsers.add_parser("system-prompt", help="Print the system prompt for a schema")
    _add_common_arguments(system_parser)

    prepare_parser = subparsers.add_parser("prepare", help="Wrap a prompt with JSON instructions")
    prepare_parser.add_argument("input", type=str, help="Prompt text or path to file (use - for stdin)")
    prepare_parser.add_argument(
        "--no-schema",
        action="store_true",
        help="Leave the schema block out of the prepared prompt",
    )
    _add_common_arguments(prepare_parser)

    extract_parser = subparsers.add_parser("extract", help="Extract the first JSON value from text")
    extract_parser.add_argument("input", type=str, help="Text or path to file (use - for stdin)")
    _add_common_arguments(extract_parser)

    validate_parser = subparsers.add_parser("validate", help="Check whether text contains valid JSON")
    validate_parser.add_argument("input", type=str, help="Text or path to file (use - for stdin)")
    _add_common_arguments(validate_parser)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    from soguard.core.logging import LogChannel, configure_logging, get_logger

    channels = None
    if args.log_channel:
        channels = [ch.strip() for ch in args.log_channel.split(",")]
    configure_logging(level=args.log_level, channels=channels, force=True)

    config = resolve_config(args)
    gateway = get_gateway()
    get_logger(LogChannel.SYSTEM).info(
        "cli_started",
        command=args.command,
        engine=gateway.engine.name,
        schema_loaded=config is not None,
    )

    if args.command in ("system-prompt", "prepare") and config is None:
        parser.error(f"{args.command} requires --schema or --config")

    if args.command == "system-prompt":
        print(gateway.get_system_prompt(config.json_schema))
        return 0

    if args.command == "prepare":
        print(gateway.prepare_prompt(
            read_input(args.input),
            config.json_schema,
            config,
        ))
        return 0

    if args.command == "extract":
        extracted = gateway.extract_json(read_input(args.input))
        if extracted is None:
            print("No valid JSON found", file=sys.stderr)
            return 1
        print(extracted)
        return 0

    if args.command == "validate":
        schema = config.json_schema if config else ""
        result = gateway.validate(read_input(args.input), schema)
        print(result.model_dump_json(indent=2))
        return 0 if result.is_valid else 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
