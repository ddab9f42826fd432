"""Command-line interface for delta2html.

Reads a delta (JSON) from a file or stdin and writes the converted HTML.

Environment Variable Support
----------------------------
``DELTA2HTML_CONFIG`` names a configuration file used when ``--config``
is not given.

Examples
--------
Convert a file using a format registry::

    $ delta2html document.json --formats formats.yaml

Read from stdin, write to a file, use paragraphs for lines::

    $ cat document.json | delta2html --block-tag p --out document.html

Fail on attributes missing from the registry::

    $ delta2html document.json --config .delta2html.toml --strict-attributes

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from delta2html import __version__
from delta2html.api import convert
from delta2html.config import load_config_file, options_from_config, registry_from_config, resolve_config_path
from delta2html.constants import (
    EXIT_CONVERSION_ERROR,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from delta2html.exceptions import ConfigurationError, Delta2HtmlError
from delta2html.formats import FormatRegistry
from delta2html.logging_utils import configure_logging
from delta2html.options import ConverterOptions

logger = logging.getLogger(__name__)

__all__ = ["create_parser", "main"]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``delta2html`` command."""
    parser = argparse.ArgumentParser(
        prog="delta2html",
        description="Convert a rich text delta (JSON) to HTML.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Delta JSON file, or '-' for stdin (default)")
    parser.add_argument("--out", "-o", help="Write HTML to this file instead of stdout")
    parser.add_argument("--formats", "-f", help="Format registry file (JSON, YAML or TOML)")
    parser.add_argument(
        "--config",
        help="Configuration file with 'formats' and 'options' tables (defaults to $DELTA2HTML_CONFIG)",
    )

    conversion = parser.add_argument_group("conversion options")
    for option_field in ("block_tag", "inline_tag", "embed_mode", "embed_placeholder"):
        metadata = ConverterOptions.__dataclass_fields__[option_field].metadata
        conversion.add_argument(
            f"--{option_field.replace('_', '-')}",
            dest=option_field,
            choices=metadata.get("choices"),
            help=metadata["help"],
        )
    conversion.add_argument(
        "--strict-attributes",
        action="store_true",
        help="Fail on attributes that have no registered format",
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--verbose", "-v", action="store_true", help="Shortcut for --log-level DEBUG")
    logging_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging from --trace, --verbose and --log-level (in that precedence)."""
    if parsed_args.trace or parsed_args.verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, trace_mode=parsed_args.trace)


def _read_delta(source: str) -> Any:
    """Read and decode the delta JSON from a path or stdin."""
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as f:
        return json.load(f)


def _build_settings(parsed_args: argparse.Namespace) -> tuple[FormatRegistry, ConverterOptions]:
    """Combine configuration files and command-line flags.

    Command-line flags override the configuration file's options, and a
    ``--formats`` file replaces its formats.
    """
    config: dict[str, Any] = {}
    config_path = resolve_config_path(parsed_args.config)
    if config_path is not None:
        config = load_config_file(config_path)

    registry = registry_from_config(config) if config else FormatRegistry()
    if parsed_args.formats:
        registry = registry_from_config(load_config_file(parsed_args.formats))

    options = options_from_config(config)
    overrides = {
        name: getattr(parsed_args, name)
        for name in ("block_tag", "inline_tag", "embed_mode", "embed_placeholder")
        if getattr(parsed_args, name) is not None
    }
    if parsed_args.strict_attributes:
        overrides["unknown_attributes"] = "error"
    if overrides:
        try:
            options = options.create_updated(**overrides)
        except ValueError as e:
            raise ConfigurationError(str(e), original_error=e) from e

    return registry, options


def main(args: list[str] | None = None) -> int:
    """Execute the ``delta2html`` command.

    Returns
    -------
    int
        Exit code: 0 on success, 1 on conversion errors, 2 on invalid
        arguments or configuration, 3 when the input cannot be read

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        registry, options = _build_settings(parsed_args)
    except ConfigurationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        delta = _read_delta(parsed_args.input)
    except OSError as e:
        print(f"Error: Cannot read input {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except json.JSONDecodeError as e:
        print(f"Error: Input is not valid JSON: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        html = convert(delta, registry, options)
    except Delta2HtmlError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_CONVERSION_ERROR

    if parsed_args.out:
        try:
            Path(parsed_args.out).write_text(html + "\n", encoding="utf-8")
        except OSError as e:
            print(f"Error: Cannot write output {parsed_args.out}: {e}", file=sys.stderr)
            return EXIT_FILE_ERROR
        logger.info(f"Wrote {parsed_args.out}")
    else:
        print(html)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
