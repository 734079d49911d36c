"""Core logic of the ``explicit-check`` command.

Validates one raw input against a spec set declared in a JSON file and
prints the outcome as JSON. Useful for trying declarations out before
wiring them into a service.
"""

import argparse
import json
import logging
import sys
from typing import Any, Optional, Sequence, TextIO, Union

from pydantic import ValidationError

from explicit.contracts.failure import ConfigurationError
from explicit.model.builder import ModelBuilder
from explicit.model.params import expand_bracket_params, parse_query
from explicit.schemas.field_spec import load_field_specs
from explicit.schemas.settings import CLISettings, load_settings_file, resolve_settings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_CONFIG_ERROR = 2


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger with a single stderr handler."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)


def read_raw_input(query: Optional[str], json_text: Optional[str], stdin: TextIO) -> dict:
    """Raw input from a query string, a JSON object, or JSON on stdin.

    Raises
    ------
    ValueError
        If the JSON is malformed or not an object.
    """
    if query is not None:
        return parse_query(query)

    text = json_text if json_text is not None else stdin.read()
    data = json.loads(text or "{}")
    if not isinstance(data, dict):
        raise ValueError("Raw input must be a JSON object")
    return expand_bracket_params(data)


def check_input(
    specs_path: str,
    raw_input: dict,
    settings_path: Optional[str] = None,
    cli_overrides: Optional[Union[dict, CLISettings]] = None,
) -> tuple[int, dict[str, Any]]:
    """Validate raw input against the spec set in ``specs_path``.

    Returns
    -------
    tuple of (int, dict)
        Exit status and the JSON document to print.

    Raises
    ------
    ConfigurationError, pydantic.ValidationError, FileNotFoundError
        If the spec set or settings cannot be loaded.
    """
    user = load_settings_file(settings_path) if settings_path else None
    settings = resolve_settings(user=user, cli=cli_overrides)
    builder = ModelBuilder(load_field_specs(specs_path), settings)
    logger.info("Checking input against %r", builder)

    result = builder.build(raw_input)
    if result.ok:
        return EXIT_OK, {"ok": True, "model": result.model.to_dict()}
    return EXIT_REJECTED, {"ok": False, "errors": result.error_payload()}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="explicit-check",
        description="Validate raw request input against a JSON spec set",
    )
    parser.add_argument("specs", help="Path to a JSON list of field declarations")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--query", help="Raw input as a URL query string (a=1&b[c]=2)")
    source.add_argument("--json", dest="json_text", help="Raw input as a JSON object (default: read stdin)")
    parser.add_argument("--settings", help="Path to a JSON file of builder settings")
    parser.add_argument(
        "--keep-whitespace", action="store_true",
        help="Do not strip whitespace from string values",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    args = build_parser().parse_args(argv)

    cli = CLISettings.model_validate({
        k: v
        for k, v in {
            "log_level": args.log_level,
            "strip_whitespace": False if args.keep_whitespace else None,
        }.items()
        if v is not None
    })
    setup_logging(cli.log_level or "WARNING")

    try:
        raw_input = read_raw_input(args.query, args.json_text, stdin)
    except ValueError as e:
        logger.error("Unreadable raw input: %s", e)
        return EXIT_CONFIG_ERROR

    try:
        status, document = check_input(args.specs, raw_input, args.settings, cli)
    except (ConfigurationError, ValidationError, FileNotFoundError, ValueError) as e:
        logger.error("Configuration error: %s", e)
        return EXIT_CONFIG_ERROR

    json.dump(document, stdout, indent=2)
    stdout.write("\n")
    return status


if __name__ == "__main__":
    sys.exit(main())
