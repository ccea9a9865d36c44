"""Command-line interface for safe-input."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional

from safe_input import __version__
from safe_input.config import Config
from safe_input.errors import SanitizeError
from safe_input.services.components import sanitize_dirname, sanitize_filename
from safe_input.services.extension import sanitize_extension
from safe_input.services.paths import inspect_path
from safe_input.services.text import clean_text, sanitize_hostname
from safe_input.services.urls import sanitize_url
from safe_input.utils.logging import setup_logging

KINDS = ("text", "hostname", "extension", "filename", "dirname", "path", "url")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="safe-input",
        description="Sanitize untrusted text, hostnames, filenames, paths and URLs",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output (DEBUG level)",
    )

    parser.add_argument(
        "--env-file",
        type=str,
        help="Path to .env file (default: .env in current directory)",
    )

    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read one value per line from standard input",
    )

    parser.add_argument(
        "--allow-nav",
        action="store_true",
        default=None,
        help="path: keep a leading ./",
    )

    parser.add_argument(
        "--no-protocol",
        action="store_true",
        help="url: accept URLs without http:// or https://",
    )

    parser.add_argument("kind", choices=KINDS, help="What kind of value to sanitize")
    parser.add_argument("value", nargs="?", help="Value to sanitize")

    args = parser.parse_intermixed_args(argv)
    if args.value is None and not args.stdin:
        parser.error("a value is required unless --stdin is given")
    if args.value is not None and args.stdin:
        parser.error("a value cannot be combined with --stdin")

    return args


def build_sanitizer(kind: str, config: Config, args: argparse.Namespace) -> Callable[[str], str]:
    """Return the sanitizer for kind with command-line and config policies applied."""
    logger = logging.getLogger("safe_input")

    if kind == "path":
        allow_nav = config.allow_nav if args.allow_nav is None else args.allow_nav

        def sanitize(value: str) -> str:
            report = inspect_path(value, allow_nav=allow_nav)
            for component in report.dropped:
                logger.warning(f"Dropped path component {component.raw!r}: {component.error}")
            return report.path

        return sanitize

    if kind == "url":
        require_protocol = config.require_protocol and not args.no_protocol
        return lambda value: sanitize_url(value, require_protocol=require_protocol)

    return {
        "text": clean_text,
        "hostname": sanitize_hostname,
        "extension": sanitize_extension,
        "filename": sanitize_filename,
        "dirname": sanitize_dirname,
    }[kind]


def run(sanitize: Callable[[str], str], values: Iterable[str]) -> int:
    """Sanitize each value, printing results; return the number of failures."""
    logger = logging.getLogger("safe_input")
    failed = 0

    for value in values:
        try:
            print(sanitize(value))
        except SanitizeError as e:
            failed += 1
            logger.error(f"{type(e).__name__}: {e} (input: {value!r})")

    return failed


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Load configuration
    try:
        env_file = Path(args.env_file) if args.env_file else None
        config = Config.from_env(env_file)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    # Setup logging
    log_level = logging.DEBUG if args.verbose else config.log_level
    logger = setup_logging(config.log_path, log_level)
    logger.debug(f"safe-input v{__version__}")

    sanitize = build_sanitizer(args.kind, config, args)

    if args.stdin:
        values: Iterable[str] = (line.rstrip("\r\n") for line in sys.stdin)
    else:
        values = [args.value]

    try:
        failed = run(sanitize, values)
    except KeyboardInterrupt:
        logger.info("\nInterrupted by user")
        return 130

    # Exit code: 1 if any value failed
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
