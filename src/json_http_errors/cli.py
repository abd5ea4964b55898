"""CLI interface for json-http-errors."""

from __future__ import annotations

import argparse
import logging
import sys

from .config import settings
from .formatters import get_formatter
from .logging import configure_logging
from .variants import ERROR_CLASSES, create_error

log = logging.getLogger(__name__)


FORMATS = ("json", "table")


def _default_format() -> str:
    # The env setting bypasses argparse choices, so check it here.
    if settings.default_format in FORMATS:
        return settings.default_format
    log.warning("unknown_default_format", extra={"code": settings.default_format})
    return "json"


def _output(data: str, output_file: str | None = None) -> None:
    """Print *data*, or append it to *output_file*."""
    if output_file is None:
        sys.stdout.write(data + "\n")
        sys.stdout.flush()
        return
    with open(output_file, "a", encoding="utf-8") as f:
        f.write(data + "\n")


def cmd_create(args: argparse.Namespace) -> int:
    """Build a single error from a status code and message."""
    err = create_error(args.code, args.message)
    if args.detail:
        err.detail = args.detail
    log.debug("created", extra={"status_code": err.status_code})

    formatter = get_formatter(args.format)
    _output(formatter.format([err.to_dict(include_stack=False)]), args.output)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """Print every error in the catalog."""
    errors = [cls().to_dict() for cls in ERROR_CLASSES.values()]
    formatter = get_formatter(args.format)
    _output(formatter.format(errors), args.output)
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    """Show version."""
    from . import __version__

    sys.stdout.write(f"json-http-errors version {__version__}\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser."""
    parser = argparse.ArgumentParser(
        prog="json-http-errors",
        description="Build structured HTTP error values",
    )

    # Global options
    parser.add_argument(
        "--version",
        "-V",
        action="store_true",
        help="Show version and exit",
    )

    subparsers = parser.add_subparsers(dest="command")

    default_format = _default_format()

    def add_common_args(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--format",
            "-f",
            choices=FORMATS,
            default=default_format,
            help=f"Output format (default: {default_format})",
        )
        p.add_argument(
            "--output",
            "-o",
            type=str,
            default=None,
            help="Output file (default: stdout)",
        )

    # create command
    p_create = subparsers.add_parser(
        "create",
        help="Create an error for a status code",
    )
    p_create.add_argument(
        "code",
        help="HTTP status code; invalid codes fall back to 500",
    )
    p_create.add_argument(
        "message",
        nargs="?",
        default=None,
        help="Message overriding the default for the code",
    )
    p_create.add_argument(
        "--detail",
        "-d",
        type=str,
        default=None,
        help="Additional detail about this particular error",
    )
    add_common_args(p_create)
    p_create.set_defaults(func=cmd_create)

    # list command
    p_list = subparsers.add_parser(
        "list",
        help="List the known status codes",
    )
    add_common_args(p_list)
    p_list.set_defaults(func=cmd_list)

    # version command
    p_version = subparsers.add_parser(
        "version",
        help="Show version",
    )
    p_version.set_defaults(func=cmd_version)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from . import __version__

        sys.stdout.write(f"json-http-errors version {__version__}\n")
        raise SystemExit(0)

    if not args.command:
        parser.print_help()
        raise SystemExit(0)

    rc = int(args.func(args))
    raise SystemExit(rc)
