"""CLI entrypoint for chartgate."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from chartgate import __version__
from chartgate.cli.handlers import handle_rules, handle_validate
from chartgate.constants.branding import CLI_DESCRIPTION
from chartgate.constants.config import VALUES_FILENAME
from chartgate.constants.reporting import DEFAULT_OUTPUT_FORMAT, VALID_OUTPUT_FORMATS


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="chartgate",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate chart values before rendering")
    validate.add_argument(
        "-f",
        "--values",
        type=Path,
        action="append",
        default=None,
        help=f"Values file (repeat to layer files; later files win; default: ./{VALUES_FILENAME})",
    )
    validate.add_argument(
        "--set",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a value by dotted key, e.g. ingress.deploy=true (repeatable; escape dots as \\.)",
    )
    validate.add_argument(
        "-a",
        "--all",
        action="store_true",
        dest="collect_all",
        help="Report the first error of every failing rule instead of stopping at the first failure",
    )
    validate.add_argument(
        "--format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=DEFAULT_OUTPUT_FORMAT,
        dest="output_format",
        help=f"Stdout format (default: {DEFAULT_OUTPUT_FORMAT})",
    )
    validate.add_argument("-o", "--output", type=Path, default=None, help="Also write the JSON report to this path")
    validate.add_argument("--no-color", action="store_true", help="Disable colored output")
    validate.add_argument("-v", "--verbose", action="store_true", help="Show per-rule diagnostics")

    subparsers.add_parser("rules", help="List validation rules in evaluation order")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(message)s")

    if args.command == "validate":
        return handle_validate(args)
    if args.command == "rules":
        return handle_rules(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2
