"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from chartgate.config import load_snapshot
from chartgate.constants.config import VALUES_FILENAME
from chartgate.constants.reporting import EXIT_CONFIG_ERROR, EXIT_OK, EXIT_VALIDATION_FAILED
from chartgate.exceptions import ConfigError
from chartgate.reporting.json_report import build_report, render_report, write_report
from chartgate.reporting.stdout import StdoutReporter
from chartgate.rules import build_rules
from chartgate.validation import validate_all


def resolve_values_files(values: list[Path] | None, overrides: list[str]) -> list[Path]:
    """Default to ./values.yaml unless files or overrides were given."""
    if values:
        return values
    if overrides:
        return []
    return [Path(VALUES_FILENAME)]


def handle_validate(args: argparse.Namespace) -> int:
    """Load values, run the rule set and report the outcome.

    Exit codes: 0 when rendering may proceed, 1 when a rule failed, 2 when
    the values could not be loaded.
    """
    try:
        snapshot = load_snapshot(resolve_values_files(args.values, args.set), args.set)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    result = validate_all(snapshot, collect_all=args.collect_all)
    report = build_report(snapshot, result, collect_all=args.collect_all)

    if args.output is not None:
        try:
            write_report(args.output, report)
        except OSError as exc:
            print(f"Cannot write report to {args.output}: {exc}", file=sys.stderr)
            return EXIT_CONFIG_ERROR

    if args.output_format == "json":
        print(render_report(report))
    else:
        use_color = not args.no_color and sys.stdout.isatty()
        print(StdoutReporter(snapshot, result, color=use_color, verbose=args.verbose).render())

    return EXIT_OK if result.ok else EXIT_VALIDATION_FAILED


def handle_rules(args: argparse.Namespace) -> int:
    """Print the rules in evaluation order with their applicability condition."""
    for position, rule in enumerate(build_rules(), start=1):
        print(f"{position}. {rule.rule_id:<26} {rule.title} (applies: {rule.applies_when})")
    return EXIT_OK
