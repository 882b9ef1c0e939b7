"""Validation orchestrator.

Runs the rule set in its fixed order against one configuration snapshot.
Rendering proceeds only when the returned result is ``ok``.
"""

from __future__ import annotations

import logging

from chartgate.config import ConfigSnapshot
from chartgate.exceptions import RenderAbortedError
from chartgate.exceptions.validation import Advisory, ValidationError
from chartgate.model import ValidationResult
from chartgate.reporting.messages import format_error, format_error_line
from chartgate.rules import Rule, build_rules

logger = logging.getLogger(__name__)


def validate_all(
    snapshot: ConfigSnapshot,
    *,
    collect_all: bool = False,
    rules: list[Rule] | None = None,
) -> ValidationResult:
    """Evaluate every rule in order and return the outcome.

    By default the pass stops at the first applicable rule that fails and that
    error is the only one reported. With ``collect_all`` every applicable rule
    is checked and each failing rule contributes its first error, still in
    rule order. Advisories never affect ``ok``.
    """
    errors: list[ValidationError] = []
    advisories: list[Advisory] = []
    evaluated: list[str] = []
    skipped: list[str] = []

    for rule in rules if rules is not None else build_rules():
        if not rule.applies(snapshot):
            logger.debug("Rule %s does not apply; skipped", rule.rule_id)
            skipped.append(rule.rule_id)
            continue

        evaluated.append(rule.rule_id)
        error = rule.check(snapshot)
        if error is not None:
            logger.debug("Rule %s failed: %s", rule.rule_id, format_error_line(error))
            errors.append(error)
            if not collect_all:
                break
            continue

        logger.debug("Rule %s passed", rule.rule_id)
        for advisory in rule.advisories(snapshot):
            logger.info("Advisory for %s: %s", advisory.field_path, advisory.message)
            advisories.append(advisory)

    return ValidationResult(
        errors=tuple(errors),
        advisories=tuple(advisories),
        rules_evaluated=tuple(evaluated),
        rules_skipped=tuple(skipped),
    )


def ensure_valid(snapshot: ConfigSnapshot) -> ValidationResult:
    """Fail-fast gate for the render stage.

    Returns the result when rendering may proceed and raises
    :class:`RenderAbortedError` carrying the formatted first error otherwise.
    """
    result = validate_all(snapshot)
    if result.error is not None:
        raise RenderAbortedError(result, format_error(result.error))
    return result
