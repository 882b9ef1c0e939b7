"""Operator-facing messages for validation errors and advisories.

Every error block names the field path, states the expected shape or the
supported set, gives a concrete valid example and a remediation hint, so the
values file can be fixed without reading rule code.
"""

from __future__ import annotations

from chartgate.constants.reporting import ADVISORY_HINT, REMEDIATION_HINTS
from chartgate.exceptions.validation import Advisory, ValidationError
from chartgate.model import ValidationResult


def remediation_hint(error: ValidationError) -> str:
    """Return the kind-specific fix-up hint for ``error``."""
    template = REMEDIATION_HINTS.get(error.kind, "fix `{field}` in your values file")
    return template.format(field=error.field_path)


def format_error(error: ValidationError) -> str:
    """Format an error as a multi-line block suitable for surfacing verbatim."""
    lines = [f"[{error.kind}] {error.field_path}: {error.message}"]
    if error.value is not None:
        lines.append(f"  got:       {error.value!r}")
    if error.expected:
        lines.append(f"  expected:  {error.expected}")
    if error.supported_values:
        lines.append(f"  supported: {', '.join(error.supported_values)}")
    lines.append(f"  example:   {error.field_path}: {error.example}")
    lines.append(f"  hint:      {remediation_hint(error)}")
    return "\n".join(lines)


def format_error_line(error: ValidationError) -> str:
    """Format an error on one line, for logs."""
    parts = [f"[{error.kind}]", error.field_path, error.message]
    if error.supported_values:
        parts.append(f"(supported: {', '.join(error.supported_values)})")
    parts.append(f"(example: {error.example})")
    return " ".join(parts)


def format_advisory(advisory: Advisory) -> str:
    """Format a non-fatal advisory block."""
    return "\n".join(
        (
            f"[{advisory.kind}] {advisory.field_path}: {advisory.message}",
            f"  hint:      {ADVISORY_HINT.format(field=advisory.field_path)}",
        )
    )


def format_result(result: ValidationResult) -> str:
    """Format every error then every advisory, separated by blank lines."""
    blocks = [format_error(error) for error in result.errors]
    blocks.extend(format_advisory(advisory) for advisory in result.advisories)
    return "\n\n".join(blocks)
