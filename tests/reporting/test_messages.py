"""Tests for operator-facing error and advisory messages."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chartgate.config import ConfigSnapshot
from chartgate.exceptions.validation import Advisory, ValidationError
from chartgate.reporting.messages import (
    format_advisory,
    format_error,
    format_error_line,
    format_result,
    remediation_hint,
)
from chartgate.validation import validate_all


def test_format_error_missing_field_block(make_snapshot: Callable[..., ConfigSnapshot]) -> None:
    error = validate_all(make_snapshot("gcp.projectId=")).error
    assert error is not None

    assert format_error(error) == (
        "[MissingRequiredField] gcp.projectId: GCP project ID is required when cloudProvider is 'gcp'\n"
        "  expected:  a non-empty string\n"
        "  example:   gcp.projectId: my-gcp-project\n"
        "  hint:      set `gcp.projectId` in your values file or pass --set gcp.projectId=<value>"
    )


def test_format_error_lists_supported_set(make_snapshot: Callable[..., ConfigSnapshot]) -> None:
    error = validate_all(make_snapshot("cloudProvider=aws")).error
    assert error is not None

    text = format_error(error)

    assert text.startswith("[UnsupportedValue] cloudProvider: cloud provider 'aws' is not supported;")
    assert "roadmap" in text
    assert "  got:       'aws'" in text
    assert "  supported: gcp" in text
    assert "  example:   cloudProvider: gcp" in text


def test_format_error_shows_offending_value_and_grammar(make_snapshot: Callable[..., ConfigSnapshot]) -> None:
    error = validate_all(make_snapshot("deployment.resources.limits.cpu=1x")).error
    assert error is not None

    text = format_error(error)

    assert "[FormatMismatch] deployment.resources.limits.cpu:" in text
    assert "  got:       '1x'" in text
    assert "millicores" in text
    assert "  example:   deployment.resources.limits.cpu: 500m" in text


@pytest.mark.parametrize(
    ("kind", "fragment"),
    [
        pytest.param("MissingRequiredField", "--set a.b=<value>", id="missing"),
        pytest.param("UnsupportedValue", "supported values", id="unsupported"),
        pytest.param("FormatMismatch", "expected format", id="format"),
        pytest.param("RangeViolation", "allowed range", id="range"),
    ],
)
def test_remediation_hint_per_kind(kind: str, fragment: str) -> None:
    error = ValidationError(kind=kind, field_path="a.b", message="m", example="e")  # type: ignore[arg-type]

    hint = remediation_hint(error)

    assert fragment in hint
    assert "`a.b`" in hint


def test_every_error_message_names_field_and_example(make_snapshot: Callable[..., ConfigSnapshot]) -> None:
    snapshot = make_snapshot(
        "deployment.resources.requests.memory=1 GB",
        "deployment.autoscaling.minReplicas=5",
        "deployment.autoscaling.maxReplicas=3",
        "ingress.domain=-bad-.com",
    )

    for error in validate_all(snapshot, collect_all=True).errors:
        text = format_error(error)
        assert error.field_path in text
        assert f"example:   {error.field_path}: {error.example}" in text
        assert "expected:" in text


def test_format_error_line_is_single_line(make_snapshot: Callable[..., ConfigSnapshot]) -> None:
    error = validate_all(make_snapshot("cloudProvider=aws")).error
    assert error is not None

    line = format_error_line(error)

    assert "\n" not in line
    assert line.startswith("[UnsupportedValue] cloudProvider ")
    assert line.endswith("(supported: gcp) (example: gcp)")


def test_format_advisory_block() -> None:
    advisory = Advisory(
        rule_id="AUTOSCALING",
        field_path="deployment.autoscaling.maxReplicas",
        message="maxReplicas is 150",
        value="150",
    )

    assert format_advisory(advisory) == (
        "[Advisory] deployment.autoscaling.maxReplicas: maxReplicas is 150\n"
        "  hint:      rendering continues; confirm `deployment.autoscaling.maxReplicas` is intentional"
    )


def test_format_result_orders_errors_before_advisories(make_snapshot: Callable[..., ConfigSnapshot]) -> None:
    snapshot = make_snapshot("deployment.autoscaling.maxReplicas=150", "ingress.domain=bad_host")

    text = format_result(validate_all(snapshot, collect_all=True))

    blocks = text.split("\n\n")
    assert len(blocks) == 2
    assert blocks[0].startswith("[FormatMismatch] ingress.domain")
    assert blocks[1].startswith("[Advisory] deployment.autoscaling.maxReplicas")


def test_format_result_empty_for_clean_pass(make_snapshot: Callable[..., ConfigSnapshot]) -> None:
    assert format_result(validate_all(make_snapshot())) == ""
