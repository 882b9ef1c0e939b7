"""Tests for the RESOURCE_QUANTITY rule and quantity grammars."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from chartgate.config import ConfigSnapshot, build_snapshot
from chartgate.rules.resources import ResourceQuantityRule, is_cpu_quantity, is_memory_quantity


@pytest.mark.parametrize("value", ["500m", "1", "1.5", "0.25", "2000m", "10"])
def test_is_cpu_quantity_accepts(value: str) -> None:
    assert is_cpu_quantity(value)


@pytest.mark.parametrize(
    "value",
    ["abc", "-1", "1x", "", "1.", ".5", "500 m", "1m5", "1M", "1\n", "٥٠٠m", "５００m", "١.٥"],
)
def test_is_cpu_quantity_rejects(value: str) -> None:
    assert not is_cpu_quantity(value)


@pytest.mark.parametrize("value", ["512Mi", "1Gi", "2G", "128974848", "129M", "1Ti", "64Ki", "1K"])
def test_is_memory_quantity_accepts(value: str) -> None:
    assert is_memory_quantity(value)


@pytest.mark.parametrize(
    "value",
    ["512mb", "1 GB", "1.5Gi", "Gi", "512Mib", "1P", "-1Gi", "512mi", "５１２Mi", "٥١٢Mi"],
)
def test_is_memory_quantity_rejects(value: str) -> None:
    assert not is_memory_quantity(value)


def test_resource_rule_applies_only_with_limits_and_requests(valid_values: dict[str, Any]) -> None:
    rule = ResourceQuantityRule()
    assert rule.applies(build_snapshot(valid_values))

    del valid_values["deployment"]["resources"]["requests"]
    valid_values["deployment"]["resources"]["limits"]["cpu"] = "not-a-quantity"
    snapshot = build_snapshot(valid_values)

    assert not rule.applies(snapshot)


def test_resource_rule_passes_valid_quantities(make_snapshot: Callable[..., ConfigSnapshot]) -> None:
    assert ResourceQuantityRule().check(make_snapshot()) is None


@pytest.mark.parametrize(
    ("override", "field_path", "value", "example"),
    [
        pytest.param("deployment.resources.limits.cpu=abc", "deployment.resources.limits.cpu", "abc", "500m", id="cpu-abc"),
        pytest.param("deployment.resources.limits.cpu=-1", "deployment.resources.limits.cpu", "-1", "500m", id="cpu-neg"),
        pytest.param("deployment.resources.requests.cpu=1x", "deployment.resources.requests.cpu", "1x", "500m", id="cpu-1x"),
        pytest.param(
            "deployment.resources.limits.memory=512mb",
            "deployment.resources.limits.memory",
            "512mb",
            "512Mi",
            id="memory-mb",
        ),
        pytest.param(
            "deployment.resources.requests.memory=1 GB",
            "deployment.resources.requests.memory",
            "1 GB",
            "512Mi",
            id="memory-space",
        ),
        pytest.param(
            "deployment.resources.limits.cpu=５００m",
            "deployment.resources.limits.cpu",
            "５００m",
            "500m",
            id="cpu-fullwidth-digits",
        ),
    ],
)
def test_resource_rule_reports_format_mismatch(
    make_snapshot: Callable[..., ConfigSnapshot],
    override: str,
    field_path: str,
    value: str,
    example: str,
) -> None:
    error = ResourceQuantityRule().check(make_snapshot(override))

    assert error is not None
    assert error.kind == "FormatMismatch"
    assert error.field_path == field_path
    assert error.value == value
    assert error.example == example
    assert error.expected


def test_resource_rule_checks_limits_before_requests(make_snapshot: Callable[..., ConfigSnapshot]) -> None:
    snapshot = make_snapshot("deployment.resources.requests.cpu=abc", "deployment.resources.limits.memory=1 GB")

    error = ResourceQuantityRule().check(snapshot)

    assert error is not None
    assert error.field_path == "deployment.resources.limits.memory"


def test_resource_rule_skips_unset_quantities(make_snapshot: Callable[..., ConfigSnapshot]) -> None:
    snapshot = make_snapshot("deployment.resources.limits.cpu=null", "deployment.resources.requests.memory=null")

    assert ResourceQuantityRule().check(snapshot) is None


def test_resource_rule_does_not_compare_limits_to_requests(make_snapshot: Callable[..., ConfigSnapshot]) -> None:
    snapshot = make_snapshot("deployment.resources.limits.cpu=100m", "deployment.resources.requests.cpu=4")

    assert ResourceQuantityRule().check(snapshot) is None
