"""Shared pytest fixtures for chart values tests."""

from __future__ import annotations

import copy
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from chartgate.config import ConfigSnapshot, build_snapshot, parse_set_override, set_value

VALID_VALUES: dict[str, Any] = {
    "cloudProvider": "gcp",
    "gcp": {
        "projectId": "my-gcp-project",
        "secretId": "medplum-config",
    },
    "serviceAccount": {
        "create": True,
        "name": "medplum-server",
        "annotations": {
            "iam.gke.io/gcp-service-account": "medplum-server@my-gcp-project.iam.gserviceaccount.com",
        },
    },
    "deployment": {
        "resources": {
            "limits": {"cpu": "2", "memory": "4Gi"},
            "requests": {"cpu": "500m", "memory": "1Gi"},
        },
        "autoscaling": {
            "enabled": True,
            "minReplicas": 2,
            "maxReplicas": 10,
            "targetCPUUtilizationPercentage": 80,
        },
    },
    "ingress": {
        "deploy": True,
        "domain": "medplum.example.com",
    },
}


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def values_root(fixtures_root: Path) -> Path:
    """Return the directory holding YAML values fixtures."""
    return fixtures_root / "values"


@pytest.fixture()
def valid_values() -> dict[str, Any]:
    """Return a fresh copy of a complete, valid values mapping."""
    return copy.deepcopy(VALID_VALUES)


@pytest.fixture()
def make_snapshot(valid_values: dict[str, Any]) -> Callable[..., ConfigSnapshot]:
    """Build snapshots from the valid values plus ``--set`` style overrides."""

    def _make(*overrides: str) -> ConfigSnapshot:
        values = copy.deepcopy(valid_values)
        for override in overrides:
            key, value = parse_set_override(override)
            set_value(values, key, value)
        return build_snapshot(values)

    return _make
