"""Tests for snapshot serialization and fingerprints."""

from __future__ import annotations

from typing import Any

from chartgate.config import build_snapshot, snapshot_fingerprint, snapshot_to_dict


def test_snapshot_to_dict_uses_chart_keys(valid_values: dict[str, Any]) -> None:
    payload = snapshot_to_dict(build_snapshot(valid_values))

    assert payload["cloudProvider"] == "gcp"
    assert payload["gcp"] == {"projectId": "my-gcp-project", "secretId": "medplum-config"}
    assert payload["deployment"]["autoscaling"]["targetCPUUtilizationPercentage"] == 80
    assert payload["deployment"]["autoscaling"]["targetMemoryUtilizationPercentage"] is None
    assert payload["deployment"]["resources"]["limits"] == {"cpu": "2", "memory": "4Gi"}


def test_snapshot_to_dict_includes_defaults() -> None:
    payload = snapshot_to_dict(build_snapshot({}))

    assert payload["serviceAccount"] == {"create": True, "name": None, "annotations": None}
    assert payload["deployment"]["resources"] == {"limits": None, "requests": None}
    assert payload["deployment"]["autoscaling"]["minReplicas"] == 1
    assert payload["deployment"]["autoscaling"]["maxReplicas"] == 10


def test_fingerprint_is_stable_for_identical_values(valid_values: dict[str, Any]) -> None:
    first = snapshot_fingerprint(build_snapshot(valid_values, sources=("a.yaml",)))
    second = snapshot_fingerprint(build_snapshot(valid_values, sources=("b.yaml", "<--set>")))

    assert first == second
    assert len(first) == 64


def test_fingerprint_matches_explicit_defaults() -> None:
    implicit = build_snapshot({})
    explicit = build_snapshot({"deployment": {"autoscaling": {"minReplicas": 1, "maxReplicas": 10}}})

    assert snapshot_fingerprint(implicit) == snapshot_fingerprint(explicit)


def test_fingerprint_changes_with_values(valid_values: dict[str, Any]) -> None:
    before = snapshot_fingerprint(build_snapshot(valid_values))
    valid_values["ingress"]["domain"] = "other.example.com"

    assert snapshot_fingerprint(build_snapshot(valid_values)) != before
