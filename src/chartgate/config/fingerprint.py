"""Stable snapshot fingerprints for comparing validation runs."""

from __future__ import annotations

import hashlib
import json

from chartgate.config.model import ConfigSnapshot, ResourceQuantities
from chartgate.types import JsonObject


def snapshot_to_dict(snapshot: ConfigSnapshot) -> JsonObject:
    """Return the snapshot as plain JSON data using the chart's values keys."""
    autoscaling = snapshot.deployment.autoscaling
    resources = snapshot.deployment.resources
    annotations = snapshot.service_account.annotations
    return {
        "cloudProvider": snapshot.cloud_provider,
        "gcp": {
            "projectId": snapshot.gcp.project_id,
            "secretId": snapshot.gcp.secret_id,
        },
        "serviceAccount": {
            "create": snapshot.service_account.create,
            "name": snapshot.service_account.name,
            "annotations": dict(sorted(annotations.items())) if annotations is not None else None,
        },
        "deployment": {
            "resources": {
                "limits": _quantities_to_dict(resources.limits),
                "requests": _quantities_to_dict(resources.requests),
            },
            "autoscaling": {
                "enabled": autoscaling.enabled,
                "minReplicas": autoscaling.min_replicas,
                "maxReplicas": autoscaling.max_replicas,
                "targetCPUUtilizationPercentage": autoscaling.target_cpu_utilization_percentage,
                "targetMemoryUtilizationPercentage": autoscaling.target_memory_utilization_percentage,
            },
        },
        "ingress": {
            "deploy": snapshot.ingress.deploy,
            "domain": snapshot.ingress.domain,
        },
    }


def snapshot_fingerprint(snapshot: ConfigSnapshot) -> str:
    """Return a sha256 over the normalized values; sources do not count."""
    blob = json.dumps(snapshot_to_dict(snapshot), sort_keys=True, separators=(",", ":")).encode("utf-8")
    return hashlib.sha256(blob).hexdigest()


def _quantities_to_dict(quantities: ResourceQuantities | None) -> JsonObject | None:
    if quantities is None:
        return None
    return {"cpu": quantities.cpu, "memory": quantities.memory}
