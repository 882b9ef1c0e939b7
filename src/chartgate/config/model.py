"""Immutable configuration snapshot for chart values."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from chartgate.constants.config import (
    DEFAULT_AUTOSCALING_ENABLED,
    DEFAULT_INGRESS_DEPLOY,
    DEFAULT_MAX_REPLICAS,
    DEFAULT_MIN_REPLICAS,
    DEFAULT_SERVICE_ACCOUNT_CREATE,
)


@dataclass(frozen=True)
class GcpConfig:
    """Google Cloud identifiers used by the server."""

    project_id: str | None = None
    secret_id: str | None = None


@dataclass(frozen=True)
class ServiceAccountConfig:
    """Kubernetes service account and its workload identity annotations.

    ``annotations`` is ``None`` when the values omit the mapping entirely.
    """

    create: bool = DEFAULT_SERVICE_ACCOUNT_CREATE
    name: str | None = None
    annotations: Mapping[str, str] | None = None


@dataclass(frozen=True)
class ResourceQuantities:
    """CPU and memory quantity strings for either limits or requests."""

    cpu: str | None = None
    memory: str | None = None


@dataclass(frozen=True)
class ResourcesConfig:
    limits: ResourceQuantities | None = None
    requests: ResourceQuantities | None = None


@dataclass(frozen=True)
class AutoscalingConfig:
    """Horizontal pod autoscaler settings."""

    enabled: bool = DEFAULT_AUTOSCALING_ENABLED
    min_replicas: int = DEFAULT_MIN_REPLICAS
    max_replicas: int = DEFAULT_MAX_REPLICAS
    target_cpu_utilization_percentage: int | None = None
    target_memory_utilization_percentage: int | None = None


@dataclass(frozen=True)
class DeploymentConfig:
    resources: ResourcesConfig = ResourcesConfig()
    autoscaling: AutoscalingConfig = AutoscalingConfig()


@dataclass(frozen=True)
class IngressConfig:
    """Ingress exposure settings."""

    deploy: bool = DEFAULT_INGRESS_DEPLOY
    domain: str | None = None


@dataclass(frozen=True)
class ConfigSnapshot:
    """Resolved, read-only view of chart values with defaults applied."""

    cloud_provider: str | None = None
    gcp: GcpConfig = GcpConfig()
    service_account: ServiceAccountConfig = ServiceAccountConfig()
    deployment: DeploymentConfig = DeploymentConfig()
    ingress: IngressConfig = IngressConfig()
    sources: tuple[str, ...] = field(default=(), compare=False)
