"""Chart values loading, normalization and fingerprinting.

This package facade re-exports the public names so callers can write
``from chartgate.config import ...``.
"""

from __future__ import annotations

from chartgate.config.fingerprint import snapshot_fingerprint, snapshot_to_dict
from chartgate.config.loader import (
    build_snapshot,
    load_snapshot,
    load_values,
    merge_values,
    parse_set_override,
    set_value,
)
from chartgate.config.model import (
    AutoscalingConfig,
    ConfigSnapshot,
    DeploymentConfig,
    GcpConfig,
    IngressConfig,
    ResourceQuantities,
    ResourcesConfig,
    ServiceAccountConfig,
)

__all__ = [
    "AutoscalingConfig",
    "ConfigSnapshot",
    "DeploymentConfig",
    "GcpConfig",
    "IngressConfig",
    "ResourceQuantities",
    "ResourcesConfig",
    "ServiceAccountConfig",
    "build_snapshot",
    "load_snapshot",
    "load_values",
    "merge_values",
    "parse_set_override",
    "set_value",
    "snapshot_fingerprint",
    "snapshot_to_dict",
]
