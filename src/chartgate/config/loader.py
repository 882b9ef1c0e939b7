"""Values loading and snapshot normalization for chart validation."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

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
from chartgate.constants.config import (
    DEFAULT_AUTOSCALING_ENABLED,
    DEFAULT_INGRESS_DEPLOY,
    DEFAULT_MAX_REPLICAS,
    DEFAULT_MIN_REPLICAS,
    DEFAULT_SERVICE_ACCOUNT_CREATE,
    INLINE_SOURCE,
    SET_KEY_ESCAPED_DOT,
    SET_KEY_SPLIT_PATTERN,
    SET_OVERRIDE_SEPARATOR,
    SET_SOURCE,
)
from chartgate.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_snapshot(paths: Sequence[Path], overrides: Sequence[str] = ()) -> ConfigSnapshot:
    """Load values files plus ``--set`` overrides and build a snapshot."""
    sources = [str(path) for path in paths]
    if overrides:
        sources.append(SET_SOURCE)
    return build_snapshot(load_values(paths, overrides), sources=tuple(sources))


def load_values(paths: Sequence[Path], overrides: Sequence[str] = ()) -> dict[str, Any]:
    """Read and layer values files the way ``helm -f a -f b --set k=v`` does.

    Later files win over earlier ones, mappings merge recursively and a
    ``null`` deletes the key. ``--set`` overrides are applied last.
    """
    values: dict[str, Any] = {}
    for path in paths:
        values = merge_values(values, _read_values_file(path))
        logger.debug("Loaded values file: %s", path)

    for override in overrides:
        key, value = parse_set_override(override)
        set_value(values, key, value)
        logger.debug("Applied override: %s", key)

    return values


def merge_values(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``base`` deep-merged with ``overlay``; inputs are left untouched."""
    merged: dict[str, Any] = copy.deepcopy(dict(base))
    for key, value in overlay.items():
        if value is None:
            merged.pop(key, None)
        elif isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = merge_values(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def parse_set_override(text: str) -> tuple[str, Any]:
    """Split ``a.b=value`` into its key and a YAML-typed scalar value."""
    key, separator, raw_value = text.partition(SET_OVERRIDE_SEPARATOR)
    if not separator or not key.strip():
        raise ConfigError(f"--set override must look like key=value, got {text!r}")
    return key.strip(), _parse_scalar(raw_value)


def set_value(values: dict[str, Any], dotted_key: str, value: Any) -> None:
    """Set ``dotted_key`` inside ``values``, creating intermediate mappings."""
    segments = [
        segment.replace(SET_KEY_ESCAPED_DOT, ".") for segment in SET_KEY_SPLIT_PATTERN.split(dotted_key)
    ]
    if any(not segment for segment in segments):
        raise ConfigError(f"Invalid values key {dotted_key!r}")

    node = values
    for depth, segment in enumerate(segments[:-1]):
        child = node.get(segment)
        if child is None:
            child = {}
            node[segment] = child
        elif not isinstance(child, dict):
            prefix = ".".join(segments[: depth + 1])
            raise ConfigError(f"Cannot set {dotted_key!r}: {prefix} is not a mapping")
        node = child
    node[segments[-1]] = value


def build_snapshot(raw: Mapping[str, Any] | None, *, sources: tuple[str, ...] = ()) -> ConfigSnapshot:
    """Normalize raw values into a :class:`ConfigSnapshot`, applying defaults once.

    Fields without a default stay ``None``; the rule that needs them reports
    the gap. Only structural problems (wrong types) raise ``ConfigError``.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ConfigError(f"Chart values must be a mapping, got {type(raw).__name__}")

    gcp_raw = _section(raw, "gcp", "gcp")
    service_account_raw = _section(raw, "serviceAccount", "serviceAccount")
    deployment_raw = _section(raw, "deployment", "deployment")
    resources_raw = _section(deployment_raw, "resources", "deployment.resources")
    autoscaling_raw = _section(deployment_raw, "autoscaling", "deployment.autoscaling")
    ingress_raw = _section(raw, "ingress", "ingress")

    return ConfigSnapshot(
        cloud_provider=_optional_str(raw, "cloudProvider", "cloudProvider"),
        gcp=GcpConfig(
            project_id=_optional_str(gcp_raw, "projectId", "gcp.projectId"),
            secret_id=_optional_str(gcp_raw, "secretId", "gcp.secretId"),
        ),
        service_account=ServiceAccountConfig(
            create=_bool(service_account_raw, "create", DEFAULT_SERVICE_ACCOUNT_CREATE, "serviceAccount.create"),
            name=_optional_str(service_account_raw, "name", "serviceAccount.name"),
            annotations=_annotations(service_account_raw.get("annotations"), "serviceAccount.annotations"),
        ),
        deployment=DeploymentConfig(
            resources=ResourcesConfig(
                limits=_quantities(resources_raw, "limits", "deployment.resources.limits"),
                requests=_quantities(resources_raw, "requests", "deployment.resources.requests"),
            ),
            autoscaling=AutoscalingConfig(
                enabled=_bool(
                    autoscaling_raw, "enabled", DEFAULT_AUTOSCALING_ENABLED, "deployment.autoscaling.enabled"
                ),
                min_replicas=_int(
                    autoscaling_raw, "minReplicas", DEFAULT_MIN_REPLICAS, "deployment.autoscaling.minReplicas"
                ),
                max_replicas=_int(
                    autoscaling_raw, "maxReplicas", DEFAULT_MAX_REPLICAS, "deployment.autoscaling.maxReplicas"
                ),
                target_cpu_utilization_percentage=_optional_int(
                    autoscaling_raw,
                    "targetCPUUtilizationPercentage",
                    "deployment.autoscaling.targetCPUUtilizationPercentage",
                ),
                target_memory_utilization_percentage=_optional_int(
                    autoscaling_raw,
                    "targetMemoryUtilizationPercentage",
                    "deployment.autoscaling.targetMemoryUtilizationPercentage",
                ),
            ),
        ),
        ingress=IngressConfig(
            deploy=_bool(ingress_raw, "deploy", DEFAULT_INGRESS_DEPLOY, "ingress.deploy"),
            domain=_optional_str(ingress_raw, "domain", "ingress.domain"),
        ),
        sources=sources or (INLINE_SOURCE,),
    )


def _read_values_file(path: Path) -> dict[str, Any]:
    """Read one YAML values file; an empty file is an empty mapping."""
    if not path.is_file():
        raise ConfigError(f"Values file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read values file {path}: {exc}") from exc
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML values file at {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Values file at {path} must be a YAML mapping")
    return raw


def _parse_scalar(raw_value: str) -> Any:
    """Type a ``--set`` value like Helm: true/false/numbers/null, else string."""
    if not raw_value:
        return ""
    try:
        parsed = yaml.safe_load(raw_value)
    except yaml.YAMLError:
        return raw_value
    if isinstance(parsed, (dict, list)):
        return raw_value
    return parsed


def _section(raw: Mapping[str, Any], key: str, path: str) -> Mapping[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"{path} must be a mapping")
    return value


def _optional_str(raw: Mapping[str, Any], key: str, path: str) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    return _text(value, path)


def _text(value: Any, path: str) -> str:
    """Render a scalar as text; YAML reads ``secretId: 2024`` as an int."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ConfigError(f"{path} must be a string, got {type(value).__name__}")
    return value if isinstance(value, str) else str(value)


def _bool(raw: Mapping[str, Any], key: str, default: bool, path: str) -> bool:
    value = raw.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigError(f"{path} must be a boolean")
    return value


def _int(raw: Mapping[str, Any], key: str, default: int, path: str) -> int:
    value = _optional_int(raw, key, path)
    return default if value is None else value


def _optional_int(raw: Mapping[str, Any], key: str, path: str) -> int | None:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{path} must be an integer")
    return value


def _quantities(raw: Mapping[str, Any], key: str, path: str) -> ResourceQuantities | None:
    """Build limits/requests; ``None`` when the block is absent."""
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise ConfigError(f"{path} must be a mapping")
    return ResourceQuantities(
        cpu=_quantity(value.get("cpu"), f"{path}.cpu"),
        memory=_quantity(value.get("memory"), f"{path}.memory"),
    )


def _quantity(value: Any, path: str) -> str | None:
    """Render a quantity as text; YAML turns ``cpu: 1.5`` into a float."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ConfigError(f"{path} must be a quantity string, got a boolean")
    if isinstance(value, (int, float)):
        return str(value)
    if not isinstance(value, str):
        raise ConfigError(f"{path} must be a quantity string, got {type(value).__name__}")
    return value


def _annotations(value: Any, path: str) -> Mapping[str, str] | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise ConfigError(f"{path} must be a mapping")
    return MappingProxyType(dict(_annotation_items(value.items(), path)))


def _annotation_items(items: Iterable[tuple[Any, Any]], path: str) -> Iterable[tuple[str, str]]:
    for key, value in items:
        yield str(key), _text(value, f"{path}[{key!r}]")
