"""Horizontal autoscaler range rule."""

from __future__ import annotations

from chartgate.config import ConfigSnapshot
from chartgate.constants.validation import (
    FIELD_MAX_REPLICAS,
    FIELD_MIN_REPLICAS,
    FIELD_TARGET_CPU,
    FIELD_TARGET_MEMORY,
    MAX_REPLICAS_ADVISORY_CEILING,
    MIN_REPLICAS_FLOOR,
    RANGE_VIOLATION,
    RULE_AUTOSCALING,
    UTILIZATION_PERCENT_MAX,
    UTILIZATION_PERCENT_MIN,
)
from chartgate.exceptions.validation import Advisory, ValidationError
from chartgate.rules.base import Rule


class AutoscalingRule(Rule):
    """Check replica bounds and utilization targets when autoscaling is enabled."""

    rule_id = RULE_AUTOSCALING
    title = "Autoscaling replica and utilization ranges"
    applies_when = "deployment.autoscaling.enabled is true"

    def applies(self, snapshot: ConfigSnapshot) -> bool:
        return snapshot.deployment.autoscaling.enabled

    def check(self, snapshot: ConfigSnapshot) -> ValidationError | None:
        autoscaling = snapshot.deployment.autoscaling
        if autoscaling.min_replicas < MIN_REPLICAS_FLOOR:
            return self._error(
                RANGE_VIOLATION,
                FIELD_MIN_REPLICAS,
                f"minReplicas must be at least {MIN_REPLICAS_FLOOR}, got {autoscaling.min_replicas}",
                example=str(MIN_REPLICAS_FLOOR),
                value=autoscaling.min_replicas,
                expected=f"an integer >= {MIN_REPLICAS_FLOOR}",
            )
        if autoscaling.max_replicas < autoscaling.min_replicas:
            return self._error(
                RANGE_VIOLATION,
                FIELD_MAX_REPLICAS,
                (
                    f"maxReplicas ({autoscaling.max_replicas}) must be greater than or equal to "
                    f"minReplicas ({autoscaling.min_replicas})"
                ),
                example=str(max(autoscaling.min_replicas, 10)),
                value=autoscaling.max_replicas,
                expected=f"an integer >= minReplicas ({autoscaling.min_replicas})",
            )
        for field_path, target in (
            (FIELD_TARGET_CPU, autoscaling.target_cpu_utilization_percentage),
            (FIELD_TARGET_MEMORY, autoscaling.target_memory_utilization_percentage),
        ):
            if target is not None and not UTILIZATION_PERCENT_MIN <= target <= UTILIZATION_PERCENT_MAX:
                return self._error(
                    RANGE_VIOLATION,
                    field_path,
                    f"utilization target must be a percentage, got {target}",
                    example="80",
                    value=target,
                    expected=f"an integer between {UTILIZATION_PERCENT_MIN} and {UTILIZATION_PERCENT_MAX}",
                )
        return None

    def advisories(self, snapshot: ConfigSnapshot) -> tuple[Advisory, ...]:
        max_replicas = snapshot.deployment.autoscaling.max_replicas
        if max_replicas <= MAX_REPLICAS_ADVISORY_CEILING:
            return ()
        return (
            Advisory(
                rule_id=self.rule_id,
                field_path=FIELD_MAX_REPLICAS,
                message=(
                    f"maxReplicas is {max_replicas}, above {MAX_REPLICAS_ADVISORY_CEILING}; "
                    "this may be unintentionally high"
                ),
                value=str(max_replicas),
            ),
        )
