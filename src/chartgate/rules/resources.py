"""CPU and memory quantity format rule."""

from __future__ import annotations

from chartgate.config import ConfigSnapshot, ResourceQuantities
from chartgate.constants.quantities import (
    CPU_QUANTITY_EXAMPLE,
    CPU_QUANTITY_EXPECTED,
    CPU_QUANTITY_PATTERN,
    MEMORY_QUANTITY_EXAMPLE,
    MEMORY_QUANTITY_EXPECTED,
    MEMORY_QUANTITY_PATTERN,
)
from chartgate.constants.validation import FIELD_RESOURCES, FORMAT_MISMATCH, RULE_RESOURCE_QUANTITY
from chartgate.exceptions.validation import ValidationError
from chartgate.rules.base import Rule


def is_cpu_quantity(value: str) -> bool:
    """Return whether ``value`` is a CPU amount such as ``500m``, ``1`` or ``1.5``."""
    return CPU_QUANTITY_PATTERN.fullmatch(value) is not None


def is_memory_quantity(value: str) -> bool:
    """Return whether ``value`` is a memory amount such as ``512Mi`` or ``2G``."""
    return MEMORY_QUANTITY_PATTERN.fullmatch(value) is not None


class ResourceQuantityRule(Rule):
    """Check the format of CPU and memory limits and requests.

    Limits are not compared against requests numerically.
    """

    rule_id = RULE_RESOURCE_QUANTITY
    title = "Resource quantity format"
    applies_when = "deployment.resources.limits and deployment.resources.requests are both set"

    def applies(self, snapshot: ConfigSnapshot) -> bool:
        resources = snapshot.deployment.resources
        return resources.limits is not None and resources.requests is not None

    def check(self, snapshot: ConfigSnapshot) -> ValidationError | None:
        resources = snapshot.deployment.resources
        for section, quantities in (("limits", resources.limits), ("requests", resources.requests)):
            if quantities is None:
                continue
            error = self._check_quantities(f"{FIELD_RESOURCES}.{section}", quantities)
            if error is not None:
                return error
        return None

    def _check_quantities(self, prefix: str, quantities: ResourceQuantities) -> ValidationError | None:
        if quantities.cpu is not None and not is_cpu_quantity(quantities.cpu):
            return self._error(
                FORMAT_MISMATCH,
                f"{prefix}.cpu",
                f"{quantities.cpu!r} is not a valid CPU quantity",
                example=CPU_QUANTITY_EXAMPLE,
                value=quantities.cpu,
                expected=CPU_QUANTITY_EXPECTED,
            )
        if quantities.memory is not None and not is_memory_quantity(quantities.memory):
            return self._error(
                FORMAT_MISMATCH,
                f"{prefix}.memory",
                f"{quantities.memory!r} is not a valid memory quantity",
                example=MEMORY_QUANTITY_EXAMPLE,
                value=quantities.memory,
                expected=MEMORY_QUANTITY_EXPECTED,
            )
        return None
