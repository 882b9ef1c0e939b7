"""Ordered registry of the values validation rules."""

from __future__ import annotations

from chartgate.constants.validation import RULE_ORDER
from chartgate.rules.autoscaling import AutoscalingRule
from chartgate.rules.base import Rule
from chartgate.rules.identity import GcpProjectRule, ServiceAccountIdentityRule
from chartgate.rules.ingress import IngressDomainRule
from chartgate.rules.provider import CloudProviderRule
from chartgate.rules.resources import ResourceQuantityRule

RULE_CLASSES: tuple[type[Rule], ...] = (
    CloudProviderRule,
    GcpProjectRule,
    ServiceAccountIdentityRule,
    ResourceQuantityRule,
    AutoscalingRule,
    IngressDomainRule,
)


def build_rules() -> list[Rule]:
    """Build rule instances in their fixed evaluation order."""
    known = {rule_cls.rule_id: rule_cls for rule_cls in RULE_CLASSES}
    return [known[rule_id]() for rule_id in RULE_ORDER]
