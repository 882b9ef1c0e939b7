"""Values validation rules for chartgate."""

from .base import Rule
from .registry import RULE_CLASSES, build_rules

__all__ = ["RULE_CLASSES", "Rule", "build_rules"]
