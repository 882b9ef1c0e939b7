"""Values-file defaults and override syntax."""

from __future__ import annotations

import re

VALUES_FILENAME: str = "values.yaml"

DEFAULT_SERVICE_ACCOUNT_CREATE: bool = True
DEFAULT_AUTOSCALING_ENABLED: bool = False
DEFAULT_MIN_REPLICAS: int = 1
DEFAULT_MAX_REPLICAS: int = 10
DEFAULT_INGRESS_DEPLOY: bool = False

SET_OVERRIDE_SEPARATOR: str = "="
# Dots inside a key segment are written as `\.` in --set overrides.
SET_KEY_SPLIT_PATTERN: re.Pattern[str] = re.compile(r"(?<!\\)\.")
SET_KEY_ESCAPED_DOT: str = "\\."

INLINE_SOURCE: str = "<inline>"
SET_SOURCE: str = "<--set>"
