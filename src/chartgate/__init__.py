"""Pre-render validation gate for the Medplum Helm chart."""

from __future__ import annotations

__version__ = "0.1.0"

from chartgate.config import ConfigSnapshot, build_snapshot, load_snapshot
from chartgate.validation import ensure_valid, validate_all

__all__ = [
    "ConfigSnapshot",
    "__version__",
    "build_snapshot",
    "ensure_valid",
    "load_snapshot",
    "validate_all",
]
