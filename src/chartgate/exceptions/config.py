"""Values-loading exceptions."""

from __future__ import annotations

from chartgate.exceptions.base import ChartgateError


class ConfigError(ChartgateError, ValueError):
    """Raised when chart values cannot be loaded or have the wrong structure."""
