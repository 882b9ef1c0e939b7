"""Shared exception hierarchy for chartgate."""

from __future__ import annotations

from .base import ChartgateError
from .config import ConfigError
from .render import RenderAbortedError

__all__ = [
    "ChartgateError",
    "ConfigError",
    "RenderAbortedError",
]
