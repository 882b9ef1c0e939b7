"""Root of the chartgate exception hierarchy."""

from __future__ import annotations


class ChartgateError(Exception):
    """Base class for all chartgate errors."""
