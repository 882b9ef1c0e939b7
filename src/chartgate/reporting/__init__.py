"""Reporting package for chartgate outputs."""

from __future__ import annotations

from typing import Any

__all__ = ["StdoutReporter", "build_report", "format_error", "write_report"]


def __getattr__(name: str) -> Any:
    """Lazily expose reporting APIs to avoid import cycles at package import time."""
    if name == "StdoutReporter":
        from .stdout import StdoutReporter

        return StdoutReporter
    if name in {"build_report", "write_report"}:
        from .json_report import build_report, write_report

        return {"build_report": build_report, "write_report": write_report}[name]
    if name == "format_error":
        from .messages import format_error

        return format_error
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
