"""Exception raised when validation blocks a render."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chartgate.exceptions.base import ChartgateError

if TYPE_CHECKING:
    from chartgate.model import ValidationResult


class RenderAbortedError(ChartgateError):
    """Raised by ``ensure_valid`` when a rule rejects the chart values.

    The full :class:`ValidationResult` is kept on ``result`` so callers can
    report every error and advisory, not just the message.
    """

    def __init__(self, result: ValidationResult, message: str) -> None:
        super().__init__(message)
        self.result = result
