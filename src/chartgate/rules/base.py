"""Rule interface for chart values validation."""

from __future__ import annotations

import inspect
import re
from abc import ABC, abstractmethod
from typing import ClassVar

from chartgate.config import ConfigSnapshot
from chartgate.exceptions.validation import Advisory, ValidationError
from chartgate.types import ErrorKind

_RULE_ID_PATTERN: re.Pattern[str] = re.compile(r"^[A-Z][A-Z0-9_]+$")


class Rule(ABC):
    """A single stateless check over a :class:`ConfigSnapshot`.

    ``applies`` is always consulted before ``check``; a rule that does not
    apply never produces an error.
    """

    rule_id: ClassVar[str]
    title: ClassVar[str]
    applies_when: ClassVar[str]

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate rule subclasses define a valid UPPER_SNAKE_CASE `rule_id`."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return

        rule_id = getattr(cls, "rule_id", None)
        if not isinstance(rule_id, str) or not rule_id.strip():
            raise TypeError(f"{cls.__name__} must define a non-empty class attribute `rule_id`")
        if not _RULE_ID_PATTERN.match(rule_id):
            raise TypeError(f"{cls.__name__}.rule_id must be UPPER_SNAKE_CASE (got {rule_id!r})")

    @abstractmethod
    def applies(self, snapshot: ConfigSnapshot) -> bool:
        """Return whether this rule is relevant to the snapshot."""

    @abstractmethod
    def check(self, snapshot: ConfigSnapshot) -> ValidationError | None:
        """Return the first failure found, or ``None`` when the snapshot passes."""

    def advisories(self, snapshot: ConfigSnapshot) -> tuple[Advisory, ...]:
        """Return non-fatal warnings for a snapshot that passed ``check``."""
        return ()

    def _error(
        self,
        kind: ErrorKind,
        field_path: str,
        message: str,
        *,
        example: str,
        value: object = None,
        expected: str = "",
        supported_values: tuple[str, ...] = (),
    ) -> ValidationError:
        return ValidationError(
            kind=kind,
            field_path=field_path,
            message=message,
            example=example,
            supported_values=supported_values,
            rule_id=self.rule_id,
            value=None if value is None else str(value),
            expected=expected,
        )
