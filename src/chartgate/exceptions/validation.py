"""Structured outcomes produced by values validation rules."""

from __future__ import annotations

from dataclasses import dataclass

from chartgate.constants.validation import ADVISORY
from chartgate.types import ErrorKind, JsonObject


@dataclass(frozen=True)
class ValidationError:
    """A single fatal rule failure with the field it concerns.

    Message text for operators is assembled by
    :mod:`chartgate.reporting.messages`; this record only carries facts.
    """

    kind: ErrorKind
    field_path: str
    message: str
    example: str
    supported_values: tuple[str, ...] = ()
    rule_id: str = ""
    value: str | None = None
    expected: str = ""

    def to_dict(self) -> JsonObject:
        """Return a JSON-ready mapping."""
        return {
            "kind": self.kind,
            "rule_id": self.rule_id,
            "field_path": self.field_path,
            "message": self.message,
            "value": self.value,
            "expected": self.expected,
            "example": self.example,
            "supported_values": list(self.supported_values),
        }


@dataclass(frozen=True)
class Advisory:
    """A non-fatal warning; never blocks rendering."""

    rule_id: str
    field_path: str
    message: str
    value: str | None = None

    @property
    def kind(self) -> str:
        return ADVISORY

    def to_dict(self) -> JsonObject:
        """Return a JSON-ready mapping."""
        return {
            "kind": self.kind,
            "rule_id": self.rule_id,
            "field_path": self.field_path,
            "message": self.message,
            "value": self.value,
        }
