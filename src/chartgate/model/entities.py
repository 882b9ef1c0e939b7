"""Result model for a validation pass."""

from __future__ import annotations

from dataclasses import dataclass

from chartgate.exceptions.validation import Advisory, ValidationError
from chartgate.types import JsonObject


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one orchestrated pass over a configuration snapshot."""

    errors: tuple[ValidationError, ...] = ()
    advisories: tuple[Advisory, ...] = ()
    rules_evaluated: tuple[str, ...] = ()
    rules_skipped: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        """True when no fatal error was found; advisories do not count."""
        return not self.errors

    @property
    def error(self) -> ValidationError | None:
        """First error in rule order, or ``None``."""
        return self.errors[0] if self.errors else None

    def to_dict(self) -> JsonObject:
        return {
            "valid": self.ok,
            "rules_evaluated": list(self.rules_evaluated),
            "rules_skipped": list(self.rules_skipped),
            "errors": [error.to_dict() for error in self.errors],
            "advisories": [advisory.to_dict() for advisory in self.advisories],
        }
