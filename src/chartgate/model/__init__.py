"""Core data models for chartgate."""

from .entities import ValidationResult

__all__ = ["ValidationResult"]
