"""Shared type aliases for chartgate."""

from .common import ErrorKind, JsonObject, JsonScalar, JsonValue

__all__ = [
    "ErrorKind",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
]
