"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias, Union

ErrorKind: TypeAlias = Literal["MissingRequiredField", "UnsupportedValue", "FormatMismatch", "RangeViolation"]

JsonScalar: TypeAlias = Union[str, int, float, bool, None]
JsonValue: TypeAlias = Union[JsonScalar, list["JsonValue"], dict[str, "JsonValue"]]
JsonObject: TypeAlias = dict[str, JsonValue]
