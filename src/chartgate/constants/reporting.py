"""Constants for report formats, atomic writing and stdout formatting."""

from __future__ import annotations

REPORT_SCHEMA_VERSION: str = "1.0.0"
REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})
DEFAULT_OUTPUT_FORMAT: str = "text"

MODE_FAIL_FAST: str = "fail-fast"
MODE_COLLECT_ALL: str = "collect-all"

EXIT_OK: int = 0
EXIT_VALIDATION_FAILED: int = 1
EXIT_CONFIG_ERROR: int = 2

# Remediation hints keyed by error kind; `{field}` is the offending field path.
REMEDIATION_HINTS: dict[str, str] = {
    "MissingRequiredField": "set `{field}` in your values file or pass --set {field}=<value>",
    "UnsupportedValue": "set `{field}` to one of the supported values",
    "FormatMismatch": "rewrite `{field}` so it matches the expected format",
    "RangeViolation": "adjust `{field}` so it falls inside the allowed range",
}
ADVISORY_HINT: str = "rendering continues; confirm `{field}` is intentional"

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"
