"""Grammars for resource quantities and ingress hostnames."""

from __future__ import annotations

import re

# ASCII integer or decimal cores, optional millicore suffix: 500m, 1, 1.5
CPU_QUANTITY_PATTERN: re.Pattern[str] = re.compile(r"^[0-9]+(?:\.[0-9]+)?m?$")
# ASCII integer with optional K/M/G/T unit, optionally binary: 512Mi, 1Gi, 2G
MEMORY_QUANTITY_PATTERN: re.Pattern[str] = re.compile(r"^[0-9]+(?:[KMGT]i?)?$")

DNS_LABEL_MAX_LENGTH: int = 63
DNS_LABEL_PATTERN: re.Pattern[str] = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?$")
DNS_LABEL_SEPARATOR: str = "."

CPU_QUANTITY_EXPECTED: str = "an integer or decimal number of cores, optionally suffixed with `m` for millicores"
MEMORY_QUANTITY_EXPECTED: str = "an integer, optionally followed by K, M, G or T and an optional `i` for binary units"
DNS_HOSTNAME_EXPECTED: str = (
    "dot-separated labels of 1-63 letters, digits or internal hyphens (no leading or trailing hyphen)"
)

CPU_QUANTITY_EXAMPLE: str = "500m"
MEMORY_QUANTITY_EXAMPLE: str = "512Mi"
