"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "CHARTGATE"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ CHARTGATE",
    "     // pre-render checks for the medplum chart",
)
VALIDATION_SUMMARY_TITLE: str = "Validation summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} values validator"))
