"""Human-readable stdout reporter for validation results."""

from __future__ import annotations

from chartgate.config import ConfigSnapshot
from chartgate.constants.branding import ASCII_LOGO_LINES, VALIDATION_SUMMARY_TITLE
from chartgate.constants.reporting import ANSI_DIM, ANSI_GREEN, ANSI_RED, ANSI_RESET, ANSI_YELLOW
from chartgate.model import ValidationResult
from chartgate.reporting.messages import format_result


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats a validation result as a summary header plus message blocks."""

    def __init__(
        self,
        snapshot: ConfigSnapshot,
        result: ValidationResult,
        *,
        color: bool = True,
        verbose: bool = False,
    ) -> None:
        """Initialise the reporter."""
        self._snapshot = snapshot
        self._result = result
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header(), self._render_messages()]
        return "\n".join(section for section in sections if section)

    def _paint(self, text: str, color: str) -> str:
        return _colorize(text, color) if self._color else text

    def _render_header(self) -> str:
        r = self._result
        sep = "  " + "─" * 38
        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {VALIDATION_SUMMARY_TITLE}",
            sep,
            "",
            f"  Values      {', '.join(self._snapshot.sources)}",
            f"  Rules run   {len(r.rules_evaluated)} ({self._format_rule_list(r.rules_evaluated)})",
        ]
        if r.rules_skipped:
            lines.append(f"  Skipped     {len(r.rules_skipped)} ({self._format_rule_list(r.rules_skipped)})")
        lines.append(f"  Errors      {len(r.errors)}")
        lines.append(f"  Advisories  {len(r.advisories)}")
        lines.append(f"  Verdict     {self._render_verdict()}")
        lines.append("")
        return "\n".join(lines)

    def _render_verdict(self) -> str:
        if not self._result.ok:
            return self._paint("FAIL (render aborted)", ANSI_RED)
        if self._result.advisories:
            return self._paint("PASS with advisories", ANSI_YELLOW)
        return self._paint("PASS", ANSI_GREEN)

    def _render_messages(self) -> str:
        body = format_result(self._result)
        if not body:
            return ""
        return "\n".join(f"  {line}" if line else "" for line in body.splitlines()) + "\n"

    def _format_rule_list(self, rule_ids: tuple[str, ...]) -> str:
        if not rule_ids:
            return self._paint("none", ANSI_DIM)
        if self._verbose or len(rule_ids) <= 3:
            return ", ".join(rule_ids)
        return f"{', '.join(rule_ids[:3])}, +{len(rule_ids) - 3} more"
