"""Ingress hostname rule."""

from __future__ import annotations

from chartgate.config import ConfigSnapshot
from chartgate.constants.quantities import (
    DNS_HOSTNAME_EXPECTED,
    DNS_LABEL_MAX_LENGTH,
    DNS_LABEL_PATTERN,
    DNS_LABEL_SEPARATOR,
)
from chartgate.constants.validation import (
    EXAMPLE_INGRESS_DOMAIN,
    FIELD_INGRESS_DOMAIN,
    FORMAT_MISMATCH,
    MISSING_REQUIRED_FIELD,
    RULE_INGRESS_DOMAIN,
)
from chartgate.exceptions.validation import ValidationError
from chartgate.rules.base import Rule


def is_dns_hostname(value: str) -> bool:
    """Return whether ``value`` is a dot-separated hostname of valid DNS labels."""
    labels = value.split(DNS_LABEL_SEPARATOR)
    return all(
        len(label) <= DNS_LABEL_MAX_LENGTH and DNS_LABEL_PATTERN.fullmatch(label) is not None for label in labels
    )


class IngressDomainRule(Rule):
    """Require a valid public hostname when the ingress is deployed."""

    rule_id = RULE_INGRESS_DOMAIN
    title = "Ingress domain hostname"
    applies_when = "ingress.deploy is true"

    def applies(self, snapshot: ConfigSnapshot) -> bool:
        return snapshot.ingress.deploy

    def check(self, snapshot: ConfigSnapshot) -> ValidationError | None:
        domain = snapshot.ingress.domain
        if not domain:
            return self._error(
                MISSING_REQUIRED_FIELD,
                FIELD_INGRESS_DOMAIN,
                "ingress domain is required when ingress.deploy is true",
                example=EXAMPLE_INGRESS_DOMAIN,
                expected=DNS_HOSTNAME_EXPECTED,
            )
        if not is_dns_hostname(domain):
            return self._error(
                FORMAT_MISMATCH,
                FIELD_INGRESS_DOMAIN,
                f"{domain!r} is not a valid DNS hostname",
                example=EXAMPLE_INGRESS_DOMAIN,
                value=domain,
                expected=DNS_HOSTNAME_EXPECTED,
            )
        return None
