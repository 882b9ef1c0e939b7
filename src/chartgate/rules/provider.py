"""Cloud provider selection rule."""

from __future__ import annotations

from chartgate.config import ConfigSnapshot
from chartgate.constants.validation import (
    CLOUD_PROVIDER_GCP,
    FIELD_CLOUD_PROVIDER,
    ROADMAP_NOTE,
    RULE_CLOUD_PROVIDER,
    SUPPORTED_CLOUD_PROVIDERS,
    UNSUPPORTED_VALUE,
)
from chartgate.exceptions.validation import ValidationError
from chartgate.rules.base import Rule


class CloudProviderRule(Rule):
    """Require `cloudProvider` to name a supported deployment target."""

    rule_id = RULE_CLOUD_PROVIDER
    title = "Supported cloud provider"
    applies_when = "always"

    def applies(self, snapshot: ConfigSnapshot) -> bool:
        return True

    def check(self, snapshot: ConfigSnapshot) -> ValidationError | None:
        provider = snapshot.cloud_provider
        if provider in SUPPORTED_CLOUD_PROVIDERS:
            return None

        supported = tuple(sorted(SUPPORTED_CLOUD_PROVIDERS))
        detail = "is not set" if not provider else f"{provider!r} is not supported"
        return self._error(
            UNSUPPORTED_VALUE,
            FIELD_CLOUD_PROVIDER,
            f"cloud provider {detail}; {ROADMAP_NOTE}",
            example=CLOUD_PROVIDER_GCP,
            value=provider or None,
            expected=f"one of: {', '.join(supported)}",
            supported_values=supported,
        )
