"""GCP project and workload identity rules."""

from __future__ import annotations

from chartgate.config import ConfigSnapshot
from chartgate.constants.validation import (
    CLOUD_PROVIDER_GCP,
    EXAMPLE_GCP_PROJECT_ID,
    EXAMPLE_GCP_SECRET_ID,
    EXAMPLE_INGRESS_DOMAIN,
    EXAMPLE_SERVICE_ACCOUNT_EMAIL,
    FIELD_GCP_PROJECT_ID,
    FIELD_GCP_SECRET_ID,
    FIELD_INGRESS_DOMAIN,
    FIELD_SERVICE_ACCOUNT_ANNOTATIONS,
    FIELD_WORKLOAD_IDENTITY,
    FORMAT_MISMATCH,
    MISSING_REQUIRED_FIELD,
    RULE_GCP_PROJECT,
    RULE_SERVICE_ACCOUNT_IDENTITY,
    WORKLOAD_IDENTITY_ANNOTATION,
)
from chartgate.exceptions.validation import ValidationError
from chartgate.rules.base import Rule


class GcpProjectRule(Rule):
    """Require the GCP project and config secret, plus a domain when ingress is on."""

    rule_id = RULE_GCP_PROJECT
    title = "GCP project and secret identifiers"
    applies_when = f"cloudProvider == {CLOUD_PROVIDER_GCP!r}"

    def applies(self, snapshot: ConfigSnapshot) -> bool:
        return snapshot.cloud_provider == CLOUD_PROVIDER_GCP

    def check(self, snapshot: ConfigSnapshot) -> ValidationError | None:
        if not snapshot.gcp.project_id:
            return self._missing(FIELD_GCP_PROJECT_ID, "GCP project ID", EXAMPLE_GCP_PROJECT_ID)
        if not snapshot.gcp.secret_id:
            return self._missing(FIELD_GCP_SECRET_ID, "Secret Manager secret ID", EXAMPLE_GCP_SECRET_ID)
        # INGRESS_DOMAIN repeats this check for non-gcp providers.
        if snapshot.ingress.deploy and not snapshot.ingress.domain:
            return self._missing(FIELD_INGRESS_DOMAIN, "ingress domain", EXAMPLE_INGRESS_DOMAIN)
        return None

    def _missing(self, field_path: str, label: str, example: str) -> ValidationError:
        return self._error(
            MISSING_REQUIRED_FIELD,
            field_path,
            f"{label} is required when cloudProvider is {CLOUD_PROVIDER_GCP!r}",
            example=example,
            expected="a non-empty string",
        )


class ServiceAccountIdentityRule(Rule):
    """Require the GKE workload identity annotation with an email-like value."""

    rule_id = RULE_SERVICE_ACCOUNT_IDENTITY
    title = "GKE workload identity annotation"
    applies_when = f"cloudProvider == {CLOUD_PROVIDER_GCP!r}"

    def applies(self, snapshot: ConfigSnapshot) -> bool:
        return snapshot.cloud_provider == CLOUD_PROVIDER_GCP

    def check(self, snapshot: ConfigSnapshot) -> ValidationError | None:
        annotations = snapshot.service_account.annotations
        expected = "a GCP service account email (name@project-id.iam.gserviceaccount.com)"
        if annotations is None:
            return self._error(
                MISSING_REQUIRED_FIELD,
                FIELD_SERVICE_ACCOUNT_ANNOTATIONS,
                f"service account annotations are required and must include {WORKLOAD_IDENTITY_ANNOTATION!r}",
                example=f"{WORKLOAD_IDENTITY_ANNOTATION}: {EXAMPLE_SERVICE_ACCOUNT_EMAIL}",
                expected=f"a mapping containing {WORKLOAD_IDENTITY_ANNOTATION!r}",
            )

        account = annotations.get(WORKLOAD_IDENTITY_ANNOTATION)
        if not account:
            return self._error(
                MISSING_REQUIRED_FIELD,
                FIELD_WORKLOAD_IDENTITY,
                "workload identity annotation is required to bind the pod to a GCP service account",
                example=EXAMPLE_SERVICE_ACCOUNT_EMAIL,
                expected=expected,
            )
        # Only the email shape is checked, not the domain suffix.
        if "@" not in account:
            return self._error(
                FORMAT_MISMATCH,
                FIELD_WORKLOAD_IDENTITY,
                f"{account!r} does not look like a service account email",
                example=EXAMPLE_SERVICE_ACCOUNT_EMAIL,
                value=account,
                expected=expected,
            )
        return None
