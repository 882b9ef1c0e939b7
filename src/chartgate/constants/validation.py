"""Error kinds, rule identifiers and field paths for values validation."""

from __future__ import annotations

MISSING_REQUIRED_FIELD: str = "MissingRequiredField"
UNSUPPORTED_VALUE: str = "UnsupportedValue"
FORMAT_MISMATCH: str = "FormatMismatch"
RANGE_VIOLATION: str = "RangeViolation"
ADVISORY: str = "Advisory"

RULE_CLOUD_PROVIDER: str = "CLOUD_PROVIDER"
RULE_GCP_PROJECT: str = "GCP_PROJECT"
RULE_SERVICE_ACCOUNT_IDENTITY: str = "SERVICE_ACCOUNT_IDENTITY"
RULE_RESOURCE_QUANTITY: str = "RESOURCE_QUANTITY"
RULE_AUTOSCALING: str = "AUTOSCALING"
RULE_INGRESS_DOMAIN: str = "INGRESS_DOMAIN"

# Evaluation order is fixed; the first failing rule wins in fail-fast mode.
RULE_ORDER: tuple[str, ...] = (
    RULE_CLOUD_PROVIDER,
    RULE_GCP_PROJECT,
    RULE_SERVICE_ACCOUNT_IDENTITY,
    RULE_RESOURCE_QUANTITY,
    RULE_AUTOSCALING,
    RULE_INGRESS_DOMAIN,
)

CLOUD_PROVIDER_GCP: str = "gcp"
SUPPORTED_CLOUD_PROVIDERS: frozenset[str] = frozenset({CLOUD_PROVIDER_GCP})
ROADMAP_NOTE: str = "additional cloud providers are on the roadmap but not yet implemented"

WORKLOAD_IDENTITY_ANNOTATION: str = "iam.gke.io/gcp-service-account"

MIN_REPLICAS_FLOOR: int = 1
MAX_REPLICAS_ADVISORY_CEILING: int = 100
UTILIZATION_PERCENT_MIN: int = 1
UTILIZATION_PERCENT_MAX: int = 100

FIELD_CLOUD_PROVIDER: str = "cloudProvider"
FIELD_GCP_PROJECT_ID: str = "gcp.projectId"
FIELD_GCP_SECRET_ID: str = "gcp.secretId"
FIELD_SERVICE_ACCOUNT_ANNOTATIONS: str = "serviceAccount.annotations"
FIELD_WORKLOAD_IDENTITY: str = f"serviceAccount.annotations[{WORKLOAD_IDENTITY_ANNOTATION!r}]"
FIELD_RESOURCES: str = "deployment.resources"
FIELD_AUTOSCALING: str = "deployment.autoscaling"
FIELD_MIN_REPLICAS: str = f"{FIELD_AUTOSCALING}.minReplicas"
FIELD_MAX_REPLICAS: str = f"{FIELD_AUTOSCALING}.maxReplicas"
FIELD_TARGET_CPU: str = f"{FIELD_AUTOSCALING}.targetCPUUtilizationPercentage"
FIELD_TARGET_MEMORY: str = f"{FIELD_AUTOSCALING}.targetMemoryUtilizationPercentage"
FIELD_INGRESS_DOMAIN: str = "ingress.domain"

EXAMPLE_GCP_PROJECT_ID: str = "my-gcp-project"
EXAMPLE_GCP_SECRET_ID: str = "medplum-config"
EXAMPLE_SERVICE_ACCOUNT_EMAIL: str = "medplum-server@my-gcp-project.iam.gserviceaccount.com"
EXAMPLE_INGRESS_DOMAIN: str = "medplum.example.com"
