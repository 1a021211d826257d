"""In-process Prometheus counters for code generation and validation."""
from __future__ import annotations

from typing import Final

from prometheus_client import CONTENT_TYPE_LATEST, Counter, generate_latest

_CODES_GENERATED_TOTAL: Final = Counter(
    "pixqr_codes_generated_total",
    "PIX codes generated",
    labelnames=("key_type",),
)
_VALIDATIONS_TOTAL: Final = Counter(
    "pixqr_validations_total",
    "PIX code validations by result",
    labelnames=("result",),
)
_SERVICE_ERRORS_TOTAL: Final = Counter(
    "pixqr_service_errors_total",
    "Service-level errors by code",
    labelnames=("code",),
)


def record_generated(key_type: str) -> None:
    _CODES_GENERATED_TOTAL.labels(key_type=key_type).inc()


def record_validation(valid: bool) -> None:
    _VALIDATIONS_TOTAL.labels(result="valid" if valid else "invalid").inc()


def record_service_error(code: str) -> None:
    _SERVICE_ERRORS_TOTAL.labels(code=code).inc()


def metrics_payload() -> tuple[bytes, str]:
    """Return Prometheus exposition payload and content type."""

    return generate_latest(), CONTENT_TYPE_LATEST
