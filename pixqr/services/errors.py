"""Shared service error definitions."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ServiceError(Exception):
    code: str
    message: str

    def __str__(self) -> str:  # noqa: D401 override
        return f"{self.code}: {self.message}"


def err_missing_fields(message: str | None = None) -> ServiceError:
    return ServiceError(
        code="ERR_MISSING_FIELDS",
        message=message or "Missing required fields: key, keyType, merchantName, and merchantCity are required",
    )


def err_invalid_key(key_type: object, key: object) -> ServiceError:
    key_type = getattr(key_type, "value", key_type)
    return ServiceError(code="ERR_INVALID_KEY", message=f"Invalid {key_type} key format: {key}")


def err_name_too_long(limit: int = 25) -> ServiceError:
    return ServiceError(code="ERR_NAME_TOO_LONG", message=f"Merchant name must be {limit} characters or less")


def err_city_too_long(limit: int = 15) -> ServiceError:
    return ServiceError(code="ERR_CITY_TOO_LONG", message=f"Merchant city must be {limit} characters or less")


def err_payload_too_long(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_PAYLOAD_TOO_LONG", message=message or "Field value exceeds 99 characters")


def err_bad_payload(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_BAD_PAYLOAD", message=message or "Invalid PIX payload")
