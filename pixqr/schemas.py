"""Pydantic schemas for generation requests and decoded codes."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class GenerationRequest(BaseModel):
    """Raw caller input; semantic checks are applied by ``generate``.

    Accepts snake_case names or the camelCase names used by PIX tooling
    (``keyType``, ``merchantName`` ...). Non-string values are treated as
    absent.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    key: str | None = None
    key_type: str | None = None
    merchant_name: str | None = None
    merchant_city: str | None = None
    description: str | None = None
    transaction_id: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _drop_non_strings(cls, value: Any) -> str | None:
        if isinstance(value, str):
            # str enums such as PixKeyType are narrowed to their value
            return str(getattr(value, "value", value))
        return None

    def missing_fields(self) -> list[str]:
        required = ("key", "key_type", "merchant_name", "merchant_city")
        return [name for name in required if not (getattr(self, name) or "").strip()]


class DecodedPix(BaseModel):
    payload_format_indicator: str
    gui: str
    key: str
    description: str | None = None
    merchant_category_code: str
    transaction_currency: str
    country_code: str
    merchant_name: str
    merchant_city: str
    transaction_id: str | None = Field(default=None, description="None when the *** placeholder is used")
    crc: str
