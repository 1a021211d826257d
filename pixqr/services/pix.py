"""Static PIX code generation, validation and decoding services."""
from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any
from uuid import uuid4

from ..config import get_settings
from ..crc import crc16_ccitt
from ..keys import validate_pix_key
from ..monitoring import record_generated, record_service_error, record_validation
from ..payload import (
    MAX_MERCHANT_CITY,
    MAX_MERCHANT_NAME,
    NO_TRANSACTION_ID,
    build_pix_payload,
)
from ..schemas import DecodedPix, GenerationRequest
from ..tlv import parse_tlv
from .errors import (
    ServiceError,
    err_bad_payload,
    err_city_too_long,
    err_invalid_key,
    err_missing_fields,
    err_name_too_long,
    err_payload_too_long,
)

logger = logging.getLogger("pixqr.services")

MIN_CODE_LENGTH = 50
CODE_PREFIX = "000201"
_CRC_SUFFIX_RE = re.compile(r"6304([0-9A-F]{4})\Z", re.IGNORECASE)


def _coerce_request(request: GenerationRequest | Mapping[str, Any]) -> GenerationRequest:
    if isinstance(request, GenerationRequest):
        return request
    if isinstance(request, Mapping):
        return GenerationRequest.model_validate(dict(request))
    raise err_missing_fields()


def _check_request(request: GenerationRequest) -> None:
    if request.missing_fields():
        raise err_missing_fields()
    if not validate_pix_key(request.key, request.key_type):
        raise err_invalid_key(request.key_type, request.key)
    if len(request.merchant_name) > MAX_MERCHANT_NAME:
        raise err_name_too_long(MAX_MERCHANT_NAME)
    if len(request.merchant_city) > MAX_MERCHANT_CITY:
        raise err_city_too_long(MAX_MERCHANT_CITY)


def generate(request: GenerationRequest | Mapping[str, Any]) -> str:
    """Build the PIX copy-paste code for a static QR.

    Raises ``ServiceError`` on the first failed check: missing fields, bad
    key, merchant name over 25 characters, merchant city over 15.
    """

    try:
        req = _coerce_request(request)
        _check_request(req)
        try:
            payload = build_pix_payload(
                key=req.key,
                merchant_name=req.merchant_name,
                merchant_city=req.merchant_city,
                description=req.description,
                transaction_id=req.transaction_id,
            )
        except ValueError as exc:
            raise err_payload_too_long(str(exc)) from exc
    except ServiceError as exc:
        logger.warning("pix generation rejected", extra={"code": exc.code})
        record_service_error(exc.code)
        raise

    code = payload.to_emv()
    extra: dict[str, Any] = {"key_type": req.key_type, "crc": code[-4:]}
    if get_settings().log_payloads:
        extra["payload"] = code
    logger.info("pix code generated", extra=extra)
    record_generated(req.key_type)
    return code


def _rejection_reason(code: Any) -> str | None:
    if not isinstance(code, str):
        return "not_a_string"
    if len(code) < MIN_CODE_LENGTH:
        return "too_short"
    if not code.startswith(CODE_PREFIX):
        return "bad_prefix"
    match = _CRC_SUFFIX_RE.search(code)
    if not match:
        return "missing_crc"
    if crc16_ccitt(code[:-4]) != match.group(1).upper():
        return "crc_mismatch"
    return None


def validate(code: Any) -> bool:
    """Return True if ``code`` looks like a BR Code with a matching CRC16.

    Never raises; any failure is reported as False.
    """

    try:
        reason = _rejection_reason(code)
    except Exception:  # noqa: BLE001 - validation must not raise
        logger.debug("pix validation failed", exc_info=True)
        reason = "error"
    if reason:
        logger.debug("pix code rejected", extra={"reason": reason})
    record_validation(reason is None)
    return reason is None


def decode(code: str) -> DecodedPix:
    """Split a valid static PIX code into its fields."""

    if not validate(code):
        raise err_bad_payload("Invalid PIX code or CRC mismatch")
    try:
        fields = {item.tag: item.value for item in parse_tlv(code)}
        account = {item.tag: item.value for item in parse_tlv(fields["26"])}
        additional = {item.tag: item.value for item in parse_tlv(fields.get("62", ""))}
        txid = additional.get("05")
        return DecodedPix(
            payload_format_indicator=fields["00"],
            gui=account["00"],
            key=account["01"],
            description=account.get("02"),
            merchant_category_code=fields["52"],
            transaction_currency=fields["53"],
            country_code=fields["58"],
            merchant_name=fields["59"],
            merchant_city=fields["60"],
            transaction_id=None if txid in (None, NO_TRANSACTION_ID) else txid,
            crc=fields["63"],
        )
    except (KeyError, ValueError) as exc:
        raise err_bad_payload(f"Malformed PIX code: {exc}") from exc


def generate_random_key() -> str:
    """Return a new random (EVP) PIX key."""

    return str(uuid4())
