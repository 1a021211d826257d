"""BR Code payload assembly for static PIX QR codes."""
from __future__ import annotations

import re
from dataclasses import dataclass, astuple

from .crc import CRC_TAG_PREFIX, crc16_ccitt
from .tlv import TLVItem, build_tlv, encode_field

PIX_GUI = "br.gov.bcb.pix"
PAYLOAD_FORMAT_INDICATOR = "01"
MERCHANT_CATEGORY_CODE = "0000"
CURRENCY_BRL = "986"
COUNTRY_CODE = "BR"
NO_TRANSACTION_ID = "***"

MAX_MERCHANT_NAME = 25
MAX_MERCHANT_CITY = 15
MAX_DESCRIPTION = 72
MAX_TRANSACTION_ID = 25

_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")


def merchant_account_information(key: str, description: str | None = None) -> str:
    """Build Tag 26 with the PIX GUI, the key and an optional description."""

    items = [TLVItem(tag="00", value=PIX_GUI), TLVItem(tag="01", value=key)]
    if isinstance(description, str) and description.strip():
        items.append(TLVItem(tag="02", value=description.strip()[:MAX_DESCRIPTION]))
    return encode_field("26", build_tlv(items))


def additional_data_field_template(transaction_id: str | None = None) -> str:
    """Build Tag 62 carrying the transaction id in sub-tag 05.

    A missing or blank id becomes the ``***`` placeholder. An id made only of
    punctuation filters down to an empty sub-tag instead.
    """

    if not isinstance(transaction_id, str) or not transaction_id.strip():
        txid = NO_TRANSACTION_ID
    else:
        txid = _NON_ALNUM_RE.sub("", transaction_id)[:MAX_TRANSACTION_ID]
    return encode_field("62", encode_field("05", txid))


@dataclass(frozen=True)
class PixPayload:
    payload_format_indicator: str
    merchant_account_information: str
    merchant_category_code: str
    transaction_currency: str
    country_code: str
    merchant_name: str
    merchant_city: str
    additional_data_field_template: str

    def without_crc(self) -> str:
        return "".join(astuple(self))

    def to_emv(self) -> str:
        """Return the final code with Tag 63 (CRC16) appended."""

        body = self.without_crc()
        crc = crc16_ccitt(f"{body}{CRC_TAG_PREFIX}")
        return f"{body}{encode_field('63', crc)}"


def build_pix_payload(
    *,
    key: str,
    merchant_name: str,
    merchant_city: str,
    description: str | None = None,
    transaction_id: str | None = None,
) -> PixPayload:
    return PixPayload(
        payload_format_indicator=encode_field("00", PAYLOAD_FORMAT_INDICATOR),
        merchant_account_information=merchant_account_information(key, description),
        merchant_category_code=encode_field("52", MERCHANT_CATEGORY_CODE),
        transaction_currency=encode_field("53", CURRENCY_BRL),
        country_code=encode_field("58", COUNTRY_CODE),
        merchant_name=encode_field("59", merchant_name),
        merchant_city=encode_field("60", merchant_city),
        additional_data_field_template=additional_data_field_template(transaction_id),
    )
