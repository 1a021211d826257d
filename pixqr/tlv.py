"""Helpers to build and parse EMV-style TLV fields."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

MAX_VALUE_LENGTH = 99


def encode_field(tag: str, value: str) -> str:
    """Format a single EMV field as ``tag + 2-digit length + value``."""

    if len(value) > MAX_VALUE_LENGTH:
        raise ValueError(f"Value for tag {tag} exceeds {MAX_VALUE_LENGTH} characters")
    return f"{tag}{len(value):02d}{value}"


@dataclass(frozen=True)
class TLVItem:
    tag: str
    value: str

    def serialize(self) -> str:
        return encode_field(self.tag, self.value)


def build_tlv(items: Iterable[TLVItem]) -> str:
    """Serialize iterable of TLV items into EMV string."""

    return "".join(item.serialize() for item in items)


def parse_tlv(payload: str) -> Iterator[TLVItem]:
    """Parse TLV payload string into TLV items."""

    idx = 0
    total = len(payload)
    while idx + 4 <= total:
        tag = payload[idx : idx + 2]
        raw_length = payload[idx + 2 : idx + 4]
        if not (raw_length.isascii() and raw_length.isdigit()):
            raise ValueError(f"Invalid TLV length {raw_length!r} for tag {tag}")
        value_start = idx + 4
        value_end = value_start + int(raw_length)
        if value_end > total:
            raise ValueError("Invalid TLV length exceeds payload")
        yield TLVItem(tag=tag, value=payload[value_start:value_end])
        idx = value_end
    if idx != total:
        raise ValueError("Dangling TLV data detected")
