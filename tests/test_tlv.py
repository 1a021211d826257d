from __future__ import annotations

import pytest

from pixqr.tlv import TLVItem, build_tlv, encode_field, parse_tlv


def test_encode_field_pads_length() -> None:
    assert encode_field("00", "01") == "000201"
    assert encode_field("58", "BR") == "5802BR"
    assert encode_field("05", "") == "0500"
    assert encode_field("59", "Fulano de Tal") == "5913Fulano de Tal"


def test_encode_field_counts_characters_not_bytes() -> None:
    assert encode_field("60", "SÃO PAULO") == "6009SÃO PAULO"


def test_encode_field_rejects_values_over_99() -> None:
    assert encode_field("02", "x" * 99).startswith("0299")
    with pytest.raises(ValueError):
        encode_field("02", "x" * 100)


def test_parse_tlv_reads_nested_groups() -> None:
    payload = build_tlv([TLVItem("00", "01"), TLVItem("62", encode_field("05", "***"))])
    items = list(parse_tlv(payload))
    assert items == [TLVItem("00", "01"), TLVItem("62", "0503***")]
    assert list(parse_tlv(items[1].value)) == [TLVItem("05", "***")]


@pytest.mark.parametrize(
    "payload",
    [
        "0005AB",  # length overruns payload
        "00AB01",  # non-numeric length
        "000201X",  # dangling data
    ],
)
def test_parse_tlv_rejects_malformed_payloads(payload: str) -> None:
    with pytest.raises(ValueError):
        list(parse_tlv(payload))
