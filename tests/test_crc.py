from __future__ import annotations

from pixqr.crc import crc16_ccitt

from .conftest import REFERENCE_CODE


def test_crc_matches_reference_payload() -> None:
    assert crc16_ccitt(REFERENCE_CODE[:-4]) == "1D3D"


def test_crc_standard_check_value() -> None:
    # CRC-16/CCITT-FALSE check value for "123456789"
    assert crc16_ccitt("123456789") == "29B1"
    assert crc16_ccitt(b"123456789") == "29B1"


def test_crc_of_empty_input_is_initial_register() -> None:
    assert crc16_ccitt("") == "FFFF"


def test_crc_is_zero_padded_uppercase() -> None:
    for data in ("A", "pix", "6304", "br.gov.bcb.pix"):
        result = crc16_ccitt(data)
        assert len(result) == 4
        assert result == result.upper()
        int(result, 16)
