"""CRC16-CCITT (FALSE variant) used by the BR Code checksum field."""
from __future__ import annotations

from typing import Iterable

CRC16_POLY = 0x1021
CRC16_INIT = 0xFFFF
CRC_TAG_PREFIX = "6304"


def _codes(data: str | bytes) -> Iterable[int]:
    if isinstance(data, (bytes, bytearray)):
        return data
    return (ord(ch) for ch in data)


def crc16_ccitt(data: str | bytes) -> str:
    """Compute CRC16-CCITT (init 0xFFFF, poly 0x1021) as 4 uppercase hex digits.

    Every character contributes its code, MSB first, with no reflection and no
    final XOR. The register is masked to 16 bits after every round.
    """

    checksum = CRC16_INIT
    for code in _codes(data):
        checksum ^= code << 8
        for _ in range(8):
            if checksum & 0x8000:
                checksum = (checksum << 1) ^ CRC16_POLY
            else:
                checksum <<= 1
            checksum &= 0xFFFF
    return f"{checksum:04X}"


crc16 = crc16_ccitt
