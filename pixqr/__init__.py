"""Static PIX (BR Code) copy-paste code generation and validation."""
from __future__ import annotations

from .crc import crc16, crc16_ccitt
from .keys import PixKeyType, validate_pix_key
from .schemas import DecodedPix, GenerationRequest
from .services.errors import ServiceError
from .services.pix import decode, generate, generate_random_key, validate

__all__ = [
    "DecodedPix",
    "GenerationRequest",
    "PixKeyType",
    "ServiceError",
    "crc16",
    "crc16_ccitt",
    "decode",
    "generate",
    "generate_random_key",
    "validate",
    "validate_pix_key",
]
