"""PIX key types and per-type key validators."""
from __future__ import annotations

import enum
import re
from typing import Callable

_CPF_RE = re.compile(r"\d{3}\.?\d{3}\.?\d{3}-?\d{2}", re.ASCII)
_CNPJ_RE = re.compile(r"\d{2}\.?\d{3}\.?\d{3}/?\d{4}-?\d{2}", re.ASCII)
_PHONE_RE = re.compile(r"(\+55)?\d{10,11}", re.ASCII)
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_UUID_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE)
_NON_DIGIT_RE = re.compile(r"\D", re.ASCII)


class PixKeyType(str, enum.Enum):
    CPF = "CPF"
    CNPJ = "CNPJ"
    PHONE = "PHONE"
    EMAIL = "EMAIL"
    RANDOM = "RANDOM"


def _digits(value: str) -> list[int]:
    return [int(ch) for ch in _NON_DIGIT_RE.sub("", value)]


def _cpf_check_digit(digits: list[int]) -> int:
    start = len(digits) + 1
    total = sum(digit * (start - i) for i, digit in enumerate(digits))
    result = (total * 10) % 11
    return 0 if result == 10 else result


def is_valid_cpf(cpf: str) -> bool:
    """Check the two CPF check digits (mod 11)."""

    digits = _digits(cpf)
    if len(digits) != 11 or len(set(digits)) == 1:
        return False
    if _cpf_check_digit(digits[:9]) != digits[9]:
        return False
    return _cpf_check_digit(digits[:10]) == digits[10]


def _cnpj_check_digit(digits: list[int]) -> int:
    total = 0
    weight = len(digits) - 7
    for digit in digits:
        total += digit * weight
        weight -= 1
        if weight < 2:
            weight = 9
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def is_valid_cnpj(cnpj: str) -> bool:
    """Check the two CNPJ check digits (weights 5..2,9..2 then 6..2,9..2)."""

    digits = _digits(cnpj)
    if len(digits) != 14 or len(set(digits)) == 1:
        return False
    if _cnpj_check_digit(digits[:12]) != digits[12]:
        return False
    return _cnpj_check_digit(digits[:13]) == digits[13]


def _valid_cpf_key(key: str) -> bool:
    return bool(_CPF_RE.fullmatch(key)) and is_valid_cpf(key)


def _valid_cnpj_key(key: str) -> bool:
    return bool(_CNPJ_RE.fullmatch(key)) and is_valid_cnpj(key)


_VALIDATORS: dict[PixKeyType, Callable[[str], bool]] = {
    PixKeyType.CPF: _valid_cpf_key,
    PixKeyType.CNPJ: _valid_cnpj_key,
    PixKeyType.PHONE: lambda key: bool(_PHONE_RE.fullmatch(key)),
    PixKeyType.EMAIL: lambda key: bool(_EMAIL_RE.fullmatch(key)),
    PixKeyType.RANDOM: lambda key: bool(_UUID_RE.fullmatch(key)),
}


def validate_pix_key(key: str, key_type: PixKeyType | str) -> bool:
    """Return True when ``key`` is well formed for ``key_type``.

    Unknown key types are rejected rather than raising.
    """

    try:
        validator = _VALIDATORS[PixKeyType(key_type)]
    except ValueError:
        return False
    if not isinstance(key, str):
        return False
    return validator(key)
