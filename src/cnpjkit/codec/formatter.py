from __future__ import annotations

from typing import Optional

from .normalizer import normalize
from .types import CNPJ_LENGTH


def format_cnpj(value: str) -> str:
    """
    Apply the `AA.AAA.AAA/AAAA-DD` mask to a normalized 14-character value.

    The separator grid is the same for numeric and alphanumeric values.
    Anything that is not exactly 14 characters comes back unchanged: this is a
    cosmetic transform, not a validator.
    """
    if value is None or len(value) != CNPJ_LENGTH:
        return value
    return f"{value[:2]}.{value[2:5]}.{value[5:8]}/{value[8:12]}-{value[12:]}"


def mask_cnpj(raw: Optional[str]) -> str:
    """Normalize user input, then mask it (e.g. " 12345678 0001 95" -> "12.345.678/0001-95")."""
    return format_cnpj(normalize(raw))
