from __future__ import annotations

from typing import Optional

from .normalizer import normalize
from .types import ALPHANUMERIC_ALPHABET, CNPJ_LENGTH, NUMERIC_ALPHABET, CnpjType


def _only(value: str, alphabet: str) -> bool:
    return all(ch in alphabet for ch in value)


def classify(normalized: str) -> Optional[CnpjType]:
    """
    Decide which encoding a normalized 14-character value uses.

    The digit-only test runs first: a 14-digit value is also a valid
    alphanumeric string, but it must be checked with the numeric mapping.

    Returns:
        `CnpjType.NUMERIC`, `CnpjType.ALPHANUMERIC`, or None for any other
        content or length.
    """
    if normalized is None or len(normalized) != CNPJ_LENGTH:
        return None
    if _only(normalized, NUMERIC_ALPHABET):
        return CnpjType.NUMERIC
    if _only(normalized, ALPHANUMERIC_ALPHABET):
        return CnpjType.ALPHANUMERIC
    return None


def detect_type(raw: Optional[str]) -> Optional[CnpjType]:
    """Normalize a raw value and classify it."""
    return classify(normalize(raw))
