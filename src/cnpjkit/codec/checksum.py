"""
CNPJ check-digit computation (weighted Mod-11, two passes).

The arithmetic is the same for both encodings; only the character-to-value
mapping differs:

  - NUMERIC:      '0'..'9' -> 0..9
  - ALPHANUMERIC: ord(c) - 48, so '0'..'9' -> 0..9 and 'A'..'Z' -> 17..42

For a 14-digit value both mappings agree, which is why legacy identifiers stay
valid under the alphanumeric rule.

Legacy fallback
---------------
If an alphanumeric pass meets a character whose value falls outside 0..42, the
whole pass yields '0' instead of failing. Callers that want a hard failure pass
`strict=True`, which checks the base against the type's alphabet up front and
raises `MalformedCnpjError`.
"""

from __future__ import annotations

from typing import Sequence

from ..errors import MalformedCnpjError
from .types import ALPHABETS, BASE_LENGTH, NUMERIC_ALPHABET, WEIGHTS_1, WEIGHTS_2, CnpjType

_MAX_ALPHANUMERIC_VALUE = 42  # ord('Z') - 48


def _ensure_alphabet(chars: str, kind: CnpjType) -> None:
    alphabet = ALPHABETS[kind]
    bad = [ch for ch in chars if ch not in alphabet]
    if bad:
        raise MalformedCnpjError(
            f"characters {''.join(bad)!r} not allowed in a {kind.value} CNPJ"
        )


def check_digit(
    chars: str, weights: Sequence[int], kind: CnpjType, strict: bool = False
) -> str:
    """
    Compute one check digit over `chars[:len(weights)]`.

    Args:
        chars:   Base characters (12 for the first digit, 13 for the second).
        weights: WEIGHTS_1 or WEIGHTS_2.
        kind:    Selects the character-to-value mapping.
        strict:  Raise instead of taking the legacy '0' fallback.

    Returns:
        A single character '0'..'9'.
    """
    kind = CnpjType(kind)
    if len(chars) < len(weights):
        raise MalformedCnpjError(
            f"need {len(weights)} characters for this pass, got {len(chars)}"
        )
    if strict:
        _ensure_alphabet(chars[: len(weights)], kind)

    total = 0
    for ch, weight in zip(chars, weights):
        if kind is CnpjType.NUMERIC:
            if ch not in NUMERIC_ALPHABET:
                raise MalformedCnpjError(f"{ch!r} is not a digit")
            value = ord(ch) - 48
        else:
            value = ord(ch) - 48
            if value < 0 or value > _MAX_ALPHANUMERIC_VALUE:
                return "0"
        total += value * weight

    dv = 11 - total % 11
    return "0" if dv >= 10 else str(dv)


def check_digits(base: str, kind: CnpjType, strict: bool = False) -> str:
    """
    Compute both check digits for a 12-character base.

    The second pass runs over the base plus the first digit, with WEIGHTS_2.

    Example:
        >>> check_digits("123456780001", CnpjType.NUMERIC)
        '95'
        >>> check_digits("12ABC34501DE", CnpjType.ALPHANUMERIC)
        '35'
    """
    if strict and len(base) != BASE_LENGTH:
        raise MalformedCnpjError(f"base must have {BASE_LENGTH} characters, got {len(base)}")
    d1 = check_digit(base, WEIGHTS_1, kind, strict=strict)
    d2 = check_digit(base[:BASE_LENGTH] + d1, WEIGHTS_2, kind, strict=strict)
    return d1 + d2
