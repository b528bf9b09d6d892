"""
Normalization: the inverse of the mask.

Users paste CNPJs in every shape imaginable ("12.345.678/0001-95",
" 12 345 678 0001 95 ", "12abc34501de35"). Everything downstream works on the
canonical form: uppercase, `0-9A-Z` only.
"""

from __future__ import annotations

from typing import Optional

from .types import ALPHANUMERIC_ALPHABET

_ALLOWED = frozenset(ALPHANUMERIC_ALPHABET)


def normalize(raw: Optional[str]) -> str:
    """
    Strip a raw string down to its uppercase alphanumeric content.

    ASCII letters are uppercased first; anything outside `0-9A-Z` afterwards
    (punctuation, whitespace, accented or non-ASCII characters) is dropped.
    No length check is done here.

    Args:
        raw: Candidate string, possibly masked. `None` is accepted.

    Returns:
        The canonical string; `""` for `None`.
    """
    if raw is None:
        return ""
    # str.upper() would fold some non-ASCII letters onto ASCII ones (e.g. "ß" -> "SS"),
    # so only a-z are case-folded.
    return "".join(
        ch for ch in (c.upper() if "a" <= c <= "z" else c for c in raw) if ch in _ALLOWED
    )
