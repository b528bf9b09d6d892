"""
Random CNPJ generation.

The random source is injected: anything with a `choice(seq)` method works,
typically `random.Random(seed)` in tests. Without one a fresh
`random.SystemRandom` is used, so no module-level generator state is shared.

Generated values are self-consistent (they pass `is_valid`) but do not
correspond to registered companies.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol, Sequence

from .checksum import check_digits
from .formatter import format_cnpj
from .types import ALPHABETS, BASE_LENGTH, NUMERIC_ALPHABET, CnpjType


class RandomSource(Protocol):
    def choice(self, seq: Sequence[str]) -> str: ...


def generate_base(kind: CnpjType, rng: Optional[RandomSource] = None) -> str:
    """
    Draw a 12-character base from the alphabet of `kind`.

    An alphanumeric base is redrawn while it contains only digits, so the
    finished identifier classifies as ALPHANUMERIC.
    """
    kind = CnpjType(kind)
    rng = rng or random.SystemRandom()
    alphabet = ALPHABETS[kind]
    while True:
        base = "".join(rng.choice(alphabet) for _ in range(BASE_LENGTH))
        if kind is CnpjType.NUMERIC or any(ch not in NUMERIC_ALPHABET for ch in base):
            return base


def generate(
    kind: CnpjType = CnpjType.ALPHANUMERIC,
    rng: Optional[RandomSource] = None,
    masked: bool = False,
) -> str:
    """
    Generate a valid CNPJ of the requested type.

    Args:
        kind:   NUMERIC or ALPHANUMERIC.
        rng:    Injected random source; defaults to `random.SystemRandom()`.
        masked: Return `AA.AAA.AAA/AAAA-DD` instead of the bare 14 characters.
    """
    kind = CnpjType(kind)
    base = generate_base(kind, rng)
    value = base + check_digits(base, kind)
    return format_cnpj(value) if masked else value
