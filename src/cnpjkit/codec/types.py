"""
Constants shared by every stage of the codec.

A CNPJ is 14 characters: a 12-character base (8 for the root, 4 for the
branch) followed by 2 check digits. The base alphabet depends on the type;
check digits are always 0-9.
"""

from __future__ import annotations

import string
from enum import Enum
from typing import Dict, Final, Tuple


class CnpjType(str, Enum):
    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"


CNPJ_LENGTH: Final[int] = 14
BASE_LENGTH: Final[int] = 12

WEIGHTS_1: Final[Tuple[int, ...]] = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
WEIGHTS_2: Final[Tuple[int, ...]] = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

NUMERIC_ALPHABET: Final[str] = string.digits
ALPHANUMERIC_ALPHABET: Final[str] = string.digits + string.ascii_uppercase

ALPHABETS: Final[Dict[CnpjType, str]] = {
    CnpjType.NUMERIC: NUMERIC_ALPHABET,
    CnpjType.ALPHANUMERIC: ALPHANUMERIC_ALPHABET,
}
