"""Pure string functions: normalize -> classify -> checksum, plus mask and generate."""

from .checksum import check_digit, check_digits
from .classifier import classify, detect_type
from .formatter import format_cnpj, mask_cnpj
from .generator import generate, generate_base
from .normalizer import normalize
from .types import (
    ALPHANUMERIC_ALPHABET,
    BASE_LENGTH,
    CNPJ_LENGTH,
    NUMERIC_ALPHABET,
    WEIGHTS_1,
    WEIGHTS_2,
    CnpjType,
)
from .validators import is_valid

__all__ = [
    "ALPHANUMERIC_ALPHABET",
    "BASE_LENGTH",
    "CNPJ_LENGTH",
    "NUMERIC_ALPHABET",
    "WEIGHTS_1",
    "WEIGHTS_2",
    "CnpjType",
    "check_digit",
    "check_digits",
    "classify",
    "detect_type",
    "format_cnpj",
    "generate",
    "generate_base",
    "is_valid",
    "mask_cnpj",
    "normalize",
]
