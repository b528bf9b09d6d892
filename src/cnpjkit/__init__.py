"""cnpjkit: validate, format, classify and generate Brazilian CNPJ identifiers."""

from .codec import (
    CnpjType,
    check_digits,
    classify,
    detect_type,
    format_cnpj,
    generate,
    is_valid,
    mask_cnpj,
    normalize,
)
from .errors import CnpjError, InvalidCnpjError, MalformedCnpjError
from .model import Cnpj

__version__ = "0.1.0"

__all__ = [
    "Cnpj",
    "CnpjType",
    "CnpjError",
    "InvalidCnpjError",
    "MalformedCnpjError",
    "check_digits",
    "classify",
    "detect_type",
    "format_cnpj",
    "generate",
    "is_valid",
    "mask_cnpj",
    "normalize",
]
