from __future__ import annotations

from typing import Optional

from .checksum import check_digits
from .classifier import classify
from .normalizer import normalize
from .types import BASE_LENGTH, CNPJ_LENGTH


def is_valid(raw: Optional[str]) -> bool:
    """
    Validate a CNPJ in any accepted shape (masked or bare, numeric or alphanumeric).

    Steps:
      1) normalize
      2) require 14 characters
      3) classify (numeric is tested before alphanumeric)
      4) compare the trailing 2 characters with the computed check digits

    Never raises; malformed input is simply False.
    """
    clean = normalize(raw)
    if len(clean) != CNPJ_LENGTH:
        return False
    kind = classify(clean)
    if kind is None:
        return False
    return clean[BASE_LENGTH:] == check_digits(clean[:BASE_LENGTH], kind)
