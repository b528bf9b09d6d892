"""
Immutable CNPJ value object.

Built in one step (base + computed check digits, or a validated raw value) and
never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .codec import (
    BASE_LENGTH,
    CnpjType,
    check_digits,
    classify,
    format_cnpj,
    generate,
    is_valid,
    normalize,
)
from .codec.generator import RandomSource
from .errors import InvalidCnpjError, MalformedCnpjError

HEADQUARTERS_BRANCH = "0001"


@dataclass(frozen=True)
class Cnpj:
    value: str
    kind: CnpjType

    def __post_init__(self) -> None:
        # value must already be normalized; parse() is the entry point for raw input
        kind = classify(self.value) if is_valid(self.value) else None
        if kind is None or kind != self.kind:
            raise InvalidCnpjError(self.value)
        object.__setattr__(self, "kind", kind)

    @classmethod
    def parse(cls, raw: Optional[str]) -> "Cnpj":
        """
        Build from user input in any accepted shape.

        Raises:
            InvalidCnpjError: wrong length, disallowed characters or bad check digits.
        """
        if not is_valid(raw):
            raise InvalidCnpjError(raw)
        clean = normalize(raw)
        return cls(value=clean, kind=classify(clean))

    @classmethod
    def from_base(cls, base: str, kind: CnpjType) -> "Cnpj":
        """
        Complete a 12-character base with its check digits.

        Raises:
            MalformedCnpjError: base has the wrong length or characters outside
                the alphabet of `kind`.
        """
        kind = CnpjType(kind)
        clean = normalize(base)
        if len(clean) != BASE_LENGTH:
            raise MalformedCnpjError(f"base must have {BASE_LENGTH} characters, got {len(clean)}")
        value = clean + check_digits(clean, kind, strict=True)
        # a digit-only base completed as ALPHANUMERIC is still a numeric CNPJ
        return cls(value=value, kind=classify(value))

    @classmethod
    def generate(cls, kind: CnpjType = CnpjType.ALPHANUMERIC, rng: Optional[RandomSource] = None) -> "Cnpj":
        value = generate(kind, rng)
        return cls(value=value, kind=CnpjType(kind))

    @property
    def root(self) -> str:
        """First 8 characters: identifies the company."""
        return self.value[:8]

    @property
    def branch(self) -> str:
        """Characters 9-12 (the "ordem"): identifies the establishment."""
        return self.value[8:BASE_LENGTH]

    @property
    def base(self) -> str:
        return self.value[:BASE_LENGTH]

    @property
    def check_digits(self) -> str:
        return self.value[BASE_LENGTH:]

    @property
    def is_headquarters(self) -> bool:
        return self.branch == HEADQUARTERS_BRANCH

    @property
    def formatted(self) -> str:
        return format_cnpj(self.value)

    def __str__(self) -> str:
        return self.formatted

    def __repr__(self) -> str:
        return f"Cnpj({self.formatted!r})"
