from __future__ import annotations


class CnpjError(ValueError):
    """Base error for CNPJ construction failures."""


class InvalidCnpjError(CnpjError):
    """A full identifier failed shape or check-digit validation."""

    def __init__(self, raw: str | None) -> None:
        self.raw = raw
        super().__init__(f"invalid CNPJ: {raw!r}")


class MalformedCnpjError(CnpjError):
    """A base contains characters outside its alphabet or has the wrong length."""
