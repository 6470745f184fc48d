"""Content fingerprint for translation units."""

import hashlib
import re
import unicodedata
from dataclasses import dataclass

_WHITESPACE = re.compile(r"\s+")


def canonicalize(content: str) -> str:
    """Canonical form used for fingerprinting: NFC, whitespace runs collapsed, stripped."""
    return _WHITESPACE.sub(" ", unicodedata.normalize("NFC", content)).strip()


@dataclass(frozen=True)
class Fingerprint:
    """SHA-256 of a unit's canonical content (binary)."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != 32:
            raise ValueError("SHA-256 fingerprint must be 32 bytes")

    @classmethod
    def of(cls, content: str) -> "Fingerprint":
        return cls(hashlib.sha256(canonicalize(content).encode("utf-8")).digest())

    def hex(self) -> str:
        return self.value.hex()
