"""Locale value object (RFC 5646 language tag)."""

import re
from dataclasses import dataclass

# language[-script][-region][-variant...]
_TAG = re.compile(
    r"^(?P<language>[a-zA-Z]{2,3}|[a-zA-Z]{5,8})"
    r"(?:-(?P<script>[a-zA-Z]{4}))?"
    r"(?:-(?P<region>[a-zA-Z]{2}|[0-9]{3}))?"
    r"(?P<variants>(?:-(?:[a-zA-Z0-9]{5,8}|[0-9][a-zA-Z0-9]{3}))*)$"
)


@dataclass(frozen=True)
class Locale:
    """Language/region identifier. Equality is by normalized identifier."""

    identifier: str

    @classmethod
    def from_identifier(cls, value: object) -> "Locale":
        """Parse and normalize an identifier (``en-us`` -> ``en-US``). Raises ValueError."""
        if not isinstance(value, str):
            raise ValueError(f"Invalid locale: {value!r}")
        match = _TAG.match(value.strip().replace("_", "-"))
        if not match:
            raise ValueError(f"Invalid locale: {value!r}")
        parts = [match["language"].lower()]
        if match["script"]:
            parts.append(match["script"].title())
        if match["region"]:
            parts.append(match["region"].upper())
        if match["variants"]:
            parts.extend(v.lower() for v in match["variants"].split("-") if v)
        return cls("-".join(parts))

    @classmethod
    def is_valid(cls, value: object) -> bool:
        try:
            cls.from_identifier(value)
        except ValueError:
            return False
        return True

    def __str__(self) -> str:
        return self.identifier
