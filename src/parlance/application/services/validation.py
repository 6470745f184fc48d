"""Field validation shared by project and document use cases.

Each helper records messages into an ``errors`` dict instead of raising, so a
caller can report every invalid field at once.
"""

import re

from parlance.domain.value_objects import Locale

BLANK = "can't be blank"
INVALID = "invalid"
TAKEN = "already taken"

_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _add(errors: dict[str, list[str]], field: str, message: str) -> None:
    errors.setdefault(field, []).append(message)


def validate_name(value: object, errors: dict[str, list[str]], field: str = "name") -> str | None:
    if not isinstance(value, str) or not value.strip():
        _add(errors, field, BLANK)
        return None
    return value.strip()


def validate_sections(
    value: object, errors: dict[str, list[str]], field: str = "sections"
) -> dict[str, str] | None:
    """Non-empty mapping of section name -> source content."""
    if value is None or (isinstance(value, dict) and not value):
        _add(errors, field, BLANK)
        return None
    if not isinstance(value, dict) or not all(
        isinstance(k, str) and k.strip() and isinstance(v, str) for k, v in value.items()
    ):
        _add(errors, field, INVALID)
        return None
    return dict(value)


def validate_locale(value: object, errors: dict[str, list[str]], field: str) -> str | None:
    try:
        return Locale.from_identifier(value).identifier
    except ValueError:
        _add(errors, field, INVALID)
        return None


def validate_targeted_locales(
    value: object, errors: dict[str, list[str]], field: str = "targeted_locales"
) -> dict[str, bool] | None:
    """Mapping of locale identifier -> required flag, keys normalized."""
    if not isinstance(value, dict):
        _add(errors, field, INVALID)
        return None
    normalized: dict[str, bool] = {}
    for identifier, required in value.items():
        if not isinstance(required, bool) or not Locale.is_valid(identifier):
            _add(errors, field, INVALID)
            return None
        normalized[Locale.from_identifier(identifier).identifier] = required
    return normalized


def validate_email(value: object, errors: dict[str, list[str]], field: str = "email") -> str | None:
    """Blank clears the address; anything else must look like one."""
    if not isinstance(value, str):
        _add(errors, field, INVALID)
        return None
    value = value.strip()
    if value and not _EMAIL.match(value):
        _add(errors, field, INVALID)
        return None
    return value
