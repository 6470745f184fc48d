"""Unit tests for field validation helpers."""

from parlance.application.services.validation import (
    validate_email,
    validate_name,
    validate_sections,
    validate_targeted_locales,
)


def test_validate_name_strips() -> None:
    errors: dict = {}
    assert validate_name("  home ", errors) == "home"
    assert errors == {}


def test_validate_name_blank() -> None:
    errors: dict = {}
    assert validate_name(None, errors) is None
    assert errors == {"name": ["can't be blank"]}


def test_validate_sections() -> None:
    errors: dict = {}
    assert validate_sections({"main": ""}, errors) == {"main": ""}
    assert validate_sections(["<p>a</p>"], errors) is None
    assert validate_sections({"": "x"}, errors) is None
    assert errors == {"sections": ["invalid", "invalid"]}


def test_validate_targeted_locales_normalizes_keys() -> None:
    errors: dict = {}
    assert validate_targeted_locales({"pt_br": True, "FR": False}, errors) == {
        "pt-BR": True,
        "fr": False,
    }
    assert errors == {}


def test_validate_targeted_locales_rejects_bad_entries() -> None:
    for value in (["fr"], {"fr": 1}, {"??": True}):
        errors: dict = {}
        assert validate_targeted_locales(value, errors) is None
        assert errors == {"targeted_locales": ["invalid"]}


def test_validate_email() -> None:
    errors: dict = {}
    assert validate_email(" editor@example.com ", errors) == "editor@example.com"
    assert validate_email("", errors) == ""
    assert errors == {}
    assert validate_email("editor@", errors) is None
    assert errors == {"email": ["invalid"]}
