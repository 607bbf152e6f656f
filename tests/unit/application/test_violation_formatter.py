"""
Name: Violation Formatter Tests

Responsibilities:
  - Validate prefix stripping and order-preserving renaming
  - Validate parser errors become MalformedInputError
"""

import pytest

from kunde.application.violation_formatter import (
    format_violations,
    malformed_input_from,
    strip_context,
    to_violations,
)
from kunde.domain.entities import Adresse
from kunde.domain.errors import MalformedInputError
from kunde.domain.value_objects import FieldViolation, ValidationContext, Violation

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("create.kunde.nachname", "nachname"),
        ("update.kunde.adresse.plz", "adresse.plz"),
        ("patch.kunde.email", "email"),
        ("adresse.ort", "adresse.ort"),
        ("delete.kunde.email", "delete.kunde.email"),
    ],
)
def test_strip_context(raw, expected):
    assert strip_context(raw) == expected


def test_to_violations_preserves_order():
    raw = [
        FieldViolation("update.kunde.email", "m1", "kunde.email.pattern"),
        FieldViolation("update.kunde.nachname", "m2", "kunde.nachname.pattern"),
        FieldViolation("update.kunde.adresse.plz", "m3", "adresse.plz.pattern"),
    ]

    assert to_violations(raw) == [
        Violation("email", "m1"),
        Violation("nachname", "m2"),
        Violation("adresse.plz", "m3"),
    ]


def test_format_violations_wire_payload():
    raw = [FieldViolation("create.kunde.adresse.plz", "zu kurz", "adresse.plz.pattern")]

    assert format_violations(raw) == [{"property": "adresse.plz", "message": "zu kurz"}]


def test_format_empty_is_empty():
    assert format_violations([]) == []


def test_same_field_same_property_in_every_context(validator, kunde_factory):
    kunde = kunde_factory.create(adresse=Adresse(plz="1", ort="Testort"))

    payloads = [
        format_violations(validator.validate(kunde, ctx)) for ctx in ValidationContext
    ]

    assert all(p == payloads[0] for p in payloads)
    assert payloads[0][0]["property"] == "adresse.plz"


def test_malformed_input_from_parser_errors():
    errors = [
        {
            "type": "int_parsing",
            "loc": ("body", "kategorie"),
            "msg": "Input should be a valid integer",
        },
        {
            "type": "missing",
            "loc": ("body", "adresse", "plz"),
            "msg": "Field required",
        },
    ]

    exc = malformed_input_from(errors)

    assert isinstance(exc, MalformedInputError)
    assert exc.error_code == "MALFORMED_INPUT"
    assert exc.message == (
        "kategorie: Input should be a valid integer; adresse.plz: Field required"
    )


def test_malformed_input_includes_ctx_error():
    errors = [
        {
            "type": "json_invalid",
            "loc": ("body", 1),
            "msg": "JSON decode error",
            "ctx": {"error": "Expecting value"},
        }
    ]

    assert malformed_input_from(errors).message == (
        "1: JSON decode error (Expecting value)"
    )


def test_malformed_input_without_details_has_fallback():
    assert malformed_input_from([]).message == "Malformed request body"
