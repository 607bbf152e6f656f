"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Configure test environment (no .env, APP_ENV=test)
  - Provide reusable Kunde fixtures and factories
  - Register the "unit" marker

Collaborators:
  - pytest: Test framework
  - kunde.domain: entities and value objects

Notes:
  - Fixtures are auto-discovered by pytest
  - Settings must be patched before anything calls get_settings()
"""

import os
from dataclasses import replace
from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from kunde.crosscutting import config as app_config

app_config.Settings.model_config["env_file"] = None
os.environ.setdefault("APP_ENV", "test")

from kunde.domain.entities import Adresse, Kunde, Umsatz  # noqa: E402
from kunde.domain.validation import KundeValidator  # noqa: E402
from kunde.domain.value_objects import (  # noqa: E402
    FamilienstandType,
    GeschlechtType,
    InteresseType,
)

# Fecha fija para constraints dependientes del "hoy".
FIXED_TODAY = date(2024, 6, 1)


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


# ============================================================================
# Test Data Factories
# ============================================================================


class KundeFactory:
    """R: Factory for valid Kunden with overridable fields."""

    @staticmethod
    def create(**overrides) -> Kunde:
        kunde = Kunde(
            id=uuid4(),
            nachname="Alpha",
            email="alpha@hska.de",
            kategorie=1,
            newsletter=True,
            geburtsdatum=date(1980, 1, 31),
            umsatz=Umsatz(betrag=Decimal("1"), waehrung="EUR"),
            homepage="https://www.hska.de",
            geschlecht=GeschlechtType.WEIBLICH,
            familienstand=FamilienstandType.VERHEIRATET,
            interessen=(InteresseType.LESEN, InteresseType.REISEN),
            adresse=Adresse(plz="12345", ort="Testort"),
        )
        return replace(kunde, **overrides)


@pytest.fixture
def kunde_factory() -> type[KundeFactory]:
    return KundeFactory


@pytest.fixture
def sample_kunde() -> Kunde:
    """R: A Kunde that satisfies every constraint."""
    return KundeFactory.create()


@pytest.fixture
def fixed_today() -> date:
    return FIXED_TODAY


@pytest.fixture
def validator() -> KundeValidator:
    """R: German messages, deterministic today."""
    return KundeValidator(locale="de", today=lambda: FIXED_TODAY)


@pytest.fixture
def kunde_payload() -> dict:
    """R: Valid JSON body for POST/PUT /kunden."""
    return {
        "nachname": "Testname",
        "email": "testname@hska.de",
        "kategorie": 1,
        "newsletter": True,
        "geburtsdatum": "2000-01-31",
        "umsatz": {"betrag": "10.50", "waehrung": "EUR"},
        "homepage": "https://www.hska.de",
        "geschlecht": "W",
        "familienstand": "VH",
        "interessen": ["S", "L"],
        "adresse": {"plz": "12345", "ort": "Testort"},
    }
