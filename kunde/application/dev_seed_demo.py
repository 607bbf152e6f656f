"""
Name: Dev Seed Demo (Local-only)

Responsibilities:
  - Load a handful of sample Kunden into the repository at startup
  - Enforce safety guard: never in production
  - Keep operations idempotent (safe to run multiple times)

CRC:
  Component: ensure_dev_demo
  Responsibilities:
    - Validate environment guard
    - Ensure each demo Kunde exists (lookup by email)
  Collaborators:
    - KundeRepository (find / create)
    - Settings (dev_seed_demo/app_env)
  Constraints:
    - Must NEVER run in production
    - Must be idempotent
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import uuid4

from ..crosscutting.config import Settings
from ..crosscutting.logger import logger
from ..domain.entities import Adresse, Kunde, Umsatz
from ..domain.repositories import KundeRepository
from ..domain.value_objects import FamilienstandType, GeschlechtType, InteresseType


@dataclass(frozen=True, slots=True)
class _SeedKundeSpec:
    """R: Declarative seed spec (no side effects)."""

    nachname: str
    geburtsdatum: date
    kategorie: int = 0


# R: Canonical demo Kunden
_DEMO_KUNDEN: tuple[_SeedKundeSpec, ...] = (
    _SeedKundeSpec(nachname="Alpha", geburtsdatum=date(1980, 1, 31), kategorie=1),
    _SeedKundeSpec(nachname="Beta", geburtsdatum=date(1975, 6, 15), kategorie=2),
    _SeedKundeSpec(nachname="Gamma", geburtsdatum=date(1990, 3, 1), kategorie=3),
    _SeedKundeSpec(nachname="Delta", geburtsdatum=date(2000, 12, 24), kategorie=4),
    _SeedKundeSpec(nachname="Epsilon", geburtsdatum=date(1966, 9, 9), kategorie=5),
)


def _assert_not_production(settings: Settings) -> None:
    """
    R: Safety guard: DEV_SEED_DEMO must never run in production.
    Fail-fast to prevent accidental seeding in real environments.
    """
    env = (settings.app_env or "").strip().lower()
    if env in {"prod", "production"}:
        raise RuntimeError(
            f"FATAL: DEV_SEED_DEMO is enabled but ENV is '{env}'. "
            "Safety guard prevents seeding production."
        )


def build_demo_kunde(spec: _SeedKundeSpec) -> Kunde:
    return Kunde(
        id=uuid4(),
        nachname=spec.nachname,
        email=f"{spec.nachname.lower()}@hska.de",
        kategorie=spec.kategorie,
        newsletter=True,
        geburtsdatum=spec.geburtsdatum,
        umsatz=Umsatz(betrag=Decimal("1"), waehrung="EUR"),
        homepage="https://www.hska.de",
        geschlecht=GeschlechtType.WEIBLICH,
        familienstand=FamilienstandType.VERHEIRATET,
        interessen=(InteresseType.LESEN, InteresseType.REISEN),
        adresse=Adresse(plz="12345", ort="Testort"),
    )


def ensure_dev_demo(settings: Settings, *, repository: KundeRepository) -> int:
    """
    R: Ensure the demo Kunden exist if configured.

    Returns:
        Number of Kunden created in this call (0 when already seeded).
    """
    if not settings.dev_seed_demo:
        return 0

    _assert_not_production(settings)

    logger.info("Dev seed demo: starting provisioning")

    created = 0
    for spec in _DEMO_KUNDEN:
        kunde = build_demo_kunde(spec)
        if repository.find({"email": [kunde.email]}):
            logger.info(
                "Dev seed demo: kunde already exists",
                extra={"nachname": spec.nachname},
            )
            continue
        repository.create(kunde)
        created += 1
        logger.info("Dev seed demo: kunde created", extra={"nachname": spec.nachname})

    logger.info("Dev seed demo: provisioning complete", extra={"created_count": created})
    return created
