"""
===============================================================================
TARJETA CRC — schemas/kunden.py
===============================================================================

Módulo:
    Schemas HTTP para Kunden

Responsabilidades:
    - Definir DTOs de request/response para /kunden.
    - Validar SOLO forma y tipos primitivos: un tipo incorrecto o un JSON
      roto termina en MALFORMED_INPUT; los constraints de dominio
      (patrón de nachname, PLZ, rango de kategorie, ...) los revisa
      KundeValidator y terminan en CONSTRAINT_VIOLATION.
    - Resolver tokens de enum con build(); un token desconocido queda ausente.

Colaboradores:
    - domain.entities (Kunde, Adresse, Umsatz)
    - domain.value_objects (enums)
    - domain.patching (PatchOp, PatchOperation)
===============================================================================
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from kunde.domain.entities import Adresse, Kunde, Umsatz
from kunde.domain.patching import PatchOp, PatchOperation
from kunde.domain.value_objects import (
    FamilienstandType,
    GeschlechtType,
    InteresseType,
)
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    StrictBool,
    StrictInt,
    TypeAdapter,
    ValidationError,
    field_validator,
)

_HTTP_URL = TypeAdapter(HttpUrl)


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------
class AdresseReq(BaseModel):
    plz: str
    ort: str


class UmsatzReq(BaseModel):
    betrag: Decimal
    waehrung: str = Field(..., pattern=r"^[A-Z]{3}$", description="ISO 4217")


class KundeReq(BaseModel):
    """
    Request para crear (POST) o reemplazar (PUT) un Kunde.

    Nota:
      - id se acepta pero se ignora; lo asigna el servidor.
    """

    model_config = ConfigDict(extra="ignore")

    id: UUID | None = None
    nachname: str
    email: str
    kategorie: StrictInt = 0
    newsletter: StrictBool = False
    geburtsdatum: date | None = None
    umsatz: UmsatzReq | None = None
    homepage: str | None = None
    geschlecht: str | None = Field(default=None, description="M | W | D")
    familienstand: str | None = Field(default=None, description="L | VH | G | VW")
    interessen: list[str] | None = Field(default=None, description="S | L | R")
    adresse: AdresseReq

    @field_validator("homepage")
    @classmethod
    def _homepage_is_url(cls, value: str | None) -> str | None:
        # R: Se valida como URL pero se guarda tal cual llegó (sin normalizar).
        if value is None:
            return value
        try:
            _HTTP_URL.validate_python(value)
        except ValidationError as exc:
            raise ValueError(f"invalid URL: {value}") from exc
        return value

    def to_entity(self) -> Kunde:
        interessen = None
        if self.interessen is not None:
            resolved = (InteresseType.build(token) for token in self.interessen)
            interessen = tuple(i for i in resolved if i is not None)

        return Kunde(
            nachname=self.nachname,
            email=self.email,
            kategorie=self.kategorie,
            newsletter=self.newsletter,
            geburtsdatum=self.geburtsdatum,
            umsatz=(
                Umsatz(betrag=self.umsatz.betrag, waehrung=self.umsatz.waehrung)
                if self.umsatz is not None
                else None
            ),
            homepage=self.homepage,
            geschlecht=GeschlechtType.build(self.geschlecht),
            familienstand=FamilienstandType.build(self.familienstand),
            interessen=interessen,
            adresse=Adresse(plz=self.adresse.plz, ort=self.adresse.ort),
        )


class PatchOperationReq(BaseModel):
    """Una operación de PATCH: {"op", "path", "value"}."""

    op: PatchOp
    path: str
    value: str

    def to_operation(self) -> PatchOperation:
        return PatchOperation(op=self.op, path=self.path, value=self.value)


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------
class AdresseRes(BaseModel):
    plz: str
    ort: str


class UmsatzRes(BaseModel):
    betrag: Decimal
    waehrung: str


class KundeRes(BaseModel):
    """Response de Kunde; los enums salen con su código externo."""

    id: UUID
    nachname: str
    email: str
    kategorie: int
    newsletter: bool
    geburtsdatum: date | None = None
    umsatz: UmsatzRes | None = None
    homepage: str | None = None
    geschlecht: GeschlechtType | None = None
    familienstand: FamilienstandType | None = None
    interessen: list[InteresseType] | None = None
    adresse: AdresseRes

    @classmethod
    def from_entity(cls, kunde: Kunde) -> "KundeRes":
        return cls(
            id=kunde.id,
            nachname=kunde.nachname,
            email=kunde.email,
            kategorie=kunde.kategorie,
            newsletter=kunde.newsletter,
            geburtsdatum=kunde.geburtsdatum,
            umsatz=(
                UmsatzRes(betrag=kunde.umsatz.betrag, waehrung=kunde.umsatz.waehrung)
                if kunde.umsatz is not None
                else None
            ),
            homepage=kunde.homepage,
            geschlecht=kunde.geschlecht,
            familienstand=kunde.familienstand,
            interessen=(
                list(kunde.interessen) if kunde.interessen is not None else None
            ),
            adresse=AdresseRes(plz=kunde.adresse.plz, ort=kunde.adresse.ort),
        )


class ViolationRes(BaseModel):
    """Una violación de constraint en el wire: {"property", "message"}."""

    property: str
    message: str
