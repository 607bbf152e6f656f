"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Módulo:
    Entidades del Dominio (Kunde, Adresse, Umsatz)

Responsabilidades:
    - Definir el registro inmutable Kunde y sus valores anidados.
    - Mantener tipos claros para patcher, validador y repositorios.

Colaboradores:
    - domain.value_objects: enums cerrados de los campos.
    - domain.patching / domain.validation: transforman / validan Kunde.
    - interfaces/api: serializan DTOs basados en estas entidades.

Principios:
    - Sin dependencias a FastAPI / persistencia.
    - Inmutables (frozen): cada cambio produce un Kunde nuevo via replace().
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Tuple
from uuid import UUID

from .value_objects import FamilienstandType, GeschlechtType, InteresseType


@dataclass(frozen=True)
class Adresse:
    """Dirección: PLZ de 5 dígitos + Ort."""

    plz: str
    ort: str


@dataclass(frozen=True)
class Umsatz:
    """Facturación: monto + código de moneda ISO 4217 (ej: EUR)."""

    betrag: Decimal
    waehrung: str


@dataclass(frozen=True)
class Kunde:
    """
    Registro de cliente.

    Importante:
      - id lo asigna el alta (create), nunca el cliente HTTP.
      - interessen se normaliza a tuple para que el registro sea inmutable.
    """

    nachname: str
    email: str
    adresse: Adresse
    id: Optional[UUID] = None
    kategorie: int = 0
    newsletter: bool = False
    geburtsdatum: Optional[date] = None
    umsatz: Optional[Umsatz] = None
    homepage: Optional[str] = None
    geschlecht: Optional[GeschlechtType] = None
    familienstand: Optional[FamilienstandType] = None
    interessen: Optional[Tuple[InteresseType, ...]] = None

    def __post_init__(self) -> None:
        if self.interessen is not None and not isinstance(self.interessen, tuple):
            object.__setattr__(self, "interessen", tuple(self.interessen))

    def with_id(self, kunde_id: UUID) -> "Kunde":
        return replace(self, id=kunde_id)

    def with_interessen(self, interessen: Optional[Iterable[InteresseType]]) -> "Kunde":
        return replace(
            self, interessen=tuple(interessen) if interessen is not None else None
        )
