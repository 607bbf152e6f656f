"""
===============================================================================
TARJETA CRC — domain/value_objects.py
===============================================================================

Módulo:
    Objetos de valor del dominio Kunde (enums cerrados, violaciones, contexto)

Responsabilidades:
    - Definir los enums cerrados (Geschlecht, Familienstand, Interesse) con
      código externo + nombre simbólico.
    - Resolver tokens de forma case-insensitive por código o por nombre.
    - Representar violaciones de constraints (cruda e "hacia afuera").
    - Definir el contexto de validación (create / update / patch).

Colaboradores:
    - domain.entities: usa los enums como tipos de campo.
    - domain.validation: produce FieldViolation.
    - application.violation_formatter: convierte FieldViolation -> Violation.

Reglas:
    - Las tablas de lookup se construyen una sola vez al importar el módulo
      y nunca se mutan (MappingProxyType).
    - build() nunca lanza: token desconocido => None.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Type, TypeVar

_E = TypeVar("_E", bound=Enum)


# ---------------------------------------------------------------------------
# Enums cerrados
# ---------------------------------------------------------------------------


class GeschlechtType(str, Enum):
    """Geschlecht: el JSON usa el código interno (M/W/D)."""

    MAENNLICH = "M"
    WEIBLICH = "W"
    DIVERS = "D"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def build(cls, token: Optional[str]) -> Optional["GeschlechtType"]:
        return _resolve(cls, token)


class FamilienstandType(str, Enum):
    """Familienstand: códigos L / VH / G / VW."""

    LEDIG = "L"
    VERHEIRATET = "VH"
    GESCHIEDEN = "G"
    VERWITWET = "VW"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def build(cls, token: Optional[str]) -> Optional["FamilienstandType"]:
        return _resolve(cls, token)


class InteresseType(str, Enum):
    """Interesse: códigos S / L / R."""

    SPORT = "S"
    LESEN = "L"
    REISEN = "R"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def build(cls, token: Optional[str]) -> Optional["InteresseType"]:
        return _resolve(cls, token)


def _token_table(enum_cls: Type[_E]) -> Mapping[str, _E]:
    """Código y nombre, ambos en minúsculas, apuntan al mismo miembro."""
    table: dict[str, _E] = {}
    for member in enum_cls:
        table[str(member.value).lower()] = member
        table[member.name.lower()] = member
    return MappingProxyType(table)


_TOKEN_TABLES: Mapping[type, Mapping[str, Enum]] = MappingProxyType(
    {
        enum_cls: _token_table(enum_cls)
        for enum_cls in (GeschlechtType, FamilienstandType, InteresseType)
    }
)


def _resolve(enum_cls: Type[_E], token: Optional[str]) -> Optional[_E]:
    if not isinstance(token, str):
        return None
    return _TOKEN_TABLES[enum_cls].get(token.strip().lower())  # type: ignore[return-value]


# ---------------------------------------------------------------------------
# Contexto de validación
# ---------------------------------------------------------------------------


class ValidationContext(str, Enum):
    """
    Operación de nivel superior que disparó la validación.

    Los paths crudos llevan el prefijo "<operación>.kunde." (como los
    reporta un validador a nivel de método); el formatter lo elimina.
    """

    CREATE = "create"
    UPDATE = "update"
    PATCH = "patch"

    @property
    def prefix(self) -> str:
        return f"{self.value}.kunde."


# ---------------------------------------------------------------------------
# Violaciones
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldViolation:
    """
    Violación cruda, tal como la produce el validador.

    - path: incluye el prefijo de contexto (ej: "update.kunde.adresse.plz")
    - message: texto humano (ya localizado)
    - constraint: clave estable del catálogo (ej: "adresse.plz.pattern")
    """

    path: str
    message: str
    constraint: str


@dataclass(frozen=True)
class Violation:
    """Violación en la forma que consume la API: property + message."""

    property: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"property": self.property, "message": self.message}
