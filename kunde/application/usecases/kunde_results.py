"""
===============================================================================
KUNDE USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Name:
    Kunde Use Case Results

Business Goal:
    Proveer modelos compartidos de resultados y errores para los casos de uso
    de Kunden, con un contrato estable y explícito para:
      - violaciones de constraints (lista de Violation)
      - tokens de enum desconocidos en un PATCH
      - input mal formado
      - registros no encontrados

Why (Context / Intención):
    - Los use cases devuelven resultados tipados en lugar de lanzar
      excepciones hacia afuera: el borde HTTP elige una respuesta distinta
      por código sin inspeccionar excepciones.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    kunde_results models (module)

Responsibilities:
    - KundeErrorCode: conjunto acotado de categorías estables.
    - KundeError: code + message (+ violations para CONSTRAINT_VIOLATION).
    - KundeResult / KundeListResult / DeleteKundeResult.

Collaborators:
    - domain.entities.Kunde
    - domain.value_objects.Violation
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from ...domain.entities import Kunde
from ...domain.value_objects import Violation


class KundeErrorCode(str, Enum):
    """
    Códigos:
      - CONSTRAINT_VIOLATION: registro bien formado que viola constraints.
      - UNKNOWN_ENUM_TOKEN: add/remove de interessen con token desconocido.
      - MALFORMED_INPUT: body no parseable / tipo primitivo incorrecto.
      - NOT_FOUND: no existe un Kunde con ese id.
    """

    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"
    UNKNOWN_ENUM_TOKEN = "UNKNOWN_ENUM_TOKEN"
    MALFORMED_INPUT = "MALFORMED_INPUT"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class KundeError:
    """
    Error de caso de uso.

    violations sólo se completa para CONSTRAINT_VIOLATION (paths ya sin
    prefijo de contexto, en el orden del validador).
    """

    code: KundeErrorCode
    message: str
    violations: Tuple[Violation, ...] = ()


@dataclass
class KundeResult:
    """
    Contrato:
      - error is None => kunde presente (éxito)
      - error != None => kunde None (fallo)
    """

    kunde: Kunde | None = None
    error: KundeError | None = None


@dataclass
class KundeListResult:
    """Lista (posiblemente vacía) de Kunden; vacío no es un error."""

    kunden: List[Kunde] = field(default_factory=list)
    error: KundeError | None = None


@dataclass
class DeleteKundeResult:
    """Delete es idempotente: deleted=False si no había nada que borrar."""

    deleted: bool
    error: KundeError | None = None


def not_found_error() -> KundeError:
    return KundeError(code=KundeErrorCode.NOT_FOUND, message="Kunde not found.")
