"""
===============================================================================
TARJETA CRC — domain/__init__.py
===============================================================================

Módulo:
    Exportaciones de la Capa de Dominio (API pública del dominio)

Responsabilidades:
    - Centralizar exports para imports limpios en application/interfaces.
    - Exponer las tres operaciones del motor: apply_patch, validate, formato
      (el formato vive en application.violation_formatter).

Reglas:
    - Solo re-exporta contratos/entidades del dominio.
    - No importar infraestructura aquí.
===============================================================================
"""

from .entities import Adresse, Kunde, Umsatz
from .errors import (
    ConstraintViolationError,
    DomainError,
    MalformedInputError,
    UnknownEnumTokenError,
)
from .patching import PatchOp, PatchOperation, apply_patch
from .repositories import KundeRepository
from .validation import KundeValidator, validate_kunde
from .value_objects import (
    FamilienstandType,
    FieldViolation,
    GeschlechtType,
    InteresseType,
    ValidationContext,
    Violation,
)

__all__ = [
    "Adresse",
    "ConstraintViolationError",
    "DomainError",
    "FamilienstandType",
    "FieldViolation",
    "GeschlechtType",
    "InteresseType",
    "Kunde",
    "KundeRepository",
    "KundeValidator",
    "MalformedInputError",
    "PatchOp",
    "PatchOperation",
    "Umsatz",
    "UnknownEnumTokenError",
    "ValidationContext",
    "Violation",
    "apply_patch",
    "validate_kunde",
]
