"""
===============================================================================
MÓDULO: Excepciones tipadas del dominio Kunde
===============================================================================

Objetivo
--------
Tres categorías de error bien separadas, para que el borde HTTP pueda elegir
una respuesta distinta por categoría:

- ConstraintViolationError: registro bien formado que viola constraints.
- UnknownEnumTokenError: add/remove de interessen con un token desconocido.
- MalformedInputError: el body no se pudo parsear / tipo primitivo erróneo.

Cada error lleva error_code estable + error_id para correlación con logs.
===============================================================================
"""

from __future__ import annotations

from typing import Iterable, Tuple
from uuid import uuid4

from .value_objects import FieldViolation, ValidationContext


class DomainError(Exception):
    """Base para errores del dominio Kunde."""

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, error_id: str | None = None):
        self.message = message
        self.error_id = error_id or str(uuid4())
        super().__init__(message)


class UnknownEnumTokenError(DomainError):
    """Token de interés fuera del conjunto cerrado (sólo en add/remove)."""

    error_code: str = "UNKNOWN_ENUM_TOKEN"

    def __init__(self, token: str, error_id: str | None = None):
        self.token = token
        super().__init__(f"{token} ist kein gueltiges Interesse", error_id)


class ConstraintViolationError(DomainError):
    """Una o más violaciones de constraints, reportadas juntas."""

    error_code: str = "CONSTRAINT_VIOLATION"

    def __init__(
        self,
        violations: Iterable[FieldViolation],
        context: ValidationContext,
        error_id: str | None = None,
    ):
        self.violations: Tuple[FieldViolation, ...] = tuple(violations)
        self.context = context
        super().__init__(
            f"{len(self.violations)} constraint violation(s) in {context.value}",
            error_id,
        )


class MalformedInputError(DomainError):
    """El request no tiene la forma esperada; message = diagnóstico del parser."""

    error_code: str = "MALFORMED_INPUT"
