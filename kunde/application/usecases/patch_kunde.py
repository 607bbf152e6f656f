"""
===============================================================================
USE CASE: Patch Kunde
===============================================================================

Name:
    Patch Kunde Use Case

Business Goal:
    Aplicar una lista de operaciones replace/add/remove a un Kunde existente
    y persistir el resultado sólo si sigue cumpliendo los constraints.

Why (Context / Intención):
    - Las operaciones se aplican sobre una copia; el registro almacenado no
      cambia ante UNKNOWN_ENUM_TOKEN ni ante CONSTRAINT_VIOLATION.
    - El orden es fijo: todos los replace, luego todos los add, luego todos
      los remove (independiente del orden en la request).

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    PatchKundeUseCase

Responsibilities:
    - Cargar el Kunde (NOT_FOUND si no existe).
    - apply_patch -> UNKNOWN_ENUM_TOKEN si un token de interessen no resuelve.
    - Validar bajo ValidationContext.PATCH.
    - Persistir con replace.

Collaborators:
    - KundeRepository: find_by_id / replace
    - domain.patching.apply_patch
    - KundeValidator

-------------------------------------------------------------------------------
INPUTS / OUTPUTS
-------------------------------------------------------------------------------
Inputs:
    - kunde_id: UUID
    - operations: Sequence[PatchOperation]

Outputs:
    - KundeResult con el Kunde parcheado o error:
        NOT_FOUND | UNKNOWN_ENUM_TOKEN | CONSTRAINT_VIOLATION
===============================================================================
"""

from __future__ import annotations

import logging
from typing import Sequence
from uuid import UUID

from ...domain.errors import ConstraintViolationError, UnknownEnumTokenError
from ...domain.patching import PatchOperation, apply_patch
from ...domain.repositories import KundeRepository
from ...domain.validation import KundeValidator
from ...domain.value_objects import ValidationContext
from .create_kunde import constraint_violation_result
from .kunde_results import KundeError, KundeErrorCode, KundeResult, not_found_error

logger = logging.getLogger(__name__)


class PatchKundeUseCase:
    def __init__(
        self, repository: KundeRepository, validator: KundeValidator
    ) -> None:
        self._kunden = repository
        self._validator = validator

    def execute(
        self, kunde_id: UUID, operations: Sequence[PatchOperation]
    ) -> KundeResult:
        # ---------------------------------------------------------------------
        # 1) Load.
        # ---------------------------------------------------------------------
        kunde = self._kunden.find_by_id(kunde_id)
        if kunde is None:
            return KundeResult(error=not_found_error())

        # ---------------------------------------------------------------------
        # 2) Apply (replace -> add -> remove).
        # ---------------------------------------------------------------------
        try:
            patched = apply_patch(kunde, operations)
        except UnknownEnumTokenError as exc:
            logger.debug("Unbekanntes Interesse", extra={"token": exc.token})
            return KundeResult(
                error=KundeError(
                    code=KundeErrorCode.UNKNOWN_ENUM_TOKEN, message=exc.message
                )
            )

        # ---------------------------------------------------------------------
        # 3) Validate el registro resultante.
        # ---------------------------------------------------------------------
        try:
            self._validator.check(patched, ValidationContext.PATCH)
        except ConstraintViolationError as exc:
            return constraint_violation_result(exc.violations)

        # ---------------------------------------------------------------------
        # 4) Persist.
        # ---------------------------------------------------------------------
        stored = self._kunden.replace(patched)
        if stored is None:
            return KundeResult(error=not_found_error())

        logger.debug(
            "Kunde gepatcht",
            extra={"kunde_id": str(kunde_id), "operations": len(operations)},
        )
        return KundeResult(kunde=stored)
