"""
===============================================================================
USE CASE: Update Kunde (PUT)
===============================================================================

Name:
    Update Kunde Use Case

Business Goal:
    Reemplazar por completo un Kunde existente con el registro enviado.

Why (Context / Intención):
    - La validación corre antes del lookup: un body inválido se reporta como
      CONSTRAINT_VIOLATION aunque el id no exista.
    - El id del recurso manda; un id distinto en el body se ignora.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    UpdateKundeUseCase

Responsibilities:
    - Validar bajo ValidationContext.UPDATE.
    - Verificar existencia (NOT_FOUND si no existe).
    - Persistir el reemplazo conservando el id almacenado.

Collaborators:
    - KundeRepository: find_by_id / replace
    - KundeValidator
===============================================================================
"""

from __future__ import annotations

import logging
from uuid import UUID

from ...domain.entities import Kunde
from ...domain.errors import ConstraintViolationError
from ...domain.repositories import KundeRepository
from ...domain.validation import KundeValidator
from ...domain.value_objects import ValidationContext
from .create_kunde import constraint_violation_result
from .kunde_results import KundeResult, not_found_error

logger = logging.getLogger(__name__)


class UpdateKundeUseCase:
    def __init__(
        self, repository: KundeRepository, validator: KundeValidator
    ) -> None:
        self._kunden = repository
        self._validator = validator

    def execute(self, kunde_id: UUID, kunde: Kunde) -> KundeResult:
        # ---------------------------------------------------------------------
        # 1) Constraints del registro completo.
        # ---------------------------------------------------------------------
        try:
            self._validator.check(kunde, ValidationContext.UPDATE)
        except ConstraintViolationError as exc:
            return constraint_violation_result(exc.violations)

        # ---------------------------------------------------------------------
        # 2) Existencia.
        # ---------------------------------------------------------------------
        if self._kunden.find_by_id(kunde_id) is None:
            return KundeResult(error=not_found_error())

        # ---------------------------------------------------------------------
        # 3) Reemplazo.
        # ---------------------------------------------------------------------
        updated = self._kunden.replace(kunde.with_id(kunde_id))
        if updated is None:
            # Borrado concurrente entre lookup y replace.
            return KundeResult(error=not_found_error())

        logger.debug("Kunde aktualisiert", extra={"kunde_id": str(kunde_id)})
        return KundeResult(kunde=updated)
