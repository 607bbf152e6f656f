"""
===============================================================================
USE CASE: Delete Kunde
===============================================================================

Business Goal:
    Borrar un Kunde por id o por email.

Why (Context / Intención):
    - Delete es idempotente: borrar algo inexistente no es un error
      (la API responde 204 en ambos casos).
===============================================================================
"""

from __future__ import annotations

import logging
from uuid import UUID

from ...domain.repositories import KundeRepository
from .kunde_results import DeleteKundeResult

logger = logging.getLogger(__name__)


class DeleteKundeUseCase:
    def __init__(self, repository: KundeRepository) -> None:
        self._kunden = repository

    def execute_by_id(self, kunde_id: UUID) -> DeleteKundeResult:
        deleted = self._kunden.delete_by_id(kunde_id)
        logger.debug(
            "Kunde geloescht", extra={"kunde_id": str(kunde_id), "deleted": deleted}
        )
        return DeleteKundeResult(deleted=deleted)

    def execute_by_email(self, email: str) -> DeleteKundeResult:
        deleted = self._kunden.delete_by_email(email)
        logger.debug("Kunde geloescht (email)", extra={"deleted": deleted})
        return DeleteKundeResult(deleted=deleted)
