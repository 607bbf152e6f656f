"""
===============================================================================
USE CASE: Get Kunde
===============================================================================

Business Goal:
    Obtener un Kunde por id.

Collaborators:
    - KundeRepository.find_by_id(kunde_id) -> Kunde | None

Error Mapping:
    - NOT_FOUND: no existe un Kunde con ese id.
===============================================================================
"""

from __future__ import annotations

from uuid import UUID

from ...domain.repositories import KundeRepository
from .kunde_results import KundeResult, not_found_error


class GetKundeUseCase:
    def __init__(self, repository: KundeRepository) -> None:
        self._kunden = repository

    def execute(self, kunde_id: UUID) -> KundeResult:
        kunde = self._kunden.find_by_id(kunde_id)
        if kunde is None:
            return KundeResult(error=not_found_error())
        return KundeResult(kunde=kunde)
