"""
===============================================================================
USE CASE: Find Kunden
===============================================================================

Name:
    Find Kunden Use Case (query dispatch)

Business Goal:
    Buscar Kunden a partir de un mapa de parámetros multi-valor
    (query string de la request).

Why (Context / Intención):
    - Sin parámetros -> todos los Kunden.
    - Un criterio reconocido (email, nachname) -> match exacto.
    - Criterios desconocidos o con más de un valor -> lista vacía; nunca error.

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    FindKundenUseCase

Collaborators:
    - KundeRepository.find_all() / find(query_params)
===============================================================================
"""

from __future__ import annotations

from typing import Mapping, Sequence

from ...domain.repositories import KundeRepository
from .kunde_results import KundeListResult


class FindKundenUseCase:
    def __init__(self, repository: KundeRepository) -> None:
        self._kunden = repository

    def execute(
        self, query_params: Mapping[str, Sequence[str]] | None = None
    ) -> KundeListResult:
        if not query_params:
            return KundeListResult(kunden=self._kunden.find_all())
        return KundeListResult(kunden=self._kunden.find(query_params))
