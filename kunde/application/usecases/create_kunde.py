"""
===============================================================================
USE CASE: Create Kunde
===============================================================================

Business Goal:
    Dar de alta un Kunde nuevo: validar constraints y asignar la identidad.

Why (Context / Intención):
    - El id lo asigna el sistema; cualquier id que traiga el cliente se
      descarta.
    - Las violaciones se reportan todas juntas, con paths relativos al
      registro (sin el prefijo "create.kunde.").

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    CreateKundeUseCase

Collaborators:
    - KundeRepository.create(kunde) -> Kunde
    - KundeValidator.check(kunde, ValidationContext.CREATE)
    - violation_formatter.to_violations
===============================================================================
"""

from __future__ import annotations

import logging
from uuid import uuid4

from ...domain.entities import Kunde
from ...domain.errors import ConstraintViolationError
from ...domain.repositories import KundeRepository
from ...domain.validation import KundeValidator
from ...domain.value_objects import ValidationContext
from ..violation_formatter import format_violations, to_violations
from .kunde_results import KundeError, KundeErrorCode, KundeResult

logger = logging.getLogger(__name__)


class CreateKundeUseCase:
    def __init__(
        self, repository: KundeRepository, validator: KundeValidator
    ) -> None:
        self._kunden = repository
        self._validator = validator

    def execute(self, kunde: Kunde) -> KundeResult:
        try:
            self._validator.check(kunde, ValidationContext.CREATE)
        except ConstraintViolationError as exc:
            return constraint_violation_result(exc.violations)

        created = self._kunden.create(kunde.with_id(uuid4()))
        logger.debug("Kunde angelegt", extra={"kunde_id": str(created.id)})
        return KundeResult(kunde=created)


def constraint_violation_result(field_violations) -> KundeResult:
    """Resultado consistente para CONSTRAINT_VIOLATION (compartido con update/patch)."""
    violations = tuple(to_violations(field_violations))
    logger.debug(
        "Constraint-Verletzungen",
        extra={"violations": format_violations(field_violations)},
    )
    return KundeResult(
        error=KundeError(
            code=KundeErrorCode.CONSTRAINT_VIOLATION,
            message=f"{len(violations)} constraint violation(s).",
            violations=violations,
        )
    )
