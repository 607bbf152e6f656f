"""
===============================================================================
TARJETA CRC — error_mapping.py (UseCase Error -> HTTP RFC7807)
===============================================================================

Responsabilidades:
  - Traducir KundeErrorCode a HTTP Exceptions RFC7807.
  - Centralizar el mapeo para evitar duplicación en routers.
  - Mantener el dominio libre de HTTP.

Reglas:
  - Los tres errores de input comparten status 400 pero tienen "code"
    distinto en el payload.

Colaboradores:
  - application.usecases (KundeError, KundeErrorCode)
  - crosscutting.error_responses
===============================================================================
"""

from __future__ import annotations

from typing import NoReturn
from uuid import UUID

from kunde.application.usecases import KundeError, KundeErrorCode
from kunde.crosscutting.error_responses import (
    constraint_violation,
    internal_error,
    malformed_input,
    not_found,
    unknown_enum_token,
)


def raise_kunde_error(error: KundeError, *, kunde_id: UUID | None = None) -> NoReturn:
    """Traduce KundeError -> HTTP."""
    if error.code == KundeErrorCode.CONSTRAINT_VIOLATION:
        raise constraint_violation([v.to_dict() for v in error.violations])
    if error.code == KundeErrorCode.UNKNOWN_ENUM_TOKEN:
        raise unknown_enum_token(error.message)
    if error.code == KundeErrorCode.MALFORMED_INPUT:
        raise malformed_input(error.message)
    if error.code == KundeErrorCode.NOT_FOUND:
        raise not_found("Kunde", str(kunde_id or "-"))

    # Código nuevo sin mapear.
    raise internal_error(error.message)
