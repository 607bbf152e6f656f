"""
===============================================================================
TARJETA CRC — kunde/api/exception_handlers.py (Manejo Centralizado de Excepciones)
===============================================================================

Responsabilidades:
  - Traducir errores del parser y excepciones no tipadas a respuestas RFC7807.
  - Los errores de dominio llegan ya como AppHTTPException (error_mapping).
  - Clasificar RequestValidationError (JSON roto / tipo primitivo
    incorrecto) como MALFORMED_INPUT, nunca como CONSTRAINT_VIOLATION.
  - Evitar filtrar detalles internos en errores no controlados.

Patrones aplicados:
  - Exception Mapping (Presentation Layer).
  - Fail-safe: cualquier excepción no tipada -> INTERNAL_ERROR (con logging).

Colaboradores:
  - crosscutting.error_responses: AppHTTPException, factories, handler
  - application.violation_formatter: malformed_input_from
===============================================================================
"""

from __future__ import annotations

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..application.violation_formatter import malformed_input_from
from ..crosscutting.config import get_settings
from ..crosscutting.error_responses import (
    AppHTTPException,
    ErrorCode,
    app_exception_handler,
    malformed_input,
)
from ..crosscutting.logger import logger


def _request_id_from(request: Request) -> str | None:
    return getattr(getattr(request, "state", None), "request_id", None)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Errores del parser de FastAPI/pydantic -> MALFORMED_INPUT."""
    error = malformed_input_from(exc.errors())
    logger.debug("Malformed input", extra={"error_id": error.error_id})
    return await app_exception_handler(request, malformed_input(error.message))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handler defensivo para excepciones no tipadas.

    - Log completo (stacktrace).
    - Respuesta genérica (evita filtrar internos).
    """
    logger.error(
        "Unhandled exception",
        exc_info=True,
        extra={"request_id": _request_id_from(request)},
    )

    # R: En desarrollo ayudamos un poco más; en producción evitamos filtrar detalles.
    detail = str(exc) if not get_settings().is_production() else "Internal error."

    return await app_exception_handler(
        request,
        AppHTTPException(status_code=500, code=ErrorCode.INTERNAL_ERROR, detail=detail),
    )


def register_exception_handlers(app) -> None:
    """
    Registra handlers en la app FastAPI.

    Importante:
      - RequestValidationError se reemplaza para responder 400 MALFORMED_INPUT
        en lugar del 422 por defecto.
      - Exception genérica se registra al final como fallback.
    """
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["register_exception_handlers"]
