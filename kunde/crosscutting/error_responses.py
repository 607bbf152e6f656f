"""
===============================================================================
MÓDULO: Respuestas de error estándar (RFC 7807 / Problem Details)
===============================================================================

Objetivo
--------
Uniformar todos los errores HTTP para que:
- El cliente pueda distinguir por "code" (CONSTRAINT_VIOLATION vs
  UNKNOWN_ENUM_TOKEN vs MALFORMED_INPUT, los tres con status 400)
- El backend pueda correlacionar por request_id

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  AppHTTPException + handlers

Responsabilidades:
  - Definir catálogo de códigos de error (ErrorCode)
  - Construir payload RFC7807 (ErrorDetail)
  - Proveer factories de errores frecuentes
  - Proveer handlers (FastAPI) para devolver problem+json

Colaboradores:
  - crosscutting/middleware.py (request_id)
  - api/exception_handlers.py (mapea errores de dominio y del parser)
  - interfaces/api/http/error_mapping.py (mapea KundeErrorCode)
===============================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ErrorCode(str, Enum):
    # 4xx
    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"
    UNKNOWN_ENUM_TOKEN = "UNKNOWN_ENUM_TOKEN"
    MALFORMED_INPUT = "MALFORMED_INPUT"
    NOT_FOUND = "NOT_FOUND"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"

    # 5xx
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorDetail(BaseModel):
    """
    Modelo RFC 7807 (Problem Details).

    Campos extra:
    - code: error code estable para clientes
    - errors: violaciones [{"property": ..., "message": ...}] (sólo
      CONSTRAINT_VIOLATION)
    - request_id: correlación con los logs
    """

    type: str = "about:blank"
    title: str
    status: int
    detail: str
    code: ErrorCode
    instance: str | None = None
    errors: list[dict[str, Any]] | None = None
    request_id: str | None = None


PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"

_OPENAPI_ERROR_SCHEMA = {"$ref": "#/components/schemas/ErrorDetail"}
_OPENAPI_ERROR_CONTENT = {PROBLEM_JSON_MEDIA_TYPE: {"schema": _OPENAPI_ERROR_SCHEMA}}


def _openapi_error(description: str) -> dict[str, Any]:
    return {
        "description": f"{description} (RFC7807)",
        "model": ErrorDetail,
        "content": _OPENAPI_ERROR_CONTENT,
    }


OPENAPI_ERROR_RESPONSES = {
    "400": _openapi_error(
        "Constraint violation, unknown enum token or malformed input"
    ),
    "404": _openapi_error("Not Found"),
    "413": _openapi_error("Payload Too Large"),
    "default": _openapi_error("Error"),
}


class AppHTTPException(HTTPException):
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Clase:
      AppHTTPException

    Responsabilidades:
      - Adjuntar un ErrorCode estable
      - Transportar la lista de violaciones (errors[])

    Colaboradores:
      - app_exception_handler()
    ----------------------------------------------------------------------------
    """

    def __init__(
        self,
        status_code: int,
        code: ErrorCode,
        detail: str,
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(status_code=status_code, detail=detail)
        self.code = code
        self.errors = errors


# ---------------------------------------------------------------------------
# Factories de error (helpers)
# ---------------------------------------------------------------------------
def constraint_violation(errors: list[dict[str, Any]]) -> AppHTTPException:
    return AppHTTPException(
        400,
        ErrorCode.CONSTRAINT_VIOLATION,
        f"{len(errors)} constraint violation(s)",
        errors,
    )


def unknown_enum_token(detail: str) -> AppHTTPException:
    return AppHTTPException(400, ErrorCode.UNKNOWN_ENUM_TOKEN, detail)


def malformed_input(detail: str) -> AppHTTPException:
    return AppHTTPException(400, ErrorCode.MALFORMED_INPUT, detail)


def not_found(resource: str, identifier: str) -> AppHTTPException:
    return AppHTTPException(
        404, ErrorCode.NOT_FOUND, f"{resource} '{identifier}' nicht gefunden"
    )


def internal_error(detail: str = "Unexpected error") -> AppHTTPException:
    return AppHTTPException(500, ErrorCode.INTERNAL_ERROR, detail)


# ---------------------------------------------------------------------------
# Handlers FastAPI
# ---------------------------------------------------------------------------
def problem_response(
    request: Request, exc: AppHTTPException, *, headers: dict[str, str] | None = None
) -> JSONResponse:
    request_id = getattr(getattr(request, "state", None), "request_id", None)
    error = ErrorDetail(
        type=f"about:blank/{exc.code.value.lower()}",
        title=exc.code.value.replace("_", " ").title(),
        status=exc.status_code,
        detail=str(exc.detail),
        code=exc.code,
        instance=str(request.url),
        errors=exc.errors,
        request_id=request_id,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error.model_dump(mode="json", exclude_none=True),
        headers=headers,
        media_type=PROBLEM_JSON_MEDIA_TYPE,
    )


async def app_exception_handler(
    request: Request, exc: AppHTTPException
) -> JSONResponse:
    """Handler para AppHTTPException (propaga headers opcionales)."""
    return problem_response(request, exc, headers=getattr(exc, "headers", None))

