"""
===============================================================================
TARJETA CRC — router.py (Router raíz / Composición)
===============================================================================

Responsabilidades:
  - Definir el APIRouter raíz que se incluye en FastAPI (app.include_router).
  - Centralizar responses RFC7807 para OpenAPI.
  - Componer routers por recurso.

Colaboradores:
  - crosscutting.error_responses.OPENAPI_ERROR_RESPONSES
  - routers.kunden

Notas:
  - Este router se incluye desde kunde/api/main.py con prefix="/v1".
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter

from ....crosscutting.error_responses import OPENAPI_ERROR_RESPONSES
from .routers import kunden_router


def build_router() -> APIRouter:
    """
    Construye el router raíz v1.

    Motivo:
      - Facilita tests (se puede invocar build_router() y verificar rutas).
      - Evita efectos colaterales al importar módulos.
    """
    api_router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)
    api_router.include_router(kunden_router)
    return api_router


router = build_router()

__all__ = ["router", "build_router"]
