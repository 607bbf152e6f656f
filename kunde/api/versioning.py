"""
===============================================================================
TARJETA CRC — kunde/api/versioning.py (Alias de Rutas)
===============================================================================

Responsabilidades:
  - Exponer /api/v1 como alias de /v1 sin duplicar lógica.

Colaboradores:
  - interfaces.api.http.router.build_router (router de negocio)
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, FastAPI

from ..interfaces.api.http.router import router as business_router


def include_versioned_routes(app: FastAPI) -> None:
    """/api/v1 -> mismo router que /v1."""
    api_router = APIRouter(prefix="/api")
    api_router.include_router(business_router, prefix="/v1")
    app.include_router(api_router)


__all__ = ["include_versioned_routes"]
