"""
===============================================================================
TARJETA CRC — kunde/interfaces/api/http/routers/__init__.py
===============================================================================

Responsibilities:
    - Re-exportar los routers por recurso para el router raíz.
    - Este archivo NO define endpoints.
===============================================================================
"""

from .kunden import router as kunden_router

__all__ = ["kunden_router"]
