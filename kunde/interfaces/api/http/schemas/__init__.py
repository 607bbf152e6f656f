"""
===============================================================================
TARJETA CRC — schemas/__init__.py
===============================================================================

Módulo:
    Paquete de Schemas HTTP (DTOs Pydantic)

Reglas:
    - Schemas NO deben importar infraestructura.
    - Schemas NO deben ejecutar casos de uso.
    - Solo tipos y validación de forma de input/output.
===============================================================================
"""

from .kunden import (
    AdresseReq,
    KundeReq,
    KundeRes,
    PatchOperationReq,
    UmsatzReq,
    ViolationRes,
)

__all__ = [
    "AdresseReq",
    "KundeReq",
    "KundeRes",
    "PatchOperationReq",
    "UmsatzReq",
    "ViolationRes",
]
