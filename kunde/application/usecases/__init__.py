"""
===============================================================================
TARJETA CRC — application/usecases/__init__.py
===============================================================================

Módulo:
    Barrel de casos de uso de Kunden

Responsabilidades:
    - Exponer use cases y modelos de resultado con imports estables.

Colaboradores:
    - container.py (factories)
    - interfaces/api/http/routers (handlers)
===============================================================================
"""

from .create_kunde import CreateKundeUseCase
from .delete_kunde import DeleteKundeUseCase
from .find_kunden import FindKundenUseCase
from .get_kunde import GetKundeUseCase
from .kunde_results import (
    DeleteKundeResult,
    KundeError,
    KundeErrorCode,
    KundeListResult,
    KundeResult,
)
from .patch_kunde import PatchKundeUseCase
from .update_kunde import UpdateKundeUseCase

__all__ = [
    "CreateKundeUseCase",
    "DeleteKundeResult",
    "DeleteKundeUseCase",
    "FindKundenUseCase",
    "GetKundeUseCase",
    "KundeError",
    "KundeErrorCode",
    "KundeListResult",
    "KundeResult",
    "PatchKundeUseCase",
    "UpdateKundeUseCase",
]
