"""
===============================================================================
TARJETA CRC — kunde/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer repositorio, validador y casos de uso siguiendo DIP.
  - Exponer factories para FastAPI (Depends).
  - Mantener singletons con caching (lru_cache).

Colaboradores:
  - kunde.crosscutting.config.get_settings
  - kunde.domain (puertos, validador)
  - kunde.infrastructure (implementaciones)
  - kunde.application.usecases (casos de uso)

Notas:
  - Este archivo NO contiene lógica de negocio.
  - Este archivo NO depende de FastAPI (solo expone factories).
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.usecases import (
    CreateKundeUseCase,
    DeleteKundeUseCase,
    FindKundenUseCase,
    GetKundeUseCase,
    PatchKundeUseCase,
    UpdateKundeUseCase,
)
from .crosscutting.config import get_settings
from .domain.repositories import KundeRepository
from .domain.validation import KundeValidator
from .infrastructure.repositories import InMemoryKundeRepository

# =============================================================================
# Singletons
# =============================================================================


@lru_cache(maxsize=1)
def get_kunde_repository() -> KundeRepository:
    """Repositorio de Kunden (in-memory, vive lo que vive el proceso)."""
    return InMemoryKundeRepository()


@lru_cache(maxsize=1)
def get_kunde_validator() -> KundeValidator:
    """Validador con el idioma de mensajes configurado (MESSAGES_LOCALE)."""
    return KundeValidator(locale=get_settings().messages_locale)


# =============================================================================
# Casos de uso (baratos: se construyen por request)
# =============================================================================


def get_create_kunde_use_case() -> CreateKundeUseCase:
    return CreateKundeUseCase(get_kunde_repository(), get_kunde_validator())


def get_update_kunde_use_case() -> UpdateKundeUseCase:
    return UpdateKundeUseCase(get_kunde_repository(), get_kunde_validator())


def get_patch_kunde_use_case() -> PatchKundeUseCase:
    return PatchKundeUseCase(get_kunde_repository(), get_kunde_validator())


def get_get_kunde_use_case() -> GetKundeUseCase:
    return GetKundeUseCase(get_kunde_repository())


def get_find_kunden_use_case() -> FindKundenUseCase:
    return FindKundenUseCase(get_kunde_repository())


def get_delete_kunde_use_case() -> DeleteKundeUseCase:
    return DeleteKundeUseCase(get_kunde_repository())
