"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/kunde.py
============================================================
Class: InMemoryKundeRepository

Responsibilities:
  - Almacenar Kunden en memoria (tests / local dev).
  - Implementar lookup por id, query dispatch y reemplazo completo.
  - Mantener ordering determinístico: (nachname, email).

Collaborators:
  - domain.entities.Kunde
  - domain.repositories.KundeRepository (contrato a implementar)

Constraints / Notes:
  - Thread-safe: acceso protegido por Lock.
  - Los Kunden son frozen; se guardan y devuelven sin copiar.
  - Un miss es None / lista vacía, nunca una excepción.
============================================================
"""

from __future__ import annotations

from threading import Lock
from typing import Dict, Iterable, List, Mapping, Optional, Sequence
from uuid import UUID

from ....domain.entities import Kunde
from ....domain.repositories import KundeRepository

EMAIL_PARAM = "email"
NACHNAME_PARAM = "nachname"


class InMemoryKundeRepository(KundeRepository):
    """
    Repositorio in-memory, thread-safe, para Kunden.

    Modelo mental:
    - _kunden es la "tabla" en memoria (UUID -> Kunde).
    - Cada operación lee/escribe bajo lock.
    """

    def __init__(self, kunden: Iterable[Kunde] = ()) -> None:
        self._lock = Lock()
        self._kunden: Dict[UUID, Kunde] = {}
        for kunde in kunden:
            self.create(kunde)

    @staticmethod
    def _sorted(items: Iterable[Kunde]) -> List[Kunde]:
        """R: Lista nueva ordenada por (nachname, email)."""
        return sorted(items, key=lambda k: (k.nachname, k.email))

    def _snapshot(self) -> List[Kunde]:
        with self._lock:
            return list(self._kunden.values())

    # =========================================================
    # Lookups
    # =========================================================
    def find_by_id(self, kunde_id: UUID) -> Optional[Kunde]:
        with self._lock:
            return self._kunden.get(kunde_id)

    def find_all(self) -> List[Kunde]:
        return self._sorted(self._snapshot())

    def find(self, query_params: Mapping[str, Sequence[str]]) -> List[Kunde]:
        """
        Query dispatch sobre un mapa multi-valor.

        - mapa vacío -> todos
        - se recorren los parámetros en orden; el primero con != 1 valor
          corta con lista vacía
        - email -> match exacto (a lo sumo uno)
        - nachname -> match exacto ("" -> todos)
        - parámetros desconocidos se saltean; si no hay ninguno reconocido,
          lista vacía
        """
        if not query_params:
            return self.find_all()

        for key, values in query_params.items():
            if len(values) != 1:
                return []

            value = values[0]
            if key == EMAIL_PARAM:
                return self._find_by_email(value)
            if key == NACHNAME_PARAM:
                return self._find_by_nachname(value)

        return []

    def _find_by_email(self, email: str) -> List[Kunde]:
        return [k for k in self._snapshot() if k.email == email][:1]

    def _find_by_nachname(self, nachname: str) -> List[Kunde]:
        if nachname == "":
            return self.find_all()
        return self._sorted(k for k in self._snapshot() if k.nachname == nachname)

    # =========================================================
    # Writes
    # =========================================================
    def create(self, kunde: Kunde) -> Kunde:
        if kunde.id is None:
            raise ValueError("kunde.id must be assigned before create()")
        with self._lock:
            self._kunden[kunde.id] = kunde
        return kunde

    def replace(self, kunde: Kunde) -> Optional[Kunde]:
        with self._lock:
            if kunde.id not in self._kunden:
                return None
            self._kunden[kunde.id] = kunde
        return kunde

    def delete_by_id(self, kunde_id: UUID) -> bool:
        with self._lock:
            return self._kunden.pop(kunde_id, None) is not None

    def delete_by_email(self, email: str) -> bool:
        with self._lock:
            ids = [k.id for k in self._kunden.values() if k.email == email]
            for kunde_id in ids:
                del self._kunden[kunde_id]
        return bool(ids)
