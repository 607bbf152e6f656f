"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define the persistence/lookup contract the PATCH flow depends on.
- Keep application/domain independent from the concrete store.

Collaborators
- domain.entities: Kunde
- infrastructure.repositories: in-memory implementation

Notes
- typing.Protocol for structural subtyping.
- A lookup miss is an empty result (None / empty list), never an exception.
"""

from typing import List, Mapping, Optional, Protocol, Sequence
from uuid import UUID

from .entities import Kunde


class KundeRepository(Protocol):
    """R: Interface for Kunde lookup and persistence."""

    def find_by_id(self, kunde_id: UUID) -> Optional[Kunde]:
        """R: Return the stored record or None."""
        ...

    def find_all(self) -> List[Kunde]:
        ...

    def find(self, query_params: Mapping[str, Sequence[str]]) -> List[Kunde]:
        """
        R: Query dispatch over a multi-valued parameter map.

        Exact match by one recognised criterion (email, nachname);
        unrecognised or multiply-valued criteria yield an empty list.
        """
        ...

    def create(self, kunde: Kunde) -> Kunde:
        """R: Store a new record. kunde.id must already be assigned."""
        ...

    def replace(self, kunde: Kunde) -> Optional[Kunde]:
        """R: Overwrite the record with the same id; None if it does not exist."""
        ...

    def delete_by_id(self, kunde_id: UUID) -> bool:
        ...

    def delete_by_email(self, email: str) -> bool:
        ...
