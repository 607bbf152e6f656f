from .in_memory import InMemoryKundeRepository

__all__ = ["InMemoryKundeRepository"]
