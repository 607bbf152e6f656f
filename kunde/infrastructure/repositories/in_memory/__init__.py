"""
In-Memory Repository Implementations.

For testing and local development. Data is lost on process restart.
"""

from .kunde import InMemoryKundeRepository

__all__ = ["InMemoryKundeRepository"]
