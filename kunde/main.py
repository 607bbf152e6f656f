"""
Entry point shim: `uvicorn kunde.main:app`.
"""

from .api.main import app

__all__ = ["app"]
