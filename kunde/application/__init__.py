"""
===============================================================================
APPLICATION LAYER (Public API / Exports)
===============================================================================

Expone los puntos de entrada estables de la capa de aplicación:
  - violation_formatter: FieldViolation -> payload de wire, y clasificación
    de errores del parser como MalformedInput
  - ensure_dev_demo: seed local de Kunden de ejemplo

Nota:
  - Los casos de uso se importan desde `usecases/`.
===============================================================================
"""

from .dev_seed_demo import ensure_dev_demo
from .violation_formatter import (
    format_violations,
    malformed_input_from,
    strip_context,
    to_violations,
)

__all__ = [
    # Violation Formatter
    "format_violations",
    "malformed_input_from",
    "strip_context",
    "to_violations",
    # Dev seed
    "ensure_dev_demo",
]
