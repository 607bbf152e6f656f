"""
===============================================================================
TARJETA CRC — application/violation_formatter.py
===============================================================================

Módulo:
    Violation Formatter (adaptador hacia el borde de la API)

Responsabilidades:
    - Quitar el prefijo de contexto ("create.kunde.", "update.kunde.", ...)
      para que el mismo campo se reporte igual desde cualquier operación.
    - Renombrar FieldViolation -> {"property", "message"} preservando el orden.
    - Clasificar errores del parser (pydantic) como MalformedInputError,
      separados de las violaciones de constraints.

Colaboradores:
    - domain.value_objects (FieldViolation, Violation, ValidationContext)
    - domain.errors.MalformedInputError
    - interfaces/api (exception handlers, error_mapping)
===============================================================================
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Sequence

from ..domain.errors import MalformedInputError
from ..domain.value_objects import FieldViolation, ValidationContext, Violation

_CONTEXT_PREFIXES = tuple(ctx.prefix for ctx in ValidationContext)

# Segmentos de loc que agrega FastAPI y no son parte del documento.
_LOC_ROOTS = {"body"}


def strip_context(path: str) -> str:
    """'update.kunde.adresse.plz' -> 'adresse.plz'."""
    for prefix in _CONTEXT_PREFIXES:
        if path.startswith(prefix):
            return path[len(prefix) :]
    return path


def to_violations(field_violations: Iterable[FieldViolation]) -> List[Violation]:
    return [
        Violation(property=strip_context(v.path), message=v.message)
        for v in field_violations
    ]


def format_violations(
    field_violations: Iterable[FieldViolation],
) -> List[dict[str, str]]:
    """Payload de wire: [{"property": ..., "message": ...}, ...]."""
    return [v.to_dict() for v in to_violations(field_violations)]


def malformed_input_from(errors: Sequence[Mapping[str, Any]]) -> MalformedInputError:
    """
    Construye MalformedInputError a partir de la lista de errores del parser
    (pydantic ValidationError.errors() / RequestValidationError.errors()).
    """
    diagnostics = [_describe(error) for error in errors]
    message = "; ".join(d for d in diagnostics if d) or "Malformed request body"
    return MalformedInputError(message)


def _describe(error: Mapping[str, Any]) -> str:
    loc = [str(part) for part in error.get("loc", ()) if part not in _LOC_ROOTS]
    msg = str(error.get("msg", "")).strip()

    ctx = error.get("ctx") or {}
    detail = ctx.get("error") if isinstance(ctx, Mapping) else None
    if detail and str(detail) not in msg:
        msg = f"{msg} ({detail})" if msg else str(detail)

    if loc:
        return f"{'.'.join(loc)}: {msg}"
    return msg
