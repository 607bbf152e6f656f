"""
===============================================================================
TARJETA CRC — kunde/context.py (Contexto por request)
===============================================================================

Responsabilidades:
  - Mantener el contexto del request en curso usando ContextVars (async-safe).
  - Correlacionar logs sin pasar request_id por todas las capas.

Colaboradores:
  - kunde.crosscutting.middleware: setea request_id/method/path.
  - kunde.crosscutting.logger: lee get_context_dict() al formatear.

Restricciones:
  - Solo strings; "" significa "no disponible".
===============================================================================
"""

from __future__ import annotations

from contextvars import ContextVar

request_id_var: ContextVar[str] = ContextVar("request_id", default="")
http_method_var: ContextVar[str] = ContextVar("http_method", default="")
http_path_var: ContextVar[str] = ContextVar("http_path", default="")

_CONTEXT_VARS: tuple[tuple[str, ContextVar[str]], ...] = (
    ("request_id", request_id_var),
    ("method", http_method_var),
    ("path", http_path_var),
)


def set_request_context(
    *, request_id: str = "", method: str = "", path: str = ""
) -> None:
    request_id_var.set(request_id or "")
    http_method_var.set(method or "")
    http_path_var.set(path or "")


def get_context_dict() -> dict[str, str]:
    """Contexto actual como dict, omitiendo claves vacías."""
    return {key: value for key, var in _CONTEXT_VARS if (value := var.get())}


def clear_context() -> None:
    """Evita que el contexto de un request se filtre al siguiente."""
    for _, var in _CONTEXT_VARS:
        var.set("")
