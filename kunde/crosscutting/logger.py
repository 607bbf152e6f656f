"""
===============================================================================
MÓDULO: Logger estructurado (JSON) con contexto de request
===============================================================================

Objetivo
--------
Loguear de forma parseable (una línea JSON por evento) y correlacionable por
request_id, sin volcar datos personales completos de los Kunden.

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  JSONFormatter + setup_logger()

Responsabilidades:
  - Formatear LogRecord como JSON (timestamp UTC, nivel, logger, origen)
  - Enriquecer con el contexto de request
  - Redactar campos sensibles y limitar tamaños en los "extra"

Colaboradores:
  - kunde/context.py (ContextVars)
  - crosscutting/config.py (LOG_LEVEL / LOG_JSON)

Notas:
  - Los módulos usan logging.getLogger(__name__); todos cuelgan de "kunde",
    que es el único logger con handler.
===============================================================================
"""

from __future__ import annotations

import json
import logging
import os
import sys
import traceback
from datetime import datetime, timezone
from typing import Any

from ..context import get_context_dict
from .config import get_settings

ROOT_LOGGER_NAME = "kunde"

# Atributos estándar de LogRecord; el resto son "extra".
_RESERVED_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


class _Redactor:
    """
    Limpia los "extra" antes de serializarlos.

    Reglas:
      - claves sensibles -> "***REDACTADO***"
      - strings largos -> recortados
      - profundidad acotada
    """

    SENSITIVE_KEYS = {
        "password",
        "secret",
        "token",
        "authorization",
        "api_key",
        "geburtsdatum",
        "umsatz",
    }

    def __init__(self, max_str: int = 4_000, max_depth: int = 4):
        self._max_str = max_str
        self._max_depth = max_depth

    def sanitize(self, value: Any, *, depth: int = 0, key: str | None = None) -> Any:
        if key and key.lower() in self.SENSITIVE_KEYS:
            return "***REDACTADO***"
        if depth > self._max_depth:
            return "***TRUNCADO***"

        if isinstance(value, str):
            if len(value) <= self._max_str:
                return value
            return value[: self._max_str] + "…(truncado)"

        if isinstance(value, (bytes, bytearray)):
            return f"<bytes {len(value)}B>"

        if isinstance(value, dict):
            return {
                str(k): self.sanitize(v, depth=depth + 1, key=str(k))
                for k, v in value.items()
            }

        if isinstance(value, (list, tuple, set, frozenset)):
            return [self.sanitize(v, depth=depth + 1, key=key) for v in value]

        if value is None or isinstance(value, (bool, int, float)):
            return value
        return str(value)


class JSONFormatter(logging.Formatter):
    """LogRecord -> JSON de una línea."""

    def __init__(self):
        super().__init__()
        self._redactor = _Redactor()

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "pid": os.getpid(),
        }
        payload.update(get_context_dict())

        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS:
                continue
            payload[key] = self._redactor.sanitize(value, key=key)

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            payload["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
                "stacktrace": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(
            payload, ensure_ascii=False, default=str, separators=(",", ":")
        )


def setup_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Configura el logger raíz del servicio.

    - No duplica handlers si se llama más de una vez
    - Respeta LOG_LEVEL / LOG_JSON
    """
    settings = get_settings()
    log = logging.getLogger(name)
    log.setLevel(getattr(logging, settings.log_level, logging.INFO))

    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            JSONFormatter()
            if settings.log_json
            else logging.Formatter("%(levelname)s %(name)s %(message)s")
        )
        log.addHandler(handler)

    return log


logger = setup_logger()
