"""
===============================================================================
MÓDULO: Middlewares HTTP (contexto + límites de payload)
===============================================================================

Objetivo
--------
1) RequestContextMiddleware:
   - Generar/propagar request_id (X-Request-Id)
   - Setear contextvars (method/path)
   - Log por request

2) BodyLimitMiddleware:
   - Rechazar payloads más grandes que MAX_BODY_BYTES (incluye chunked)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componentes:
  - RequestContextMiddleware
  - BodyLimitMiddleware

Colaboradores:
  - kunde/context.py
  - crosscutting/error_responses.py
  - crosscutting/config.py
===============================================================================
"""

from __future__ import annotations

import json
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ..context import clear_context, set_request_context
from .config import get_settings
from .error_responses import PROBLEM_JSON_MEDIA_TYPE, ErrorCode, ErrorDetail
from .logger import logger

REQUEST_ID_HEADER = "X-Request-Id"
_MAX_REQUEST_ID_LEN = 128


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Clase:
      RequestContextMiddleware

    Responsabilidades:
      - Aceptar X-Request-Id razonable o generar uno nuevo
      - Setear contextvars para correlación de logs
      - Devolver X-Request-Id en la respuesta
      - Garantizar clear_context() para evitar leaks
    ----------------------------------------------------------------------------
    """

    _QUIET_PATHS = {"/healthz"}

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        incoming = (request.headers.get(REQUEST_ID_HEADER) or "").strip()
        request_id = incoming if _is_valid_request_id(incoming) else str(uuid.uuid4())

        set_request_context(
            request_id=request_id, method=request.method, path=request.url.path
        )
        request.state.request_id = request_id

        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        except Exception:
            logger.exception("request failed", extra={"status_code": 500})
            raise
        finally:
            if request.url.path not in self._QUIET_PATHS:
                latency = time.perf_counter() - start
                logger.info(
                    "request completed",
                    extra={
                        "status_code": status_code,
                        "latency_ms": round(latency * 1000, 2),
                    },
                )
            clear_context()


def _is_valid_request_id(value: str) -> bool:
    return bool(value) and len(value) <= _MAX_REQUEST_ID_LEN


class _BodyTooLarge(Exception):
    pass


class BodyLimitMiddleware:
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Clase:
      BodyLimitMiddleware (ASGI puro)

    Responsabilidades:
      - Rechazar requests cuyo body exceda max_body_bytes con 413 RFC7807
      - Funciona tanto con Content-Length como con transferencia chunked
    ----------------------------------------------------------------------------
    """

    def __init__(self, app, max_body_bytes: int | None = None):
        self.app = app
        self._max_bytes = (
            max_body_bytes
            if max_body_bytes is not None
            else get_settings().max_body_bytes
        )

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = {
            k.decode("latin-1").lower(): v.decode("latin-1")
            for k, v in scope.get("headers", [])
        }
        path = scope.get("path", "")

        content_length = headers.get("content-length", "")
        if content_length.isdigit() and int(content_length) > self._max_bytes:
            logger.warning(
                "payload too large (content-length)",
                extra={"content_length": content_length, "max_bytes": self._max_bytes},
            )
            await self._send_413(send, path=path)
            return

        started = False
        received = 0

        async def send_wrapper(message):
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        async def receive_limited():
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b"") or b"")
                if received > self._max_bytes:
                    raise _BodyTooLarge()
            return message

        try:
            await self.app(scope, receive_limited, send_wrapper)
        except _BodyTooLarge:
            # Con la respuesta ya iniciada no se puede enviar otra.
            if started:
                logger.error("payload exceeded limit after response start")
                raise
            logger.warning(
                "payload too large (streaming)",
                extra={"received_bytes": received, "max_bytes": self._max_bytes},
            )
            await self._send_413(send, path=path)

    async def _send_413(self, send, *, path: str) -> None:
        problem = ErrorDetail(
            type="about:blank/payload_too_large",
            title="Payload Too Large",
            status=413,
            detail=f"Request body too large. Maximum: {self._max_bytes} bytes",
            code=ErrorCode.PAYLOAD_TOO_LARGE,
            instance=path,
        ).model_dump(mode="json", exclude_none=True)

        await send(
            {
                "type": "http.response.start",
                "status": 413,
                "headers": [(b"content-type", PROBLEM_JSON_MEDIA_TYPE.encode())],
            }
        )
        await send(
            {
                "type": "http.response.body",
                "body": json.dumps(problem, ensure_ascii=False).encode("utf-8"),
            }
        )
