"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize FastAPI application with metadata (title, version)
  - Configure middleware (CORS, request context, body limit)
  - Mount the Kunden router under /v1 (alias /api/v1)
  - Expose the health check endpoint

Collaborators:
  - FastAPI: ASGI web framework
  - CORSMiddleware: Cross-Origin Resource Sharing handler
  - RequestContextMiddleware: Request ID and logging context
  - BodyLimitMiddleware: MAX_BODY_BYTES enforcement
  - interfaces.api.http.router: Kunden endpoints

Notes:
  - Middleware order matters: BodyLimit → RequestContext → CORS → routes
  - /healthz follows Kubernetes health check convention
  - Demo Kunden are seeded in lifespan when DEV_SEED_DEMO=1
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ..application.dev_seed_demo import ensure_dev_demo
from ..container import get_kunde_repository
from ..crosscutting.config import get_settings
from ..crosscutting.logger import logger
from ..crosscutting.middleware import BodyLimitMiddleware, RequestContextMiddleware
from ..interfaces.api.http.router import router
from .exception_handlers import register_exception_handlers
from .versioning import include_versioned_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Seeds demo data if enabled."""
    settings = get_settings()

    ensure_dev_demo(settings, repository=get_kunde_repository())

    logger.info(
        "Kunde API starting up",
        extra={
            "app_env": settings.app_env,
            "messages_locale": settings.messages_locale,
            "max_body_bytes": settings.max_body_bytes,
        },
    )
    yield
    logger.info("Kunde API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="Kunde API",
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "kunden",
                "description": "Kunden: lesen, anlegen, aendern, patchen, loeschen",
            },
        ],
    )

    # R: Middleware order (last added = first to execute)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins_list(),
        allow_credentials=settings.cors_allow_credentials,  # R: Secure default: False
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "If-Match", "X-Request-Id"],
        expose_headers=["Location", "X-Request-Id"],
    )
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(BodyLimitMiddleware, max_body_bytes=settings.max_body_bytes)

    app.include_router(router, prefix="/v1")
    include_versioned_routes(app)
    register_exception_handlers(app)

    @app.get("/healthz")
    def healthz(request: Request):
        """
        R: Liveness check (in-memory store, no external dependencies).

        Returns:
            ok: always True while the process serves requests
            request_id: Correlation ID for this request
        """
        return {
            "ok": True,
            "request_id": getattr(request.state, "request_id", None),
        }

    return app


app = create_app()
