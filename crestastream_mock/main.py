"""FastAPI application wiring for the CrestaStream mock backend.

- Builds the app around one explicitly owned :class:`ServiceContainer`
  (conversation store, session registry, identities, agents).
- Configures logging, CORS and the Content-Security-Policy header.
- Shapes every ``HTTPException`` into the JSON error envelopes the
  automation suite expects: ``{"error": ...}`` or ``{"success": false, ...}``.
- Exposes health, version and AI suggestion endpoints next to the routers.

Run it with ``crestastream-mock`` or ``uvicorn crestastream_mock.main:app``.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import uvicorn
from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .__version__ import __build_date__, __commit_sha__, __version__
from .app_logging import APP_LOGGER_NAME, init_logging
from .config import Settings, get_settings
from .routers import agents, auth_api, conversations, metrics_api
from .seed_data import AI_SUGGESTIONS, DEMO_IDENTITIES
from .services import ServiceContainer, ServicesDep

logger = logging.getLogger(APP_LOGGER_NAME)

system_router = APIRouter(tags=["system"])


@system_router.get("/health")
def health(services: ServicesDep) -> dict[str, Any]:
    """Liveness probe consumed by the automation suite's health checks."""
    return {
        "status": "healthy",
        "version": __version__,
        "uptime": services.uptime,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": {
            "database": "connected",
            "ai": "operational",
            "cache": "connected",
        },
    }


@system_router.get("/version")
def version() -> dict[str, Any]:
    """Return version information for the application."""
    return {
        "version": __version__,
        "build_date": __build_date__,
        "commit_sha": __commit_sha__,
    }


@system_router.get("/ai/suggestions")
def ai_suggestions() -> dict[str, Any]:
    return {"suggestions": [dict(s) for s in AI_SUGGESTIONS]}


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render ``detail`` as the response body envelope."""

    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"error": exc.detail}
    return JSONResponse(
        content, status_code=exc.status_code, headers=getattr(exc, "headers", None)
    )


def create_app(
    settings: Settings | None = None, services: ServiceContainer | None = None
) -> FastAPI:
    """Build an app that owns ``services`` (fresh demo state by default)."""

    settings = settings or get_settings()
    prefix = settings.api_prefix

    app = FastAPI(title="CrestaStream Mock API", version=__version__)
    app.state.settings = settings
    app.state.services = services or ServiceContainer.build(
        seed_demo_data=settings.seed_demo_data
    )

    init_logging(app, skip_paths={f"{prefix}/health"})
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    @app.middleware("http")
    async def content_security_policy(request: Request, call_next):
        response = await call_next(request)
        response.headers["Content-Security-Policy"] = settings.content_security_policy
        return response

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(system_router, prefix=prefix)
    app.include_router(auth_api.router, prefix=prefix)
    app.include_router(conversations.router, prefix=prefix)
    app.include_router(metrics_api.router, prefix=prefix)
    app.include_router(agents.router, prefix=prefix)
    return app


def _banner(settings: Settings) -> str:
    base = f"http://{settings.host}:{settings.port}"
    lines = [
        "CrestaStream mock server",
        f"  API:   {base}{settings.api_prefix}",
        "  Test users:",
        *(f"    {i.email} / {i.password}" for i in DEMO_IDENTITIES),
    ]
    return "\n".join(lines) + "\n"


app = create_app()


def run() -> None:
    """Console entry point: serve the module-level app with uvicorn."""

    settings = get_settings()
    sys.stdout.write(_banner(settings))
    logger.info("Starting mock server on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
