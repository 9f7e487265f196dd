from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.middleware.trustedhost import TrustedHostMiddleware

from app.api.router import api_router
from app.clients.azure_maps import AzureMapsClient
from app.core.config import Settings, load_settings
from app.core.logging import configure_logging
from app.services.rate_limit import FixedWindowRateLimiter
from app.web.router import ui_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.weather_provider = None
        if settings.weather_provider_configured:
            app.state.weather_provider = AzureMapsClient(
                subscription_key=str(settings.azure_maps_subscription_key).strip(),
                timeout_seconds=settings.weather_timeout_seconds,
                base_url=str(settings.azure_maps_base_url),
            )
        else:
            logger.info("No Azure Maps subscription key found; weather runs in mock mode")

        yield
        if app.state.weather_provider is not None:
            await app.state.weather_provider.aclose()

    docs_enabled = settings.docs_enabled and not settings.is_production
    app = FastAPI(
        title="City Weather & Holidays API",
        version="0.1.0",
        debug=settings.debug,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.weather_provider = None
    app.state.api_rate_limiter = FixedWindowRateLimiter(
        max_requests=settings.api_rate_limit_max,
        window_seconds=settings.rate_limit_window_seconds,
    )
    app.state.page_rate_limiter = FixedWindowRateLimiter(
        max_requests=settings.page_rate_limit_max,
        window_seconds=settings.rate_limit_window_seconds,
    )

    app.add_middleware(GZipMiddleware, minimum_size=1024)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
        expose_headers=["RateLimit-Limit", "RateLimit-Remaining", "RateLimit-Reset"],
    )
    if settings.trusted_hosts:
        app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.trusted_hosts)

    @app.middleware("http")
    async def security_headers(request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        response.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        response.headers.setdefault("Cross-Origin-Resource-Policy", "same-site")
        if settings.is_production:
            response.headers.setdefault(
                "Strict-Transport-Security", "max-age=31536000; includeSubDomains"
            )
        return response

    @app.get("/healthz", tags=["meta"])
    def healthz():
        return {
            "name": "city-weather-holidays",
            "status": "ok",
            "mock_mode": not settings.weather_provider_configured,
        }

    app.include_router(api_router)
    app.include_router(ui_router)

    static_dir = Path(__file__).resolve().parent / "web" / "static"
    app.mount("/static", StaticFiles(directory=static_dir), name="static")
    return app
