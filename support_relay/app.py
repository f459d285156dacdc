"""
Support Relay - FastAPI Application

Mini App support questions in, admin bot notifications out.
"""
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from support_relay.config import SupportRelayConfig
from support_relay.errors import ERROR_SERVER, SupportRelayError
from support_relay.logging import get_logger
from support_relay.routers import support_router
from support_relay.services.database import Database
from support_relay.services.domains import SupportRelayService
from support_relay.services.telegram_messaging import TelegramMessenger

logger = get_logger(__name__)


def create_app(config: Optional[SupportRelayConfig] = None) -> FastAPI:
    """Build the app; configuration is read from the environment at startup if not given."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        settings = config or SupportRelayConfig.from_env()
        db = await Database.create(settings)
        http_client = httpx.AsyncClient()
        messenger = TelegramMessenger(
            http_client,
            bot_token=settings.admin_bot_token,
            api_url=settings.telegram_api_url,
            timeout=settings.telegram_api_timeout,
        )
        app.state.support_service = SupportRelayService(db, messenger, settings)
        logger.info(f"Support relay started: {settings!r}")
        try:
            yield
        finally:
            await http_client.aclose()

    app = FastAPI(
        title="Support Relay",
        description="Telegram Mini App support questions relayed to operators",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS for Mini App
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Telegram Mini Apps require this
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(SupportRelayError)
    async def support_relay_error_handler(request: Request, exc: SupportRelayError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.code})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Malformed request to {request.url.path}: {len(exc.errors())} validation errors")
        return JSONResponse(status_code=500, content={"error": ERROR_SERVER})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.url.path}", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": ERROR_SERVER})

    @app.get("/api/health")
    async def health_check():
        return {"status": "ok"}

    app.include_router(support_router, prefix="/api")

    return app


app = create_app()
