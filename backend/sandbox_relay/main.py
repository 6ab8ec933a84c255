import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sandbox_relay.core.config import Settings, get_settings
from sandbox_relay.core.errors import ChatError
from sandbox_relay.core.logging import configure_logging
from sandbox_relay.routers import chat, health, static
from sandbox_relay.schemas.chat import ErrorResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with httpx.AsyncClient() as client:
        app.state.http_client = client
        yield
    del app.state.http_client


async def chat_error_handler(request: Request, exc: ChatError) -> JSONResponse:
    body = ErrorResponse(error=exc.error, details=exc.details)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(exclude_none=True))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(title="Sandbox Prompt Relay", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ChatError, chat_error_handler)

    # Include Routers; the static catch-all must stay last
    app.include_router(chat.router, prefix="/api", tags=["Chat"])
    app.include_router(health.router, tags=["Health"])
    app.include_router(static.router)

    if not settings.OPENAI_API_KEY:
        logger.warning("OPENAI_API_KEY is not set; upstream calls will be rejected")

    return app


app = create_app()
