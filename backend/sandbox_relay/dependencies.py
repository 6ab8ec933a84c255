from typing import Optional

import httpx
from fastapi import Request

from sandbox_relay.core.config import Settings


def get_relay_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_http_client(request: Request) -> Optional[httpx.AsyncClient]:
    # Absent outside the app lifespan; the relay then opens its own client
    return getattr(request.app.state, "http_client", None)
