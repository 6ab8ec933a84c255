from typing import Optional

import httpx
from fastapi import APIRouter, Body, Depends

from sandbox_relay.core.config import Settings
from sandbox_relay.dependencies import get_http_client, get_relay_settings
from sandbox_relay.schemas.chat import ChatRequest, ChatResponse, ErrorResponse
from sandbox_relay.services.relay_service import handle_chat

router = APIRouter()


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def chat_endpoint(
    request: Optional[ChatRequest] = Body(None),
    settings: Settings = Depends(get_relay_settings),
    client: Optional[httpx.AsyncClient] = Depends(get_http_client),
):
    """
    Relay an edit request for the sandbox to the completion endpoint.
    Accepts the new prompt, earlier prompts and the current HTML/CSS/JS,
    and returns the model's reply text. A missing body counts as an
    empty request and is rejected for its missing prompt.
    """
    return await handle_chat(request or ChatRequest(), settings, client)
