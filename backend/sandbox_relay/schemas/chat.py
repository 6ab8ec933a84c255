from pydantic import BaseModel, Field
from typing import Literal, Optional, List


class SandboxState(BaseModel):
    html: Optional[str] = Field(None, description="Markup currently inside #demo-root")
    css: Optional[str] = Field(None, description="Styles currently applied to the sandbox")
    js: Optional[str] = Field(None, description="Script currently executed in the sandbox frame")


class Message(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    # Missing/empty prompt is reported by the relay as a 400, not a schema error
    prompt: Optional[str] = Field(None, description="New edit request from the user")
    history: Optional[List[str]] = Field(default_factory=list, description="Previous user requests, oldest first")
    state: Optional[SandboxState] = Field(default_factory=SandboxState, description="Current sandbox contents")


class ChatResponse(BaseModel):
    reply: str = Field(..., description="Model reply text")


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
