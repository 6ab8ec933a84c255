"""
Relay error kinds. Each one ends the current request; the app turns them into
an ErrorResponse body with the matching HTTP status.
"""

from typing import Optional


class ChatError(Exception):
    status_code = 500
    error = "Proxy error"

    def __init__(self, error: Optional[str] = None, details: Optional[str] = None):
        self.error = error or self.error
        self.details = details
        super().__init__(self.error if details is None else f"{self.error}: {details}")


class InvalidRequest(ChatError):
    """Caller input failed validation; no upstream call was made."""

    status_code = 400
    error = "Missing prompt"


class UpstreamError(ChatError):
    """Completion endpoint answered with a non-2xx status."""

    status_code = 502
    error = "OpenAI request failed"


class RelayError(ChatError):
    """Network, serialization or response-shape failure."""

    status_code = 500
    error = "Proxy error"
