import json
import logging
from typing import Any, List, Optional

import httpx

from sandbox_relay.core.config import Settings
from sandbox_relay.core.errors import ChatError, InvalidRequest, RelayError, UpstreamError
from sandbox_relay.schemas.chat import ChatRequest, ChatResponse, Message, SandboxState

logger = logging.getLogger(__name__)

MODEL = "gpt-4o-mini"
TEMPERATURE = 0.8

HTML_PLACEHOLDER = "<!-- none -->"
CSS_PLACEHOLDER = "/* none */"
JS_PLACEHOLDER = "// none"

# Stands in for earlier model output so it is not resent on every turn
ASSISTANT_PLACEHOLDER = "Request completed"

SYSTEM_PROMPT = """You are a front-end assistant. The user is editing a web page.
The HTML you are working on is placed inside the #demo-root element of the following structure:
```html
<!DOCTYPE html>
<html lang="en">
 <head>
  <meta charset="UTF-8">
  <title>WIP</title>
  <style id="demo-style">/* CSS you return is placed here (and in document.adoptedStyleSheets) */</style>
 </head>
 <body id="demo-root"><!-- Demo area - HTML you return is placed here --></body>
</html>
```
The HTML content is placed within a body tag, so your response can't use html, head, title, body, etc tags.

When you need JavaScript, return it in a fenced block labelled `js` (or `javascript`).

Only respond with **complete** HTML and/or CSS and/or JS wrapped in fenced code blocks. A block of a given type overrides all the previous content of that type, so additions must also contain all the previous content.

If there's no change to a type of resource, omit any blocks of that type (an empty block clears the existing content). E.g. no JS change -> don't output a js block.

The user may be requesting things one at a time. Try your best to avoid changing things you're not asked to change."""


def _render_state(state: SandboxState) -> str:
    return (
        "Current HTML (inside #demo-root):\n"
        f"```html\n{state.html or HTML_PLACEHOLDER}\n```\n\n"
        "Current CSS (scoped to #demo-root):\n"
        f"```css\n{state.css or CSS_PLACEHOLDER}\n```\n\n"
        "Current JavaScript (executed inside the iframe):\n"
        f"```js\n{state.js or JS_PLACEHOLDER}\n```"
    )


def build_messages(history: Optional[List[str]], state: Optional[SandboxState]) -> List[Message]:
    """
    System instructions with the current sandbox contents, then one
    user / placeholder-assistant pair per earlier request, oldest first.
    The new prompt is left for the caller to append.
    """
    state = state or SandboxState()

    messages = [
        Message(role="system", content=f"{SYSTEM_PROMPT}\n\n{_render_state(state)}"),
    ]
    for user_prompt in history or []:
        messages.append(Message(role="user", content=user_prompt))
        messages.append(Message(role="assistant", content=ASSISTANT_PLACEHOLDER))
    return messages


def extract_reply(data: Any) -> str:
    """choices[0].message.content, or "" when the body has another shape."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    return content if isinstance(content, str) else ""


async def handle_chat(
    request: ChatRequest,
    settings: Settings,
    client: Optional[httpx.AsyncClient] = None,
) -> ChatResponse:
    if not request.prompt:
        raise InvalidRequest()

    messages = build_messages(request.history, request.state)
    messages.append(Message(role="user", content=request.prompt))
    conversation = [m.model_dump() for m in messages]

    logger.info("OpenAI request:\n%s", json.dumps(conversation, indent=2, ensure_ascii=False))

    headers = {
        "Authorization": f"Bearer {settings.OPENAI_API_KEY}",
        "Content-Type": "application/json",
    }
    payload = {
        "model": MODEL,
        "temperature": TEMPERATURE,
        "messages": conversation,
        "stream": False,
    }

    if client is None:
        async with httpx.AsyncClient() as own_client:
            return await _dispatch(own_client, settings, payload, headers)
    return await _dispatch(client, settings, payload, headers)


async def _dispatch(client: httpx.AsyncClient, settings: Settings, payload: dict, headers: dict) -> ChatResponse:
    try:
        response = await client.post(
            settings.OPENAI_ENDPOINT,
            json=payload,
            headers=headers,
            timeout=settings.UPSTREAM_TIMEOUT,
        )
        if not response.is_success:
            logger.error("OpenAI error (%s): %s", response.status_code, response.text)
            raise UpstreamError(details=response.text)

        return ChatResponse(reply=extract_reply(response.json()))
    except ChatError:
        raise
    except Exception as e:
        logger.exception("Relay to %s failed", settings.OPENAI_ENDPOINT)
        raise RelayError(details=str(e) or e.__class__.__name__) from e
