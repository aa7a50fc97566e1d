import logging
from typing import Any, Dict, Iterator, List, Optional

import requests

from skillnest.core.config import settings
from skillnest.core.exceptions import (
    AIConfigError,
    AIError,
    AIRateLimitError,
    AIUsageLimitError,
)

logger = logging.getLogger(__name__)


def _headers() -> Dict[str, str]:
    api_key = settings.ai.groq_api_key
    if not api_key:
        logger.error("GROQ_API_KEY missing.")
        raise AIConfigError()
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }


def _post(payload: Dict[str, Any], stream: bool = False) -> requests.Response:
    headers = _headers()
    try:
        return requests.post(
            settings.ai.base_url,
            json=payload,
            headers=headers,
            timeout=settings.ai.timeout_seconds,
            stream=stream,
        )
    except requests.exceptions.Timeout:
        logger.error("AI service timeout.")
        raise AIError("AI service reached timeout limit.")
    except requests.exceptions.RequestException as e:
        logger.error(f"AI service request failed: {e}")
        raise AIError(f"AI service error: {e}")


def _raise_for_upstream_status(response: requests.Response) -> None:
    """Map upstream failures onto the user-facing errors (429, 402, everything else)."""
    if response.ok:
        return
    if response.status_code == 429:
        raise AIRateLimitError()
    if response.status_code == 402:
        raise AIUsageLimitError()
    logger.error(
        f"AI gateway error: {response.status_code}",
        extra={"upstream_body": response.text[:2000]},
    )
    raise AIError("AI gateway error")


def complete(
    messages: List[Dict[str, str]],
    temperature: float = 0.7,
    json_mode: bool = False,
) -> str:
    """
    Call the chat-completions endpoint and return the assistant message text.

    Args:
        messages: List of message dictionaries with 'role' and 'content'
        temperature: Sampling temperature
        json_mode: Ask the provider to constrain output to a JSON object

    Raises:
        AIConfigError: If the API key is not configured.
        AIRateLimitError / AIUsageLimitError: On upstream 429 / 402.
        AIError: On network failures, any other upstream status, or an empty completion.
    """
    payload: Dict[str, Any] = {
        "model": settings.ai.model_name,
        "messages": messages,
        "temperature": temperature,
    }
    if json_mode:
        payload["response_format"] = {"type": "json_object"}

    logger.info(f"Calling AI Model: {settings.ai.model_name}")
    response = _post(payload)
    _raise_for_upstream_status(response)

    try:
        content = response.json()["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError):
        content = None
    if not content:
        raise AIError("No content in AI response")
    return content


class StreamHandle:
    """Open upstream SSE response. Iterating yields raw bytes and closes the connection at the end."""

    media_type = "text/event-stream"

    def __init__(self, response: requests.Response):
        self._response = response

    def iter_bytes(self) -> Iterator[bytes]:
        try:
            # chunk_size=None hands over bytes as they arrive
            for chunk in self._response.iter_content(chunk_size=None):
                if chunk:
                    yield chunk
        finally:
            self._response.close()

    def close(self) -> None:
        self._response.close()


def open_stream(
    messages: List[Dict[str, str]],
    temperature: Optional[float] = None,
) -> StreamHandle:
    """
    Start a streaming completion. The upstream status is checked before any
    byte is handed back, so error statuses surface as exceptions, not as a
    half-written event stream.
    """
    payload: Dict[str, Any] = {
        "model": settings.ai.model_name,
        "messages": messages,
        "stream": True,
    }
    if temperature is not None:
        payload["temperature"] = temperature

    logger.info(f"Opening AI stream: {settings.ai.model_name}")
    response = _post(payload, stream=True)
    try:
        _raise_for_upstream_status(response)
    except Exception:
        response.close()
        raise
    return StreamHandle(response)
