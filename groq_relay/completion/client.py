from __future__ import annotations

import logging
from enum import Enum
from typing import Any

import httpx

from groq_relay.core.constants import AppSettings
from .schemas import (
    Answer,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    CompletionResult,
    Failure,
)

logger = logging.getLogger(__name__)


class Endpoint(Enum):
    """Centralized API endpoint paths"""

    CHAT_COMPLETIONS = "/chat/completions"


class CompletionError(Exception):
    """Raised when the upstream response carries no usable answer"""
    pass


class CompletionClient:
    """
    Client for the Groq OpenAI-compatible chat completion API.

    Every call is a single-turn, single-message conversation. The client
    never raises from ``complete``: failures of any kind come back as a
    ``Failure`` result. There are no retries.

    No timeout is configured, so httpx's 5 second default applies; a
    slow generation comes back as a ``Failure`` describing the timeout.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = AppSettings.GROQ_BASE_URL,
        model: str = AppSettings.GROQ_MODEL.value,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model

        # No explicit timeout: httpx's default policy applies
        self._http_client = httpx.Client(
            base_url=self.base_url,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {api_key}",
            },
            transport=transport,
        )

    def build_request(self, query: str) -> ChatCompletionRequest:
        return ChatCompletionRequest(
            model=self.model,
            messages=[ChatMessage(role="user", content=query)],
        )

    def complete(self, query: str) -> CompletionResult:
        """
        Send ``query`` upstream and return the first choice's text.

        Returns:
            Answer: with ``choices[0].message.content``
            Failure: on transport errors, non-2xx statuses or a response
                without a string at that path
        """
        payload = self.build_request(query)

        try:
            response = self._http_client.post(
                str(Endpoint.CHAT_COMPLETIONS.value),
                json=payload.model_dump(),
            )
            response.raise_for_status()

            completion = ChatCompletionResponse.model_validate(
                response.json())
            if not completion.choices:
                raise CompletionError("Upstream response contained no choices")

            return Answer(text=completion.choices[0].message.content)

        except Exception as e:
            logger.warning("Chat completion failed: %s", e)
            return Failure(message=str(e))

    def close(self) -> None:
        """Close underlying HTTP client"""
        self._http_client.close()

    def __enter__(self) -> 'CompletionClient':
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
