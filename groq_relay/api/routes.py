from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from typing import Annotated

from .dependencies import get_completion_client
from groq_relay.completion.client import CompletionClient
from groq_relay.completion.schemas import Failure


router = APIRouter(tags=["Chat"])

ERROR_PREFIX = "ERROR: "


@router.get("/chat", response_class=PlainTextResponse)
def chat(
    q: Annotated[str, Query(description="Text relayed as a single user message")],
    client: Annotated[CompletionClient, Depends(get_completion_client)],
) -> PlainTextResponse:
    """
    Relay ``q`` to the upstream model and return its answer as plain text.

    Upstream failures are still answered with 200; the body then starts
    with ``ERROR: ``.
    """
    result = client.complete(q)

    if isinstance(result, Failure):
        return PlainTextResponse(ERROR_PREFIX + result.message)
    return PlainTextResponse(result.text)
