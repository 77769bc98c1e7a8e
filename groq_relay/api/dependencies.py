from typing import Iterator

from fastapi import Depends

from groq_relay.completion.client import CompletionClient
from groq_relay.core.config import get_settings, Settings


def get_settings_dependency() -> Settings:
    return get_settings()


def get_completion_client(
    settings: Settings = Depends(get_settings_dependency),
) -> Iterator[CompletionClient]:
    with CompletionClient(**settings.groq_config) as client:
        yield client
