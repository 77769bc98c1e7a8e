from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import AppSettings, GroqModels


class Settings(BaseSettings):
    """Application settings loaded from environment + defaults"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    GROQ_API_KEY: str
    GROQ_MODEL: GroqModels = AppSettings.GROQ_MODEL
    GROQ_BASE_URL: str = AppSettings.GROQ_BASE_URL
    CORS_ORIGINS: List[str] = AppSettings.CORS_ORIGINS
    ENVIRONMENT: str = AppSettings.ENVIRONMENT

    @property
    def groq_config(self) -> dict:
        return {
            "api_key": self.GROQ_API_KEY,
            "base_url": self.GROQ_BASE_URL,
            "model": self.GROQ_MODEL.value,
        }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
