from enum import Enum


class GroqModels(Enum):
    """Supported Groq model identifiers"""

    LLAMA3_1_8B_INSTANT = "llama-3.1-8b-instant"
    LLAMA3_3_70B_VERSATILE = "llama-3.3-70b-versatile"


class AppSettings:
    """Central place for all application-level configuration"""

    GROQ_MODEL: GroqModels = GroqModels.LLAMA3_1_8B_INSTANT
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    CORS_ORIGINS = ["*"]
    ENVIRONMENT = "development"
