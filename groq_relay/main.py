from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
import uvicorn

from groq_relay.api.routes import router
from groq_relay.core.config import get_settings, Settings

import logging

# Basic console logging configuration
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-7s  %(name)-20s │ %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    settings = get_settings()

    logger.info(
        "Starting | env=%s | model=%s | upstream=%s",
        settings.ENVIRONMENT,
        settings.GROQ_MODEL.value,
        settings.GROQ_BASE_URL,
    )

    try:
        yield
    finally:
        logger.info("Shutting down")


async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "client_ip": request.client.host if request.client else "unknown",
        }
    )
    return PlainTextResponse(
        "Internal server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


async def health_check():
    return {"status": "healthy"}


def create_app(settings: Settings) -> FastAPI:
    # Docs are hidden in production
    app = FastAPI(
        title="Groq Relay",
        description="Relays a query to a Groq chat model and returns the answer",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
        redoc_url=None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(router)
    app.add_exception_handler(Exception, global_exception_handler)
    app.add_api_route("/health", health_check, methods=["GET"],
                      include_in_schema=False)
    return app


app = create_app(get_settings())


def run() -> None:
    """Serve the relay with uvicorn (``groq-relay`` console script)"""
    uvicorn.run("groq_relay.main:app", host="0.0.0.0", port=8000)
