"""Impressionism Craft API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CraftError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and model client initialized on startup, closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - One OllamaClient per process on app.state: connection reuse across requests
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import combine, elements, health
from app.config import Settings, get_settings
from app.infrastructure import database
from app.infrastructure.observability import setup_logging
from app.infrastructure.ollama_client import GenerationParameters, OllamaClient

logger = logging.getLogger(__name__)


def build_ollama_client(settings: Settings) -> OllamaClient:
    return OllamaClient(
        base_url=settings.ollama_base_url,
        timeout_seconds=settings.ollama_timeout_seconds,
        parameters=GenerationParameters(
            model=settings.ollama_model,
            max_tokens=settings.generation_max_tokens,
            temperature=settings.generation_temperature,
            top_p=settings.generation_top_p,
            seed=settings.generation_seed,
            repeat_penalty=settings.generation_repeat_penalty,
        ),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.text_generator = build_ollama_client(settings)
    logger.info("Impressionism Craft API started")
    yield
    await app.state.text_generator.aclose()
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("Impressionism Craft API shutting down")


app = FastAPI(
    title="Impressionism Craft API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(combine.router)
app.include_router(elements.router)

register_error_handlers(app)
