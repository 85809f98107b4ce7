from __future__ import annotations

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dietrecipes.shared.config.settings import settings
from dietrecipes.shared.logging.logger import setup_logging

from dietrecipes.features.recipes.api.routes import router as recipes_router

log = logging.getLogger("app")


def _split(value: str) -> list:
    if value and value != "*":
        return [v.strip() for v in value.split(",") if v.strip()]
    return ["*"]


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(title="Diet Recipes", version="1.0.0")

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_split(settings.CORS_ALLOW_ORIGINS),
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=_split(settings.CORS_ALLOW_METHODS),
        allow_headers=_split(settings.CORS_ALLOW_HEADERS),
    )

    # Routers
    app.include_router(recipes_router, prefix="/api")

    if not settings.GOOGLE_GENERATIVE_AI_API_KEY:
        log.warning("GOOGLE_GENERATIVE_AI_API_KEY is not set; recipe generation will fail")

    return app

# Uvicorn/Gunicorn entry point
app = create_app()
