"""
FastAPI application for tutor-insights.

Provides REST API for:
- Question classification
- Topic insights and analytics summary
- Theme catalog
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from config import get_settings
from tutor_insights import __version__
from tutor_insights.api.routers import questions_router, themes_router
from tutor_insights.core import configure_logging

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    configure_logging(settings.log_level, settings.log_file)
    logger.info(f"Service started on {settings.api_host}:{settings.api_port}")

    yield

    # Shutdown
    logger.info("Shutting down tutor-insights service...")


app = FastAPI(
    title="Tutor Insights",
    description="""
    Question classification and topic insights for AI tutoring chats.

    ## Features

    - **Classification**: Category, difficulty and concept tags for a question
    - **Topic Insights**: Most asked concepts with teaching suggestions
    - **Themes**: Built-in subject catalog

    ## Data Flow

    ```
    Chat layer
        ↓ classify (per question)
    Caller-owned question list
        ↓ insights (on demand)
    Analytics view
    ```
    """,
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ========================================
# Health & Status Endpoints
# ========================================


@app.get("/", tags=["Health"])
def root() -> dict[str, str]:
    """Root endpoint returning service info."""
    return {
        "service": "tutor-insights",
        "version": __version__,
        "status": "ok",
    }


@app.get("/health", tags=["Health"])
def health_check() -> dict[str, str]:
    return {"status": "ok"}


# ========================================
# Routers
# ========================================

app.include_router(questions_router.router, prefix="/api/questions", tags=["Questions"])
app.include_router(themes_router.router, prefix="/api/themes", tags=["Themes"])
