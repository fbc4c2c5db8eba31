"""API routers for tutor-insights."""

from tutor_insights.api.routers import questions_router, themes_router

__all__ = [
    "questions_router",
    "themes_router",
]
