"""FastAPI application for tutor-insights."""
