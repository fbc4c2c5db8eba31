"""Command line interface for tutor-insights."""
