"""
tutor-insights: question classification and topic insights for AI tutoring chats.

Packages:
    analysis  - classifier, insight aggregator, suggestions (pure, no I/O)
    content   - question file loading
    core      - logging setup
    api       - FastAPI application
    cli       - Typer command line
"""

__version__ = "1.0.0"
