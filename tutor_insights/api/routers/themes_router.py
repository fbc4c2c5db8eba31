"""
API router for the theme catalog.
"""

from fastapi import APIRouter, HTTPException

from tutor_insights.analysis import get_theme, list_themes

router = APIRouter()


@router.get("/")
def get_all_themes():
    """
    List the built-in learning themes.
    """
    return [theme.to_dict() for theme in list_themes()]


@router.get("/{theme_id}")
def get_single_theme(theme_id: str):
    """
    Get one theme by id.
    """
    theme = get_theme(theme_id)
    if theme is None:
        raise HTTPException(status_code=404, detail=f"Unknown theme: {theme_id}")
    return theme.to_dict()
