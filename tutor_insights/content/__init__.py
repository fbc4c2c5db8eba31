"""Question file loading."""

from .loader import QuestionFileError, QuestionLoader, load_questions

__all__ = ["QuestionFileError", "QuestionLoader", "load_questions"]
