"""
Question Analysis Engine.

Turns free-text student questions into structured learning signals:

    classify(text, theme)  -> Classification (category, difficulty, concepts)
    analyze(questions)     -> list[TopicInsight], most asked concept first

Both entry points are pure functions over their arguments. The caller
owns the question collection; nothing here stores state between calls.

Example:
    from tutor_insights.analysis import Question, Theme, analyze, classify

    result = classify("What is the derivative of x^2?", Theme.PURE_MATH)
    question = Question.from_classification(
        "What is the derivative of x^2?", Theme.PURE_MATH, result
    )
    insights = analyze([question])
"""

from .aggregator import InsightAggregator, analyze, format_concept, most_frequent
from .classifier import QuestionClassifier, classify
from .models import Classification, DifficultyTier, Question, Theme, TopicInsight
from .session import QuestionSession
from .suggestions import SuggestionGenerator, suggest
from .summary import QuestionSummary, summarize
from .themes import ThemeInfo, get_theme, list_themes

__all__ = [
    # Entry points
    "classify",
    "analyze",
    "suggest",
    "summarize",
    # Components
    "QuestionClassifier",
    "InsightAggregator",
    "SuggestionGenerator",
    "QuestionSession",
    # Models
    "Classification",
    "Question",
    "TopicInsight",
    "QuestionSummary",
    "ThemeInfo",
    # Enums
    "Theme",
    "DifficultyTier",
    # Helpers
    "format_concept",
    "most_frequent",
    "get_theme",
    "list_themes",
]
