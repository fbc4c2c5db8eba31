"""
Analytics summary over a question snapshot.

Headline numbers shown next to the topic insights: totals, category and
difficulty distributions, and how many topics are trending.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from .models import DifficultyTier, Question, TopicInsight

UNCATEGORIZED = "Uncategorized"
DEFAULT_TRENDING_THRESHOLD = 5


@dataclass
class QuestionSummary:
    """Distribution counts preserve first-seen order."""

    total_questions: int = 0
    unique_concepts: int = 0
    category_counts: dict[str, int] = field(default_factory=dict)
    difficulty_counts: dict[str, int] = field(default_factory=dict)
    trending_topics: int = 0

    @property
    def category_total(self) -> int:
        return len(self.category_counts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_questions": self.total_questions,
            "unique_concepts": self.unique_concepts,
            "categories": self.category_total,
            "category_counts": dict(self.category_counts),
            "difficulty_counts": dict(self.difficulty_counts),
            "trending_topics": self.trending_topics,
        }


def summarize(
    questions: Sequence[Question],
    insights: Sequence[TopicInsight],
    trending_threshold: int = DEFAULT_TRENDING_THRESHOLD,
) -> QuestionSummary:
    """
    Summarize a question snapshot.

    Args:
        questions: Questions the insights were computed from
        insights: Output of the insight aggregator
        trending_threshold: Insights with a frequency above this count as trending

    Returns:
        QuestionSummary
    """
    summary = QuestionSummary(
        total_questions=len(questions),
        unique_concepts=len(insights),
    )

    for question in questions:
        category = question.category or UNCATEGORIZED
        summary.category_counts[category] = summary.category_counts.get(category, 0) + 1

        difficulty = (question.difficulty or DifficultyTier.BEGINNER).value
        summary.difficulty_counts[difficulty] = summary.difficulty_counts.get(difficulty, 0) + 1

    summary.trending_topics = sum(1 for insight in insights if insight.frequency > trending_threshold)
    return summary
