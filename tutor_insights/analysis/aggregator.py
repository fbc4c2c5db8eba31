"""
Topic Insight Aggregator.

Groups classified questions by concept tag and turns each group into a
TopicInsight: how often the concept comes up, the typical difficulty,
a few example questions and a teaching suggestion.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

from loguru import logger

from .models import DifficultyTier, Question, TopicInsight
from .suggestions import SuggestionGenerator

T = TypeVar("T")

DEFAULT_SAMPLE_SIZE = 3


def most_frequent(items: Sequence[T]) -> T:
    """
    Statistical mode of a non-empty sequence.

    Ties go to the value seen first.
    """
    counts: dict[T, int] = {}
    for item in items:
        counts[item] = counts.get(item, 0) + 1

    best, best_count = items[0], 0
    for item, count in counts.items():
        if count > best_count:
            best, best_count = item, count
    return best


def format_concept(concept: str) -> str:
    """Display name for a concept key: 'linear-algebra' -> 'Linear Algebra'."""
    return " ".join(word[:1].upper() + word[1:] for word in concept.split("-"))


class InsightAggregator:
    """Builds ranked topic insights from a snapshot of classified questions."""

    def __init__(
        self,
        suggestions: SuggestionGenerator | None = None,
        sample_size: int = DEFAULT_SAMPLE_SIZE,
    ):
        """
        Initialize aggregator.

        Args:
            suggestions: Generator for the suggested introduction text
            sample_size: Maximum number of example questions per insight
        """
        self.suggestions = suggestions or SuggestionGenerator()
        self.sample_size = sample_size

    def analyze(self, questions: Iterable[Question]) -> list[TopicInsight]:
        """
        Aggregate questions into topic insights.

        Args:
            questions: Classified questions in submission order

        Returns:
            Insights sorted by frequency (descending); equal frequencies keep
            the order in which their concepts first appeared
        """
        buckets: dict[str, list[Question]] = {}
        for question in questions:
            for concept in question.concepts or ():
                buckets.setdefault(concept, []).append(question)

        logger.debug(f"Aggregating {len(buckets)} concept buckets")

        insights = [self._build_insight(concept, bucket) for concept, bucket in buckets.items()]

        # sorted() is stable, so ties keep first-seen order
        return sorted(insights, key=lambda insight: insight.frequency, reverse=True)

    def _build_insight(self, concept: str, bucket: list[Question]) -> TopicInsight:
        difficulty = most_frequent(
            [question.difficulty or DifficultyTier.BEGINNER for question in bucket]
        )
        frequency = len(bucket)

        return TopicInsight(
            concept=format_concept(concept),
            frequency=frequency,
            difficulty=difficulty,
            common_questions=tuple(q.content for q in bucket[: self.sample_size]),
            suggested_introduction=self.suggestions.suggest(concept, difficulty, frequency),
        )


_default_aggregator = InsightAggregator()


def analyze(questions: Iterable[Question]) -> list[TopicInsight]:
    """Aggregate questions into topic insights with default settings."""
    return _default_aggregator.analyze(questions)
