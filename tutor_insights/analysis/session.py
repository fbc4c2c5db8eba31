"""
Question Session: in-memory record of the questions asked in one theme.

The chat layer hands every submitted message to submit(); the session
classifies it, stores the resulting Question and can produce insights
over everything collected so far. Switching theme starts over.
"""

from __future__ import annotations

from loguru import logger

from .aggregator import InsightAggregator
from .classifier import QuestionClassifier
from .models import Question, Theme, TopicInsight
from .summary import DEFAULT_TRENDING_THRESHOLD, QuestionSummary, summarize


class QuestionSession:
    """Single-threaded question collection for one student."""

    def __init__(
        self,
        theme: Theme | str,
        user_id: str = "student-1",
        classifier: QuestionClassifier | None = None,
        aggregator: InsightAggregator | None = None,
        trending_threshold: int = DEFAULT_TRENDING_THRESHOLD,
    ):
        self.theme = Theme.parse(theme)
        self.user_id = user_id
        self.classifier = classifier or QuestionClassifier()
        self.aggregator = aggregator or InsightAggregator()
        self.trending_threshold = trending_threshold
        self._questions: list[Question] = []

    @property
    def questions(self) -> tuple[Question, ...]:
        return tuple(self._questions)

    def submit(self, content: str) -> Question:
        """
        Classify and record a question.

        Raises:
            ValueError: If content is blank
        """
        if not content or not content.strip():
            raise ValueError("Question content cannot be empty")

        classification = self.classifier.classify(content, self.theme)
        question = Question.from_classification(
            content,
            self.theme,
            classification,
            user_id=self.user_id,
        )
        self._questions.append(question)

        logger.info(
            f"Recorded question {question.id[:8]} as {classification.category} "
            f"({classification.difficulty.value})"
        )
        return question

    def change_theme(self, theme: Theme | str) -> None:
        """Switch theme and drop the questions collected so far."""
        self.theme = Theme.parse(theme)
        dropped = len(self._questions)
        self._questions = []
        logger.info(f"Theme changed to {self.theme.value}, cleared {dropped} questions")

    def insights(self) -> list[TopicInsight]:
        if not self._questions:
            return []
        return self.aggregator.analyze(self._questions)

    def summary(self) -> QuestionSummary:
        return summarize(self._questions, self.insights(), self.trending_threshold)
