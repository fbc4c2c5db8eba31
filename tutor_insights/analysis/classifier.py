"""
Question Classifier.

Maps a raw question and the session theme to a category, a difficulty
tier and concept tags using case-insensitive keyword matching.

Classification happens in two passes:
1. Theme rules: first matching rule wins and may escalate difficulty.
2. Generic overlay: theme-independent cues ("prove", "why", "what", ...)
   overwrite the difficulty from pass 1 whenever one of them matches.
"""

from __future__ import annotations

from collections.abc import Mapping

from loguru import logger

from .models import Classification, DifficultyTier, Theme
from .rules import DIFFICULTY_OVERLAY, THEME_RULES, CategoryRule, Escalation

DEFAULT_CATEGORY = "General"


class QuestionClassifier:
    """
    Rule-based classifier over immutable keyword tables.

    Stateless once constructed; a single instance can be shared freely.
    """

    def __init__(
        self,
        theme_rules: Mapping[Theme, tuple[CategoryRule, ...]] = THEME_RULES,
        overlay: tuple[Escalation, ...] = DIFFICULTY_OVERLAY,
    ):
        """
        Initialize classifier.

        Args:
            theme_rules: Ordered category rules per theme
            overlay: Theme-independent difficulty cues, highest priority first
        """
        self.theme_rules = theme_rules
        self.overlay = overlay

    def classify(self, content: str, theme: Theme | str | None) -> Classification:
        """
        Classify a question.

        Args:
            content: Question text as typed by the student
            theme: Theme id; unknown ids behave like a theme without rules

        Returns:
            Classification (never raises)
        """
        resolved = Theme.parse(theme)
        if resolved is Theme.GENERAL and theme not in (Theme.GENERAL, Theme.GENERAL.value):
            logger.debug(f"Unknown theme {theme!r}, classifying without theme rules")

        text = (content or "").lower()

        category = DEFAULT_CATEGORY
        difficulty = DifficultyTier.BEGINNER
        concepts: list[str] = []

        rule = self._match_rule(text, resolved)
        if rule is not None:
            category = rule.category
            concepts.append(rule.concept)
            difficulty = rule.resolve_difficulty(text, difficulty)

        difficulty = self._apply_overlay(text, difficulty)

        logger.debug(
            f"Classified question under {resolved.value} as {category} "
            f"({difficulty.value}, concepts={concepts})"
        )

        return Classification(
            category=category,
            difficulty=difficulty,
            concepts=tuple(concepts),
        )

    def _match_rule(self, text: str, theme: Theme) -> CategoryRule | None:
        """Return the first rule for the theme whose triggers appear in text."""
        for rule in self.theme_rules.get(theme, ()):
            if rule.matches(text):
                return rule
        return None

    def _apply_overlay(self, text: str, difficulty: DifficultyTier) -> DifficultyTier:
        # Overlay wins over theme rules, even when it lowers the difficulty.
        for cue in self.overlay:
            if cue.matches(text):
                return cue.difficulty
        return difficulty


_default_classifier = QuestionClassifier()


def classify(content: str, theme: Theme | str | None) -> Classification:
    """Classify a question with the built-in rule tables."""
    return _default_classifier.classify(content, theme)
