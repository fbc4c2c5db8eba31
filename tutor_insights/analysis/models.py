"""
Question Analysis Data Models.

These models represent the data flowing between the chat layer and the
analysis engine: themes, difficulty tiers, classified questions and the
per-concept insights derived from them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import uuid4


# =============================================================================
# Enums
# =============================================================================


class Theme(str, Enum):
    """Subject domain a learning session runs under."""
    PURE_MATH = "pure-math"
    APPLIED_MATH = "applied-math"
    PHYSICS = "physics"
    QUANTUM_COMPUTING = "quantum-computing"
    GENERAL = "general"  # Fallback for unknown theme ids

    @classmethod
    def parse(cls, value: str | Theme | None) -> Theme:
        """Resolve an exact theme id; anything else, including case variants, is GENERAL."""
        if isinstance(value, Theme):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.GENERAL


class DifficultyTier(str, Enum):
    """How demanding a question is."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @classmethod
    def parse(cls, value: str | DifficultyTier | None) -> DifficultyTier:
        """Resolve a tier name; missing or unknown values count as beginner."""
        if isinstance(value, DifficultyTier):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.BEGINNER


# =============================================================================
# Classification Models
# =============================================================================


@dataclass(frozen=True)
class Classification:
    """Result of classifying a single question."""

    category: str = "General"
    difficulty: DifficultyTier = DifficultyTier.BEGINNER
    concepts: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "difficulty": self.difficulty.value,
            "concepts": list(self.concepts),
        }


@dataclass(frozen=True)
class Question:
    """
    A question submitted by a student.

    Owned by the caller. Classification fields stay None until the
    question has been run through the classifier.
    """
    content: str
    theme: Theme
    id: str = field(default_factory=lambda: str(uuid4()))
    user_id: str = "student-1"
    timestamp: datetime = field(default_factory=datetime.now)

    # Classification
    category: str | None = None
    difficulty: DifficultyTier | None = None
    concepts: tuple[str, ...] | None = None

    @classmethod
    def from_classification(
        cls,
        content: str,
        theme: Theme,
        classification: Classification,
        **kwargs: Any,
    ) -> Question:
        """Build a question record carrying a classification result."""
        return cls(
            content=content,
            theme=theme,
            category=classification.category,
            difficulty=classification.difficulty,
            concepts=classification.concepts,
            **kwargs,
        )

    @property
    def is_classified(self) -> bool:
        return self.concepts is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "content": self.content,
            "theme": self.theme.value,
            "user_id": self.user_id,
            "timestamp": self.timestamp.isoformat(),
            "category": self.category,
            "difficulty": self.difficulty.value if self.difficulty else None,
            "concepts": list(self.concepts) if self.concepts is not None else None,
        }


# =============================================================================
# Insight Models
# =============================================================================


@dataclass(frozen=True)
class TopicInsight:
    """
    Aggregate over every question tagged with one concept.

    Recomputed on every analysis call; the concept key is its only identity.
    """
    concept: str  # Display name, e.g. "Linear Algebra"
    frequency: int
    difficulty: DifficultyTier  # Mode of the bucket's difficulties
    common_questions: tuple[str, ...]
    suggested_introduction: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "concept": self.concept,
            "frequency": self.frequency,
            "difficulty": self.difficulty.value,
            "common_questions": list(self.common_questions),
            "suggested_introduction": self.suggested_introduction,
        }
