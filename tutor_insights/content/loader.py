"""
Question file loader.

Reads exported chat questions from a JSON file and turns them into
Question records, classifying any entry that arrives without concepts.

Accepted entry shapes:
    "What is a qubit?"
    {"content": "...", "theme": "physics"}
    {"content": "...", "category": "...", "difficulty": "...", "concepts": [...]}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from ..analysis.classifier import QuestionClassifier
from ..analysis.models import DifficultyTier, Question, Theme


class QuestionFileError(ValueError):
    """Raised when a question file cannot be read or has the wrong shape."""


class QuestionLoader:
    """Load question snapshots from JSON exports."""

    def __init__(
        self,
        default_theme: Theme | str = Theme.PURE_MATH,
        classifier: QuestionClassifier | None = None,
    ):
        """
        Initialize loader.

        Args:
            default_theme: Theme for entries that do not name one
            classifier: Classifier for entries without concepts
        """
        self.default_theme = Theme.parse(default_theme)
        self.classifier = classifier or QuestionClassifier()

    def load_file(self, path: Path | str) -> list[Question]:
        """
        Load every valid question in a JSON file.

        Raises:
            QuestionFileError: If the file is missing, not JSON, or not a list
        """
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise QuestionFileError(f"Question file not found: {path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise QuestionFileError(f"Could not read {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise QuestionFileError(f"Invalid JSON in {path}: {e}") from e

        return self.load_entries(raw, source=str(path))

    def load_entries(self, raw: Any, source: str = "<memory>") -> list[Question]:
        """Convert already-decoded JSON into questions, skipping bad entries."""
        if not isinstance(raw, list):
            raise QuestionFileError(f"Expected a JSON list of questions in {source}")

        questions = []
        for index, entry in enumerate(raw):
            question = self._parse_entry(entry)
            if question is None:
                logger.warning(f"Skipping entry {index} in {source}: no usable content")
                continue
            questions.append(question)

        logger.debug(f"Loaded {len(questions)} questions from {source}")
        return questions

    def _parse_entry(self, entry: Any) -> Question | None:
        if isinstance(entry, str):
            entry = {"content": entry}
        if not isinstance(entry, dict):
            return None

        content = entry.get("content")
        if not isinstance(content, str) or not content.strip():
            return None

        theme = Theme.parse(entry.get("theme") or self.default_theme)
        extra: dict[str, Any] = {}
        if entry.get("id"):
            extra["id"] = str(entry["id"])
        if entry.get("user_id"):
            extra["user_id"] = str(entry["user_id"])

        concepts = entry.get("concepts")
        if isinstance(concepts, list):
            # Pre-classified export: keep as-is
            return Question(
                content=content,
                theme=theme,
                category=entry.get("category"),
                difficulty=DifficultyTier.parse(entry.get("difficulty")) if entry.get("difficulty") else None,
                concepts=tuple(str(c) for c in concepts),
                **extra,
            )

        classification = self.classifier.classify(content, theme)
        return Question.from_classification(content, theme, classification, **extra)


def load_questions(path: Path | str, default_theme: Theme | str = Theme.PURE_MATH) -> list[Question]:
    """Load and classify questions from a JSON file."""
    return QuestionLoader(default_theme=default_theme).load_file(path)
