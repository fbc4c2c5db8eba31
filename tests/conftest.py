"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tutor_insights.analysis import DifficultyTier, Question, Theme  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (in-process API)")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


def make_question(
    content: str,
    concepts: tuple[str, ...] = (),
    difficulty: DifficultyTier | None = DifficultyTier.BEGINNER,
    category: str | None = None,
    theme: Theme = Theme.PURE_MATH,
) -> Question:
    """Build a pre-classified question without running the classifier."""
    return Question(
        content=content,
        theme=theme,
        category=category,
        difficulty=difficulty,
        concepts=concepts,
    )


@pytest.fixture
def question_factory():
    """Factory for pre-classified questions."""
    return make_question


@pytest.fixture
def calculus_questions():
    """Three calculus questions with difficulties [beginner, beginner, advanced]."""
    return [
        make_question("What is a derivative?", ("calculus",), DifficultyTier.BEGINNER, "Calculus"),
        make_question("What is an integral?", ("calculus",), DifficultyTier.BEGINNER, "Calculus"),
        make_question("Prove the partial derivative rule", ("calculus",), DifficultyTier.ADVANCED, "Calculus"),
    ]


@pytest.fixture
def sample_export(tmp_path):
    """A JSON question export mixing raw strings, objects and pre-classified entries."""
    import json

    path = tmp_path / "questions.json"
    path.write_text(
        json.dumps([
            "What is the derivative of x^2?",
            {"content": "How do I multiply a matrix by a vector?"},
            {"content": "Explain Shor's algorithm", "theme": "quantum-computing"},
            {
                "content": "Imported question",
                "category": "Statistics",
                "difficulty": "advanced",
                "concepts": ["statistics"],
            },
            {"content": "   "},
            42,
        ]),
        encoding="utf-8",
    )
    return path
