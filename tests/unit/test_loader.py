"""
Unit tests for the question file loader.
"""

import json

import pytest

from tutor_insights.analysis import DifficultyTier, Theme
from tutor_insights.content import QuestionFileError, QuestionLoader, load_questions


class TestLoadFile:

    def test_mixed_entries(self, sample_export):
        questions = load_questions(sample_export, default_theme="pure-math")

        assert [q.content for q in questions] == [
            "What is the derivative of x^2?",
            "How do I multiply a matrix by a vector?",
            "Explain Shor's algorithm",
            "Imported question",
        ]

    def test_unclassified_entries_are_classified(self, sample_export):
        questions = load_questions(sample_export, default_theme="pure-math")

        assert questions[0].concepts == ("calculus",)
        assert questions[1].category == "Linear Algebra"
        assert questions[1].difficulty == DifficultyTier.INTERMEDIATE
        assert questions[2].theme == Theme.QUANTUM_COMPUTING
        assert questions[2].concepts == ("quantum-algorithms",)

    def test_preclassified_entries_kept(self, sample_export):
        imported = load_questions(sample_export)[3]

        assert imported.category == "Statistics"
        assert imported.difficulty == DifficultyTier.ADVANCED
        assert imported.concepts == ("statistics",)

    def test_ids_preserved(self, tmp_path):
        path = tmp_path / "q.json"
        path.write_text(json.dumps([{"id": "abc", "content": "What is a prime?"}]), encoding="utf-8")

        assert load_questions(path)[0].id == "abc"

    def test_missing_file(self, tmp_path):
        with pytest.raises(QuestionFileError, match="not found"):
            load_questions(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(QuestionFileError, match="Invalid JSON"):
            load_questions(path)

    def test_top_level_must_be_list(self, tmp_path):
        path = tmp_path / "object.json"
        path.write_text(json.dumps({"content": "What is a qubit?"}), encoding="utf-8")

        with pytest.raises(QuestionFileError, match="list"):
            load_questions(path)


def test_load_entries_uses_default_theme():
    loader = QuestionLoader(default_theme="applied-math")

    questions = loader.load_entries(["What is the mean?"])

    assert questions[0].theme == Theme.APPLIED_MATH
    assert questions[0].category == "Statistics"


def test_question_file_error_is_value_error():
    assert issubclass(QuestionFileError, ValueError)
