"""
Unit tests for introduction suggestions.
"""

import pytest

from tutor_insights.analysis import DifficultyTier, SuggestionGenerator, suggest
from tutor_insights.analysis.suggestions import (
    HIGH_FREQUENCY_NOTE,
    INTRODUCTION_TABLE,
    LOW_FREQUENCY_NOTE,
    MODERATE_FREQUENCY_NOTE,
    normalize_concept_key,
)

CALCULUS_BEGINNER = (
    "Start with the concept of limits and rates of change. "
    "Use visual examples like velocity and slopes."
)


class TestFrequencyBands:

    @pytest.mark.parametrize(
        "frequency, note",
        [
            (11, HIGH_FREQUENCY_NOTE),
            (50, HIGH_FREQUENCY_NOTE),
            (10, MODERATE_FREQUENCY_NOTE),
            (6, MODERATE_FREQUENCY_NOTE),
            (5, LOW_FREQUENCY_NOTE),
            (1, LOW_FREQUENCY_NOTE),
            (0, LOW_FREQUENCY_NOTE),
        ],
    )
    def test_note_by_frequency(self, frequency, note):
        assert suggest("calculus", DifficultyTier.BEGINNER, frequency) == CALCULUS_BEGINNER + note


class TestLookup:

    def test_difficulty_selects_sentence(self):
        text = suggest("quantum-algorithms", DifficultyTier.INTERMEDIATE, 1)

        assert text.startswith("Introduce Grover's search algorithm")

    @pytest.mark.parametrize("concept", ["Linear Algebra", "linear  algebra", "LINEAR-ALGEBRA"])
    def test_display_names_are_normalized(self, concept):
        text = suggest(concept, DifficultyTier.BEGINNER, 1)

        assert text.startswith("Start with vectors as arrows")

    def test_unknown_concept_falls_back_to_template(self):
        text = suggest("number-theory", DifficultyTier.ADVANCED, 3)

        assert text == (
            "Based on 3 student questions, consider introducing number-theory "
            "with advanced-level explanations and plenty of examples."
        )

    def test_template_keeps_raw_concept(self):
        text = suggest("Error Correction", DifficultyTier.BEGINNER, 12)

        assert "introducing Error Correction with beginner-level" in text

    def test_table_is_complete(self):
        assert len(INTRODUCTION_TABLE) == 10
        for concept, intros in INTRODUCTION_TABLE.items():
            assert set(intros) == set(DifficultyTier), concept

    def test_custom_table(self):
        generator = SuggestionGenerator(
            table={"mechanics": {DifficultyTier.BEGINNER: "Start with Newton's laws."}}
        )

        assert generator.suggest("mechanics", DifficultyTier.BEGINNER, 2) == (
            "Start with Newton's laws." + LOW_FREQUENCY_NOTE
        )
        assert generator.suggest("mechanics", DifficultyTier.ADVANCED, 2).startswith("Based on 2")


def test_normalize_concept_key():
    assert normalize_concept_key("Quantum Gates") == "quantum-gates"
    assert normalize_concept_key("  Quantum \t Gates ") == "quantum-gates"
    assert normalize_concept_key("calculus") == "calculus"
