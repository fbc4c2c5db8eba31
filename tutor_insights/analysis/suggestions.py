"""
Teaching suggestions for topic insights.

Canned introductions per concept and difficulty, followed by a note on
how often students ask about the topic.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .models import DifficultyTier

_B = DifficultyTier.BEGINNER
_I = DifficultyTier.INTERMEDIATE
_A = DifficultyTier.ADVANCED

INTRODUCTION_TABLE: Mapping[str, Mapping[DifficultyTier, str]] = MappingProxyType({
    "calculus": {
        _B: "Start with the concept of limits and rates of change. Use visual examples like velocity and slopes.",
        _I: "Build on derivatives by exploring the fundamental theorem of calculus and integration techniques.",
        _A: "Introduce multivariable calculus concepts and advanced integration methods like Green's theorem.",
    },
    "algebra": {
        _B: "Begin with basic equation solving and variable manipulation using concrete examples.",
        _I: "Introduce polynomial operations and factoring with real-world applications.",
        _A: "Explore abstract algebraic structures and advanced equation solving techniques.",
    },
    "linear-algebra": {
        _B: "Start with vectors as arrows in 2D/3D space and basic vector operations.",
        _I: "Introduce matrices as transformations and explore matrix operations.",
        _A: "Cover eigenvalues, eigenvectors, and advanced matrix decomposition techniques.",
    },
    "probability": {
        _B: "Use simple examples like coin flips and dice rolls to introduce basic probability.",
        _I: "Explore conditional probability and introduce common probability distributions.",
        _A: "Cover advanced topics like Bayesian inference and stochastic processes.",
    },
    "statistics": {
        _B: "Start with descriptive statistics using real datasets and visualizations.",
        _I: "Introduce hypothesis testing and confidence intervals with practical examples.",
        _A: "Cover advanced statistical modeling and machine learning concepts.",
    },
    "qubits": {
        _B: "Start with classical bits vs quantum bits, introducing the concept of superposition with simple analogies.",
        _I: "Explore qubit states using Bloch sphere representation and basic quantum measurements.",
        _A: "Cover multi-qubit systems, quantum state manipulation, and decoherence effects.",
    },
    "quantum-gates": {
        _B: "Introduce basic single-qubit gates (X, Y, Z, H) using circuit diagrams and simple operations.",
        _I: "Cover two-qubit gates like CNOT and explore how gates create quantum circuits.",
        _A: "Discuss universal gate sets, gate decomposition, and quantum circuit optimization.",
    },
    "superposition": {
        _B: "Use analogies like spinning coins to explain quantum superposition concepts.",
        _I: "Introduce mathematical formalism with |0⟩ + |1⟩ states and measurement probabilities.",
        _A: "Cover superposition in multi-qubit systems and interference effects.",
    },
    "entanglement": {
        _B: "Explain quantum entanglement using simple two-particle examples and correlations.",
        _I: "Introduce Bell states and explore non-local correlations in quantum systems.",
        _A: "Cover entanglement measures, quantum teleportation, and applications in quantum protocols.",
    },
    "quantum-algorithms": {
        _B: "Start with simple quantum algorithms like Deutsch's algorithm to show quantum advantage.",
        _I: "Introduce Grover's search algorithm and its quadratic speedup over classical search.",
        _A: "Cover Shor's factoring algorithm, quantum Fourier transform, and complexity theory implications.",
    },
})

# Frequency bands for the trailing note
HIGH_FREQUENCY = 10
MODERATE_FREQUENCY = 5

HIGH_FREQUENCY_NOTE = (
    " This topic appears frequently in student questions, so consider dedicating extra time to it."
)
MODERATE_FREQUENCY_NOTE = " Students show moderate interest in this topic."
LOW_FREQUENCY_NOTE = (
    " This topic comes up occasionally - consider it as an advanced or optional topic."
)


def normalize_concept_key(concept: str) -> str:
    """Lower-case a concept and hyphenate whitespace runs: 'Linear  Algebra' -> 'linear-algebra'."""
    return "-".join(concept.lower().split())


def frequency_note(frequency: int) -> str:
    if frequency > HIGH_FREQUENCY:
        return HIGH_FREQUENCY_NOTE
    if frequency > MODERATE_FREQUENCY:
        return MODERATE_FREQUENCY_NOTE
    return LOW_FREQUENCY_NOTE


class SuggestionGenerator:
    """Produces an introduction suggestion for a concept."""

    def __init__(self, table: Mapping[str, Mapping[DifficultyTier, str]] = INTRODUCTION_TABLE):
        self.table = table

    def suggest(self, concept: str, difficulty: DifficultyTier, frequency: int) -> str:
        """
        Build the suggested introduction for a concept.

        Args:
            concept: Concept key or display name
            difficulty: Representative difficulty of the concept's questions
            frequency: Number of questions tagged with the concept

        Returns:
            Canned introduction plus frequency note, or a generic template
            for concepts without a canned entry
        """
        intros = self.table.get(normalize_concept_key(concept))
        intro = intros.get(difficulty) if intros else None

        if intro:
            return intro + frequency_note(frequency)

        return (
            f"Based on {frequency} student questions, consider introducing {concept} "
            f"with {difficulty.value}-level explanations and plenty of examples."
        )


_default_generator = SuggestionGenerator()


def suggest(concept: str, difficulty: DifficultyTier, frequency: int) -> str:
    """Suggest an introduction using the built-in table."""
    return _default_generator.suggest(concept, difficulty, frequency)
