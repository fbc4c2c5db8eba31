"""
Keyword rule tables for question classification.

Each theme owns an ordered tuple of category rules. Order is priority:
the classifier stops at the first rule whose triggers appear in the
question. Within a rule, escalations are checked in order and the first
hit sets the difficulty.

After the theme rules, DIFFICULTY_OVERLAY is applied to every question
regardless of theme, and it overwrites whatever difficulty the theme
rule produced.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .models import DifficultyTier, Theme


@dataclass(frozen=True)
class Escalation:
    """Sub-trigger that forces a difficulty inside a matched rule."""

    triggers: tuple[str, ...]
    difficulty: DifficultyTier

    def matches(self, text: str) -> bool:
        return any(trigger in text for trigger in self.triggers)


@dataclass(frozen=True)
class CategoryRule:
    """Trigger substrings mapped to a category and concept tag."""

    category: str
    concept: str
    triggers: tuple[str, ...]
    base_difficulty: DifficultyTier | None = None
    escalations: tuple[Escalation, ...] = ()

    def matches(self, text: str) -> bool:
        return any(trigger in text for trigger in self.triggers)

    def resolve_difficulty(self, text: str, current: DifficultyTier) -> DifficultyTier:
        """Difficulty after this rule matched, before the generic overlay."""
        for escalation in self.escalations:
            if escalation.matches(text):
                return escalation.difficulty
        if self.base_difficulty is not None:
            return self.base_difficulty
        return current


# =============================================================================
# Theme Rule Tables
# =============================================================================

PURE_MATH_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        category="Calculus",
        concept="calculus",
        triggers=("derivative", "integral"),
        escalations=(
            Escalation(("partial", "multiple"), DifficultyTier.ADVANCED),
            Escalation(("chain rule", "substitution"), DifficultyTier.INTERMEDIATE),
        ),
    ),
    CategoryRule(
        category="Linear Algebra",
        concept="linear-algebra",
        triggers=("matrix", "vector"),
        escalations=(
            Escalation(("eigenvalue", "determinant"), DifficultyTier.ADVANCED),
            Escalation(("multiply", "inverse"), DifficultyTier.INTERMEDIATE),
        ),
    ),
    CategoryRule(
        category="Algebra",
        concept="algebra",
        triggers=("equation", "solve"),
        escalations=(
            Escalation(("quadratic", "polynomial"), DifficultyTier.INTERMEDIATE),
        ),
    ),
    CategoryRule(
        category="Number Theory",
        concept="number-theory",
        triggers=("prime", "divisible"),
        escalations=(
            Escalation(("theorem", "proof"), DifficultyTier.ADVANCED),
        ),
    ),
)

APPLIED_MATH_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        category="Probability",
        concept="probability",
        triggers=("probability", "random"),
        escalations=(
            Escalation(("distribution", "bayesian"), DifficultyTier.ADVANCED),
        ),
    ),
    CategoryRule(
        category="Statistics",
        concept="statistics",
        triggers=("statistics", "mean", "median"),
        escalations=(
            Escalation(("regression", "hypothesis"), DifficultyTier.INTERMEDIATE),
        ),
    ),
)

QUANTUM_COMPUTING_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        category="Qubits",
        concept="qubits",
        triggers=("qubit", "quantum bit"),
        escalations=(
            Escalation(("superposition", "entanglement"), DifficultyTier.INTERMEDIATE),
        ),
    ),
    CategoryRule(
        category="Quantum Gates",
        concept="quantum-gates",
        triggers=("gate", "circuit"),
        escalations=(
            Escalation(("cnot", "hadamard"), DifficultyTier.INTERMEDIATE),
        ),
    ),
    CategoryRule(
        category="Quantum Algorithms",
        concept="quantum-algorithms",
        triggers=("algorithm", "shor", "grover"),
        base_difficulty=DifficultyTier.ADVANCED,
    ),
    CategoryRule(
        category="Superposition",
        concept="superposition",
        triggers=("superposition",),
        base_difficulty=DifficultyTier.INTERMEDIATE,
    ),
    CategoryRule(
        category="Entanglement",
        concept="entanglement",
        triggers=("entanglement",),
        base_difficulty=DifficultyTier.INTERMEDIATE,
    ),
    CategoryRule(
        category="Error Correction",
        concept="error-correction",
        triggers=("error", "correction"),
        base_difficulty=DifficultyTier.ADVANCED,
    ),
)

# Every Theme member has an entry; physics and the fallback have no rules.
THEME_RULES: Mapping[Theme, tuple[CategoryRule, ...]] = MappingProxyType({
    Theme.PURE_MATH: PURE_MATH_RULES,
    Theme.APPLIED_MATH: APPLIED_MATH_RULES,
    Theme.PHYSICS: (),
    Theme.QUANTUM_COMPUTING: QUANTUM_COMPUTING_RULES,
    Theme.GENERAL: (),
})


# =============================================================================
# Generic Difficulty Overlay
# =============================================================================

DIFFICULTY_OVERLAY: tuple[Escalation, ...] = (
    Escalation(("prove", "theorem", "abstract"), DifficultyTier.ADVANCED),
    Escalation(("why", "explain", "derive"), DifficultyTier.INTERMEDIATE),
    Escalation(("what", "define", "basic"), DifficultyTier.BEGINNER),
)
