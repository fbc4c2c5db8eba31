"""Built-in learning themes offered to students."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .models import Theme


@dataclass(frozen=True)
class ThemeInfo:
    id: Theme
    name: str
    description: str
    concepts: tuple[str, ...]
    color: str  # Hex colour used by dashboards

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id.value,
            "name": self.name,
            "description": self.description,
            "concepts": list(self.concepts),
            "color": self.color,
        }


THEME_CATALOG: tuple[ThemeInfo, ...] = (
    ThemeInfo(
        id=Theme.PURE_MATH,
        name="Pure Mathematics",
        description="Algebra, Calculus, Number Theory, Abstract Algebra",
        concepts=("algebra", "calculus", "linear-algebra", "number-theory", "abstract-algebra"),
        color="#3b82f6",
    ),
    ThemeInfo(
        id=Theme.APPLIED_MATH,
        name="Applied Mathematics",
        description="Statistics, Probability, Discrete Math, Operations Research",
        concepts=("statistics", "probability", "discrete-math", "optimization"),
        color="#10b981",
    ),
    ThemeInfo(
        id=Theme.PHYSICS,
        name="Physics",
        description="Classical Mechanics, Thermodynamics, Quantum Physics",
        concepts=("mechanics", "thermodynamics", "electromagnetism", "quantum-physics"),
        color="#8b5cf6",
    ),
    ThemeInfo(
        id=Theme.QUANTUM_COMPUTING,
        name="Quantum Computing",
        description="Qubits, Quantum Gates, Algorithms, Error Correction",
        concepts=("qubits", "quantum-gates", "superposition", "entanglement", "quantum-algorithms"),
        color="#f59e0b",
    ),
)


def list_themes() -> tuple[ThemeInfo, ...]:
    return THEME_CATALOG


def get_theme(theme_id: Theme | str) -> ThemeInfo | None:
    """Look up a catalog entry; None for unknown ids and the general fallback."""
    theme = Theme.parse(theme_id)
    for info in THEME_CATALOG:
        if info.id is theme:
            return info
    return None
