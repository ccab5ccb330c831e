"""Core abstractions: solutions, evolution policies and the evolution engine."""

from genetic_algorithms.core.solution import Solution
from genetic_algorithms.core.policy import EvolutionContext, EvolutionPolicy
from genetic_algorithms.core.engine import (
    EvolutionEngine,
    EvolutionResult,
    GenerationStats,
    Observer,
)

__all__ = [
    "Solution",
    "EvolutionContext",
    "EvolutionPolicy",
    "EvolutionEngine",
    "EvolutionResult",
    "GenerationStats",
    "Observer",
]
