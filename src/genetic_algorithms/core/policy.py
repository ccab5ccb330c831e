"""
Evolution policies and the read-only context they operate on.

An evolution policy supplies the problem-specific decisions the engine
delegates:

- produce_initial_population: Build the first generation
- should_stop: Decide whether the run is over
- select_parents: Choose two members of the current population to recombine

Policies are injected into the engine rather than derived from it. Each hook
receives an EvolutionContext, a read-only view of the engine state.
"""

from __future__ import annotations

import copy
import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterable, Tuple

from genetic_algorithms.core.solution import Solution

if TYPE_CHECKING:
    from genetic_algorithms.core.engine import EvolutionEngine


class EvolutionContext:
    """
    Read-only view of an engine, handed to policy hooks only.

    The population is exposed as a tuple of the live members, so a policy can
    return parents by identity. Policies must treat those members as read-only;
    anything leaving the policy should go through EvolutionPolicy.project().

    The random source is the engine's own instance. It is not safe for
    concurrent use and must only be used from the thread driving the run.
    """

    __slots__ = ("_engine",)

    def __init__(self, engine: "EvolutionEngine"):
        self._engine = engine

    @property
    def population(self) -> Tuple[Solution, ...]:
        return self._engine._population

    @property
    def population_size(self) -> int:
        return self._engine.population_size

    @property
    def mutation_probability(self) -> float:
        return self._engine.mutation_probability

    @property
    def current_generation(self) -> int:
        return self._engine.current_generation

    @property
    def rng(self) -> random.Random:
        return self._engine.rng


class EvolutionPolicy(ABC):
    """
    Abstract base class for the pluggable decisions of a genetic algorithm.

    The engine checks every postcondition below and raises InvalidStateError
    when one is broken, so an incorrect policy aborts the run instead of
    silently corrupting the population.
    """

    @abstractmethod
    def produce_initial_population(self, context: EvolutionContext) -> Iterable[Solution]:
        """
        Build the first generation.

        Called once, while the engine is being constructed. At that point
        context.population is still empty.

        Returns:
            Exactly context.population_size solutions.
        """
        pass

    @abstractmethod
    def should_stop(self, context: EvolutionContext) -> bool:
        """
        Check whether the run is finished.

        Evaluated once before every generation advance. Must not have side
        effects: calling it repeatedly without an intervening advance returns
        the same answer.
        """
        pass

    @abstractmethod
    def select_parents(self, context: EvolutionContext) -> Tuple[Solution, Solution]:
        """
        Choose the two solutions whose genomes are recombined next.

        Returns:
            Two members of context.population, compared by identity.
        """
        pass

    def project(self, solution: Solution) -> Any:
        """
        Convert a solution into a value that is safe to hand out.

        Used by EvolutionEngine.snapshot(). The default returns a deep copy;
        policies with a primitive representation of their genome should
        override this.
        """
        return copy.deepcopy(solution)
