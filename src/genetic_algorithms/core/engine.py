"""Evolution engine driving a fixed-size population through generations."""

from __future__ import annotations

import math
import numbers
import random
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

from genetic_algorithms.config import EngineConfig
from genetic_algorithms.core.policy import EvolutionContext, EvolutionPolicy
from genetic_algorithms.core.solution import Solution
from genetic_algorithms.errors import InvalidArgumentError, InvalidStateError
from genetic_algorithms.utils.logging import log_event, log_generation, LogLevel


@dataclass
class GenerationStats:
    """Bookkeeping for one completed generation advance."""

    generation: int
    parent_pairs: int
    offspring: int       # Children produced, before truncation
    discarded: int       # Surplus children dropped by truncation
    mutations: int


@dataclass
class EvolutionResult:
    """Result of a complete run."""

    generations: int
    history: List[GenerationStats] = field(default_factory=list)


Observer = Callable[["EvolutionEngine"], None]


class EvolutionEngine:
    """
    Generic engine for genetic algorithms with a fixed population size.

    The engine owns the population and the generation counter. Everything
    problem-specific is delegated to an injected EvolutionPolicy (initial
    population, stopping condition, parent selection) and to the Solution
    objects themselves (mutation and recombination).

    One generation advance:
    1. Ask the policy for two parents and check both belong to the population
    2. Combine them into one or more children
    3. Mutate each child with probability mutation_probability
    4. Repeat until at least population_size children exist
    5. Keep the first population_size children as the new population

    Invariants, checked on every assignment:
    - len(population) == population_size
    - current_generation starts at 0 and grows by exactly 1 per advance

    A failed check raises InvalidStateError and leaves the previous population
    and generation counter untouched.

    The random source is shared with the policy through the context. It is a
    single-owner handle: the engine and the policy use it in turn from one
    thread, never concurrently.

    Example:
        >>> engine = EvolutionEngine(policy, population_size=100,
        ...                          mutation_probability=0.1, seed=7)
        >>> result = engine.run(lambda e: print(e.current_generation))
        >>> print(result.generations)
    """

    def __init__(
        self,
        policy: EvolutionPolicy,
        population_size: int,
        mutation_probability: float,
        seed: int | None = None,
        rng: random.Random | None = None,
    ):
        """
        Validate the arguments and build the initial population.

        Args:
            policy: Supplies the initial population, stopping condition and
                parent selection.
            population_size: Number of solutions in every generation, at least 2.
            mutation_probability: Chance, between 0.0 and 1.0 inclusive, that
                each new child is mutated.
            seed: Seed for a new random source. None seeds it from the system.
            rng: An existing random source to share instead of creating one.
                Cannot be combined with seed.

        Raises:
            InvalidArgumentError: If any argument is out of range.
            InvalidStateError: If the policy's initial population is invalid.
        """
        if not isinstance(policy, EvolutionPolicy):
            raise InvalidArgumentError(
                f"Invalid policy - shall be an EvolutionPolicy: {policy!r}"
            )

        if isinstance(population_size, bool) or not isinstance(population_size, numbers.Integral):
            raise InvalidArgumentError(
                f"Invalid population size - shall be an integer: {population_size!r}"
            )
        if population_size < 2:
            raise InvalidArgumentError(
                f"Invalid population size - shall be greater than 1: {population_size}"
            )

        if isinstance(mutation_probability, bool) or not isinstance(mutation_probability, numbers.Real):
            raise InvalidArgumentError(
                f"Invalid mutation probability - shall be a real number: {mutation_probability!r}"
            )
        if math.isnan(mutation_probability) or not 0.0 <= mutation_probability <= 1.0:
            raise InvalidArgumentError(
                f"Invalid mutation probability - shall be in range <0;1>: {mutation_probability}"
            )

        if rng is not None:
            if seed is not None:
                raise InvalidArgumentError("Specify either a seed or a random source, not both")
            if not isinstance(rng, random.Random):
                raise InvalidArgumentError(
                    f"Invalid random source - shall be a random.Random instance: {rng!r}"
                )

        self._policy = policy
        self._population_size = int(population_size)
        self._mutation_probability = float(mutation_probability)
        self._rng = rng if rng is not None else random.Random(seed)
        self._current_generation = 0
        self._population: Tuple[Solution, ...] = ()
        self._context = EvolutionContext(self)

        self._install_population(
            policy.produce_initial_population(self._context),
            stage="initial population",
        )

    @classmethod
    def from_config(
        cls,
        policy: EvolutionPolicy,
        config: EngineConfig,
        rng: random.Random | None = None,
    ) -> "EvolutionEngine":
        """Build an engine from an EngineConfig section."""
        return cls(
            policy,
            population_size=config.population_size,
            mutation_probability=config.mutation_probability,
            seed=config.seed if rng is None else None,
            rng=rng,
        )

    @property
    def policy(self) -> EvolutionPolicy:
        return self._policy

    @property
    def population_size(self) -> int:
        return self._population_size

    @property
    def mutation_probability(self) -> float:
        return self._mutation_probability

    @property
    def current_generation(self) -> int:
        return self._current_generation

    @property
    def rng(self) -> random.Random:
        return self._rng

    def snapshot(self) -> list:
        """
        Return the policy's projection of every population member, in order.

        This is the only way to read the population from outside: live members
        are reachable from policy hooks alone.
        """
        return [self._policy.project(solution) for solution in self._population]

    def _install_population(self, solutions: Iterable[Solution], stage: str) -> None:
        # Materialize first, so generators and lazy views are sized correctly.
        population = tuple(solutions)

        if len(population) != self._population_size:
            raise InvalidStateError(
                f"Invalid size of {stage} - shall be equal to {self._population_size}: {len(population)}"
            )

        for member in population:
            if not isinstance(member, Solution):
                raise InvalidStateError(f"Member of {stage} is not a Solution: {member!r}")

        self._population = population

    def _is_member(self, candidate: object) -> bool:
        return any(member is candidate for member in self._population)

    def _select_parents(self) -> Tuple[Solution, Solution]:
        parents = self._policy.select_parents(self._context)
        try:
            mother, father = parents
        except (TypeError, ValueError):
            raise InvalidStateError(
                f"Parent selection shall return exactly two solutions: {parents!r}"
            ) from None

        # Selection is implemented outside the engine, so it is not trusted.
        for role, parent in (("mother", mother), ("father", father)):
            if not self._is_member(parent):
                raise InvalidStateError(
                    f"Selected {role} does not belong to the current population: {parent!r}"
                )

        return mother, father

    def advance_generation(self) -> GenerationStats:
        """
        Replace the population with a new generation of offspring.

        Normally driven by run(). Exposed so callers can step a run manually.

        Returns:
            Statistics about the generation that was just produced.

        Raises:
            InvalidStateError: If the policy or a solution breaks its
                contract. The current population is left unchanged.
        """
        offspring: List[Solution] = []
        parent_pairs = 0
        mutations = 0

        while len(offspring) < self._population_size:
            mother, father = self._select_parents()
            parent_pairs += 1

            children = list(mother.combine_with(father))
            if not children:
                raise InvalidStateError(
                    f"Combination produced no offspring: {mother!r} x {father!r}"
                )
            for child in children:
                if not isinstance(child, Solution):
                    raise InvalidStateError(f"Offspring is not a Solution: {child!r}")

            for child in children:
                if self._rng.random() < self._mutation_probability:
                    child.mutate()
                    mutations += 1

            offspring.extend(children)

        produced = len(offspring)

        # First produced, first kept.
        self._install_population(offspring[:self._population_size], stage="new population")
        self._current_generation += 1

        stats = GenerationStats(
            generation=self._current_generation,
            parent_pairs=parent_pairs,
            offspring=produced,
            discarded=produced - self._population_size,
            mutations=mutations,
        )
        log_generation(
            gen=stats.generation,
            offspring=stats.offspring,
            discarded=stats.discarded,
            mutations=stats.mutations,
        )
        return stats

    def run(self, observer: Optional[Observer] = None) -> EvolutionResult:
        """
        Evolve the population until the policy says to stop.

        The stopping condition is checked before every generation, so a
        policy that is already satisfied produces no generation at all. The
        caller is responsible for a policy that eventually stops.

        Args:
            observer: Optional callable invoked with this engine after every
                completed generation, on the calling thread.

        Returns:
            EvolutionResult with the final generation count and per-generation
            statistics of this run.
        """
        history: List[GenerationStats] = []

        log_event(
            "RUN_START",
            level=LogLevel.NORMAL,
            population_size=self._population_size,
            mutation_probability=self._mutation_probability,
            generation=self._current_generation,
        )

        while not self._policy.should_stop(self._context):
            history.append(self.advance_generation())

            if observer is not None:
                observer(self)

        log_event("RUN_END", level=LogLevel.NORMAL, generations=self._current_generation)

        return EvolutionResult(generations=self._current_generation, history=history)
