"""Evolution policy for the color matching problem."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence, Tuple

from genetic_algorithms.color_matching.color import (
    ColorSolution,
    channel_fitness,
    format_channels,
    validate_channels,
)
from genetic_algorithms.config import ColorMatchingConfig
from genetic_algorithms.core.policy import EvolutionContext, EvolutionPolicy
from genetic_algorithms.errors import InvalidArgumentError, InvalidStateError
from genetic_algorithms.selection import get_selection_strategy, select_pair

if TYPE_CHECKING:
    from genetic_algorithms.core.engine import EvolutionEngine


class ColorMatchingPolicy(EvolutionPolicy):
    """
    Evolves random colors towards a hidden reference color.

    - Initial population: uniformly random colors
    - Parent selection: roulette wheel (fitness-proportional) by default, or
      tournament; the two parents are always distinct solutions
    - Stopping rule: a fixed number of generations

    The reference color is drawn from the engine's random source right after
    the initial population, unless one is given explicitly. The algorithm
    never sees it directly; it only shapes the fitness scores.

    A policy holds the reference of the engine it initialized, so it serves
    exactly one engine. The query methods (scores, best_color, best_channels,
    best_fitness) take that engine and read its snapshot, never live members.

    Example:
        >>> policy = ColorMatchingPolicy(generation_limit=100)
        >>> engine = EvolutionEngine(policy, 1000, 0.1, seed=1)
        >>> engine.run()
        >>> print(policy.reference_color, policy.best_color(engine))
    """

    def __init__(
        self,
        generation_limit: int,
        selection: str = "roulette",
        tournament_size: int = 3,
        reference: Sequence[int] | None = None,
    ):
        if isinstance(generation_limit, bool) or not isinstance(generation_limit, int) or generation_limit < 1:
            raise InvalidArgumentError(
                f"Invalid generation limit - shall be a positive integer: {generation_limit!r}"
            )

        kwargs = {"tournament_size": tournament_size} if selection == "tournament" else {}
        try:
            self.selection = get_selection_strategy(selection, **kwargs)
        except ValueError as e:
            raise InvalidArgumentError(str(e)) from e

        if reference is not None:
            # The color itself is built once a random source exists.
            reference = tuple(validate_channels(reference))

        self.generation_limit = generation_limit
        self._reference_channels = reference
        self._reference: ColorSolution | None = None

    @classmethod
    def from_config(cls, config: ColorMatchingConfig) -> "ColorMatchingPolicy":
        return cls(
            generation_limit=config.generation_limit,
            selection=config.selection,
            tournament_size=config.tournament_size,
        )

    @property
    def reference(self) -> ColorSolution:
        if self._reference is None:
            raise InvalidStateError("Reference color is not chosen before the initial population exists")
        return self._reference

    @property
    def reference_color(self) -> str:
        return str(self.reference)

    def produce_initial_population(self, context: EvolutionContext) -> List[ColorSolution]:
        if self._reference is not None:
            raise InvalidStateError(
                "Color matching policy already serves an engine - create a new policy per engine"
            )

        population = [ColorSolution.random(context.rng) for _ in range(context.population_size)]

        if self._reference_channels is not None:
            self._reference = ColorSolution(self._reference_channels, context.rng)
        else:
            self._reference = ColorSolution.random(context.rng)

        return population

    def select_parents(self, context: EvolutionContext) -> Tuple[ColorSolution, ColorSolution]:
        reference = self.reference
        scores = [solution.fitness(reference) for solution in context.population]
        return select_pair(self.selection, context.population, scores, context.rng)

    def should_stop(self, context: EvolutionContext) -> bool:
        return context.current_generation >= self.generation_limit

    def project(self, solution: ColorSolution) -> Tuple[int, ...]:
        return solution.channels

    def _snapshot(self, engine: "EvolutionEngine") -> List[Tuple[int, ...]]:
        if engine.policy is not self:
            raise InvalidArgumentError("Engine is driven by a different policy")
        return engine.snapshot()

    def scores(self, engine: "EvolutionEngine") -> List[int]:
        """Fitness of every member of the engine's population, in order."""
        reference = self.reference.channels
        return [channel_fitness(reference, channels) for channels in self._snapshot(engine)]

    def _best(self, engine: "EvolutionEngine") -> Tuple[Tuple[int, ...], int]:
        snapshot = self._snapshot(engine)
        reference = self.reference.channels
        scores = [channel_fitness(reference, channels) for channels in snapshot]
        # Last of the equally best, matching a stable ascending sort.
        best_index = max(range(len(scores)), key=lambda i: (scores[i], i))
        return snapshot[best_index], scores[best_index]

    def best_color(self, engine: "EvolutionEngine") -> str:
        return format_channels(self._best(engine)[0])

    def best_channels(self, engine: "EvolutionEngine") -> Tuple[int, ...]:
        return self._best(engine)[0]

    def best_fitness(self, engine: "EvolutionEngine") -> int:
        return self._best(engine)[1]
