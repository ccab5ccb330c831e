"""
Parent selection strategies.

The engine leaves parent selection to the evolution policy. These strategies
are building blocks for policies that rank their solutions with a fitness
score:

- RouletteSelection: Probability proportional to fitness score
- TournamentSelection: Best of a random subset

All strategies draw from the random source passed in, so a seeded engine
produces the same selections on every run.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def _available_indices(population: Sequence, scores: Sequence[float], exclude: object | None) -> List[int]:
    if len(population) != len(scores):
        raise ValueError(
            f"Population and scores have mismatched lengths: {len(population)} != {len(scores)}"
        )

    indices = [i for i, member in enumerate(population) if member is not exclude]
    if not indices:
        raise ValueError("No candidates left to select from")
    return indices


class SelectionStrategy(ABC):
    """
    Abstract base class for picking a single parent from a population.

    Higher scores mean fitter solutions. The member passed as exclude (if
    any) is never returned; it is compared by identity, which lets a policy
    draw a second parent distinct from the first.
    """

    @abstractmethod
    def pick(
        self,
        population: Sequence[T],
        scores: Sequence[float],
        rng: random.Random,
        exclude: object | None = None,
    ) -> T:
        """
        Pick one member of the population.

        Args:
            population: Candidates to choose from.
            scores: Fitness score of each candidate, in the same order.
            rng: Random source to draw from.
            exclude: Member that must not be picked.

        Returns:
            The chosen member (the object itself, not a copy).

        Raises:
            ValueError: If population and scores differ in length or no
                candidate remains after exclusion.
        """
        pass


class RouletteSelection(SelectionStrategy):
    """
    Roulette wheel selection strategy.

    Selection probability proportional to fitness score. Negative scores are
    treated as zero. When no candidate has a positive score the pick is
    uniform.
    """

    def pick(
        self,
        population: Sequence[T],
        scores: Sequence[float],
        rng: random.Random,
        exclude: object | None = None,
    ) -> T:
        indices = _available_indices(population, scores, exclude)
        weights = [max(scores[i], 0) for i in indices]
        total = sum(weights)

        if total <= 0:
            return population[rng.choice(indices)]

        spin = rng.random() * total
        for index, weight in zip(indices, weights):
            spin -= weight
            if spin < 0:
                return population[index]

        # Float rounding can leave a tiny remainder; land on the last slot with weight.
        last = max(i for i, w in zip(indices, weights) if w > 0)
        return population[last]


class TournamentSelection(SelectionStrategy):
    """
    Tournament selection strategy.

    Samples tournament_size candidates without replacement and picks the one
    with the highest score.
    """

    def __init__(self, tournament_size: int = 3):
        """
        Initialize tournament selection.

        Args:
            tournament_size: Number of candidates in each tournament
        """
        if tournament_size < 1:
            raise ValueError(f"Invalid tournament size - shall be positive: {tournament_size}")
        self.tournament_size = tournament_size

    def pick(
        self,
        population: Sequence[T],
        scores: Sequence[float],
        rng: random.Random,
        exclude: object | None = None,
    ) -> T:
        indices = _available_indices(population, scores, exclude)
        tournament = rng.sample(indices, min(self.tournament_size, len(indices)))

        winner = max(tournament, key=lambda i: scores[i])
        return population[winner]


def select_pair(
    strategy: SelectionStrategy,
    population: Sequence[T],
    scores: Sequence[float],
    rng: random.Random,
) -> Tuple[T, T]:
    """Pick a mother and a father, never the same solution twice."""
    mother = strategy.pick(population, scores, rng)
    father = strategy.pick(population, scores, rng, exclude=mother)
    return mother, father


def get_selection_strategy(name: str, **kwargs) -> SelectionStrategy:
    """Factory function to get a selection strategy by name."""
    strategies = {
        "roulette": RouletteSelection,
        "tournament": TournamentSelection,
    }

    if name not in strategies:
        raise ValueError(f"Unknown selection strategy: {name}")

    return strategies[name](**kwargs)
