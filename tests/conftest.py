"""Pytest configuration and fixtures."""

import random

import pytest

from genetic_algorithms.core import EvolutionEngine, EvolutionPolicy, Solution
from genetic_algorithms.errors import InvalidArgumentError
from genetic_algorithms.utils.logging import set_verbosity, LogLevel


class Tracker:
    """Shared bookkeeping for stub solutions: id allocation and mutate calls."""

    def __init__(self):
        self.last_id = -1
        self.mutate_calls = 0

    def next_id(self) -> int:
        self.last_id += 1
        return self.last_id


class StubSolution(Solution):
    """
    Trivial genome holding an integer id.

    Every child gets a fresh id from the tracker, so the order in which
    children were produced can be read back from the population.
    """

    def __init__(self, tracker: Tracker, n_children: int = 1):
        self.tracker = tracker
        self.n_children = n_children
        self.value = tracker.next_id()

    def mutate(self) -> None:
        self.tracker.mutate_calls += 1

    def combine_with(self, other):
        if not isinstance(other, StubSolution):
            raise InvalidArgumentError(f"Not a stub solution: {other!r}")
        return [StubSolution(self.tracker, self.n_children) for _ in range(self.n_children)]

    def __repr__(self):
        return f"StubSolution({self.value})"


class StubPolicy(EvolutionPolicy):
    """Uniform random parents, fixed generation limit."""

    def __init__(self, generation_limit: int = 3, n_children: int = 1, initial_size: int | None = None):
        self.tracker = Tracker()
        self.generation_limit = generation_limit
        self.n_children = n_children
        self.initial_size = initial_size
        self.initial_calls = 0

    def produce_initial_population(self, context):
        self.initial_calls += 1
        size = context.population_size if self.initial_size is None else self.initial_size
        return [StubSolution(self.tracker, self.n_children) for _ in range(size)]

    def should_stop(self, context):
        return context.current_generation >= self.generation_limit

    def select_parents(self, context):
        population = context.population
        return (
            population[context.rng.randrange(len(population))],
            population[context.rng.randrange(len(population))],
        )


@pytest.fixture(autouse=True)
def reset_verbosity():
    """Keep the global log verbosity from leaking between tests."""
    yield
    set_verbosity(LogLevel.NORMAL)


@pytest.fixture
def stub_policy():
    return StubPolicy()


@pytest.fixture
def make_engine():
    """Factory building an engine around a StubPolicy."""

    def _make(population_size=4, mutation_probability=0.0, seed=0, policy=None, **policy_kwargs):
        policy = policy if policy is not None else StubPolicy(**policy_kwargs)
        return EvolutionEngine(policy, population_size, mutation_probability, seed=seed)

    return _make


@pytest.fixture
def rng():
    return random.Random(1234)
