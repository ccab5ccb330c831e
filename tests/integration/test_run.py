"""End-to-end runs of the evolution engine."""

import pytest

from genetic_algorithms.color_matching import ColorMatchingPolicy, MAX_FITNESS
from genetic_algorithms.config import get_default_config
from genetic_algorithms.core import EvolutionEngine, EvolutionPolicy, Solution


class CloneSolution(Solution):
    """Child equals its first parent; mutation does nothing but count."""

    mutate_calls = 0

    def __init__(self, value):
        self.value = value

    def mutate(self):
        CloneSolution.mutate_calls += 1

    def combine_with(self, other):
        return [CloneSolution(self.value)]


class FirstTwoPolicy(EvolutionPolicy):
    """Always pairs the first two members; stops at a generation limit."""

    def __init__(self, generation_limit):
        self.generation_limit = generation_limit

    def produce_initial_population(self, context):
        return [CloneSolution(i) for i in range(context.population_size)]

    def should_stop(self, context):
        return context.current_generation == self.generation_limit

    def select_parents(self, context):
        return context.population[0], context.population[1]

    def project(self, solution):
        return solution.value


@pytest.fixture(autouse=True)
def reset_mutate_calls():
    CloneSolution.mutate_calls = 0


class TestTrivialRun:
    def test_size_four_three_generations(self):
        engine = EvolutionEngine(FirstTwoPolicy(generation_limit=3), 4, 0.0, seed=0)
        checkpoints = [(engine.current_generation, len(engine.snapshot()))]

        result = engine.run(lambda e: checkpoints.append((e.current_generation, len(e.snapshot()))))

        assert result.generations == 3
        assert engine.current_generation == 3
        assert checkpoints == [(0, 4), (1, 4), (2, 4), (3, 4)]
        # Every child clones the first member, value 0.
        assert engine.snapshot() == [0, 0, 0, 0]

    @pytest.mark.parametrize("probability, expected_calls", [(1.0, 12), (0.0, 0)])
    def test_mutation_probability_extremes(self, probability, expected_calls):
        engine = EvolutionEngine(FirstTwoPolicy(generation_limit=3), 4, probability, seed=0)

        result = engine.run()

        assert CloneSolution.mutate_calls == expected_calls
        assert sum(stats.mutations for stats in result.history) == expected_calls

    def test_minimum_population(self):
        engine = EvolutionEngine(FirstTwoPolicy(generation_limit=5), 2, 0.5, seed=0)

        engine.run()

        assert engine.current_generation == 5
        assert len(engine.snapshot()) == 2


class TestColorMatchingRun:
    def _run(self, seed, selection="roulette"):
        policy = ColorMatchingPolicy(generation_limit=10, selection=selection)
        engine = EvolutionEngine(policy, 40, 0.1, seed=seed)
        trace = []
        engine.run(lambda e: trace.append(e.snapshot()))
        return policy, engine, trace

    def test_deterministic_with_seed(self):
        policy_a, engine_a, trace_a = self._run(seed=21)
        policy_b, engine_b, trace_b = self._run(seed=21)

        assert trace_a == trace_b
        assert policy_a.reference.channels == policy_b.reference.channels
        assert engine_a.current_generation == engine_b.current_generation == 10

    def test_population_size_kept(self):
        _, engine, trace = self._run(seed=5, selection="tournament")

        assert len(trace) == 10
        assert all(len(population) == 40 for population in trace)

    def test_mean_fitness_improves(self):
        policy = ColorMatchingPolicy(generation_limit=30)
        engine = EvolutionEngine(policy, 100, 0.05, seed=13)
        initial = sum(policy.scores(engine)) / 100

        engine.run()
        final = sum(policy.scores(engine)) / 100

        assert final > initial
        assert policy.best_fitness(engine) <= MAX_FITNESS

    def test_default_config_run(self):
        config = get_default_config()
        policy = ColorMatchingPolicy.from_config(config.color_matching)
        engine = EvolutionEngine.from_config(policy, config.engine)

        result = engine.run()

        assert result.generations == config.color_matching.generation_limit
        assert len(engine.snapshot()) == config.engine.population_size
