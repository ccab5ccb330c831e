#!/usr/bin/env python3
"""
Quick Start Examples for the Genetic Algorithms Framework

Shows the built-in color matching problem and how to plug in your own
solution type and evolution policy.

Usage: python examples/quick_start.py
"""


def example_1_color_matching():
    """Example 1: Run the built-in color matching problem"""
    print("=" * 60)
    print("EXAMPLE 1: Color Matching")
    print("=" * 60)

    from genetic_algorithms import EvolutionEngine
    from genetic_algorithms.color_matching import ColorMatchingPolicy

    policy = ColorMatchingPolicy(generation_limit=50)
    engine = EvolutionEngine(policy, population_size=300, mutation_probability=0.1, seed=7)

    def report(engine):
        if engine.current_generation % 10 == 0:
            print(f"Generation {engine.current_generation}: {policy.best_color(engine)}")

    print(f"Reference: {policy.reference_color}")
    engine.run(report)
    print(f"Best found: {policy.best_color(engine)}")
    print()


def example_2_custom_problem():
    """Example 2: Evolve a bit string towards all ones"""
    print("=" * 60)
    print("EXAMPLE 2: Custom Solution and Policy")
    print("=" * 60)

    from genetic_algorithms import EvolutionEngine, EvolutionPolicy, Solution
    from genetic_algorithms.selection import TournamentSelection, select_pair

    class BitString(Solution):
        def __init__(self, bits, rng):
            self.bits = list(bits)
            self.rng = rng

        def mutate(self):
            index = self.rng.randrange(len(self.bits))
            self.bits[index] ^= 1

        def combine_with(self, other):
            cut = self.rng.randrange(1, len(self.bits))
            return [
                BitString(self.bits[:cut] + other.bits[cut:], self.rng),
                BitString(other.bits[:cut] + self.bits[cut:], self.rng),
            ]

    class OneMax(EvolutionPolicy):
        def __init__(self, length, generation_limit):
            self.length = length
            self.generation_limit = generation_limit
            self.selection = TournamentSelection(tournament_size=3)

        def produce_initial_population(self, context):
            return [
                BitString([context.rng.randint(0, 1) for _ in range(self.length)], context.rng)
                for _ in range(context.population_size)
            ]

        def should_stop(self, context):
            return (
                context.current_generation >= self.generation_limit
                or any(sum(s.bits) == self.length for s in context.population)
            )

        def select_parents(self, context):
            scores = [sum(s.bits) for s in context.population]
            return select_pair(self.selection, context.population, scores, context.rng)

        def project(self, solution):
            return "".join(str(bit) for bit in solution.bits)

    engine = EvolutionEngine(OneMax(length=32, generation_limit=200), 51, 0.2, seed=1)
    result = engine.run()

    print(f"Stopped after {result.generations} generations")
    print(f"Best: {max(engine.snapshot(), key=lambda bits: bits.count('1'))}")
    print()


if __name__ == "__main__":
    example_1_color_matching()
    example_2_custom_problem()
