"""
Genetic Algorithms Framework

A small engine for genetic algorithms with a fixed population size. The
engine drives a population of candidate solutions through repeated
generations of parent selection, recombination and mutation until a stopping
condition is met.

## Core Concept

The engine is generic. Problem-specific behaviour is plugged in through two
abstractions:

1. **Solution**: a genome that can mutate itself and combine with a partner
2. **EvolutionPolicy**: builds the initial population, selects parents and
   decides when to stop

The engine validates everything the plugins return (population size, parent
membership, offspring) and aborts the run on the first contract breach.

## API Reference

### Color matching example
```python
from genetic_algorithms import EvolutionEngine
from genetic_algorithms.color_matching import ColorMatchingPolicy

policy = ColorMatchingPolicy(generation_limit=100)
engine = EvolutionEngine(policy, population_size=1000, mutation_probability=0.1, seed=7)

result = engine.run()
print(policy.reference_color, policy.best_color(engine))
```

### Progress reporting
```python
def report(engine):
    print(engine.current_generation, engine.snapshot()[:3])

engine.run(report)
```

### CLI Usage
```bash
genetic-algorithms run --population-size 500 --generations 50 --seed 1
genetic-algorithms run --config run.yaml --output result.json
```
"""

from genetic_algorithms.config import (
    Config,
    EngineConfig,
    ColorMatchingConfig,
    OutputConfig,
)
from genetic_algorithms.core import (
    Solution,
    EvolutionContext,
    EvolutionPolicy,
    EvolutionEngine,
    EvolutionResult,
    GenerationStats,
)
from genetic_algorithms.errors import (
    GeneticAlgorithmError,
    InvalidArgumentError,
    InvalidStateError,
)

__version__ = "0.1.0"

__all__ = [
    # Engine
    "EvolutionEngine",
    "EvolutionResult",
    "GenerationStats",

    # Extension points
    "Solution",
    "EvolutionPolicy",
    "EvolutionContext",

    # Errors
    "GeneticAlgorithmError",
    "InvalidArgumentError",
    "InvalidStateError",

    # Configuration classes
    "Config",
    "EngineConfig",
    "ColorMatchingConfig",
    "OutputConfig",
]
