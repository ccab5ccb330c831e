"""
Base class for candidate solutions handled by the evolution engine.

The engine treats solutions as opaque genomes: it never inspects their
attributes. It only needs two operations from them:

- mutate: Randomly modify the solution in place
- combine_with: Recombine with a partner to produce descendants

Fitness is deliberately absent. Ranking solutions is a concern of the
evolution policy (it drives parent selection), not of the engine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence


class Solution(ABC):
    """
    Abstract base class for genomes evolved by the engine.

    Implementations must keep the following contract, otherwise the engine
    state can be corrupted:

    - **In-place mutation only**: mutate() changes the receiver and nothing
      else. It must not read or write population-wide state.
    - **Reproducible**: any randomness comes from the random source shared
      with the engine, so runs with the same seed are identical.
    - **Independent offspring**: combine_with() leaves both parents untouched
      and returns new objects that share no mutable state with them.

    Solutions are mutable. Code outside the engine should work with
    projections (see EvolutionPolicy.project) rather than live references.
    """

    @abstractmethod
    def mutate(self) -> None:
        """
        Apply a randomized, in-place modification to this solution.

        Called by the engine on freshly produced offspring, before they are
        installed in the new population.
        """
        pass

    @abstractmethod
    def combine_with(self, other: "Solution") -> Sequence["Solution"]:
        """
        Combine this solution's genome with a partner's into descendants.

        Args:
            other: The second parent. Must be a compatible solution type.

        Returns:
            At least one new solution. Returning more than one is allowed;
            the engine keeps what it needs and discards the surplus.

        Raises:
            InvalidArgumentError: If other is not a compatible solution.
        """
        pass
