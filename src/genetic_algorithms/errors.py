"""Exception types raised by the genetic algorithms framework."""

from __future__ import annotations


class GeneticAlgorithmError(Exception):
    """Base class for all framework errors."""


class InvalidArgumentError(GeneticAlgorithmError, ValueError):
    """
    Raised when a caller passes a malformed argument.

    Covers engine construction (population size, mutation probability,
    random source), policy construction, and combination with an
    incompatible partner solution.
    """


class InvalidStateError(GeneticAlgorithmError, RuntimeError):
    """
    Raised when a policy or solution breaks its contract with the engine.

    Examples: an initial population of the wrong size, a selected parent that
    is not a member of the current population, or a combination that yields
    no offspring. These indicate a defect in the policy or solution code and
    abort the run.
    """
