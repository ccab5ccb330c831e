"""Color genome for the color matching problem."""

from __future__ import annotations

import random
from typing import Iterable, List, Sequence, Tuple

from genetic_algorithms.core.solution import Solution
from genetic_algorithms.errors import InvalidArgumentError

NUM_CHANNELS = 4        # alpha, red, green, blue
BITS_PER_CHANNEL = 8
MIN_CHANNEL_VALUE = 0
MAX_CHANNEL_VALUE = 2 ** BITS_PER_CHANNEL - 1
MAX_FITNESS = MAX_CHANNEL_VALUE * NUM_CHANNELS


def validate_channels(channels: Iterable[int]) -> List[int]:
    """
    Check a sequence of channel values and return it as a list.

    Raises:
        InvalidArgumentError: On a wrong channel count or value.
    """
    values = list(channels)
    if len(values) != NUM_CHANNELS:
        raise InvalidArgumentError(
            f"Invalid number of channels - shall be equal to {NUM_CHANNELS}: {len(values)}"
        )
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"Invalid channel value - shall be an integer: {value!r}")
        if not MIN_CHANNEL_VALUE <= value <= MAX_CHANNEL_VALUE:
            raise InvalidArgumentError(
                f"Invalid channel value - shall be in range <{MIN_CHANNEL_VALUE};{MAX_CHANNEL_VALUE}>: {value}"
            )
    return values


def channel_fitness(reference: Sequence[int], channels: Sequence[int]) -> int:
    """Maximum deviation minus the total absolute deviation from the reference."""
    return MAX_FITNESS - sum(abs(ref - own) for ref, own in zip(reference, channels))


def format_channels(channels: Iterable[int]) -> str:
    return f"[{', '.join(str(v) for v in channels)}]"


class ColorSolution(Solution):
    """
    An ARGB color, evolved towards a hidden reference color.

    Each of the four channels holds a value from 0 to 255. Fitness is the
    maximum possible deviation minus the total absolute channel deviation
    from the reference, so a perfect match scores MAX_FITNESS.

    All randomness (mutation, and random() construction) comes from the
    random source handed in at creation, which is the engine's shared one.
    """

    def __init__(self, channels: Iterable[int], rng: random.Random):
        """
        Create a color from explicit channel values.

        Args:
            channels: Exactly NUM_CHANNELS integers in [0, 255].
            rng: Random source used by mutate().

        Raises:
            InvalidArgumentError: On a wrong channel count or value.
        """
        if rng is None:
            raise InvalidArgumentError("Random source shall not be None")

        self._rng = rng
        self._channels: List[int] = validate_channels(channels)

    @classmethod
    def random(cls, rng: random.Random) -> "ColorSolution":
        """Generate a color with uniformly random channel values."""
        if rng is None:
            raise InvalidArgumentError("Random source shall not be None")
        channels = [rng.randint(MIN_CHANNEL_VALUE, MAX_CHANNEL_VALUE) for _ in range(NUM_CHANNELS)]
        return cls(channels, rng)

    @property
    def channels(self) -> Tuple[int, ...]:
        return tuple(self._channels)

    def fitness(self, reference: "ColorSolution") -> int:
        """Score similarity to the reference color. Higher is better."""
        return channel_fitness(reference._channels, self._channels)

    def combine_with(self, other: Solution) -> List["ColorSolution"]:
        """Average the channels of both colors into a single child."""
        if not isinstance(other, ColorSolution):
            raise InvalidArgumentError(f"Provided solution is not a color: {other!r}")

        # round() rounds halves to even, e.g. 0.5 -> 0 and 1.5 -> 2.
        averaged = [round((a + b) / 2) for a, b in zip(self._channels, other._channels)]
        return [ColorSolution(averaged, self._rng)]

    def mutate(self) -> None:
        """Assign a new random value to one randomly chosen channel."""
        value = self._rng.randint(MIN_CHANNEL_VALUE, MAX_CHANNEL_VALUE)
        index = self._rng.randrange(NUM_CHANNELS)
        self._channels[index] = value

    def __str__(self) -> str:
        return format_channels(self._channels)

    def __repr__(self) -> str:
        return f"ColorSolution({self._channels})"
