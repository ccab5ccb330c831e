"""Color matching: evolve random ARGB colors towards a hidden reference color."""

from genetic_algorithms.color_matching.color import (
    ColorSolution,
    NUM_CHANNELS,
    MIN_CHANNEL_VALUE,
    MAX_CHANNEL_VALUE,
    MAX_FITNESS,
)
from genetic_algorithms.color_matching.policy import ColorMatchingPolicy

__all__ = [
    "ColorSolution",
    "ColorMatchingPolicy",
    "NUM_CHANNELS",
    "MIN_CHANNEL_VALUE",
    "MAX_CHANNEL_VALUE",
    "MAX_FITNESS",
]
