"""
Configuration schema for the genetic algorithms framework.

All configuration classes are Pydantic models, so invalid values are rejected
when a config is built or loaded. The main Config class groups the sections
below and can be loaded from and saved to YAML files.

Sections:
- EngineConfig: Population size, mutation probability and random seed
- ColorMatchingConfig: Stopping rule and parent selection for the color problem
- OutputConfig: Verbosity and result formatting
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field


class EngineConfig(BaseModel):
    """
    Configuration for the evolution engine.

    These values are fixed for the whole run: the engine never changes its
    population size or mutation probability between generations.

    - population_size: Number of solutions forming one generation (at least 2)
    - mutation_probability: Chance that each offspring is mutated after
      recombination, from 0.0 (never) to 1.0 (always)
    - seed: Seed for the shared random source. None picks one automatically,
      so runs are not reproducible.
    """

    population_size: int = Field(default=1000, ge=2)
    mutation_probability: float = Field(default=0.1, ge=0, le=1)
    seed: int | None = None

    class Config:
        extra = "forbid"


class ColorMatchingConfig(BaseModel):
    """
    Configuration for the color matching problem.

    The run stops after generation_limit generations. Parents are chosen by
    roulette wheel (fitness-proportional) or tournament selection.
    """

    generation_limit: int = Field(default=100, ge=1)
    selection: Literal["roulette", "tournament"] = "roulette"
    tournament_size: int = Field(default=3, ge=2)  # Only used by tournament selection
    progress_interval: int = Field(default=10, ge=1)  # Report every N generations

    class Config:
        extra = "forbid"


class OutputConfig(BaseModel):
    """Configuration for output settings."""
    verbosity: Literal["silent", "minimal", "normal", "verbose", "debug"] = "normal"
    format: Literal["text", "json"] = "text"
    save_history: bool = False

    class Config:
        extra = "forbid"


class Config(BaseModel):
    """
    Main configuration for a genetic algorithm run.

    Usage Patterns:

    **Default Configuration**:
    >>> config = Config()

    **Programmatic Customization**:
    >>> config = Config()
    >>> config.engine.population_size = 200
    >>> config.color_matching.generation_limit = 50

    **YAML Configuration**:
    >>> config = Config.from_yaml("run.yaml")
    >>> config.to_yaml("run_copy.yaml")
    """

    engine: EngineConfig = Field(default_factory=EngineConfig)
    color_matching: ColorMatchingConfig = Field(default_factory=ColorMatchingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    class Config:
        extra = "forbid"

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        # An empty file loads as None
        return cls.from_dict({} if data is None else data)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Load configuration from a dictionary."""
        if not isinstance(data, dict):
            raise ValueError(
                f"Configuration shall be a mapping of sections, got {type(data).__name__}"
            )
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        with open(path, "w") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False)

    def to_dict(self) -> dict:
        """Convert configuration to a dictionary."""
        return self.model_dump()


def get_default_config() -> Config:
    """Get a small configuration suitable for quick runs and tests."""
    return Config(
        engine=EngineConfig(
            population_size=50,
            mutation_probability=0.1,
            seed=42,
        ),
        color_matching=ColorMatchingConfig(
            generation_limit=20,
            progress_interval=5,
        ),
    )
