from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from weasel.constants import (
    DEFAULT_ALPHABET,
    DEFAULT_FITNESS,
    DEFAULT_MUTATION_RATE,
    DEFAULT_OFFSPRING,
    DEFAULT_TARGET,
)
from weasel.fitness import FITNESS_STRATEGIES
from weasel.fraction import Fraction
from weasel.random_source import RandomSourceKind


class BreederConfig(BaseModel):
    """Configuration options controlling a Breeder and its run."""

    target: str = Field(default=DEFAULT_TARGET, description="Phrase to evolve towards")
    alphabet: str = Field(
        default=DEFAULT_ALPHABET,
        description=(
            "Symbols used for seeding and mutation (NFC-normalized, deduplicated)"
        ),
    )
    population_size: int = Field(
        default=DEFAULT_OFFSPRING, gt=0, description="Offspring bred per generation"
    )
    mutation_rate: Fraction = Field(
        default=DEFAULT_MUTATION_RATE,
        description="Per-symbol probability of redrawing from the alphabet",
    )
    fitness: str = Field(default=DEFAULT_FITNESS, description="Fitness strategy name")
    max_generations: int | None = Field(
        default=None,
        gt=0,
        description=(
            "Maximum number of generations to run "
            "(None = until the target is reached)"
        ),
    )
    seed: int | None = Field(default=None, description="Seed for the random source")
    rng: RandomSourceKind = Field(default="python", description="Random source backend")

    model_config = ConfigDict(frozen=True)

    @field_validator("fitness")
    @classmethod
    def _validate_fitness(cls, v: str) -> str:
        if v not in FITNESS_STRATEGIES:
            raise ValueError(
                f"unknown fitness strategy {v!r}; "
                f"expected one of {sorted(FITNESS_STRATEGIES)}"
            )
        return v
