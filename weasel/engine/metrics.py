from __future__ import annotations

from pydantic import BaseModel, Field


class RunMetrics(BaseModel):
    """Counters for a single breeding run."""

    generations: int = Field(default=0, description="Generations bred (seed excluded)")
    offspring_evaluated: int = Field(
        default=0, description="Total offspring scored across all generations"
    )
    best_score: int = Field(default=0, description="Highest score seen so far")
    target_score: int = Field(
        default=0, description="Score of the target against itself"
    )

    @property
    def reached_target(self) -> bool:
        return self.best_score >= self.target_score

    def record_seed(self, score: int) -> None:
        self.best_score = max(self.best_score, score)

    def record_generation(self, score: int, population_size: int) -> None:
        """Record one bred generation and its champion score."""
        self.generations += 1
        self.offspring_evaluated += population_size
        self.best_score = max(self.best_score, score)
