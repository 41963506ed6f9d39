from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from weasel.alphabet import graphemes
from weasel.exceptions import ConfigurationError

__all__ = [
    "FitnessStrategy",
    "ConstantFitness",
    "PositionalMatchFitness",
    "FITNESS_STRATEGIES",
    "get_fitness_strategy",
    "as_fitness_strategy",
]


class FitnessStrategy(ABC):
    """Scores a candidate text against the target. Higher is better."""

    name: str = ""

    @abstractmethod
    def score(self, target: str, candidate: str) -> int:
        """Return a non-negative score of *candidate* relative to *target*."""

    def __call__(self, target: str, candidate: str) -> int:
        return self.score(target, candidate)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ConstantFitness(FitnessStrategy):
    """Ignores its arguments and returns 1.

    For tests and experiments where every individual should be equally fit.
    """

    name = "constant"

    def score(self, target: str, candidate: str) -> int:
        return 1


class PositionalMatchFitness(FitnessStrategy):
    """One point per position where target and candidate share a grapheme.

    Both texts are segmented as given (no normalization). Comparison stops at
    the end of the shorter one.
    """

    name = "positional"

    def score(self, target: str, candidate: str) -> int:
        return sum(
            1 for t, c in zip(graphemes(target), graphemes(candidate)) if t == c
        )


class _CallableFitness(FitnessStrategy):
    def __init__(self, func: Callable[[str, str], int]):
        self._func = func
        self.name = getattr(func, "__name__", "custom")

    def score(self, target: str, candidate: str) -> int:
        return self._func(target, candidate)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"


FITNESS_STRATEGIES: dict[str, type[FitnessStrategy]] = {
    ConstantFitness.name: ConstantFitness,
    PositionalMatchFitness.name: PositionalMatchFitness,
}


def get_fitness_strategy(name: str) -> FitnessStrategy:
    """Instantiate a registered strategy by name."""
    try:
        return FITNESS_STRATEGIES[name]()
    except KeyError:
        raise ConfigurationError(
            f"unknown fitness strategy {name!r}; "
            f"expected one of {sorted(FITNESS_STRATEGIES)}"
        ) from None


def as_fitness_strategy(
    fitness: FitnessStrategy | Callable[[str, str], int] | str,
) -> FitnessStrategy:
    if isinstance(fitness, FitnessStrategy):
        return fitness
    if isinstance(fitness, str):
        return get_fitness_strategy(fitness)
    if callable(fitness):
        return _CallableFitness(fitness)
    raise ConfigurationError(f"not a fitness strategy: {fitness!r}")
