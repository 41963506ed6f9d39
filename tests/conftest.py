"""
Pytest configuration and shared fixtures for weasel tests.
"""

from __future__ import annotations

import sys
from typing import Sequence, TypeVar

from loguru import logger
import pytest

from weasel.engine import Breeder
from weasel.fitness import PositionalMatchFitness
from weasel.random_source import PythonRandomSource, RandomSource

T = TypeVar("T")


class ScriptedRandomSource(RandomSource):
    """Deterministic source: a fixed unit draw and round-robin choices."""

    def __init__(self, unit: float = 0.5):
        self.unit = unit
        self.uniform_calls = 0
        self.choose_calls = 0

    def uniform_unit(self) -> float:
        self.uniform_calls += 1
        return self.unit

    def choose_one(self, items: Sequence[T]) -> T:
        item = items[self.choose_calls % len(items)]
        self.choose_calls += 1
        return item


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep loguru at WARNING on stderr and undo sinks added by a test."""
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@pytest.fixture
def log_messages():
    messages: list[str] = []
    logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    return messages


@pytest.fixture
def make_breeder():
    """Factory for breeders with small, seeded defaults."""

    def _make(
        target: str = "CAT",
        alphabet: str = "CAT",
        population_size: int = 50,
        mutation_rate: float = 0.3,
        fitness=None,
        random_source: RandomSource | None = None,
        seed: int = 42,
    ) -> Breeder:
        return Breeder(
            random_source if random_source is not None else PythonRandomSource(seed),
            target=target,
            alphabet=alphabet,
            population_size=population_size,
            mutation_rate=mutation_rate,
            fitness=fitness if fitness is not None else PositionalMatchFitness(),
        )

    return _make
