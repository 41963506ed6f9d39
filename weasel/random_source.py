from __future__ import annotations

from abc import ABC, abstractmethod
import random
from typing import Literal, Sequence, TypeVar

import numpy as np

__all__ = [
    "RandomSource",
    "PythonRandomSource",
    "NumpyRandomSource",
    "make_random_source",
]

T = TypeVar("T")

RandomSourceKind = Literal["python", "numpy"]


class RandomSource(ABC):
    """Randomness consumed by the breeder.

    A source is owned by one breeder; every draw advances its state, so the
    order of calls is part of the reproducible output of a seeded run.
    """

    @abstractmethod
    def uniform_unit(self) -> float:
        """Draw a real number uniformly from the half-open interval (0, 1]."""

    @abstractmethod
    def choose_one(self, items: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence uniformly."""


class PythonRandomSource(RandomSource):
    """Backed by :class:`random.Random`."""

    def __init__(self, seed: int | random.Random | None = None):
        self._rng = seed if isinstance(seed, random.Random) else random.Random(seed)

    def uniform_unit(self) -> float:
        # random() is in [0, 1); flip it onto (0, 1]
        return 1.0 - self._rng.random()

    def choose_one(self, items: Sequence[T]) -> T:
        return self._rng.choice(items)


class NumpyRandomSource(RandomSource):
    """Backed by a :class:`numpy.random.Generator`."""

    def __init__(self, seed: int | np.random.Generator | None = None):
        self._rng = (
            seed
            if isinstance(seed, np.random.Generator)
            else np.random.default_rng(seed)
        )

    def uniform_unit(self) -> float:
        return 1.0 - float(self._rng.random())

    def choose_one(self, items: Sequence[T]) -> T:
        if not items:
            raise IndexError("cannot choose from an empty sequence")
        return items[int(self._rng.integers(len(items)))]


def make_random_source(
    kind: RandomSourceKind = "python", seed: int | None = None
) -> RandomSource:
    if kind == "python":
        return PythonRandomSource(seed)
    if kind == "numpy":
        return NumpyRandomSource(seed)
    raise ValueError(f"unknown random source {kind!r}")
