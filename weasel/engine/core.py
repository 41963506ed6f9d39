from __future__ import annotations

from typing import TYPE_CHECKING, Callable
import weakref

from loguru import logger

from weasel.alphabet import build_alphabet, grapheme_count, graphemes
from weasel.exceptions import EngineBusyError
from weasel.fitness import FitnessStrategy, as_fitness_strategy
from weasel.fraction import Fraction
from weasel.random_source import RandomSource, make_random_source

if TYPE_CHECKING:
    from weasel.engine.config import BreederConfig
    from weasel.engine.sequence import GenerationSequence

__all__ = ["Breeder"]


class Breeder:
    """Breeds text by cumulative selection.

    Each round copies a parent text ``population_size`` times, mutating every
    symbol with probability ``mutation_rate``, and keeps the best-scoring copy.

    The breeder owns its random source. While a :class:`GenerationSequence`
    started from it is live, the sequence has exclusive use of the breeder and
    direct calls to :meth:`breed` raise :class:`EngineBusyError`.
    """

    def __init__(
        self,
        random_source: RandomSource,
        target: str,
        alphabet: str,
        population_size: int,
        mutation_rate: Fraction,
        fitness: FitnessStrategy | Callable[[str, str], int],
    ):
        if (
            isinstance(population_size, bool)
            or not isinstance(population_size, int)
            or population_size < 1
        ):
            raise ValueError(
                f"population_size must be a positive integer, got {population_size!r}"
            )
        if not isinstance(mutation_rate, Fraction):
            mutation_rate = Fraction(mutation_rate)

        self._alphabet = build_alphabet(alphabet)
        self._rng = random_source
        self._target = target
        self._population_size = population_size
        self._mutation_rate = mutation_rate
        self._fitness = as_fitness_strategy(fitness)

        self._target_length = grapheme_count(target)
        self._target_score = self._fitness(target, target)
        # Reused for every candidate to avoid reallocating per offspring
        self._scratch: list[str] = []
        self._sequence_ref: weakref.ref[GenerationSequence] | None = None

        logger.info(
            "[Breeder] Init | target_length={}, alphabet_size={}, population={}, "
            "mutation_rate={}, fitness={}",
            self._target_length,
            len(self._alphabet),
            self._population_size,
            self._mutation_rate,
            self._fitness,
        )

    @classmethod
    def from_config(
        cls, config: BreederConfig, random_source: RandomSource | None = None
    ) -> Breeder:
        if random_source is None:
            random_source = make_random_source(config.rng, config.seed)
        return cls(
            random_source,
            target=config.target,
            alphabet=config.alphabet,
            population_size=config.population_size,
            mutation_rate=config.mutation_rate,
            fitness=config.fitness,
        )

    # -------------------------- Accessors --------------------------

    @property
    def alphabet(self) -> tuple[str, ...]:
        return self._alphabet

    @property
    def target(self) -> str:
        return self._target

    @property
    def target_length(self) -> int:
        """Number of graphemes in the target."""
        return self._target_length

    @property
    def target_score(self) -> int:
        """Fitness of the target against itself."""
        return self._target_score

    @property
    def population_size(self) -> int:
        return self._population_size

    @property
    def mutation_rate(self) -> Fraction:
        return self._mutation_rate

    @property
    def fitness(self) -> FitnessStrategy:
        return self._fitness

    # -------------------------- Public API --------------------------

    def score(self, candidate: str) -> int:
        """Score *candidate* against the target."""
        return self._fitness(self._target, candidate)

    def breed(self, individual: str) -> tuple[str, int]:
        """Do one breeding round based on the graphemes of *individual*.

        No normalization is applied to the individual. Returns the winning
        offspring and its score; on equal scores the earliest offspring wins.
        """
        self._ensure_free()
        return self._breed_round(individual)

    def random_individual(self) -> str:
        """A random text with as many graphemes as the target."""
        self._ensure_free()
        return self._random_individual()

    def start_sequence(
        self, target_score: int | None = None
    ) -> tuple[GenerationSequence, str]:
        """Create a sequence that automates breeding rounds.

        Returns the sequence and a random seed text, grapheme-length equal to
        the target, to be used as generation 0.

        If *target_score* is given, iteration stops after the first offspring
        scoring at least that much; you probably want ``self.target_score``.
        If None, the sequence never ends on its own.
        """
        from weasel.engine.sequence import GenerationSequence

        self._ensure_free()
        seed = self._random_individual()
        sequence = GenerationSequence(self, seed, target_score)
        self._sequence_ref = weakref.ref(sequence)
        logger.debug(
            "[Breeder] Sequence started | target_score={}, seed={!r}",
            target_score,
            seed,
        )
        return sequence, seed

    iter = start_sequence

    # -------------------------- Internals --------------------------

    def _ensure_free(self) -> None:
        sequence = self._sequence_ref() if self._sequence_ref is not None else None
        if sequence is not None and not sequence.exhausted:
            raise EngineBusyError(
                "breeder is held by an active generation sequence; "
                "close or exhaust it first"
            )
        self._sequence_ref = None

    def _release(self, sequence: GenerationSequence) -> None:
        if self._sequence_ref is not None and self._sequence_ref() is sequence:
            self._sequence_ref = None

    def _random_individual(self) -> str:
        choose = self._rng.choose_one
        return "".join(choose(self._alphabet) for _ in range(self._target_length))

    def _breed_round(self, individual: str) -> tuple[str, int]:
        symbols = graphemes(individual)
        winner_text = self._offspring(symbols)
        winner_score = self._fitness(self._target, winner_text)

        for _ in range(1, self._population_size):
            text = self._offspring(symbols)
            score = self._fitness(self._target, text)
            if score > winner_score:
                winner_text, winner_score = text, score

        return winner_text, winner_score

    def _offspring(self, symbols: list[str]) -> str:
        rate = self._mutation_rate.value
        uniform = self._rng.uniform_unit
        choose = self._rng.choose_one
        alphabet = self._alphabet

        buf = self._scratch
        buf.clear()
        for symbol in symbols:
            buf.append(choose(alphabet) if uniform() <= rate else symbol)
        return "".join(buf)
