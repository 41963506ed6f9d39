from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from loguru import logger

if TYPE_CHECKING:
    from weasel.engine.core import Breeder

__all__ = ["GenerationSequence"]


class GenerationSequence(Iterator[tuple[str, int]]):
    """Forward-only iterator over breeding rounds.

    Each pull breeds the current parent and makes the winner the next parent.
    Yields ``(text, score)`` pairs. With a target score, the pull that reaches
    it is still yielded and the sequence is exhausted afterwards; it cannot be
    restarted, start a new one from the breeder instead.

    Use :meth:`Breeder.start_sequence` to create one. The sequence has
    exclusive use of its breeder until it is exhausted, closed or discarded.
    """

    def __init__(self, breeder: Breeder, seed: str, target_score: int | None = None):
        self._breeder = breeder
        self._current = seed
        self._target_score = target_score
        self._generation = 0
        self._exhausted = False

    @property
    def current(self) -> str:
        """The parent of the next round (the seed before the first pull)."""
        return self._current

    @property
    def generation(self) -> int:
        """Number of generations bred so far."""
        return self._generation

    @property
    def target_score(self) -> int | None:
        return self._target_score

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> GenerationSequence:
        return self

    def __next__(self) -> tuple[str, int]:
        if self._exhausted:
            raise StopIteration

        text, score = self._breeder._breed_round(self._current)
        self._current = text
        self._generation += 1
        logger.debug(
            "[GenerationSequence] Generation {} | score={}", self._generation, score
        )

        if self._target_score is not None and score >= self._target_score:
            logger.info(
                "[GenerationSequence] Target score {} reached at generation {}",
                self._target_score,
                self._generation,
            )
            self._finish()

        return text, score

    def close(self) -> None:
        """Stop the sequence and hand the breeder back."""
        if not self._exhausted:
            logger.debug(
                "[GenerationSequence] Closed after {} generations", self._generation
            )
            self._finish()

    def _finish(self) -> None:
        self._exhausted = True
        self._breeder._release(self)

    def __enter__(self) -> GenerationSequence:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
