"""
Command-line front end: run the weasel program from The Blind Watchmaker.

Usage:
    weasel
    weasel "TO BE OR NOT TO BE" --offspring 200 --mutation-rate 0.02
    weasel -M 50 --seed 7
"""

from __future__ import annotations

from itertools import islice
from typing import Callable

import click
from loguru import logger
from pydantic import ValidationError

from weasel import __version__
from weasel.constants import (
    DEFAULT_ALPHABET,
    DEFAULT_FITNESS,
    DEFAULT_MUTATION_RATE,
    DEFAULT_OFFSPRING,
    DEFAULT_TARGET,
)
from weasel.engine import Breeder, BreederConfig, RunMetrics
from weasel.exceptions import FractionError, WeaselError
from weasel.fitness import FITNESS_STRATEGIES
from weasel.fraction import Fraction
from weasel.utils.logger_setup import setup_logger


class FractionParamType(click.ParamType):
    """Click parameter accepting a number in the inclusive range [0.0, 1.0]."""

    name = "fraction"

    def convert(self, value, param, ctx) -> Fraction:
        if isinstance(value, Fraction):
            return value
        try:
            return Fraction.parse(value)
        except FractionError as e:
            self.fail(str(e), param, ctx)


FRACTION = FractionParamType()


def format_generation(generation: int, text: str, score: int, target_score: int) -> str:
    return f"{generation}: {text} ({score}/{target_score})"


def run(
    breeder: Breeder,
    max_generations: int | None = None,
    echo: Callable[[str], None] = click.echo,
) -> RunMetrics:
    """Breed until the target is reached or *max_generations* have been bred.

    Every generation, starting with the random seed as generation 0, is passed
    to *echo* as a formatted line.
    """
    target_score = breeder.target_score
    metrics = RunMetrics(target_score=target_score)

    sequence, seed = breeder.start_sequence(target_score)
    seed_score = breeder.score(seed)
    metrics.record_seed(seed_score)
    echo(format_generation(0, seed, seed_score, target_score))

    with sequence:
        generations = (
            sequence if max_generations is None else islice(sequence, max_generations)
        )
        for generation, (text, score) in enumerate(generations, start=1):
            metrics.record_generation(score, breeder.population_size)
            echo(format_generation(generation, text, score, target_score))

    logger.info(
        "[weasel] Done | generations={}, best_score={}/{}, "
        "offspring_evaluated={}, reached_target={}",
        metrics.generations,
        metrics.best_score,
        metrics.target_score,
        metrics.offspring_evaluated,
        metrics.reached_target,
    )
    return metrics


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("target", default=DEFAULT_TARGET)
@click.option(
    "-o",
    "--offspring",
    type=click.IntRange(min=1),
    default=DEFAULT_OFFSPRING,
    show_default=True,
    help="How many offspring per generation. Must be non-zero.",
)
@click.option(
    "-a",
    "--alphabet",
    default=DEFAULT_ALPHABET,
    show_default=True,
    help="Alphabet to use. Will be Unicode-normalized (NFC), separated in "
    "grapheme clusters, and repeated graphemes will be eliminated.",
)
@click.option(
    "-M",
    "--max-generations",
    type=click.IntRange(min=1),
    default=None,
    help="Max number of generations.",
)
@click.option(
    "-m",
    "--mutation-rate",
    type=FRACTION,
    default=str(DEFAULT_MUTATION_RATE),
    show_default=True,
    help="Mutation rate. Must be in the inclusive range [0.0, 1.0].",
)
@click.option(
    "--fitness",
    type=click.Choice(sorted(FITNESS_STRATEGIES)),
    default=DEFAULT_FITNESS,
    show_default=True,
    help="Fitness strategy used to score offspring.",
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible runs.")
@click.option(
    "--rng",
    type=click.Choice(["python", "numpy"]),
    default="python",
    show_default=True,
    help="Random number generator backend.",
)
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    default="WARNING",
    show_default=True,
    help="Diagnostics level (written to stderr).",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Also write diagnostics to a log file in this directory.",
)
@click.version_option(__version__, prog_name="weasel")
def main(
    target: str,
    offspring: int,
    alphabet: str,
    max_generations: int | None,
    mutation_rate: Fraction,
    fitness: str,
    seed: int | None,
    rng: str,
    log_level: str,
    log_dir: str | None,
) -> None:
    """Run the weasel algorithm from The Blind Watchmaker towards TARGET."""
    setup_logger(level=log_level.upper(), log_dir=log_dir)

    try:
        config = BreederConfig(
            target=target,
            alphabet=alphabet,
            population_size=offspring,
            mutation_rate=mutation_rate,
            fitness=fitness,
            max_generations=max_generations,
            seed=seed,
            rng=rng,
        )
        breeder = Breeder.from_config(config)
    except (WeaselError, ValidationError) as e:
        raise click.UsageError(str(e)) from e

    run(breeder, config.max_generations)


if __name__ == "__main__":
    main()
