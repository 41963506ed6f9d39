"""
weasel - cumulative selection on strings of text

Starting from a random string, repeatedly breed mutated copies, score them
against a target phrase and keep the best one, as in Dawkins' "weasel"
program from The Blind Watchmaker.
"""

__version__ = "0.1.0"

from weasel.alphabet import build_alphabet, grapheme_count, graphemes
from weasel.engine import Breeder, BreederConfig, GenerationSequence, RunMetrics
from weasel.exceptions import (
    ConfigurationError,
    EngineBusyError,
    FractionError,
    FractionParseError,
    FractionRangeError,
    WeaselError,
)
from weasel.fitness import (
    FITNESS_STRATEGIES,
    ConstantFitness,
    FitnessStrategy,
    PositionalMatchFitness,
    get_fitness_strategy,
)
from weasel.fraction import Fraction
from weasel.random_source import (
    NumpyRandomSource,
    PythonRandomSource,
    RandomSource,
    make_random_source,
)

__all__ = [
    "Breeder",
    "BreederConfig",
    "ConfigurationError",
    "ConstantFitness",
    "EngineBusyError",
    "FITNESS_STRATEGIES",
    "FitnessStrategy",
    "Fraction",
    "FractionError",
    "FractionParseError",
    "FractionRangeError",
    "GenerationSequence",
    "NumpyRandomSource",
    "PositionalMatchFitness",
    "PythonRandomSource",
    "RandomSource",
    "RunMetrics",
    "WeaselError",
    "build_alphabet",
    "get_fitness_strategy",
    "grapheme_count",
    "graphemes",
    "make_random_source",
]
