import pytest

from weasel.exceptions import ConfigurationError
from weasel.fitness import (
    FITNESS_STRATEGIES,
    ConstantFitness,
    FitnessStrategy,
    PositionalMatchFitness,
    as_fitness_strategy,
    get_fitness_strategy,
)


class TestPositionalMatch:
    fitness = PositionalMatchFitness()

    @pytest.mark.parametrize("target", ["CAT", "METHINKS IT IS LIKE A WEASEL", "", "x\u0301yz"])
    def test_self_score_is_length(self, target):
        from weasel.alphabet import grapheme_count

        assert self.fitness(target, target) == grapheme_count(target)

    def test_shorter_candidate_truncates(self):
        assert self.fitness("CAT", "CA") == 2

    def test_longer_candidate_truncates(self):
        assert self.fitness("CA", "CAT") == 2

    def test_counts_positional_matches_only(self):
        assert self.fitness("CAT", "COT") == 2
        assert self.fitness("CAT", "TAC") == 1
        assert self.fitness("CAT", "XYZ") == 0

    def test_compares_graphemes_not_code_points(self):
        # "x" followed by a combining accent is one symbol, distinct from "x"
        assert self.fitness("xy", "x\u0301y") == 1
        assert self.fitness("x\u0301y", "x\u0301y") == 2

    def test_no_normalization(self):
        assert self.fitness("\u00e9", "e\u0301") == 0


class TestConstant:
    @pytest.mark.parametrize("target, candidate", [("CAT", "CAT"), ("CAT", ""), ("", "DOG")])
    def test_always_one(self, target, candidate):
        assert ConstantFitness()(target, candidate) == 1


class TestRegistry:
    def test_builtins_registered(self):
        assert FITNESS_STRATEGIES == {
            "constant": ConstantFitness,
            "positional": PositionalMatchFitness,
        }

    def test_get_by_name(self):
        assert isinstance(get_fitness_strategy("positional"), PositionalMatchFitness)
        assert isinstance(get_fitness_strategy("constant"), ConstantFitness)

    def test_unknown_name(self):
        with pytest.raises(ConfigurationError, match="unknown fitness strategy"):
            get_fitness_strategy("hamming")

    def test_wraps_plain_callables(self):
        def length_of_candidate(target: str, candidate: str) -> int:
            return len(candidate)

        strategy = as_fitness_strategy(length_of_candidate)
        assert isinstance(strategy, FitnessStrategy)
        assert strategy.score("CAT", "DOGS") == 4
        assert strategy.name == "length_of_candidate"

    def test_passes_strategies_through(self):
        strategy = ConstantFitness()
        assert as_fitness_strategy(strategy) is strategy
        assert isinstance(as_fitness_strategy("constant"), ConstantFitness)

    def test_rejects_non_callables(self):
        with pytest.raises(ConfigurationError):
            as_fitness_strategy(42)
