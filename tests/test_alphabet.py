import pytest

from weasel.alphabet import build_alphabet, grapheme_count, graphemes
from weasel.constants import DEFAULT_ALPHABET
from weasel.exceptions import ConfigurationError

FAMILY = "\U0001F469\u200d\U0001F469\u200d\U0001F467"
FLAG = "\U0001F1EB\U0001F1F7"


class TestGraphemes:
    def test_ascii(self):
        assert graphemes("CAT") == ["C", "A", "T"]

    def test_empty(self):
        assert graphemes("") == []
        assert grapheme_count("") == 0

    def test_combining_sequence_is_one_symbol(self):
        assert graphemes("x\u0301y") == ["x\u0301", "y"]

    def test_no_normalization(self):
        decomposed = "e\u0301"
        assert graphemes(decomposed) == [decomposed]

    def test_emoji_sequences_are_one_symbol(self):
        assert graphemes(FAMILY + FLAG + "a") == [FAMILY, FLAG, "a"]
        assert grapheme_count(FAMILY + FLAG) == 2


class TestBuildAlphabet:
    def test_deduplicates(self):
        alphabet = build_alphabet("aab")
        assert len(alphabet) == 2
        assert set(alphabet) == {"a", "b"}

    def test_empty_alphabet_fails(self):
        with pytest.raises(ConfigurationError, match="alphabet is empty"):
            build_alphabet("")

    def test_nfc_merges_equivalent_forms(self):
        alphabet = build_alphabet("e\u0301\u00e9")
        assert alphabet == ("\u00e9",)

    def test_keeps_clusters_whole(self):
        alphabet = build_alphabet(FAMILY + FLAG + FAMILY + "x\u0301")
        assert set(alphabet) == {FAMILY, FLAG, "x\u0301"}

    def test_default_alphabet(self):
        alphabet = build_alphabet(DEFAULT_ALPHABET)
        assert len(alphabet) == 53
        assert " " in alphabet

    def test_is_immutable_and_stable(self):
        alphabet = build_alphabet("cba")
        assert isinstance(alphabet, tuple)
        assert build_alphabet("abc") == alphabet
