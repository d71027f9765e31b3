"""Tests for ultimately periodic words."""

import pytest

from omega_benchmarks.automata.words import (
    UltimatelyPeriodicWord,
    symbols_of_size,
    symbol_index,
    validate_words
)


class TestSymbols:
    """Test suite for alphabet helpers."""

    def test_symbols_of_size(self):
        assert symbols_of_size(1) == ['a']
        assert symbols_of_size(3) == ['a', 'b', 'c']

    @pytest.mark.parametrize("size", [0, 27])
    def test_symbols_of_size_out_of_range(self, size):
        with pytest.raises(ValueError, match="Alphabet size"):
            symbols_of_size(size)

    def test_symbol_index(self):
        assert symbol_index('a') == 0
        assert symbol_index('c') == 2


class TestUltimatelyPeriodicWord:
    """Test suite for the word dataclass."""

    def test_equality_is_elementwise(self):
        assert UltimatelyPeriodicWord(('a',), ('b',)) == UltimatelyPeriodicWord(['a'], ['b'])
        assert UltimatelyPeriodicWord(('a',), ('b',)) != UltimatelyPeriodicWord((), ('a', 'b'))

    def test_words_are_hashable(self):
        words = {UltimatelyPeriodicWord(('a',), ('b',)), UltimatelyPeriodicWord(('a',), ('b',))}
        assert len(words) == 1

    def test_empty_cycle_rejected(self):
        with pytest.raises(ValueError, match="non-empty"):
            UltimatelyPeriodicWord(('a',), ())

    def test_string_rendering(self):
        word = UltimatelyPeriodicWord.from_strings("ab", "ba")
        assert word.spoke == ('a', 'b')
        assert word.cycle == ('b', 'a')
        assert word.spoke_string == "ab"
        assert word.cycle_string == "ba"
        assert str(word) == "ab(ba)^ω"

    def test_empty_spoke_string(self):
        word = UltimatelyPeriodicWord.from_strings("", "a")
        assert word.spoke == ()
        assert word.spoke_string == ""


class TestReduction:
    """Test suite for canonical word representations."""

    def test_cycle_becomes_primitive(self):
        word = UltimatelyPeriodicWord((), ('a', 'b', 'a', 'b')).reduced()
        assert word == UltimatelyPeriodicWord((), ('a', 'b'))

    def test_spoke_rolled_into_cycle(self):
        word = UltimatelyPeriodicWord(('a', 'a', 'b'), ('a', 'b')).reduced()
        assert word == UltimatelyPeriodicWord(('a',), ('a', 'b'))

    def test_rolling_rotates_cycle(self):
        word = UltimatelyPeriodicWord(('a', 'b'), ('a', 'a', 'b')).reduced()
        assert word == UltimatelyPeriodicWord((), ('a', 'b', 'a'))

    def test_reduced_is_idempotent(self):
        word = UltimatelyPeriodicWord(('a', 'a', 'b'), ('b', 'a', 'b', 'a')).reduced()
        assert word.reduced() == word

    def test_same_infinite_word_same_reduction(self):
        first = UltimatelyPeriodicWord(('a',), ('a',))
        second = UltimatelyPeriodicWord((), ('a', 'a', 'a'))
        assert first.reduced() == second.reduced() == UltimatelyPeriodicWord((), ('a',))


class TestValidateWords:
    """Test suite for alphabet validation of word lists."""

    def test_valid_words(self):
        words = [UltimatelyPeriodicWord(('a',), ('b',))]
        assert validate_words(words, 2) == []

    def test_unknown_symbol_reported(self):
        words = [UltimatelyPeriodicWord(('a',), ('c',))]
        errors = validate_words(words, 2)
        assert len(errors) == 1
        assert "Word 0" in errors[0]
