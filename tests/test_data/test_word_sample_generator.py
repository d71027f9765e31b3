"""Tests for train/test word sample generation."""

import logging

import numpy as np
import pytest

from omega_benchmarks.automata.words import UltimatelyPeriodicWord, validate_words
from omega_benchmarks.data.word_sample_generator import WordSampleGenerator, split_sample


def distinct_words(n):
    return [UltimatelyPeriodicWord(('a',) * i, ('b',)) for i in range(n)]


class TestSplitSample:
    """Test suite for the positional split."""

    def test_split(self):
        """Test that the first words go to training."""
        words = distinct_words(5)
        train, test = split_sample(words, 2)
        assert train == tuple(words[:2])
        assert test == tuple(words[2:])

    def test_short_collection(self):
        """Test that a short collection leaves the test part empty."""
        train, test = split_sample(distinct_words(2), 5)
        assert len(train) == 2
        assert test == ()


class TestWordSampleGenerator:
    """Test suite for WordSampleGenerator."""

    def test_requests_combined_count(self, stub_backend_cls, rng):
        """Test that one sampler call covers both parts."""
        words = distinct_words(10)
        backend = stub_backend_cls(words=words)

        train, test = WordSampleGenerator(backend).generate(2, 3, 15, 4, 6, rng)

        assert backend.word_calls == [(2, 3, 15, 10)]
        assert train == tuple(words[:4])
        assert test == tuple(words[4:])

    def test_shortfall_shrinks_test_part(self, stub_backend_cls, rng, caplog):
        """Test that missing words are taken from the test part with a warning."""
        backend = stub_backend_cls(words=distinct_words(5))

        with caplog.at_level(logging.WARNING):
            train, test = WordSampleGenerator(backend).generate(2, 1, 3, 4, 6, rng)

        assert len(train) == 4
        assert len(test) == 1
        assert "only 5 are distinct" in caplog.text

    def test_foreign_symbols_rejected(self, stub_backend_cls, rng):
        """Test that sampled words must stay inside the declared alphabet."""
        backend = stub_backend_cls(words=[UltimatelyPeriodicWord(('a',), ('c',))])

        with pytest.raises(ValueError, match="outside the alphabet"):
            WordSampleGenerator(backend).generate(2, 1, 3, 1, 0, rng)

    def test_single_symbol_alphabet(self):
        """Test that a one-symbol sample only uses that symbol."""
        train, test = WordSampleGenerator().generate(1, 3, 9, 5, 5, np.random.default_rng(2))

        assert train == (UltimatelyPeriodicWord((), ('a',)),)
        assert test == ()
        assert validate_words(train, 1) == []

    def test_empty_request(self, stub_backend_cls, rng):
        """Test that zero sizes give empty parts."""
        train, test = WordSampleGenerator(stub_backend_cls()).generate(2, 3, 15, 0, 0, rng)
        assert train == ()
        assert test == ()

    def test_reference_sizes(self):
        """Test a reference-sized sample against the built-in sampler."""
        train, test = WordSampleGenerator().generate(2, 3, 15, 100, 1000, np.random.default_rng(5))

        assert len(train) == 100
        # Short cycles collide often, so well over 100 draws are duplicates
        assert 500 < len(test) <= 900
        assert not set(train) & set(test)
        assert len(set(test)) == len(test)
        assert validate_words(train + test, 2) == []
        for word in train + test:
            assert len(word.spoke) <= 3
            assert 1 <= len(word.cycle) <= 15

    def test_reproducible(self):
        """Test that equal seeds give equal samples."""
        first = WordSampleGenerator().generate(3, 3, 9, 20, 30, np.random.default_rng(8))
        second = WordSampleGenerator().generate(3, 3, 9, 20, 30, np.random.default_rng(8))
        assert first == second
