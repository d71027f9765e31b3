"""
Pytest configuration and shared fixtures for the Omega Benchmarks test suite.
"""

import pytest
import numpy as np
import sys
from pathlib import Path

# Add src and the project root (cli.py) to path for testing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(project_root / "src"))

from omega_benchmarks.automata import AcceptanceVariant, OmegaAutomaton, UltimatelyPeriodicWord


@pytest.fixture
def rng():
    """Fresh seeded generator for one test."""
    return np.random.default_rng(1234)


@pytest.fixture
def infinitely_many_a_dba():
    """One-state Büchi automaton accepting words with infinitely many 'a'."""
    return OmegaAutomaton(2, [[(0, True), (0, False)]], AcceptanceVariant.BUCHI)


@pytest.fixture
def infinitely_many_a_dpa():
    """One-state parity automaton accepting words with infinitely many 'a'."""
    return OmegaAutomaton(2, [[(0, 0), (0, 1)]], AcceptanceVariant.PARITY)


@pytest.fixture
def only_a_omega_dba():
    """Two-state Büchi automaton accepting only a^ω; states have distinct residuals."""
    return OmegaAutomaton(2, [
        [(0, True), (1, False)],
        [(1, False), (1, False)],
    ], AcceptanceVariant.BUCHI)


@pytest.fixture
def starts_with_a_dba():
    """Three-state Büchi automaton accepting words whose first symbol is 'a'."""
    return OmegaAutomaton(2, [
        [(1, False), (2, False)],
        [(1, True), (1, True)],
        [(2, False), (2, False)],
    ], AcceptanceVariant.BUCHI)


@pytest.fixture
def redundant_dba():
    """Moore-minimal Büchi automaton whose two states accept the same language.

    Both states accept words containing ``aa`` infinitely often; only the
    edge colours differ.
    """
    return OmegaAutomaton(2, [
        [(1, False), (0, False)],
        [(1, True), (0, False)],
    ], AcceptanceVariant.BUCHI)


@pytest.fixture
def sample_words():
    """Small mixed sample over {a, b}."""
    return [
        UltimatelyPeriodicWord((), ('a',)),
        UltimatelyPeriodicWord(('a',), ('b',)),
        UltimatelyPeriodicWord(('b', 'b'), ('a', 'b')),
        UltimatelyPeriodicWord(('b',), ('b', 'b', 'a')),
    ]


class StubAutomaton:
    """Opaque automaton whose properties are fixed by the test."""

    def __init__(self, size, informative=True, accepted=None, name="stub"):
        self._size = size
        self.informative = informative
        self.accepted = set(accepted or ())
        self.name = name

    def size(self):
        return self._size

    def accepts(self, word):
        return word in self.accepted

    def __repr__(self):
        return f"StubAutomaton({self.name}, size={self._size})"


class RecoloredView:
    """What the stub backend returns from recolor_as_priorities."""

    def __init__(self, automaton, mapping):
        self.automaton = automaton
        self.mapping = mapping


class StubBackend:
    """Backend replaying scripted automata and word lists, recording every call."""

    def __init__(self, automata=(), words=()):
        self.automata = list(automata)
        self.words = list(words)
        self.sample_calls = []
        self.streamline_calls = 0
        self.recolor_calls = []
        self.informative_calls = []
        self.word_calls = []
        self.serialized = []

    def sample_automaton(self, alphabet_size, state_count, lam, variant,
                         priority_count=None, *, rng):
        self.sample_calls.append((alphabet_size, state_count, lam, variant, priority_count))
        return self.automata[len(self.sample_calls) - 1]

    def streamline(self, automaton):
        self.streamline_calls += 1
        return automaton

    def recolor_as_priorities(self, automaton, mapping):
        self.recolor_calls.append(mapping)
        return RecoloredView(automaton, mapping)

    def is_informative(self, automaton):
        self.informative_calls.append(automaton)
        if isinstance(automaton, RecoloredView):
            automaton = automaton.automaton
        return automaton.informative

    def accepts(self, automaton, word):
        return automaton.accepts(word)

    def sample_words(self, alphabet_size, max_spoke_len, max_cycle_len, count, *, rng):
        self.word_calls.append((alphabet_size, max_spoke_len, max_cycle_len, count))
        return list(self.words[:count])

    def serialize_automaton(self, automaton, name=None):
        self.serialized.append(name)
        return f"stub automaton {name}\n"


@pytest.fixture
def stub_automaton_cls():
    return StubAutomaton


@pytest.fixture
def stub_backend_cls():
    return StubBackend


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark integration tests."""
    for item in items:
        if "integration" in item.nodeid or "end_to_end" in item.nodeid:
            item.add_marker(pytest.mark.integration)
