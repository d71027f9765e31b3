"""Tests for rejection sampling of automata."""

import logging

import numpy as np
import pytest

from omega_benchmarks.automata.automaton import AcceptanceVariant, BUCHI_TO_PARITY
from omega_benchmarks.data.automaton_generator import (
    AutomatonGenerator,
    AutomatonSpec,
    InfeasibleParameters
)
from omega_benchmarks.data.planner import InvalidTargetSize


class TestAutomatonSpec:
    """Test suite for generation requests."""

    def test_generation_size_derived(self):
        """Test that candidates are oversized from the target size."""
        spec = AutomatonSpec(alphabet_size=2, target_size=4, variant="dba", lambda_=0.95)
        assert spec.variant is AcceptanceVariant.BUCHI
        assert spec.generation_size == 5

    def test_target_size_below_two(self):
        """Test that size 1 requests are rejected up front."""
        with pytest.raises(InvalidTargetSize):
            AutomatonSpec(alphabet_size=2, target_size=1, variant="dba", lambda_=0.5)

    @pytest.mark.parametrize("kwargs,message", [
        ({'alphabet_size': 0}, "Alphabet size"),
        ({'lambda_': 0.0}, "Lambda"),
        ({'lambda_': 1.0}, "Lambda"),
        ({'variant': "dpa"}, "priority_count"),
        ({'priority_count': 3}, "no priority_count"),
    ])
    def test_invalid_requests(self, kwargs, message):
        """Test validation of malformed requests."""
        values = dict(alphabet_size=2, target_size=3, variant="dba", lambda_=0.5)
        values.update(kwargs)
        with pytest.raises(ValueError, match=message):
            AutomatonSpec(**values)


class TestRejectionLoop:
    """Test suite for the rejection loop, driven by a scripted backend."""

    def test_first_acceptable_candidate_returned(self, stub_backend_cls, stub_automaton_cls, rng):
        """Test that wrong-size and uninformative candidates are skipped."""
        good = stub_automaton_cls(4, name="good")
        backend = stub_backend_cls(automata=[
            stub_automaton_cls(3, name="small"),
            stub_automaton_cls(4, informative=False, name="redundant"),
            good,
            stub_automaton_cls(4, name="unused"),
        ])
        spec = AutomatonSpec(alphabet_size=2, target_size=4, variant="dba", lambda_=0.95)

        result = AutomatonGenerator(backend, max_attempts=10).generate(spec, rng)

        assert result is good
        assert backend.sample_calls == [(2, 5, 0.95, AcceptanceVariant.BUCHI, None)] * 3
        assert backend.streamline_calls == 3

    def test_buchi_checked_through_parity_view(self, stub_backend_cls, stub_automaton_cls, rng):
        """Test that Büchi candidates are recoloured before the check."""
        backend = stub_backend_cls(automata=[stub_automaton_cls(4)])
        spec = AutomatonSpec(alphabet_size=2, target_size=4, variant="dba", lambda_=0.95)

        result = AutomatonGenerator(backend).generate(spec, rng)

        assert backend.recolor_calls == [BUCHI_TO_PARITY]
        assert backend.recolor_calls[0] == {True: 0, False: 1}
        # The streamlined candidate is returned, not the recoloured view
        assert result is backend.automata[0]

    def test_parity_checked_directly(self, stub_backend_cls, stub_automaton_cls, rng):
        """Test that parity candidates are checked without recolouring."""
        candidate = stub_automaton_cls(3)
        backend = stub_backend_cls(automata=[candidate])
        spec = AutomatonSpec(alphabet_size=2, target_size=3, variant="dpa", lambda_=0.5,
                             priority_count=3)

        AutomatonGenerator(backend).generate(spec, rng)

        assert backend.recolor_calls == []
        assert backend.informative_calls == [candidate]
        assert backend.sample_calls == [(2, 4, 0.5, AcceptanceVariant.PARITY, 3)]

    def test_wrong_size_skips_informativeness(self, stub_backend_cls, stub_automaton_cls, rng):
        """Test that the informativeness check only runs on right-size candidates."""
        backend = stub_backend_cls(automata=[stub_automaton_cls(2), stub_automaton_cls(3)])
        spec = AutomatonSpec(alphabet_size=2, target_size=3, variant="dpa", lambda_=0.5,
                             priority_count=2)

        AutomatonGenerator(backend).generate(spec, rng)

        assert len(backend.informative_calls) == 1

    def test_attempt_ceiling(self, stub_backend_cls, stub_automaton_cls, rng, caplog):
        """Test that exhausting the attempt ceiling raises InfeasibleParameters."""
        backend = stub_backend_cls(automata=[stub_automaton_cls(2)] * 5)
        spec = AutomatonSpec(alphabet_size=2, target_size=4, variant="dba", lambda_=0.95)

        with caplog.at_level(logging.ERROR):
            with pytest.raises(InfeasibleParameters) as excinfo:
                AutomatonGenerator(backend, max_attempts=3).generate(spec, rng)

        assert excinfo.value.attempts == 3
        assert excinfo.value.spec == spec
        assert "after 3 attempts" in str(excinfo.value)
        assert len(backend.sample_calls) == 3
        assert "Giving up" in caplog.text

    def test_unbounded_loop(self, stub_backend_cls, stub_automaton_cls, rng):
        """Test that None samples until success."""
        automata = [stub_automaton_cls(2)] * 50 + [stub_automaton_cls(4)]
        backend = stub_backend_cls(automata=automata)
        spec = AutomatonSpec(alphabet_size=2, target_size=4, variant="dba", lambda_=0.95)

        result = AutomatonGenerator(backend, max_attempts=None).generate(spec, rng)

        assert result is automata[-1]
        assert len(backend.sample_calls) == 51


class TestDefaultBackendGeneration:
    """Test suite for generation against the built-in engine."""

    @pytest.mark.parametrize("variant,priority_count", [("dba", None), ("dpa", 3)])
    def test_exact_size_and_informative(self, variant, priority_count):
        """Test both output guarantees on small automata."""
        spec = AutomatonSpec(alphabet_size=2, target_size=3, variant=variant, lambda_=0.5,
                             priority_count=priority_count)

        automaton = AutomatonGenerator(max_attempts=10_000).generate(spec, np.random.default_rng(0))

        assert automaton.size() == 3
        assert automaton.variant is AcceptanceVariant(variant)
        assert automaton.is_informative()
        assert automaton.streamlined() == automaton

    def test_reproducible(self):
        """Test that equal generators give equal automata."""
        spec = AutomatonSpec(alphabet_size=2, target_size=3, variant="dba", lambda_=0.5)
        generator = AutomatonGenerator(max_attempts=10_000)

        first = generator.generate(spec, np.random.default_rng(21))
        second = generator.generate(spec, np.random.default_rng(21))

        assert first == second
