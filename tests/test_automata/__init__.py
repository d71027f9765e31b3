"""
Automaton engine tests for Omega Benchmarks.

Tests for:
- Ultimately periodic words
- Acceptance of Büchi and parity automata
- Streamlining and the informativeness check
- Random generation and HOA serialization
"""
