"""
Pipeline component tests for Omega Benchmarks.

Tests for:
- Word length and generation size planning
- Rejection sampling of automata
- Word sample generation and labelling
- Task naming, export and read-back
"""
