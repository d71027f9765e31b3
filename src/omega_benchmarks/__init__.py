"""
Omega Benchmarks - reproducible benchmark datasets for omega-automata learning.

This package generates random deterministic omega-automata with informative
right congruences, samples ultimately periodic words, and bundles labelled
learning tasks on disk.
"""

__version__ = "0.1.0"
