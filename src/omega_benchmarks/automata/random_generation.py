"""Random omega-automata and random ultimately periodic words.

Acceptance colours are drawn from a continuous Bernoulli distribution with
parameter ``lambda``: its density on ``[0, 1]`` is proportional to
``lambda**x * (1 - lambda)**(1 - x)``, so ``lambda > 0.5`` pushes draws towards
1 (high priorities, non-accepting Büchi edges) and ``lambda < 0.5`` towards 0.
"""

import math
from typing import List, Optional

import numpy as np

from .automaton import AcceptanceVariant, OmegaAutomaton
from .words import UltimatelyPeriodicWord, symbols_of_size


def continuous_bernoulli(lam: float, size: int,
                         rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Draw *size* samples from the continuous Bernoulli distribution by inverse transform.

    Parameters
    ----------
    lam : float
        Shape parameter in (0, 1); 0.5 gives the uniform distribution
    size : int
        Number of samples
    rng : Optional[np.random.Generator]
        Source of randomness

    Returns
    -------
    np.ndarray, shape (size,)
        Samples in [0, 1]
    """
    if not 0.0 < lam < 1.0:
        raise ValueError(f"Lambda must lie in (0, 1), got {lam}")
    if rng is None:
        rng = np.random.default_rng()

    u = rng.random(size)
    if abs(lam - 0.5) < 1e-9:
        return u

    # F^{-1}(u) = log(1 + u (2λ - 1) / (1 - λ)) / log(λ / (1 - λ))
    samples = np.log1p(u * (2.0 * lam - 1.0) / (1.0 - lam)) / math.log(lam / (1.0 - lam))
    return np.clip(samples, 0.0, 1.0)


def generate_random_automaton(alphabet_size: int,
                              state_count: int,
                              lam: float,
                              variant: AcceptanceVariant,
                              priority_count: Optional[int] = None,
                              rng: Optional[np.random.Generator] = None) -> OmegaAutomaton:
    """
    Sample a complete deterministic automaton with uniformly random successors.

    Every edge colour is obtained by bucketing a continuous Bernoulli draw:
    priority ``min(floor(x * k), k - 1)`` for ``k`` priorities, and for Büchi
    automata an edge is accepting when its two-bucket priority is 0.

    Parameters
    ----------
    alphabet_size : int
        Number of symbols
    state_count : int
        Number of states before streamlining
    lam : float
        Continuous Bernoulli parameter in (0, 1)
    variant : AcceptanceVariant
        Acceptance condition kind
    priority_count : Optional[int]
        Number of priorities, required for parity automata
    rng : Optional[np.random.Generator]
        Source of randomness

    Returns
    -------
    OmegaAutomaton
        Raw (not yet streamlined) automaton
    """
    variant = AcceptanceVariant(variant)
    if state_count < 1:
        raise ValueError(f"State count must be positive, got {state_count}")
    if variant is AcceptanceVariant.PARITY:
        if priority_count is None or priority_count < 1:
            raise ValueError("Parity automata need a positive priority count")
        buckets = priority_count
    else:
        buckets = 2
    if rng is None:
        rng = np.random.default_rng()

    n_edges = state_count * alphabet_size
    targets = rng.integers(0, state_count, size=n_edges).reshape(state_count, alphabet_size)
    draws = continuous_bernoulli(lam, n_edges, rng).reshape(state_count, alphabet_size)
    priorities = np.minimum((draws * buckets).astype(int), buckets - 1)

    transitions = []
    for state in range(state_count):
        row = []
        for symbol in range(alphabet_size):
            priority = int(priorities[state, symbol])
            color = priority == 0 if variant is AcceptanceVariant.BUCHI else priority
            row.append((int(targets[state, symbol]), color))
        transitions.append(row)

    return OmegaAutomaton(alphabet_size, transitions, variant,
                          priority_count=priority_count if variant is AcceptanceVariant.PARITY else None)


def generate_random_words(alphabet_size: int,
                          min_spoke_len: int,
                          max_spoke_len: int,
                          min_cycle_len: int,
                          max_cycle_len: int,
                          count: int,
                          rng: Optional[np.random.Generator] = None) -> List[UltimatelyPeriodicWord]:
    """
    Draw *count* random ultimately periodic words and keep the distinct ones.

    Spoke and cycle lengths are uniform in their inclusive ranges and every
    symbol is uniform over the alphabet. Words are reduced to canonical form
    before de-duplication, so fewer than *count* words are returned when
    draws coincide. Delivery order is the order of first occurrence.

    Returns
    -------
    List[UltimatelyPeriodicWord]
        Distinct reduced words
    """
    if not 0 <= min_spoke_len <= max_spoke_len:
        raise ValueError(f"Invalid spoke length range [{min_spoke_len}, {max_spoke_len}]")
    if not 1 <= min_cycle_len <= max_cycle_len:
        raise ValueError(f"Invalid cycle length range [{min_cycle_len}, {max_cycle_len}]")
    if rng is None:
        rng = np.random.default_rng()

    symbols = symbols_of_size(alphabet_size)
    words = {}
    for _ in range(count):
        spoke_len = int(rng.integers(min_spoke_len, max_spoke_len + 1))
        cycle_len = int(rng.integers(min_cycle_len, max_cycle_len + 1))
        spoke = tuple(symbols[i] for i in rng.integers(0, alphabet_size, size=spoke_len))
        cycle = tuple(symbols[i] for i in rng.integers(0, alphabet_size, size=cycle_len))
        word = UltimatelyPeriodicWord(spoke, cycle).reduced()
        words.setdefault(word, None)
    return list(words)
