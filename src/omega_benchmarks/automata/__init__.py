"""Automaton engine used by the benchmark pipeline.

Key Components
--------------
- Words: ultimately periodic words and reduction to canonical form
- Automaton: deterministic Büchi / parity automata with edge colours
- Minimization: streamlining into a reachable Moore quotient
- Congruence: informative right congruence check
- Random generation: random automata and random word sets
- HOA: Hanoi Omega-Automata writer and reader
- Backend: the capability interface consumed by the pipeline

Examples
--------
>>> import numpy as np
>>> from omega_benchmarks.automata import AcceptanceVariant, generate_random_automaton
>>> rng = np.random.default_rng(0)
>>> dba = generate_random_automaton(2, 5, 0.5, AcceptanceVariant.BUCHI, rng=rng).streamlined()
>>> print(dba.to_hoa())  # doctest: +SKIP
"""

from .words import (
    UltimatelyPeriodicWord,
    symbols_of_size,
    symbol_index,
    validate_words
)

from .automaton import (
    AcceptanceVariant,
    OmegaAutomaton,
    BUCHI_TO_PARITY
)

from .minimize import (
    streamline,
    reachable_states,
    moore_partition,
    transition_graph
)

from .congruence import (
    is_informative_right_congruent,
    equivalent_state_pairs,
    distinguishability_matrix,
    product_graph
)

from .random_generation import (
    continuous_bernoulli,
    generate_random_automaton,
    generate_random_words
)

from .hoa import (
    to_hoa,
    parse_hoa
)

from .backend import (
    AutomataBackend,
    DefaultBackend
)

__all__ = [
    # Core classes
    'UltimatelyPeriodicWord',
    'OmegaAutomaton',
    'AcceptanceVariant',
    'AutomataBackend',
    'DefaultBackend',

    # Constants
    'BUCHI_TO_PARITY',

    # Word functions
    'symbols_of_size',
    'symbol_index',
    'validate_words',

    # Structural operations
    'streamline',
    'reachable_states',
    'moore_partition',
    'transition_graph',
    'is_informative_right_congruent',
    'equivalent_state_pairs',
    'distinguishability_matrix',
    'product_graph',

    # Random generation
    'continuous_bernoulli',
    'generate_random_automaton',
    'generate_random_words',

    # Serialization
    'to_hoa',
    'parse_hoa'
]
