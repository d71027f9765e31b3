"""Capability interface between the generation pipeline and the automaton engine.

The pipeline only ever talks to automata through an :class:`AutomataBackend`.
:class:`DefaultBackend` binds the interface to this package's engine; tests
substitute small stubs to drive the pipeline deterministically.
"""

from typing import Any, Dict, List, Optional, Protocol, Sequence

import numpy as np

from .automaton import AcceptanceVariant, OmegaAutomaton
from .hoa import to_hoa
from .random_generation import generate_random_automaton, generate_random_words
from .words import UltimatelyPeriodicWord


class AutomataBackend(Protocol):
    """Operations the pipeline consumes from an automaton engine.

    Example::

        class FixedBackend:
            def sample_automaton(self, alphabet_size, state_count, lam, variant,
                                 priority_count=None, *, rng):
                return my_automaton
            ...
    """

    def sample_automaton(self, alphabet_size: int, state_count: int, lam: float,
                         variant: AcceptanceVariant, priority_count: Optional[int] = None,
                         *, rng: np.random.Generator) -> Any:
        ...

    def streamline(self, automaton: Any) -> Any:
        ...

    def recolor_as_priorities(self, automaton: Any, mapping: Dict[Any, int]) -> Any:
        ...

    def is_informative(self, automaton: Any) -> bool:
        ...

    def accepts(self, automaton: Any, word: UltimatelyPeriodicWord) -> bool:
        ...

    def sample_words(self, alphabet_size: int, max_spoke_len: int, max_cycle_len: int,
                     count: int, *, rng: np.random.Generator) -> Sequence[UltimatelyPeriodicWord]:
        ...

    def serialize_automaton(self, automaton: Any, name: Optional[str] = None) -> str:
        ...


class DefaultBackend:
    """:class:`AutomataBackend` backed by :class:`OmegaAutomaton`."""

    def sample_automaton(self, alphabet_size: int, state_count: int, lam: float,
                         variant: AcceptanceVariant, priority_count: Optional[int] = None,
                         *, rng: np.random.Generator) -> OmegaAutomaton:
        return generate_random_automaton(alphabet_size, state_count, lam, variant,
                                         priority_count=priority_count, rng=rng)

    def streamline(self, automaton: OmegaAutomaton) -> OmegaAutomaton:
        return automaton.streamlined()

    def recolor_as_priorities(self, automaton: OmegaAutomaton,
                              mapping: Dict[Any, int]) -> OmegaAutomaton:
        return automaton.recolored(mapping)

    def is_informative(self, automaton: OmegaAutomaton) -> bool:
        return automaton.is_informative()

    def accepts(self, automaton: OmegaAutomaton, word: UltimatelyPeriodicWord) -> bool:
        return automaton.accepts(word)

    def sample_words(self, alphabet_size: int, max_spoke_len: int, max_cycle_len: int,
                     count: int, *, rng: np.random.Generator) -> List[UltimatelyPeriodicWord]:
        return generate_random_words(alphabet_size, 0, max_spoke_len, 1, max_cycle_len,
                                     count, rng=rng)

    def serialize_automaton(self, automaton: OmegaAutomaton, name: Optional[str] = None) -> str:
        return to_hoa(automaton, name=name)

    def __repr__(self) -> str:
        return "DefaultBackend()"
