"""Deterministic omega-automata with transition-based acceptance.

An :class:`OmegaAutomaton` is a complete deterministic transition system over
the symbols ``'a', 'b', ...`` whose edges carry acceptance colours:

* Büchi (``dba``): boolean colours, a run is accepting when it takes
  accepting edges infinitely often.
* Parity (``dpa``): integer priorities, a run is accepting when the least
  priority taken infinitely often is even (min-even convention).

States are the integers ``0 .. size()-1`` and the initial state is ``0``.
"""

from enum import Enum
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .words import UltimatelyPeriodicWord, symbols_of_size, symbol_index

Color = Union[bool, int]
Edge = Tuple[int, Color]


class AcceptanceVariant(str, Enum):
    """Acceptance condition kind; the value is the name used in file paths."""
    BUCHI = "dba"
    PARITY = "dpa"


# Accepting Büchi edges become the even priority 0, all others priority 1
BUCHI_TO_PARITY = {True: 0, False: 1}


class OmegaAutomaton:
    """Complete deterministic omega-automaton with coloured edges.

    Parameters
    ----------
    alphabet_size : int
        Number of symbols
    transitions : Sequence[Sequence[Tuple[int, Color]]]
        ``transitions[state][symbol]`` is the pair ``(target, colour)``
    variant : AcceptanceVariant
        Büchi or parity acceptance
    priority_count : Optional[int]
        Number of priorities of a parity automaton; inferred from the
        largest colour when omitted. Must be None for Büchi automata.
    """

    def __init__(self,
                 alphabet_size: int,
                 transitions: Sequence[Sequence[Edge]],
                 variant: AcceptanceVariant,
                 priority_count: Optional[int] = None):
        self.alphabet_size = alphabet_size
        self.variant = AcceptanceVariant(variant)
        self._delta: Tuple[Tuple[Edge, ...], ...] = tuple(
            tuple((int(target), color) for target, color in row) for row in transitions
        )

        n_states = len(self._delta)
        if n_states == 0:
            raise ValueError("Automaton must have at least one state")

        for state, row in enumerate(self._delta):
            if len(row) != alphabet_size:
                raise ValueError(
                    f"State {state} has {len(row)} edges, expected {alphabet_size}"
                )
            for target, _ in row:
                if not 0 <= target < n_states:
                    raise ValueError(f"State {state} has edge to unknown state {target}")

        if self.variant is AcceptanceVariant.BUCHI:
            if priority_count is not None:
                raise ValueError("Büchi automata have no priority count")
            self._delta = tuple(
                tuple((target, bool(color)) for target, color in row) for row in self._delta
            )
            self.priority_count = None
        else:
            colors = [int(color) for row in self._delta for _, color in row]
            if min(colors) < 0:
                raise ValueError("Priorities must be non-negative")
            if priority_count is None:
                priority_count = max(colors) + 1
            if max(colors) >= priority_count:
                raise ValueError(
                    f"Priority {max(colors)} out of range for {priority_count} priorities"
                )
            self._delta = tuple(
                tuple((target, int(color)) for target, color in row) for row in self._delta
            )
            self.priority_count = priority_count

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def initial(self) -> int:
        return 0

    @property
    def symbols(self) -> List[str]:
        return symbols_of_size(self.alphabet_size)

    @property
    def transitions(self) -> Tuple[Tuple[Edge, ...], ...]:
        return self._delta

    def size(self) -> int:
        """Number of states."""
        return len(self._delta)

    def edge(self, state: int, symbol: int) -> Edge:
        """``(target, colour)`` of the edge leaving *state* on symbol index *symbol*."""
        return self._delta[state][symbol]

    def edges(self) -> Iterator[Tuple[int, int, int, Color]]:
        """Iterate over ``(source, symbol, target, colour)`` for all edges."""
        for state, row in enumerate(self._delta):
            for symbol, (target, color) in enumerate(row):
                yield state, symbol, target, color

    # ------------------------------------------------------------------
    # Semantics
    # ------------------------------------------------------------------

    def is_accepting_loop(self, colors: Sequence[Color]) -> bool:
        """Acceptance verdict for a run whose infinitely repeated colours are *colors*."""
        if self.variant is AcceptanceVariant.BUCHI:
            return any(colors)
        return min(colors) % 2 == 0

    def _step(self, state: int, symbol: str) -> Edge:
        index = symbol_index(symbol)
        if not 0 <= index < self.alphabet_size:
            raise ValueError(f"Symbol '{symbol}' not in alphabet {self.symbols}")
        return self._delta[state][index]

    def accepts(self, word: UltimatelyPeriodicWord) -> bool:
        """
        Decide whether the automaton accepts the ultimately periodic *word*.

        The spoke is read first; the cycle is then read repeatedly until the
        state at the start of a cycle iteration repeats. The colours of the
        iterations between the two visits are exactly the colours taken
        infinitely often.
        """
        state = self.initial
        for symbol in word.spoke:
            state, _ = self._step(state, symbol)

        first_visit: Dict[int, int] = {}
        iterations: List[List[Color]] = []
        while state not in first_visit:
            first_visit[state] = len(iterations)
            colors = []
            for symbol in word.cycle:
                state, color = self._step(state, symbol)
                colors.append(color)
            iterations.append(colors)

        loop_colors = [c for colors in iterations[first_visit[state]:] for c in colors]
        return self.is_accepting_loop(loop_colors)

    # ------------------------------------------------------------------
    # Derived automata
    # ------------------------------------------------------------------

    def recolored(self, mapping: Dict[Color, int],
                  priority_count: Optional[int] = None) -> 'OmegaAutomaton':
        """
        Parity automaton with the same transition structure and colours mapped by *mapping*.

        Used to view a Büchi automaton as a two-priority parity automaton with
        :data:`BUCHI_TO_PARITY`.
        """
        transitions = [[(target, mapping[color]) for target, color in row] for row in self._delta]
        return OmegaAutomaton(self.alphabet_size, transitions, AcceptanceVariant.PARITY,
                              priority_count=priority_count)

    def as_parity(self) -> 'OmegaAutomaton':
        """This automaton as a parity automaton, recolouring Büchi edges if needed."""
        if self.variant is AcceptanceVariant.PARITY:
            return self
        return self.recolored(BUCHI_TO_PARITY, priority_count=2)

    def streamlined(self) -> 'OmegaAutomaton':
        """Reachable, Moore-minimal, canonically numbered copy (see :mod:`.minimize`)."""
        from .minimize import streamline
        return streamline(self)

    def is_informative(self) -> bool:
        """Whether all states have pairwise distinct residual languages (see :mod:`.congruence`)."""
        from .congruence import is_informative_right_congruent
        return is_informative_right_congruent(self)

    def to_hoa(self, name: Optional[str] = None) -> str:
        """Serialize in the Hanoi Omega-Automata format (see :mod:`.hoa`)."""
        from .hoa import to_hoa
        return to_hoa(self, name=name)

    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, OmegaAutomaton):
            return NotImplemented
        return (self.alphabet_size == other.alphabet_size
                and self.variant is other.variant
                and self.priority_count == other.priority_count
                and self._delta == other._delta)

    def __hash__(self) -> int:
        return hash((self.alphabet_size, self.variant, self.priority_count, self._delta))

    def __repr__(self) -> str:
        return (f"OmegaAutomaton(variant={self.variant.value}, size={self.size()}, "
                f"alphabet_size={self.alphabet_size})")
