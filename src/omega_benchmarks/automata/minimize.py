"""Streamlining: trimming, Moore minimization and canonical numbering.

Streamlining treats edge colours as outputs of a Moore-style transducer: two
states are merged when they emit the same colours and move to merged states on
every symbol. This never changes the accepted language. It does not perform
full language minimization, so a streamlined automaton can still contain
language-equivalent states; that is exactly what the informativeness check in
:mod:`.congruence` looks for.
"""

from typing import Dict, List

import networkx as nx

from .automaton import OmegaAutomaton


def transition_graph(automaton: OmegaAutomaton) -> nx.DiGraph:
    """Directed graph of the transition structure, edges in state and symbol order."""
    graph = nx.DiGraph()
    graph.add_nodes_from(range(automaton.size()))
    graph.add_edges_from((source, target) for source, _, target, _ in automaton.edges())
    return graph


def reachable_states(automaton: OmegaAutomaton) -> List[int]:
    """States reachable from the initial state, in breadth-first discovery order."""
    graph = transition_graph(automaton)
    return [automaton.initial] + [target for _, target in nx.bfs_edges(graph, automaton.initial)]


def moore_partition(automaton: OmegaAutomaton, states: List[int]) -> Dict[int, int]:
    """
    Coarsest partition of *states* compatible with edge colours and successors.

    Parameters
    ----------
    automaton : OmegaAutomaton
        Automaton whose states are partitioned
    states : List[int]
        States closed under successors (e.g. the reachable states)

    Returns
    -------
    Dict[int, int]
        Block index for every state in *states*
    """
    block = {state: 0 for state in states}
    n_blocks = 1

    while True:
        signatures = {}
        refined = {}
        for state in states:
            signature = (block[state], tuple(
                (block[target], color) for target, color in automaton.transitions[state]
            ))
            refined[state] = signatures.setdefault(signature, len(signatures))
        block = refined
        if len(signatures) == n_blocks:
            return block
        n_blocks = len(signatures)


def streamline(automaton: OmegaAutomaton) -> OmegaAutomaton:
    """
    Reduce *automaton* to its reachable Moore quotient with canonical numbering.

    States of the result are numbered in breadth-first order from the initial
    state, visiting symbols alphabetically, so structurally equal quotients
    come out identical. Streamlining is idempotent.
    """
    states = reachable_states(automaton)
    block = moore_partition(automaton, states)

    representative: Dict[int, int] = {}
    for state in states:
        representative.setdefault(block[state], state)

    # Canonical renumbering of blocks, successors visited in symbol order
    quotient = nx.DiGraph()
    quotient.add_edges_from(
        (b, block[target])
        for b in sorted(representative)
        for target, _ in automaton.transitions[representative[b]]
    )
    start = block[automaton.initial]
    quotient.add_node(start)
    ordered_blocks = [start] + [target for _, target in nx.bfs_edges(quotient, start)]
    numbering = {b: number for number, b in enumerate(ordered_blocks)}

    transitions = [
        [(numbering[block[target]], color)
         for target, color in automaton.transitions[representative[b]]]
        for b in ordered_blocks
    ]
    return OmegaAutomaton(automaton.alphabet_size, transitions, automaton.variant,
                          priority_count=automaton.priority_count)
