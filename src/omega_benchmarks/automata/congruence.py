"""Informative right congruence check for deterministic parity automata.

The transition structure of an automaton induces a right congruence on finite
words (two words are congruent when they lead to the same state). It is
*informative* when it coincides with the right congruence of the accepted
language, i.e. when no two states have the same residual language.

Two states ``p`` and ``q`` are separated by an ultimately periodic word iff
the pair product started in ``(p, q)`` can reach a cycle whose least priority
is even in one component and odd in the other. Such cycles are found by
repeated strongly connected component decomposition: inside a component
where neither condition holds yet, the edges carrying the offending minimal
priority can never lie on a separating cycle and are removed.
"""

from typing import Dict, Iterable, List, Set, Tuple

import networkx as nx
import numpy as np

from .automaton import OmegaAutomaton

Node = Tuple[int, int]
ProductEdge = Tuple[Node, Node, int, int]


def _product_edges(automaton: OmegaAutomaton) -> List[ProductEdge]:
    """Edges of the full pair product, labelled with both priorities."""
    n = automaton.size()
    edges = []
    for p in range(n):
        for q in range(n):
            for symbol in range(automaton.alphabet_size):
                p_target, p_color = automaton.edge(p, symbol)
                q_target, q_color = automaton.edge(q, symbol)
                edges.append(((p, q), (p_target, q_target), p_color, q_color))
    return edges


def _graph(edges: Iterable[ProductEdge]) -> nx.DiGraph:
    graph = nx.DiGraph()
    graph.add_edges_from((source, target) for source, target, _, _ in edges)
    return graph


def product_graph(automaton: OmegaAutomaton) -> nx.DiGraph:
    """
    Pair product of *automaton* with itself as a directed graph.

    Nodes are state pairs ``(p, q)``; there is an edge when some symbol leads
    from ``(p, q)`` to the pair of successors. Priorities are not attached,
    parallel edges on different symbols collapse into one.
    """
    graph = _graph(_product_edges(automaton.as_parity()))
    graph.add_nodes_from((p, q) for p in range(automaton.size()) for q in range(automaton.size()))
    return graph


def _components_with_cycles(edges: List[ProductEdge]) -> List[List[ProductEdge]]:
    """Split *edges* into the edge sets internal to each strongly connected component."""
    component_of: Dict[Node, int] = {}
    for number, component in enumerate(nx.strongly_connected_components(_graph(edges))):
        for node in component:
            component_of[node] = number

    internal: Dict[int, List[ProductEdge]] = {}
    for edge in edges:
        source, target = edge[0], edge[1]
        if component_of[source] == component_of[target]:
            internal.setdefault(component_of[source], []).append(edge)
    return list(internal.values())


def _separating_cycle_nodes(edges: List[ProductEdge], even_side: int) -> Set[Node]:
    """
    Nodes lying on a cycle whose least priority is even on *even_side* and odd on the other side.

    *even_side* is 2 or 3, the position of the priority within a product edge.
    """
    odd_side = 5 - even_side
    found: Set[Node] = set()
    pending = [edges]
    while pending:
        for component in _components_with_cycles(pending.pop()):
            min_even = min(edge[even_side] for edge in component)
            min_odd = min(edge[odd_side] for edge in component)
            if min_even % 2 == 0 and min_odd % 2 == 1:
                found.update(edge[0] for edge in component)
            elif min_even % 2 == 1:
                pending.append([edge for edge in component if edge[even_side] != min_even])
            else:
                pending.append([edge for edge in component if edge[odd_side] != min_odd])
    return found


def distinguishability_matrix(automaton: OmegaAutomaton) -> np.ndarray:
    """
    Boolean matrix whose entry ``[p, q]`` tells whether states p and q accept different languages.

    Büchi automata are checked through their two-priority parity view.
    """
    parity = automaton.as_parity()
    edges = _product_edges(parity)
    graph = _graph(edges)

    separating = _separating_cycle_nodes(edges, 2) | _separating_cycle_nodes(edges, 3)

    # Pairs that can reach a separating cycle
    reached: Set[Node] = set()
    for node in separating:
        if node not in reached:
            reached.add(node)
            reached |= nx.ancestors(graph, node)

    n = parity.size()
    matrix = np.zeros((n, n), dtype=bool)
    for p, q in reached:
        matrix[p, q] = True
    return matrix


def equivalent_state_pairs(automaton: OmegaAutomaton) -> List[Tuple[int, int]]:
    """Pairs ``p < q`` of distinct states with identical residual languages."""
    matrix = distinguishability_matrix(automaton)
    n = automaton.size()
    return [(p, q) for p in range(n) for q in range(p + 1, n) if not matrix[p, q]]


def is_informative_right_congruent(automaton: OmegaAutomaton) -> bool:
    """True when every pair of distinct states is separated by some word."""
    return not equivalent_state_pairs(automaton)
