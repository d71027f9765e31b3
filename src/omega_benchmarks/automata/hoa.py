"""Hanoi Omega-Automata (HOA v1) serialization.

Symbols are encoded in binary over ``ceil(log2(alphabet_size))`` atomic
propositions: symbol ``i`` is the valuation whose proposition ``j`` holds iff
bit ``j`` of ``i`` is set. Acceptance is transition-based; parity automata use
the ``parity min even`` condition.
"""

import re
from typing import Dict, List, Optional, Tuple

from .automaton import AcceptanceVariant, Color, OmegaAutomaton

_EDGE_PATTERN = re.compile(r'^\[(?P<label>[^\]]*)\]\s*(?P<target>\d+)\s*(?:\{(?P<acc>[\d\s]*)\})?\s*$')
_STATE_PATTERN = re.compile(r'^State:\s*(?P<state>\d+)')


def proposition_count(alphabet_size: int) -> int:
    """Number of atomic propositions needed to encode *alphabet_size* symbols."""
    return (alphabet_size - 1).bit_length()


def symbol_label(symbol: int, n_props: int) -> str:
    """
    HOA label expression for the valuation encoding *symbol*.

    Examples
    --------
    >>> symbol_label(2, 2)
    '!0&1'
    """
    if n_props == 0:
        return 't'
    return '&'.join(('' if (symbol >> j) & 1 else '!') + str(j) for j in range(n_props))


def parity_min_even_condition(priority_count: int) -> str:
    """
    Acceptance formula of ``parity min even`` with *priority_count* priorities.

    Examples
    --------
    >>> parity_min_even_condition(4)
    'Inf(0) | (Fin(1) & (Inf(2) | Fin(3)))'
    """
    def atom(priority: int) -> str:
        return f"Inf({priority})" if priority % 2 == 0 else f"Fin({priority})"

    formula = atom(priority_count - 1)
    for priority in range(priority_count - 2, -1, -1):
        inner = formula if priority == priority_count - 2 else f"({formula})"
        operator = '|' if priority % 2 == 0 else '&'
        formula = f"{atom(priority)} {operator} {inner}"
    return formula


def to_hoa(automaton: OmegaAutomaton, name: Optional[str] = None) -> str:
    """
    Render *automaton* as HOA v1 text.

    Parameters
    ----------
    automaton : OmegaAutomaton
        Automaton to serialize
    name : Optional[str]
        Value of the ``name:`` header

    Returns
    -------
    str
        HOA document terminated by ``--END--`` and a newline
    """
    n_props = proposition_count(automaton.alphabet_size)
    propositions = ' '.join(f'"p{j}"' for j in range(n_props))

    lines = ['HOA: v1']
    if name:
        lines.append(f'name: "{name}"')
    lines.append(f'States: {automaton.size()}')
    lines.append(f'Start: {automaton.initial}')
    lines.append(f'AP: {n_props}' + (f' {propositions}' if propositions else ''))

    if automaton.variant is AcceptanceVariant.BUCHI:
        lines.append('acc-name: Buchi')
        lines.append('Acceptance: 1 Inf(0)')
    else:
        count = automaton.priority_count
        lines.append(f'acc-name: parity min even {count}')
        lines.append(f'Acceptance: {count} {parity_min_even_condition(count)}')

    properties = ['trans-labels', 'explicit-labels', 'trans-acc', 'deterministic']
    if 2 ** n_props == automaton.alphabet_size:
        properties.append('complete')
    lines.append('properties: ' + ' '.join(properties))

    lines.append('--BODY--')
    for state, row in enumerate(automaton.transitions):
        lines.append(f'State: {state}')
        for symbol, (target, color) in enumerate(row):
            if automaton.variant is AcceptanceVariant.BUCHI:
                acceptance = ' {0}' if color else ''
            else:
                acceptance = f' {{{color}}}'
            lines.append(f'[{symbol_label(symbol, n_props)}] {target}{acceptance}')
    lines.append('--END--')
    return '\n'.join(lines) + '\n'


def _parse_label(label: str) -> int:
    """Symbol index encoded by a conjunction of literals produced by :func:`symbol_label`."""
    label = label.strip()
    if label == 't':
        return 0
    symbol = 0
    for literal in label.split('&'):
        literal = literal.strip()
        if not literal.startswith('!'):
            symbol |= 1 << int(literal)
    return symbol


def parse_hoa(text: str) -> OmegaAutomaton:
    """
    Parse HOA text written by :func:`to_hoa` back into an automaton.

    Only the subset produced by this module is supported: a single start
    state 0, explicit conjunctive labels, transition-based Büchi or
    ``parity min even`` acceptance.

    Raises
    ------
    ValueError
        If the document is outside the supported subset
    """
    lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
    if not lines or not lines[0].startswith('HOA:'):
        raise ValueError("Not a HOA document")

    headers: Dict[str, str] = {}
    body_start = None
    for i, line in enumerate(lines[1:], start=1):
        if line == '--BODY--':
            body_start = i + 1
            break
        key, _, value = line.partition(':')
        headers[key.strip()] = value.strip()
    if body_start is None:
        raise ValueError("HOA document has no --BODY--")

    n_states = int(headers['States'])
    if int(headers.get('Start', '0')) != 0:
        raise ValueError("Only start state 0 is supported")

    acc_name = headers.get('acc-name', '')
    if acc_name == 'Buchi':
        variant = AcceptanceVariant.BUCHI
        priority_count = None
    elif acc_name.startswith('parity min even'):
        variant = AcceptanceVariant.PARITY
        priority_count = int(acc_name.split()[-1])
    else:
        raise ValueError(f"Unsupported acceptance: {acc_name!r}")

    edges: List[Dict[int, Tuple[int, Color]]] = [dict() for _ in range(n_states)]
    state = None
    for line in lines[body_start:]:
        if line == '--END--':
            break
        state_match = _STATE_PATTERN.match(line)
        if state_match:
            state = int(state_match.group('state'))
            continue
        edge_match = _EDGE_PATTERN.match(line)
        if edge_match is None or state is None:
            raise ValueError(f"Cannot parse HOA line: {line!r}")
        acc = [int(mark) for mark in (edge_match.group('acc') or '').split()]
        if variant is AcceptanceVariant.BUCHI:
            color: Color = 0 in acc
        else:
            if len(acc) != 1:
                raise ValueError(f"Parity edge needs exactly one priority: {line!r}")
            color = acc[0]
        symbol = _parse_label(edge_match.group('label'))
        edges[state][symbol] = (int(edge_match.group('target')), color)

    alphabet_size = max(len(row) for row in edges)
    transitions = []
    for state, row in enumerate(edges):
        if sorted(row) != list(range(alphabet_size)):
            raise ValueError(f"State {state} is not complete over {alphabet_size} symbols")
        transitions.append([row[symbol] for symbol in range(alphabet_size)])

    return OmegaAutomaton(alphabet_size, transitions, variant, priority_count=priority_count)
