"""Acceptance labelling of word samples."""

from typing import Any, Dict, Iterable, List, NamedTuple, Optional

from ..automata.backend import AutomataBackend, DefaultBackend
from ..automata.words import UltimatelyPeriodicWord


class LabelledWord(NamedTuple):
    """A word together with the automaton's verdict on it."""
    word: UltimatelyPeriodicWord
    verdict: bool


def label(automaton: Any,
          sample: Iterable[UltimatelyPeriodicWord],
          backend: Optional[AutomataBackend] = None) -> List[LabelledWord]:
    """
    Label every word of *sample* with its acceptance by *automaton*.

    The output follows the iteration order of *sample*; neither argument is
    modified, so equal inputs always give equal outputs.

    Parameters
    ----------
    automaton : Any
        Automaton understood by *backend*
    sample : Iterable[UltimatelyPeriodicWord]
        Words to label
    backend : Optional[AutomataBackend]
        Acceptance evaluator, defaults to :class:`DefaultBackend`

    Returns
    -------
    List[LabelledWord]
        One (word, verdict) pair per input word
    """
    if backend is None:
        backend = DefaultBackend()
    return [LabelledWord(word, bool(backend.accepts(automaton, word))) for word in sample]


def summarize_labels(labelled: List[LabelledWord]) -> Dict[str, Any]:
    """
    Count positive and negative verdicts.

    Returns
    -------
    dict
        ``n_words``, ``n_positive``, ``n_negative`` and ``positive_rate``
        (0.0 for an empty sample)
    """
    n_positive = sum(1 for item in labelled if item.verdict)
    n_words = len(labelled)
    return {
        'n_words': n_words,
        'n_positive': n_positive,
        'n_negative': n_words - n_positive,
        'positive_rate': n_positive / n_words if n_words > 0 else 0.0
    }
