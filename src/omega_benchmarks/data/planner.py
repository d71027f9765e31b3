"""Generation parameters derived from a requested automaton size."""

import math
from typing import Tuple


class InvalidTargetSize(ValueError):
    """Raised for automaton sizes without defined generation parameters (below 2)."""


def _check_target_size(target_size: int) -> None:
    if target_size < 2:
        raise InvalidTargetSize(
            f"Target size must be at least 2, got {target_size}: "
            f"log2({target_size}) gives no usable spoke length"
        )


def derive_word_lengths(target_size: int) -> Tuple[int, int]:
    """
    Maximal spoke and cycle lengths for words sampled against automata of *target_size* states.

    ``spoke_len = 2 * ceil(log2(n)) - 1`` and
    ``cycle_len = (2 * n - spoke_len) * spoke_len``.

    Parameters
    ----------
    target_size : int
        Number of automaton states, at least 2

    Returns
    -------
    Tuple[int, int]
        (spoke_len, cycle_len)

    Raises
    ------
    InvalidTargetSize
        If target_size < 2 (size 1 would give a spoke length of -1)

    Examples
    --------
    >>> derive_word_lengths(4)
    (3, 15)
    """
    _check_target_size(target_size)
    spoke_len = 2 * math.ceil(math.log2(target_size)) - 1
    cycle_len = (2 * target_size - spoke_len) * spoke_len
    return spoke_len, cycle_len


def derive_generation_size(target_size: int) -> int:
    """
    Number of states of the raw automata sampled for a *target_size* result.

    Streamlining usually shrinks a random automaton, so candidates are
    oversized by ``round(log2(n)) - 1`` states. This is a heuristic, not a
    guarantee that the streamlined size hits the target.

    Raises
    ------
    InvalidTargetSize
        If target_size < 2

    Examples
    --------
    >>> derive_generation_size(4)
    5
    """
    _check_target_size(target_size)
    # log2 of an integer is never exactly halfway, so rounding mode does not matter
    return target_size + round(math.log2(target_size)) - 1
